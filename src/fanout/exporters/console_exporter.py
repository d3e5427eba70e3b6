# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console
from rich.table import Table

from fanout.common.decorators import implements_protocol
from fanout.common.enums import DataExporterType
from fanout.common.factories import DataExporterFactory
from fanout.common.mixins import FanoutLoggerMixin
from fanout.common.models import BatchResult, ErrorDetailsCount
from fanout.common.protocols import DataExporterProtocol
from fanout.exporters.exporter_config import ExporterConfig


@implements_protocol(DataExporterProtocol)
@DataExporterFactory.register(DataExporterType.CONSOLE)
class ConsoleExporter(FanoutLoggerMixin):
    """Prints the batch summary, and the error summary if anything failed, to the console."""

    def __init__(self, exporter_config: ExporterConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self._result = exporter_config.result
        self._console = exporter_config.console or Console()

    async def export(self, width: int | None = None) -> None:
        summary = Table(title=self._get_title(), width=width)
        summary.add_column("Count", justify="right", style="cyan")
        summary.add_column("Succeeded", justify="right", style="green")
        summary.add_column("Failed", justify="right", style="red")
        summary.add_column("Success Rate", justify="right", style="green")
        summary.add_column("Duration (sec)", justify="right", style="cyan")
        summary.add_row(*self._format_summary_row(self._result))

        self._console.print("\n")
        self._console.print(summary)

        if self._result.error_summary:
            errors = Table(title=self._get_error_title(), width=width)
            errors.add_column("Code", justify="right", style="yellow")
            errors.add_column("Type", justify="right", style="yellow")
            errors.add_column("Message", justify="left", style="yellow")
            errors.add_column("Count", justify="right", style="yellow")
            for error_details_count in self._result.error_summary:
                errors.add_row(*self._format_error_row(error_details_count))
            self._console.print("\n")
            self._console.print(errors)

        if self._result.was_timed_out:
            self._console.print(
                "[red][bold]Batch deadline expired, outstanding invocations were cancelled[/bold][/red]"
            )

        self._console.file.flush()

    @staticmethod
    def _format_summary_row(result: BatchResult) -> list[str]:
        duration = (
            f"{result.duration_sec:,.3f}"
            if result.duration_sec is not None
            else "[dim]N/A[/dim]"
        )
        return [
            f"{result.count:,}",
            f"{result.succeeded:,}",
            f"{result.failed:,}",
            f"{result.success_rate:.2%}",
            duration,
        ]

    @staticmethod
    def _format_error_row(error_details_count: ErrorDetailsCount) -> list[str]:
        details = error_details_count.error_details
        return [
            str(details.code) if details.code is not None else "[dim]N/A[/dim]",
            str(details.type) if details.type else "[dim]N/A[/dim]",
            str(details.message),
            f"{error_details_count.count:,}",
        ]

    def _get_title(self) -> str:
        return f"Fanout | {self._result.count:,} x {self._result.mode} @ {self._result.target}"

    def _get_error_title(self) -> str:
        return "[bold][red]Fanout | Error Summary[/red][/bold]"
