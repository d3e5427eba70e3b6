# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio

from rich.console import Console

from fanout.common.config import UserConfig
from fanout.common.factories import DataExporterFactory
from fanout.common.mixins import FanoutLoggerMixin
from fanout.common.models import BatchResult
from fanout.common.protocols import DataExporterProtocol
from fanout.exporters.exporter_config import ExporterConfig, FileExportInfo


class ExporterManager(FanoutLoggerMixin):
    """
    ExporterManager is responsible for exporting a batch result using all
    registered data exporters. A failing exporter is logged, it never fails the run.
    """

    def __init__(
        self,
        result: BatchResult,
        user_config: UserConfig,
        console: Console | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._tasks: set[asyncio.Task] = set()
        self._exporter_config = ExporterConfig(
            result=result,
            user_config=user_config,
            console=console,
        )

    def _task_done_callback(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            self.warning(f"Exporter task was cancelled: {task.get_name()}")
        elif task.exception():
            self.error(f"Error exporting batch result: {task.exception()!r}")
        else:
            self.debug(lambda: f"Exporter task done: {task.get_name()}")

    def _log_exported_files(
        self, exports: list[tuple[DataExporterProtocol, asyncio.Task]]
    ) -> None:
        if self._exporter_config.user_config.output.disable_export:
            return
        for exporter, task in exports:
            if not hasattr(exporter, "get_export_info"):
                continue
            if task.cancelled() or task.exception() is not None:
                continue
            info: FileExportInfo = exporter.get_export_info()
            self.info(f"{info.export_type}: {info.file_path}")

    async def export_data(self) -> None:
        self.debug("Exporting batch result")

        exports: list[tuple[DataExporterProtocol, asyncio.Task]] = []
        for exporter_type in DataExporterFactory.get_all_class_types():
            exporter = DataExporterFactory.create_instance(
                exporter_type, exporter_config=self._exporter_config
            )
            self.debug(lambda exporter_type=exporter_type: f"Creating task for exporter: {exporter_type}")
            task = asyncio.create_task(exporter.export(), name=f"export-{exporter_type}")
            self._tasks.add(task)
            task.add_done_callback(self._task_done_callback)
            exports.append((exporter, task))

        await asyncio.gather(*(task for _, task in exports), return_exceptions=True)
        self._log_exported_files(exports)
        self.debug("Exporting batch result completed")
