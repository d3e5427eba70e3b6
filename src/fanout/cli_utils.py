# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING

# Imported on every CLI start, rich is pulled in only when an error is reported.

if TYPE_CHECKING:
    from rich.align import AlignMethod
    from rich.console import RenderableType
    from rich.style import StyleType


def _stderr_console():
    from rich.console import Console

    return Console(stderr=True)


def raise_startup_error_and_exit(
    message: "RenderableType",
    text_color: "StyleType | None" = None,
    title: str = "Error",
    exit_code: int = 1,
    border_style: "StyleType" = "bold red",
    title_align: "AlignMethod" = "left",
) -> None:
    """Show `message` in a panel on stderr, then exit with `exit_code`.

    Plain string messages are wrapped in `text_color` markup when one is given,
    other rich renderables are shown unchanged.
    """
    import sys

    from rich.panel import Panel

    if text_color and isinstance(message, str):
        message = f"[{text_color}]{message}[/{text_color}]"

    panel = Panel(
        message, title=title, title_align=title_align, border_style=border_style
    )
    _stderr_console().print(panel)
    sys.exit(exit_code)


class exit_on_error(AbstractContextManager):
    """Turn an exception escaping the block into an error panel and a process exit.

    With no exception types given, anything but SystemExit and KeyboardInterrupt
    is handled. String messages may reference the exception as `{e}`.

    Usage:
        with exit_on_error(ConfigurationError, title="Invalid Configuration"):
            run_batch(user_config, service_config)
    """

    def __init__(
        self,
        *exceptions: type[BaseException],
        message: "RenderableType" = "{e}",
        text_color: "StyleType | None" = None,
        title: str = "Error",
        exit_code: int = 1,
        show_traceback: bool = True,
    ):
        self.exceptions = exceptions
        self.message = message
        self.text_color = text_color
        self.title = title
        self.exit_code = exit_code
        self.show_traceback = show_traceback

    def _handles(self, exc_type: type[BaseException]) -> bool:
        if self.exceptions:
            return issubclass(exc_type, self.exceptions)
        return not issubclass(exc_type, SystemExit | KeyboardInterrupt)

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None or not self._handles(exc_type):
            return None

        if self.show_traceback:
            console = _stderr_console()
            console.print_exception(max_frames=10, word_wrap=True)
            console.file.flush()

        message = self.message
        if isinstance(message, str):
            message = message.format(e=exc_value)
        raise_startup_error_and_exit(
            message,
            text_color=self.text_color,
            title=self.title,
            exit_code=self.exit_code,
        )
