# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import os

from fanout.common import fanout_logger
from fanout.common.fanout_logger import (
    _CRITICAL,
    _DEBUG,
    _ERROR,
    _INFO,
    _NOTICE,
    _SUCCESS,
    _TRACE,
    _WARNING,
    FanoutLogger,
    LogMessageT,
)
from fanout.common.mixins.base_mixin import BaseMixin


class FanoutLoggerMixin(BaseMixin):
    """Mixin giving a class its own lazily evaluated logger.

    The logger is named after the class unless `logger_name` is passed.
    see :class:`FanoutLogger` for details on lazy messages.

    Usage:
        class ProcessInvoker(FanoutLoggerMixin):
            async def invoke(self, invocation, target):
                self.trace(lambda: f"Spawning {invocation.command} against {target}")
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = FanoutLogger(logger_name or self.__class__.__name__)
        self._log = self.logger._log
        self.is_enabled_for = self.logger.is_enabled_for
        super().__init__(**kwargs)

    @property
    def is_debug_enabled(self) -> bool:
        return self.is_enabled_for(_DEBUG)

    @property
    def is_trace_enabled(self) -> bool:
        return self.is_enabled_for(_TRACE)

    def log(self, level: int, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(level):
            self._log(level, message, *args, **kwargs)

    def trace(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_TRACE):
            self._log(_TRACE, message, *args, **kwargs)

    def debug(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_DEBUG):
            self._log(_DEBUG, message, *args, **kwargs)

    def info(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_INFO):
            self._log(_INFO, message, *args, **kwargs)

    def notice(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_NOTICE):
            self._log(_NOTICE, message, *args, **kwargs)

    def warning(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_WARNING):
            self._log(_WARNING, message, *args, **kwargs)

    def success(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_SUCCESS):
            self._log(_SUCCESS, message, *args, **kwargs)

    def error(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_ERROR):
            self._log(_ERROR, message, *args, **kwargs)

    def exception(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_ERROR):
            self._log(_ERROR, message, *args, exc_info=True, **kwargs)

    def critical(self, message: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_CRITICAL):
            self._log(_CRITICAL, message, *args, **kwargs)


# Skip this file too when resolving the caller of a log record
_srcfile = os.path.normcase(FanoutLoggerMixin.info.__code__.co_filename)
fanout_logger._ignored_files.append(_srcfile)
