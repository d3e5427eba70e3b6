# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
import os
from collections.abc import Callable
from inspect import currentframe

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG
_INFO = logging.INFO
_NOTICE = logging.WARNING - 5
_WARNING = logging.WARNING
_SUCCESS = logging.WARNING + 5
_ERROR = logging.ERROR
_CRITICAL = logging.CRITICAL

logging.addLevelName(_TRACE, "TRACE")
logging.addLevelName(_NOTICE, "NOTICE")
logging.addLevelName(_SUCCESS, "SUCCESS")

_LEVEL_NAMES = {
    "TRACE": _TRACE,
    "DEBUG": _DEBUG,
    "INFO": _INFO,
    "NOTICE": _NOTICE,
    "WARNING": _WARNING,
    "SUCCESS": _SUCCESS,
    "ERROR": _ERROR,
    "CRITICAL": _CRITICAL,
}

LogMessageT = str | Callable[..., str]


class FanoutLogger:
    """Logger with lazy evaluation of f-string messages and a few extra levels.

    Messages may be plain strings or callables returning a string. A callable
    is only evaluated when its level is enabled, which keeps per-invocation
    trace logging cheap in large batches.

    Extra levels on top of the standard ones:
        - TRACE    (TRACE < DEBUG)
        - NOTICE   (INFO < NOTICE < WARNING)
        - SUCCESS  (WARNING < SUCCESS < ERROR)

    Usage:
        logger = FanoutLogger(__name__)
        logger.debug(lambda: f"Dispatching invocation {index} of {count}")
        logger.success("Batch completed")
        # Bind loop variables so the lambda does not see a later value
        logger.trace(lambda i=i: f"Worker {i} idle")
    """

    def __init__(self, logger_name: str):
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)
        self._internal_log = self._logger._log
        self._logger.findCaller = self.find_caller

        self.is_enabled_for = self._logger.isEnabledFor
        self.set_level = self._logger.setLevel
        self.get_effective_level = self._logger.getEffectiveLevel

    @property
    def is_debug_enabled(self) -> bool:
        return self.is_enabled_for(_DEBUG)

    @property
    def is_trace_enabled(self) -> bool:
        return self.is_enabled_for(_TRACE)

    def _log(self, level: int, msg: LogMessageT, *args, **kwargs) -> None:
        if callable(msg):
            # logging's _log wants a tuple for args even when there are none
            self._internal_log(level, msg(*args), (), **kwargs)
        else:
            self._internal_log(level, msg, args, **kwargs)

    @classmethod
    def is_valid_level(cls, level: int | str) -> bool:
        """Check if the given level is one of the known level names or numbers."""
        if isinstance(level, str):
            return level.upper() in _LEVEL_NAMES
        return level in _LEVEL_NAMES.values()

    @classmethod
    def get_level_number(cls, level: int | str) -> int:
        """Get the numeric level for the given level."""
        if isinstance(level, str):
            return _LEVEL_NAMES[level.upper()]
        return level

    def find_caller(
        self, stack_info=False, stacklevel=1
    ) -> tuple[str, int, str, str | None]:
        """Find the first stack frame outside of the logging machinery.

        NOTE: Modified version of logging.Logger.findCaller that skips every
        file registered in `_ignored_files`, so records point at the real caller
        instead of this module or the logger mixin.
        """
        f = currentframe()
        if f is not None:
            f = f.f_back
        orig_f = f
        while f and stacklevel > 1:
            f = f.f_back
            stacklevel -= 1
        if not f:
            f = orig_f
        while f and hasattr(f, "f_code"):
            co = f.f_code
            if os.path.normcase(co.co_filename) in _ignored_files:
                f = f.f_back
                continue
            return co.co_filename, f.f_lineno, co.co_name, None
        return "(unknown file)", 0, "(unknown function)", None

    def log(self, level: int, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(level):
            self._log(level, msg, *args, **kwargs)

    def trace(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_TRACE):
            self._log(_TRACE, msg, *args, **kwargs)

    def debug(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_DEBUG):
            self._log(_DEBUG, msg, *args, **kwargs)

    def info(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_INFO):
            self._log(_INFO, msg, *args, **kwargs)

    def notice(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_NOTICE):
            self._log(_NOTICE, msg, *args, **kwargs)

    def warning(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_WARNING):
            self._log(_WARNING, msg, *args, **kwargs)

    def success(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_SUCCESS):
            self._log(_SUCCESS, msg, *args, **kwargs)

    def error(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_ERROR):
            self._log(_ERROR, msg, *args, **kwargs)

    def exception(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_ERROR):
            self._log(_ERROR, msg, *args, exc_info=True, **kwargs)

    def critical(self, msg: LogMessageT, *args, **kwargs) -> None:
        if self.is_enabled_for(_CRITICAL):
            self._log(_CRITICAL, msg, *args, **kwargs)


# Files skipped when looking up the caller of a log record (same idea as logging._srcfile)
_srcfile = os.path.normcase(FanoutLogger.find_caller.__code__.co_filename)
_ignored_files = [logging._srcfile, _srcfile]
