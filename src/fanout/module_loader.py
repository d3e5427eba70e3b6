# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Imports the Fanout subpackages that register implementations with the factories.

Invokers, dispatch strategies and exporters register themselves through class
decorators at import time. The CLI only imports them once a command runs, so
`fanout --help` stays fast.
"""

import importlib
import threading
import time
from collections.abc import Iterator
from pathlib import Path

from fanout.common.fanout_logger import FanoutLogger

_logger = FanoutLogger(__name__)

_loaded = False
_load_lock = threading.Lock()


def _subpackage_names() -> Iterator[str]:
    for path in sorted(Path(__file__).parent.iterdir()):
        if path.name.startswith(("_", ".")):
            continue
        if path.is_dir() and (path / "__init__.py").exists():
            yield path.name


def _import_subpackages() -> None:
    for name in _subpackage_names():
        module_name = f"fanout.{name}"
        _logger.debug(f"Importing {module_name}")
        try:
            importlib.import_module(module_name)
        except ImportError:
            _logger.exception(f"Unable to import {module_name}")
            raise


def ensure_modules_loaded() -> None:
    """Import every registering subpackage, once per process."""
    global _loaded
    with _load_lock:
        if _loaded:
            return
        started = time.perf_counter()
        _import_subpackages()
        _loaded = True
        _logger.debug(
            lambda: f"Subpackages imported in {time.perf_counter() - started:.2f}s"
        )
