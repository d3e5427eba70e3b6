# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from fanout.common.config.config_defaults import OutputDefaults
from fanout.common.fanout_logger import FanoutLogger

if TYPE_CHECKING:
    from fanout.common.config import ServiceConfig, UserConfig

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = FanoutLogger(__name__)


def setup_rich_logging(
    service_config: "ServiceConfig", user_config: "UserConfig | None" = None
) -> None:
    """Route every logger to a rich handler on stderr.

    When a user config is given, the same records also go to `fanout.log` in the
    log folder of its artifact directory.
    """
    level = service_config.log_level.level
    root = logging.getLogger()
    root.setLevel(level)

    root.addHandler(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format="%H:%M:%S.%f",
            omit_repeated_times=False,
        )
    )
    if user_config is not None:
        root.addHandler(create_file_handler(user_config.output.log_folder, level))

    logger.debug(
        lambda: f"Logging to stderr at level {logging.getLevelName(level)}"
    )


def create_file_handler(log_folder: Path, level: str | int) -> logging.FileHandler:
    """Create the handler writing `fanout.log` inside `log_folder`, creating the folder if needed."""
    log_folder.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_folder / OutputDefaults.LOG_FILE, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATE_FORMAT))
    return handler
