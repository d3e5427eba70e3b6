# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from fanout.common.enums.base_enums import CaseInsensitiveStrEnum
from fanout.common.fanout_logger import FanoutLogger


class FanoutLogLevel(CaseInsensitiveStrEnum):
    """Log levels for FanoutLogger."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get the integer level equivalent."""
        return FanoutLogger.get_level_number(self.value)
