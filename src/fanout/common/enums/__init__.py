# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "CaseInsensitiveStrEnum",
    "ConcurrencyMode",
    "DataExporterType",
    "FailureCause",
    "FailurePolicy",
    "FanoutLogLevel",
    "InvocationOutcome",
    "InvokerType",
]

from fanout.common.enums.base_enums import CaseInsensitiveStrEnum
from fanout.common.enums.driver_enums import (
    ConcurrencyMode,
    FailureCause,
    FailurePolicy,
    InvocationOutcome,
)
from fanout.common.enums.logging_enums import FanoutLogLevel
from fanout.common.enums.plugin_enums import DataExporterType, InvokerType
