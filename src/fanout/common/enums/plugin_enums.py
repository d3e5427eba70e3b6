# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from fanout.common.enums.base_enums import CaseInsensitiveStrEnum


class InvokerType(CaseInsensitiveStrEnum):
    """The available ways of performing one invocation against the target."""

    PROCESS = "process"
    """Run an external client executable (redis-cli by default) once per invocation."""

    TCP = "tcp"
    """Send one inline command over a fresh TCP connection and read one reply line."""


class DataExporterType(CaseInsensitiveStrEnum):
    CONSOLE = "console"
    JSON = "json"
    CONFIG = "config"
