# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from fanout.common.config import UserConfig
from fanout.common.models import BatchResult


@dataclass
class ExporterConfig:
    result: BatchResult
    user_config: UserConfig
    console: Console | None = None


@dataclass
class FileExportInfo:
    export_type: str
    file_path: Path
