# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "ConfigExporter",
    "ConsoleExporter",
    "ExporterConfig",
    "ExporterManager",
    "FileExportInfo",
    "JsonExporter",
]

from fanout.exporters.config_exporter import ConfigExporter
from fanout.exporters.console_exporter import ConsoleExporter
from fanout.exporters.exporter_config import ExporterConfig, FileExportInfo
from fanout.exporters.exporter_manager import ExporterManager
from fanout.exporters.json_exporter import JsonExporter
