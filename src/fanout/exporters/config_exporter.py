# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import aiofiles

from fanout.common.decorators import implements_protocol
from fanout.common.enums import DataExporterType
from fanout.common.factories import DataExporterFactory
from fanout.common.mixins import FanoutLoggerMixin
from fanout.common.protocols import DataExporterProtocol
from fanout.exporters.exporter_config import ExporterConfig, FileExportInfo


@DataExporterFactory.register(DataExporterType.CONFIG)
@implements_protocol(DataExporterProtocol)
class ConfigExporter(FanoutLoggerMixin):
    """Writes the resolved user config of the run as commented YAML next to its result."""

    def __init__(self, exporter_config: ExporterConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self._user_config = exporter_config.user_config
        self._file_path = self._user_config.output.config_file

    def get_export_info(self) -> FileExportInfo:
        return FileExportInfo(
            export_type="Config Export",
            file_path=self._file_path,
        )

    async def export(self) -> None:
        if self._user_config.output.disable_export:
            self.debug("File export is disabled, skipping config export")
            return

        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        content = self._user_config.serialize_to_yaml(verbose=True)
        if self._user_config.cli_command:
            content = f"# {self._user_config.cli_command}\n{content}"
        async with aiofiles.open(self._file_path, "w") as f:
            await f.write(content)
