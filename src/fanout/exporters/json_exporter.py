# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import aiofiles

from fanout.common.decorators import implements_protocol
from fanout.common.enums import DataExporterType
from fanout.common.factories import DataExporterFactory
from fanout.common.mixins import FanoutLoggerMixin
from fanout.common.protocols import DataExporterProtocol
from fanout.exporters.exporter_config import ExporterConfig, FileExportInfo


@DataExporterFactory.register(DataExporterType.JSON)
@implements_protocol(DataExporterProtocol)
class JsonExporter(FanoutLoggerMixin):
    """
    Writes the batch result, including every invocation record, to a JSON file.
    """

    def __init__(self, exporter_config: ExporterConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self._result = exporter_config.result
        self._output = exporter_config.user_config.output
        self._file_path = self._output.batch_result_file

    def get_export_info(self) -> FileExportInfo:
        return FileExportInfo(
            export_type="JSON Export",
            file_path=self._file_path,
        )

    async def export(self) -> None:
        """Export the batch result to `batch_result.json` in the artifact directory.

        Raises:
            OSError: If the file cannot be written
        """
        if self._output.disable_export:
            self.debug("File export is disabled, skipping JSON export")
            return

        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self.debug(lambda: f"Exporting batch result to JSON file: {self._file_path}")
        export_data_json = self._result.model_dump_json(indent=2)
        async with aiofiles.open(self._file_path, "w") as f:
            await f.write(export_data_json)
