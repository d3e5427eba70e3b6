# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated

from pydantic import Field

from fanout.common.config.base_config import BaseConfig
from fanout.common.config.cli_parameter import CLIParameter
from fanout.common.config.config_defaults import OutputDefaults
from fanout.common.config.groups import Groups


class OutputConfig(BaseConfig):
    """
    A configuration class for where the results of a run are written.
    """

    _CLI_GROUP = Groups.OUTPUT

    artifact_directory: Annotated[
        Path,
        Field(
            description="The directory to store the batch result, the resolved config and the log file in.",
        ),
        CLIParameter(
            name=("--artifact-dir", "--artifact-directory"),
            group=_CLI_GROUP,
        ),
    ] = OutputDefaults.ARTIFACT_DIRECTORY

    disable_export: Annotated[
        bool,
        Field(
            description="Only print the summary to the console, do not write the batch result and config files.",
        ),
        CLIParameter(
            name=("--no-export",),
            group=_CLI_GROUP,
        ),
    ] = OutputDefaults.DISABLE_EXPORT

    @property
    def batch_result_file(self) -> Path:
        return self.artifact_directory / OutputDefaults.BATCH_RESULT_JSON_FILE

    @property
    def config_file(self) -> Path:
        return self.artifact_directory / OutputDefaults.CONFIG_YAML_FILE

    @property
    def log_folder(self) -> Path:
        return self.artifact_directory / OutputDefaults.LOG_FOLDER
