# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import shlex
import sys
from typing import Annotated

from pydantic import Field, model_validator
from typing_extensions import Self

from fanout.common.config.base_config import ADD_TO_TEMPLATE, BaseConfig
from fanout.common.config.cli_parameter import DisableCLI
from fanout.common.config.loadgen_config import LoadGeneratorConfig
from fanout.common.config.output_config import OutputConfig
from fanout.common.config.target_config import TargetConfig


class UserConfig(BaseConfig):
    """Everything that describes one batch run: the target, the load and where results go."""

    @model_validator(mode="after")
    def validate_cli_args(self) -> Self:
        """Record the CLI command that produced this config, if it has not already been set."""
        if not self.cli_command:
            self.cli_command = shlex.join(["fanout", *sys.argv[1:]])
        return self

    target: Annotated[
        TargetConfig,
        Field(
            description="The server under test and the client used to reach it.",
        ),
    ] = TargetConfig()

    loadgen: Annotated[
        LoadGeneratorConfig,
        Field(
            description="How many invocations to run, which commands and how concurrently.",
        ),
    ] = LoadGeneratorConfig()

    output: Annotated[
        OutputConfig,
        Field(
            description="Where the batch result and the logs are written.",
        ),
    ] = OutputConfig()

    cli_command: Annotated[
        str | None,
        Field(
            description="The command line that produced this config.",
            json_schema_extra={ADD_TO_TEMPLATE: False},
        ),
        DisableCLI(reason="This is automatically set by the CLI"),
    ] = None
