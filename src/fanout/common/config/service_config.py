# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

from fanout.common.config.cli_parameter import CLIParameter
from fanout.common.config.config_defaults import ServiceDefaults
from fanout.common.config.groups import Groups
from fanout.common.enums import FanoutLogLevel


class ServiceConfig(BaseSettings):
    """Process level settings of the harness itself, such as logging.

    Every field can also be set with a FANOUT_ prefixed environment variable,
    or in a .env file, for example FANOUT_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="FANOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    _CLI_GROUP = Groups.SERVICE

    @model_validator(mode="after")
    def validate_log_level_from_verbose_flags(self) -> Self:
        """Set log level based on verbose flags."""
        if self.extra_verbose:
            self.log_level = FanoutLogLevel.TRACE
        elif self.verbose:
            self.log_level = FanoutLogLevel.DEBUG
        return self

    log_level: Annotated[
        FanoutLogLevel,
        Field(
            description="Logging level",
        ),
        CLIParameter(
            name=("--log-level"),
            group=_CLI_GROUP,
        ),
    ] = ServiceDefaults.LOG_LEVEL

    verbose: Annotated[
        bool,
        Field(
            description="Equivalent to --log-level DEBUG.",
        ),
        CLIParameter(
            name=("--verbose", "-v"),
            group=_CLI_GROUP,
        ),
    ] = ServiceDefaults.VERBOSE

    extra_verbose: Annotated[
        bool,
        Field(
            description="Equivalent to --log-level TRACE. Logs every invocation as it is dispatched and retired.",
        ),
        CLIParameter(
            name=("--extra-verbose", "-vv"),
            group=_CLI_GROUP,
        ),
    ] = ServiceDefaults.EXTRA_VERBOSE
