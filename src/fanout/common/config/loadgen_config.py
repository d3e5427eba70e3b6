# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import BeforeValidator, Field, model_validator
from typing_extensions import Self

from fanout.common.config.base_config import BaseConfig
from fanout.common.config.cli_parameter import CLIParameter
from fanout.common.config.config_defaults import LoadGeneratorDefaults
from fanout.common.config.config_validators import (
    custom_enum_converter,
    parse_command_list,
    parse_zero_as_none,
)
from fanout.common.config.groups import Groups
from fanout.common.enums import ConcurrencyMode, FailurePolicy
from fanout.common.fanout_logger import FanoutLogger
from fanout.common.models import CommandSpec

_logger = FanoutLogger(__name__)


class LoadGeneratorConfig(BaseConfig):
    """
    A configuration class for the shape of a batch: how many invocations, which commands,
    how they are dispatched, and the limits they run under.
    """

    _CLI_GROUP = Groups.LOAD_GENERATOR

    @model_validator(mode="after")
    def validate_timeouts(self) -> Self:
        if (
            self.batch_timeout is not None
            and self.invocation_timeout is not None
            and self.invocation_timeout > self.batch_timeout
        ):
            _logger.warning(
                f"--invocation-timeout ({self.invocation_timeout}s) is longer than --batch-timeout "
                f"({self.batch_timeout}s), hung invocations will be cancelled by the batch deadline instead"
            )
        return self

    count: Annotated[
        int,
        Field(
            ge=1,
            description="The number of invocations in the batch.",
        ),
        CLIParameter(
            name=("--count", "-n"),
            group=_CLI_GROUP,
        ),
    ] = LoadGeneratorDefaults.COUNT

    mode: Annotated[
        ConcurrencyMode,
        Field(
            description="How the invocations are dispatched.\n"
            "parallel: all at once, bounded only by --max-concurrency.\n"
            "serial: one after another, each waiting for the previous to finish.",
        ),
        CLIParameter(
            name=("--mode",),
            group=_CLI_GROUP,
            converter=custom_enum_converter,
        ),
    ] = LoadGeneratorDefaults.MODE

    commands: Annotated[
        list[str],
        Field(
            min_length=1,
            description="The command(s) to send, such as PING or \"ECHO 'Hello World!'\". "
            "Can be specified multiple times, invocation i sends command i modulo the number of commands.",
        ),
        BeforeValidator(parse_command_list),
        CLIParameter(
            name=("--command", "-c"),
            group=_CLI_GROUP,
        ),
    ] = LoadGeneratorDefaults.COMMANDS

    max_concurrency: Annotated[
        int | None,
        Field(
            ge=1,
            description="The maximum number of invocations running at once in parallel mode. "
            "Set to 0 for one worker per invocation (unbounded).",
        ),
        BeforeValidator(parse_zero_as_none),
        CLIParameter(
            name=("--max-concurrency",),
            group=_CLI_GROUP,
        ),
    ] = LoadGeneratorDefaults.MAX_CONCURRENCY

    invocation_timeout: Annotated[
        float | None,
        Field(
            gt=0,
            description="The timeout in floating-point seconds for each invocation. "
            "A hung invocation is cancelled and counted as failed. Set to 0 to disable.",
        ),
        BeforeValidator(parse_zero_as_none),
        CLIParameter(
            name=("--invocation-timeout",),
            group=_CLI_GROUP,
        ),
    ] = LoadGeneratorDefaults.INVOCATION_TIMEOUT

    batch_timeout: Annotated[
        float | None,
        Field(
            gt=0,
            description="The timeout in floating-point seconds for the whole batch. Invocations still "
            "running or queued when it expires are cancelled and counted as failed. No limit by default.",
        ),
        CLIParameter(
            name=("--batch-timeout",),
            group=_CLI_GROUP,
        ),
    ] = LoadGeneratorDefaults.BATCH_TIMEOUT

    failure_policy: Annotated[
        FailurePolicy,
        Field(
            description="How failed invocations affect the exit status.\n"
            "ignore: report failures but exit 0.\n"
            "any: exit 1 if any invocation failed.",
        ),
        CLIParameter(
            name=("--failure-policy",),
            group=_CLI_GROUP,
            converter=custom_enum_converter,
        ),
    ] = LoadGeneratorDefaults.FAILURE_POLICY

    @property
    def command_spec(self) -> CommandSpec:
        """The configured commands as a command spec."""
        return CommandSpec.from_value(self.commands)
