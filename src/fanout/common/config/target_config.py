# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import shlex
from typing import Annotated

from pydantic import BeforeValidator, Field

from fanout.common.config.base_config import BaseConfig
from fanout.common.config.cli_parameter import CLIParameter
from fanout.common.config.config_defaults import TargetDefaults
from fanout.common.config.config_validators import (
    custom_enum_converter,
    parse_client_args,
)
from fanout.common.config.groups import Groups
from fanout.common.enums import InvokerType
from fanout.common.models import TargetEndpoint


class TargetConfig(BaseConfig):
    """
    A configuration class for the server under test and the client used to reach it.
    """

    _CLI_GROUP = Groups.TARGET

    host: Annotated[
        str,
        Field(
            min_length=1,
            description="Host name or IP address of the target server.",
        ),
        CLIParameter(
            name=("--host",),
            group=_CLI_GROUP,
        ),
    ] = TargetDefaults.HOST

    port: Annotated[
        int,
        Field(
            ge=1,
            le=65535,
            description="TCP port of the target server.",
        ),
        CLIParameter(
            name=("--port", "-p"),
            group=_CLI_GROUP,
        ),
    ] = TargetDefaults.PORT

    invoker: Annotated[
        InvokerType,
        Field(
            description="How each invocation reaches the target.\n"
            "process: run the external client executable once per invocation.\n"
            "tcp: send one inline command over a fresh TCP connection and read one reply line.",
        ),
        CLIParameter(
            name=("--invoker",),
            group=_CLI_GROUP,
            converter=custom_enum_converter,
        ),
    ] = TargetDefaults.INVOKER

    client: Annotated[
        str,
        Field(
            min_length=1,
            description="The client executable run by the process invoker.",
        ),
        CLIParameter(
            name=("--client",),
            group=_CLI_GROUP,
        ),
    ] = TargetDefaults.CLIENT

    client_args: Annotated[
        str,
        Field(
            description="Arguments passed to the client before the command. "
            "The placeholders {host} and {port} are replaced with the target address. "
            'Use the --client-args="..." form when the value starts with a dash.',
        ),
        BeforeValidator(parse_client_args),
        CLIParameter(
            name=("--client-args",),
            group=_CLI_GROUP,
        ),
    ] = TargetDefaults.CLIENT_ARGS

    capture_output: Annotated[
        bool,
        Field(
            description="Capture the stderr of the client and include it in the error of a failed invocation. "
            "Output is discarded otherwise.",
        ),
        CLIParameter(
            name=("--capture-output",),
            group=_CLI_GROUP,
        ),
    ] = TargetDefaults.CAPTURE_OUTPUT

    connect_timeout: Annotated[
        float,
        Field(
            gt=0,
            description="The timeout in floating-point seconds for opening a connection with the tcp invoker.",
        ),
        CLIParameter(
            name=("--connect-timeout",),
            group=_CLI_GROUP,
        ),
    ] = TargetDefaults.CONNECT_TIMEOUT

    @property
    def endpoint(self) -> TargetEndpoint:
        """The target endpoint shared by every invocation."""
        return TargetEndpoint(host=self.host, port=self.port)

    def client_argv(self, endpoint: TargetEndpoint | None = None) -> list[str]:
        """The client executable and its arguments, with the target placeholders filled in."""
        endpoint = endpoint or self.endpoint
        args = [
            arg.replace("{host}", endpoint.host).replace(
                "{port}", str(endpoint.port)
            )
            for arg in shlex.split(self.client_args)
        ]
        return [self.client, *args]
