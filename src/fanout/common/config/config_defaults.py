# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path

from fanout.common.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_INVOCATION_TIMEOUT,
    DEFAULT_MAX_CONCURRENCY,
)
from fanout.common.enums import (
    ConcurrencyMode,
    FailurePolicy,
    FanoutLogLevel,
    InvokerType,
)


#
# Config Defaults
@dataclass(frozen=True)
class TargetDefaults:
    HOST = "127.0.0.1"
    PORT = 6379
    INVOKER = InvokerType.PROCESS
    CLIENT = "redis-cli"
    CLIENT_ARGS = "-h {host} -p {port}"
    CAPTURE_OUTPUT = False
    CONNECT_TIMEOUT = DEFAULT_CONNECT_TIMEOUT


@dataclass(frozen=True)
class LoadGeneratorDefaults:
    COUNT = 150
    MODE = ConcurrencyMode.PARALLEL
    COMMANDS = ["PING", "ECHO 'Hello World!'"]
    MAX_CONCURRENCY = DEFAULT_MAX_CONCURRENCY
    INVOCATION_TIMEOUT = DEFAULT_INVOCATION_TIMEOUT
    BATCH_TIMEOUT = None
    FAILURE_POLICY = FailurePolicy.IGNORE


@dataclass(frozen=True)
class OutputDefaults:
    ARTIFACT_DIRECTORY = Path("./artifacts")
    DISABLE_EXPORT = False
    LOG_FOLDER = Path("logs")
    LOG_FILE = Path("fanout.log")
    BATCH_RESULT_JSON_FILE = Path("batch_result.json")
    CONFIG_YAML_FILE = Path("fanout_config.yaml")


@dataclass(frozen=True)
class ServiceDefaults:
    LOG_LEVEL = FanoutLogLevel.INFO
    VERBOSE = False
    EXTRA_VERBOSE = False
