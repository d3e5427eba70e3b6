# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "ADD_TO_TEMPLATE",
    "BaseConfig",
    "CLIParameter",
    "DisableCLI",
    "Groups",
    "LoadGeneratorConfig",
    "LoadGeneratorDefaults",
    "OutputConfig",
    "OutputDefaults",
    "ServiceConfig",
    "ServiceDefaults",
    "TargetConfig",
    "TargetDefaults",
    "UserConfig",
    "load_service_config",
]

from fanout.common.config.base_config import ADD_TO_TEMPLATE, BaseConfig
from fanout.common.config.cli_parameter import CLIParameter, DisableCLI
from fanout.common.config.config_defaults import (
    LoadGeneratorDefaults,
    OutputDefaults,
    ServiceDefaults,
    TargetDefaults,
)
from fanout.common.config.groups import Groups
from fanout.common.config.loadgen_config import LoadGeneratorConfig
from fanout.common.config.loader import load_service_config
from fanout.common.config.output_config import OutputConfig
from fanout.common.config.service_config import ServiceConfig
from fanout.common.config.target_config import TargetConfig
from fanout.common.config.user_config import UserConfig
