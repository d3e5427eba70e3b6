# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "BatchResult",
    "CommandSpec",
    "CommandTemplate",
    "ErrorDetails",
    "ErrorDetailsCount",
    "FanoutBaseModel",
    "Invocation",
    "TargetEndpoint",
    "exclude_if_none",
]

from fanout.common.models.base_models import FanoutBaseModel, exclude_if_none
from fanout.common.models.batch_models import BatchResult
from fanout.common.models.command_models import CommandSpec, CommandTemplate
from fanout.common.models.endpoint_models import TargetEndpoint
from fanout.common.models.error_models import ErrorDetails, ErrorDetailsCount
from fanout.common.models.invocation_models import Invocation
