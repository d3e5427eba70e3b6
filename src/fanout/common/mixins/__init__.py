# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "BaseMixin",
    "FanoutLoggerMixin",
    "TaskManagerMixin",
]

from fanout.common.mixins.base_mixin import BaseMixin
from fanout.common.mixins.fanout_logger_mixin import FanoutLoggerMixin
from fanout.common.mixins.task_manager_mixin import TaskManagerMixin
