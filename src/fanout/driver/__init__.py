# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "BaseDispatchStrategy",
    "Batch",
    "LoadDriver",
    "ParallelStrategy",
    "SerialStrategy",
]

from fanout.driver.batch import Batch
from fanout.driver.dispatch_strategy import BaseDispatchStrategy
from fanout.driver.load_driver import LoadDriver
from fanout.driver.parallel_strategy import ParallelStrategy
from fanout.driver.serial_strategy import SerialStrategy
