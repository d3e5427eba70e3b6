# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from fanout.common.enums import ConcurrencyMode
from fanout.common.factories import DispatchStrategyFactory
from fanout.driver.dispatch_strategy import BaseDispatchStrategy


@DispatchStrategyFactory.register(ConcurrencyMode.SERIAL)
class SerialStrategy(BaseDispatchStrategy):
    """Runs the batch one invocation at a time, in order.

    A single worker drains the queue, so each invocation starts only after the
    previous one reached its terminal outcome. `max_concurrency` is ignored.
    """

    def _worker_count(self, count: int) -> int:
        return 1
