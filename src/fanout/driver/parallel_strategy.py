# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from fanout.common.enums import ConcurrencyMode
from fanout.common.factories import DispatchStrategyFactory
from fanout.driver.dispatch_strategy import BaseDispatchStrategy


@DispatchStrategyFactory.register(ConcurrencyMode.PARALLEL)
class ParallelStrategy(BaseDispatchStrategy):
    """Fans the whole batch out at once.

    One worker per invocation, capped at `max_concurrency` when it is set, so an
    invocation only waits to start while every worker slot is busy.
    """

    def _worker_count(self, count: int) -> int:
        if self.max_concurrency is None:
            return count
        return min(count, self.max_concurrency)
