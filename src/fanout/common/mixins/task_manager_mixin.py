# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
from collections.abc import Coroutine

from fanout.common.constants import TASK_CANCEL_TIMEOUT_SHORT
from fanout.common.mixins.fanout_logger_mixin import FanoutLoggerMixin


class TaskManagerMixin(FanoutLoggerMixin):
    """Mixin to track a set of asyncio tasks so they can be awaited or cancelled together."""

    def __init__(self, **kwargs):
        self.tasks: set[asyncio.Task] = set()
        super().__init__(**kwargs)

    def execute_async(self, coro: Coroutine) -> asyncio.Task:
        """Create a task from a coroutine, track it, and return immediately.
        The task is dropped from the set once it completes.
        """
        task = asyncio.create_task(coro)
        self.tasks.add(task)
        task.add_done_callback(self.tasks.discard)
        return task

    async def wait_for_tasks(self) -> list[BaseException | None]:
        """Wait for all current tasks to complete."""
        return await asyncio.gather(*list(self.tasks), return_exceptions=True)

    async def cancel_all_tasks(
        self, timeout: float | None = TASK_CANCEL_TIMEOUT_SHORT
    ) -> None:
        """Cancel all tracked tasks and wait up to `timeout` seconds for them to settle.

        Passing `timeout=None` cancels without waiting.
        """
        if not self.tasks:
            return

        task_list = list(self.tasks)
        for task in task_list:
            task.cancel()
        self.tasks.clear()

        if timeout is None:
            return
        _, pending = await asyncio.wait(task_list, timeout=timeout)
        if pending:
            self.warning(
                f"{len(pending)} task(s) did not finish within {timeout}s of being cancelled"
            )
