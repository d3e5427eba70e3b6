# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio

import pytest

from fanout.common.mixins import TaskManagerMixin


@pytest.fixture
def task_manager() -> TaskManagerMixin:
    return TaskManagerMixin()


class TestTaskManagerMixin:
    @pytest.mark.asyncio
    async def test_finished_tasks_are_dropped(self, task_manager):
        task = task_manager.execute_async(asyncio.sleep(0))
        assert task in task_manager.tasks
        await task
        await asyncio.sleep(0)
        assert not task_manager.tasks

    @pytest.mark.asyncio
    async def test_wait_for_tasks_collects_errors(self, task_manager):
        async def fail():
            raise ValueError("boom")

        task_manager.execute_async(asyncio.sleep(0.01))
        task_manager.execute_async(fail())
        results = await task_manager.wait_for_tasks()
        assert sorted(type(r).__name__ for r in results) == ["NoneType", "ValueError"]

    @pytest.mark.asyncio
    async def test_cancel_all_tasks(self, task_manager):
        tasks = [task_manager.execute_async(asyncio.sleep(60)) for _ in range(3)]
        await task_manager.cancel_all_tasks()
        assert not task_manager.tasks
        assert all(task.cancelled() for task in tasks)

    @pytest.mark.asyncio
    async def test_cancel_without_waiting(self, task_manager):
        task = task_manager.execute_async(asyncio.sleep(60))
        await task_manager.cancel_all_tasks(timeout=None)
        assert not task_manager.tasks
        with pytest.raises(asyncio.CancelledError):
            await task
