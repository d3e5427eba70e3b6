# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio

import pytest

from fanout.common.exceptions import InvalidStateError
from fanout.common.wait_group import WaitGroup


class TestWaitGroup:
    @pytest.mark.asyncio
    async def test_fresh_wait_group_is_released(self, wait_group: WaitGroup):
        assert wait_group.is_released
        assert await wait_group.wait(timeout=0.01)

    @pytest.mark.asyncio
    async def test_wait_blocks_until_all_done(self, wait_group: WaitGroup):
        wait_group.add(3)

        async def finish_later(delay: float):
            await asyncio.sleep(delay)
            wait_group.done()

        tasks = [asyncio.create_task(finish_later(0.01 * i)) for i in range(3)]
        assert not wait_group.is_released
        assert await wait_group.wait(timeout=1.0)
        assert wait_group.count == 0
        await asyncio.gather(*tasks)

    @pytest.mark.asyncio
    async def test_wait_times_out(self, wait_group: WaitGroup):
        wait_group.add()
        assert not await wait_group.wait(timeout=0.01)
        assert wait_group.count == 1

    def test_counter_cannot_go_negative(self, wait_group: WaitGroup):
        with pytest.raises(InvalidStateError):
            wait_group.done()
        wait_group.add(2)
        with pytest.raises(InvalidStateError):
            wait_group.add(-3)
        assert wait_group.count == 2

    @pytest.mark.asyncio
    async def test_reopens_after_add(self, wait_group: WaitGroup):
        wait_group.add()
        wait_group.done()
        assert wait_group.is_released
        wait_group.add()
        assert not wait_group.is_released

    @pytest.mark.asyncio
    async def test_released_wait_returns_without_waiting(self, wait_group: WaitGroup):
        wait_group.add()
        wait_group.done()
        assert await wait_group.wait(timeout=0)
