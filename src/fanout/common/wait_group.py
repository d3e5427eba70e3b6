# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio

from fanout.common.exceptions import InvalidStateError


class WaitGroup:
    """Join barrier counting outstanding units of work.

    `add` raises the counter before work is handed out, `done` lowers it as each
    unit reaches a terminal state, and `wait` suspends until the counter is back
    at zero. A wait group that has never been added to is already released.

    Usage:
        wait_group = WaitGroup()
        wait_group.add(len(invocations))
        ...  # each worker calls wait_group.done() exactly once per invocation
        released = await wait_group.wait(timeout=60.0)
    """

    def __init__(self) -> None:
        self._counter = 0
        self._released = asyncio.Event()
        self._released.set()

    @property
    def count(self) -> int:
        """The number of outstanding units of work."""
        return self._counter

    @property
    def is_released(self) -> bool:
        """True while the counter is zero."""
        return self._released.is_set()

    def add(self, delta: int = 1) -> None:
        """Adjust the counter by `delta`, releasing any waiters when it reaches zero.

        Raises:
            InvalidStateError: If the counter would drop below zero.
        """
        if self._counter + delta < 0:
            raise InvalidStateError(
                f"WaitGroup counter cannot go negative (count={self._counter}, delta={delta})"
            )
        self._counter += delta
        if self._counter == 0:
            self._released.set()
        else:
            self._released.clear()

    def done(self) -> None:
        """Mark one unit of work as finished."""
        self.add(-1)

    async def wait(self, timeout: float | None = None) -> bool:
        """Wait until the counter reaches zero.

        Args:
            timeout: Maximum number of seconds to wait, or None to wait indefinitely.

        Returns:
            True if the barrier was released, False if the timeout expired first.
        """
        if self.is_released:
            return True
        if timeout is None:
            await self._released.wait()
            return True
        try:
            await asyncio.wait_for(self._released.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True
