# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
from abc import ABC, abstractmethod

from fanout.common.decorators import implements_protocol
from fanout.common.enums import FailureCause
from fanout.common.exceptions import DispatchFailure, InvocationTimeout
from fanout.common.mixins import TaskManagerMixin
from fanout.common.models import Invocation, TargetEndpoint
from fanout.common.protocols import DispatchStrategyProtocol, InvokerProtocol
from fanout.common.wait_group import WaitGroup
from fanout.driver.batch import Batch


@implements_protocol(DispatchStrategyProtocol)
class BaseDispatchStrategy(TaskManagerMixin, ABC):
    """
    Base class for dispatch strategies.

    Every invocation of the batch is put on a queue, and a pool of worker tasks
    drains it, running one invocation at a time each. The number of workers is
    what separates the strategies. Once the workers are started, the strategy
    joins on a WaitGroup sized to the batch, which each worker lowers as it
    retires an invocation.

    Failures of single invocations are only recorded on the invocation. The one
    fatal condition is failing to create a worker task, which raises
    :class:`DispatchFailure`.
    """

    def __init__(
        self,
        invoker: InvokerProtocol,
        target: TargetEndpoint,
        max_concurrency: int | None = None,
        invocation_timeout: float | None = None,
        batch_timeout: float | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.invoker = invoker
        self.target = target
        self.max_concurrency = max_concurrency
        self.invocation_timeout = invocation_timeout
        self.batch_timeout = batch_timeout

    @abstractmethod
    def _worker_count(self, count: int) -> int:
        """Get the number of workers used for a batch of `count` invocations."""
        raise NotImplementedError

    async def dispatch(self, batch: Batch) -> None:
        """Run every invocation of the batch and return once each one has a terminal outcome.

        Raises:
            DispatchFailure: If a worker task could not be created.
        """
        queue: asyncio.Queue[Invocation] = asyncio.Queue()
        for invocation in batch.invocations:
            queue.put_nowait(invocation)

        wait_group = WaitGroup()
        wait_group.add(batch.count)

        worker_count = self._worker_count(batch.count)
        self.debug(
            lambda: f"Dispatching {batch.count} invocation(s) to {batch.target} with {worker_count} worker(s)"
        )
        self._start_workers(worker_count, queue, wait_group)

        released = await wait_group.wait(timeout=self.batch_timeout)
        if released:
            await self.wait_for_tasks()
            return

        batch.was_timed_out = True
        await self.cancel_all_tasks()
        cancelled = batch.cancel_outstanding(
            f"Batch deadline of {self.batch_timeout}s expired before the invocation finished"
        )
        self.warning(
            f"Batch deadline of {self.batch_timeout}s expired, cancelled {cancelled} outstanding invocation(s)"
        )

    def _start_workers(
        self, worker_count: int, queue: asyncio.Queue, wait_group: WaitGroup
    ) -> None:
        for worker_id in range(worker_count):
            worker = self._worker(worker_id, queue, wait_group)
            try:
                self.execute_async(worker)
            except Exception as e:
                worker.close()
                dispatched = len(self.tasks)
                # Cancel without waiting, the workers already running are abandoned
                for task in list(self.tasks):
                    task.cancel()
                self.tasks.clear()
                self.error(f"Unable to create worker task {worker_id}: {e!r}")
                raise DispatchFailure(
                    f"Unable to create worker task: {e!r}", dispatched=dispatched
                ) from e

    async def _worker(
        self, worker_id: int, queue: asyncio.Queue, wait_group: WaitGroup
    ) -> None:
        while True:
            try:
                invocation = queue.get_nowait()
            except asyncio.QueueEmpty:
                self.trace(lambda: f"Worker {worker_id} found the queue empty, exiting")
                return

            try:
                await self._run_invocation(invocation)
            finally:
                wait_group.done()

    async def _run_invocation(self, invocation: Invocation) -> None:
        invocation.mark_started()
        self.trace(
            lambda: f"Invocation {invocation.index} started: {invocation.command}"
        )
        try:
            if self.invocation_timeout is None:
                await self.invoker.invoke(invocation, self.target)
            else:
                await asyncio.wait_for(
                    self.invoker.invoke(invocation, self.target),
                    timeout=self.invocation_timeout,
                )
        except asyncio.TimeoutError:
            if not invocation.done:
                invocation.mark_failed(
                    FailureCause.TIMEOUT,
                    InvocationTimeout(
                        f"Invocation did not finish within {self.invocation_timeout}s"
                    ),
                )
        except Exception as e:
            # Invokers record target side failures themselves, anything else is a bug in the invoker
            self.exception(f"Unexpected error running invocation {invocation.index}: {e!r}")
            if not invocation.done:
                invocation.mark_failed(FailureCause.SPAWN_ERROR, e)

        if not invocation.done:
            self.error(
                f"Invoker returned without recording an outcome for invocation {invocation.index}"
            )
            invocation.mark_failed(
                FailureCause.SPAWN_ERROR, "Invoker returned without recording an outcome"
            )
