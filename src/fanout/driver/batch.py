# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import time

from fanout.common.enums import ConcurrencyMode, FailureCause
from fanout.common.exceptions import InvalidStateError
from fanout.common.models import (
    BatchResult,
    CommandSpec,
    ErrorDetailsCount,
    Invocation,
    TargetEndpoint,
)


class Batch:
    """The ordered set of invocations dispatched together by one run.

    All invocations are created up front, invocation `i` sending
    `command_spec.command_for(i)`. The batch is done only once every invocation
    has a terminal outcome, at which point it can be retired into a
    :class:`BatchResult`.
    """

    def __init__(
        self,
        count: int,
        command_spec: CommandSpec,
        mode: ConcurrencyMode,
        target: TargetEndpoint,
    ) -> None:
        self.mode = mode
        self.target = target
        self.invocations: list[Invocation] = [
            Invocation(index=i, command=command_spec.command_for(i))
            for i in range(count)
        ]
        self.was_timed_out = False
        self.start_ns: int | None = None
        self.end_ns: int | None = None
        self._start_perf_ns: int | None = None
        self._end_perf_ns: int | None = None

    @property
    def count(self) -> int:
        return len(self.invocations)

    @property
    def done(self) -> bool:
        """Whether every invocation has reached a terminal outcome."""
        return all(invocation.done for invocation in self.invocations)

    @property
    def outstanding(self) -> list[Invocation]:
        """The invocations still running or not yet started."""
        return [invocation for invocation in self.invocations if not invocation.done]

    @property
    def succeeded(self) -> int:
        return sum(1 for invocation in self.invocations if invocation.succeeded)

    @property
    def failed(self) -> int:
        return sum(
            1
            for invocation in self.invocations
            if invocation.done and not invocation.succeeded
        )

    def mark_started(self) -> None:
        self.start_ns = time.time_ns()
        self._start_perf_ns = time.perf_counter_ns()

    def mark_finished(self) -> None:
        self.end_ns = time.time_ns()
        self._end_perf_ns = time.perf_counter_ns()

    def cancel_outstanding(self, reason: str) -> int:
        """Fail every invocation that has not reached a terminal outcome with cause `cancelled`.

        Returns:
            The number of invocations that were cancelled.
        """
        outstanding = self.outstanding
        for invocation in outstanding:
            invocation.mark_failed(FailureCause.CANCELLED, reason)
        return len(outstanding)

    def to_result(self) -> BatchResult:
        """Retire the batch into its aggregate result.

        Raises:
            InvalidStateError: If an invocation has not reached a terminal outcome.
        """
        if not self.done:
            raise InvalidStateError(
                f"Cannot retire a batch with {len(self.outstanding)} outstanding invocation(s)"
            )

        duration_ns = None
        if self._start_perf_ns is not None and self._end_perf_ns is not None:
            duration_ns = self._end_perf_ns - self._start_perf_ns

        return BatchResult(
            succeeded=self.succeeded,
            failed=self.failed,
            mode=self.mode,
            target=self.target,
            start_ns=self.start_ns,
            end_ns=self.end_ns,
            duration_ns=duration_ns,
            was_timed_out=self.was_timed_out,
            error_summary=ErrorDetailsCount.summarize(
                invocation.error
                for invocation in self.invocations
                if invocation.error is not None
            ),
            invocations=self.invocations,
        )
