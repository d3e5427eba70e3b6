# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import time

from pydantic import Field

from fanout.common.enums import FailureCause, InvocationOutcome
from fanout.common.exceptions import InvalidStateError
from fanout.common.models.base_models import FanoutBaseModel, exclude_if_none
from fanout.common.models.command_models import CommandTemplate
from fanout.common.models.error_models import ErrorDetails


@exclude_if_none("failure_cause", "error", "exit_code")
class Invocation(FanoutBaseModel):
    """One request to run a single command against the target, and its observed outcome.

    An invocation is owned by the batch that created it. It starts out
    RUNNING and moves to exactly one terminal outcome, SUCCEEDED or FAILED.
    """

    index: int = Field(
        ...,
        ge=0,
        description="Position of the invocation within its batch.",
    )
    command: CommandTemplate = Field(
        ...,
        description="The command this invocation sends.",
    )
    outcome: InvocationOutcome = Field(
        default=InvocationOutcome.RUNNING,
        description="The observed outcome of the invocation.",
    )
    failure_cause: FailureCause | None = Field(
        default=None,
        description="Why the invocation failed, if it did.",
    )
    error: ErrorDetails | None = Field(
        default=None,
        description="Details of the failure, if any.",
    )
    exit_code: int | None = Field(
        default=None,
        description="Exit status of the client process, for process based invocations.",
    )
    timestamp_ns: int | None = Field(
        default=None,
        description="Wall clock time the invocation started, in nanoseconds since the epoch.",
    )
    start_ns: int | None = Field(
        default=None,
        description="Monotonic start time of the invocation (time.perf_counter_ns).",
    )
    end_ns: int | None = Field(
        default=None,
        description="Monotonic time the invocation reached its terminal outcome (time.perf_counter_ns).",
    )

    @property
    def done(self) -> bool:
        """Whether the invocation has reached a terminal outcome."""
        return self.outcome.is_terminal

    @property
    def started(self) -> bool:
        return self.start_ns is not None

    @property
    def succeeded(self) -> bool:
        return self.outcome == InvocationOutcome.SUCCEEDED

    @property
    def duration_ns(self) -> int | None:
        if self.start_ns is None or self.end_ns is None:
            return None
        return self.end_ns - self.start_ns

    def mark_started(self) -> None:
        if self.done:
            raise InvalidStateError(
                f"Invocation {self.index} cannot start, it already {self.outcome}"
            )
        self.timestamp_ns = time.time_ns()
        self.start_ns = time.perf_counter_ns()

    def mark_succeeded(self, exit_code: int | None = None) -> None:
        self._ensure_not_done(InvocationOutcome.SUCCEEDED)
        self.exit_code = exit_code
        self._finish(InvocationOutcome.SUCCEEDED)

    def mark_failed(
        self,
        cause: FailureCause,
        error: ErrorDetails | BaseException | str | None = None,
        exit_code: int | None = None,
    ) -> None:
        """Record a failed outcome. The error may be given as details, an exception or a message."""
        self._ensure_not_done(InvocationOutcome.FAILED)
        if isinstance(error, BaseException):
            error = ErrorDetails.from_exception(error, code=exit_code)
        elif isinstance(error, str):
            error = ErrorDetails(code=exit_code, type=str(cause), message=error)
        elif error is None:
            error = ErrorDetails(code=exit_code, type=str(cause), message=str(cause))

        self.failure_cause = cause
        self.error = error
        self.exit_code = exit_code
        self._finish(InvocationOutcome.FAILED)

    def _ensure_not_done(self, outcome: InvocationOutcome) -> None:
        if self.done:
            raise InvalidStateError(
                f"Invocation {self.index} already {self.outcome}, cannot mark it {outcome}"
            )

    def _finish(self, outcome: InvocationOutcome) -> None:
        self.outcome = outcome
        self.end_ns = time.perf_counter_ns()
