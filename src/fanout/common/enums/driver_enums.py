# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from fanout.common.enums.base_enums import CaseInsensitiveStrEnum


class ConcurrencyMode(CaseInsensitiveStrEnum):
    """How the invocations of a batch are dispatched."""

    PARALLEL = "parallel"
    """All invocations are dispatched without waiting on each other, bounded only by the worker pool."""

    SERIAL = "serial"
    """Each invocation is dispatched only after the previous one reached a terminal outcome."""


class InvocationOutcome(CaseInsensitiveStrEnum):
    """The observed outcome of a single invocation."""

    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not InvocationOutcome.RUNNING


class FailureCause(CaseInsensitiveStrEnum):
    """Why an invocation was marked failed."""

    SPAWN_ERROR = "spawn_error"
    """The external client process could not be started."""

    EXIT_STATUS = "exit_status"
    """The client process exited with a non-zero status."""

    CONNECTION_ERROR = "connection_error"
    """The connection to the target could not be established or was lost."""

    ERROR_REPLY = "error_reply"
    """The target answered with an error reply."""

    TIMEOUT = "timeout"
    """The invocation did not finish before its deadline."""

    CANCELLED = "cancelled"
    """The batch deadline expired before the invocation finished."""


class FailurePolicy(CaseInsensitiveStrEnum):
    """How failed invocations affect the exit status of a run."""

    IGNORE = "ignore"
    """Failed invocations are reported but the run still exits successfully."""

    ANY = "any"
    """Any failed invocation makes the run exit with an error status."""
