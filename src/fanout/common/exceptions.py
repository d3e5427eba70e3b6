# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from fanout.common.enums.driver_enums import FailureCause


class FanoutError(Exception):
    """Base class for all exceptions raised by Fanout."""

    def raw_str(self) -> str:
        """Return the raw string representation of the exception."""
        return super().__str__()

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return f"{self.__class__.__name__}: {super().__str__()}"


class ConfigurationError(FanoutError):
    """Exception raised when the batch parameters are invalid. Nothing is dispatched."""


class DispatchFailure(FanoutError):
    """Exception raised when the driver cannot create the unit of concurrency needed to dispatch.

    This is a resource exhaustion failure and aborts the whole batch.
    """

    def __init__(self, message: str, dispatched: int = 0) -> None:
        super().__init__(f"{message} (after {dispatched} worker(s) were dispatched)")
        self.dispatched = dispatched


class InvocationFailure(FanoutError):
    """An invocation terminated with an error status.

    Invokers raise a subclass from their interaction with the target. It is
    never propagated out of a batch run: it is recorded on the failed
    invocation as error details under the subclass's `cause`, and tallied.
    """

    cause: FailureCause

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class InvocationTimeout(InvocationFailure):
    """An invocation did not finish before its deadline."""

    cause = FailureCause.TIMEOUT


class SpawnFailure(InvocationFailure):
    """The external client for an invocation could not be started."""

    cause = FailureCause.SPAWN_ERROR


class ExitStatusFailure(InvocationFailure):
    """The external client exited with a non-zero status."""

    cause = FailureCause.EXIT_STATUS


class ConnectionFailure(InvocationFailure):
    """The connection to the target could not be opened, or closed before a reply."""

    cause = FailureCause.CONNECTION_ERROR


class ErrorReply(InvocationFailure):
    """The target answered with an error reply."""

    cause = FailureCause.ERROR_REPLY


class FactoryCreationError(FanoutError):
    """Exception raised when a factory encounters an error while creating a class."""


class InvalidStateError(FanoutError):
    """Exception raised when something is in an invalid state."""
