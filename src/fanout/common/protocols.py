# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fanout.common.models import Invocation, TargetEndpoint

if TYPE_CHECKING:
    from fanout.driver.batch import Batch


@runtime_checkable
class InvokerProtocol(Protocol):
    """Protocol for invokers.

    An invoker performs exactly one interaction with the target for an
    invocation and records its terminal outcome on the invocation. It must not
    raise for failures on the target side, those are recorded as a failed
    outcome instead.
    """

    async def invoke(self, invocation: Invocation, target: TargetEndpoint) -> None: ...


@runtime_checkable
class DispatchStrategyProtocol(Protocol):
    """Protocol for the strategies that dispatch the invocations of a batch and join on them."""

    async def dispatch(self, batch: "Batch") -> None: ...


@runtime_checkable
class DataExporterProtocol(Protocol):
    """Protocol for data exporters.
    Any class implementing this protocol must provide an `export` method
    that writes the batch result it was created with to its destination.
    """

    async def export(self) -> None: ...
