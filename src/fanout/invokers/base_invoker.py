# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from abc import ABC, abstractmethod

from fanout.common.config import TargetConfig
from fanout.common.decorators import implements_protocol
from fanout.common.exceptions import InvocationFailure
from fanout.common.mixins import FanoutLoggerMixin
from fanout.common.models import CommandTemplate, Invocation, TargetEndpoint
from fanout.common.protocols import InvokerProtocol


@implements_protocol(InvokerProtocol)
class BaseInvoker(FanoutLoggerMixin, ABC):
    """Base class for invokers.

    Subclasses implement :meth:`_invoke`, which performs the interaction with the
    target and raises an :class:`InvocationFailure` subclass for a target side
    failure. :meth:`invoke` turns that into the terminal outcome of the invocation.
    Cancellation is never recorded here, it propagates to the dispatcher.
    """

    def __init__(self, target_config: TargetConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.target_config = target_config

    async def invoke(self, invocation: Invocation, target: TargetEndpoint) -> None:
        try:
            exit_code = await self._invoke(invocation.command, target)
        except InvocationFailure as e:
            self.trace(lambda: f"Invocation {invocation.index} failed: {e}")
            invocation.mark_failed(e.cause, e, exit_code=e.exit_code)
            return

        self.trace(lambda: f"Invocation {invocation.index} succeeded")
        invocation.mark_succeeded(exit_code)

    @abstractmethod
    async def _invoke(
        self, command: CommandTemplate, target: TargetEndpoint
    ) -> int | None:
        """Send `command` to `target` once.

        Returns:
            The exit status of the client, if the invoker runs one.

        Raises:
            InvocationFailure: If the interaction with the target failed.
        """
