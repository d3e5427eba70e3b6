# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Decorators for Fanout components.

Decorators mark how a class should be treated, for example which protocol it implements.
"""

from collections.abc import Callable
from typing import TypeVar

ProtocolT = TypeVar("ProtocolT")
ClassT = TypeVar("ClassT")


class DecoratorAttrs:
    """Constant attribute names for decorators.

    When you decorate a class with a decorator, the decorator type and parameters are
    set as attributes on the class.
    """

    IMPLEMENTS_PROTOCOL = "__implements_protocol__"


def implements_protocol(protocol: type[ProtocolT]) -> Callable:
    """Decorator to specify that the class implements the given runtime protocol.

    Example:
    ```python
    @implements_protocol(InvokerProtocol)
    class BaseInvoker:
        pass
    ```

    The above is the equivalent to setting:
    ```python
    BaseInvoker.__implements_protocol__ = InvokerProtocol
    ```

    Raises:
        TypeError: If the protocol is not runtime checkable.
    """
    if not getattr(protocol, "_is_runtime_protocol", False):
        raise TypeError(
            f"Protocol {protocol.__name__} is not a runtime protocol. "
            "Please use the @runtime_checkable decorator to mark it as a runtime protocol."
        )

    def decorator(cls: type[ClassT]) -> type[ClassT]:
        setattr(cls, DecoratorAttrs.IMPLEMENTS_PROTOCOL, protocol)
        return cls

    return decorator
