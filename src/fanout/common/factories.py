# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fanout.common.enums import ConcurrencyMode, DataExporterType, InvokerType
from fanout.common.exceptions import FactoryCreationError
from fanout.common.fanout_logger import FanoutLogger

if TYPE_CHECKING:
    # NOTE: Only needed for the factory type hints, importing them here would be circular.
    from fanout.common.protocols import (
        DataExporterProtocol,
        DispatchStrategyProtocol,
        InvokerProtocol,
    )

ClassEnumT = TypeVar("ClassEnumT", bound=str)
ClassProtocolT = TypeVar("ClassProtocolT")


class FanoutFactory(Generic[ClassEnumT, ClassProtocolT]):
    """Registry mapping an enum type to the class implementing it.

    Example:
    ```python
        @InvokerFactory.register(InvokerType.TCP)
        class TcpInvoker(BaseInvoker):
            ...

        invoker = InvokerFactory.create_instance(InvokerType.TCP, target_config=config)
    ```
    """

    _logger: FanoutLogger
    _registry: dict[ClassEnumT | str, type[ClassProtocolT]]
    _override_priorities: dict[ClassEnumT | str, int]

    def __init_subclass__(cls) -> None:
        cls._registry = {}
        cls._override_priorities = {}
        cls._logger = FanoutLogger(cls.__name__)
        super().__init_subclass__()

    @classmethod
    def register(
        cls, class_type: ClassEnumT | str, override_priority: int = 0
    ) -> Callable:
        """Register a class for a class type.

        Args:
            class_type: The type of class to register
            override_priority: When several classes are registered for the same type,
                the one with the highest priority wins. Built-in classes use 0.

        Returns:
            Decorator for the class that implements the class protocol
        """

        def decorator(class_cls: type[ClassProtocolT]) -> type[ClassProtocolT]:
            existing_priority = cls._override_priorities.get(class_type, -1)
            if class_type in cls._registry and existing_priority >= override_priority:
                cls._logger.warning(
                    f"{class_type!r} class {cls._registry[class_type].__name__} already registered with same or higher "
                    f"priority ({existing_priority}). Ignoring {class_cls.__name__} with priority {override_priority}.",
                )
                return class_cls

            cls._logger.debug(
                lambda: f"{class_type!r} class {class_cls.__name__} registered with priority {override_priority}.",
            )
            cls._registry[class_type] = class_cls
            cls._override_priorities[class_type] = override_priority
            return class_cls

        return decorator

    @classmethod
    def create_instance(
        cls,
        class_type: ClassEnumT | str,
        **kwargs: Any,
    ) -> ClassProtocolT:
        """Create a new instance of the class registered for `class_type`.

        Raises:
            FactoryCreationError: If the class type is not registered or the constructor fails
        """
        if class_type not in cls._registry:
            raise FactoryCreationError(
                f"No implementation registered for {class_type!r} in {cls.__name__}."
            )
        try:
            return cls.get_class_from_type(class_type)(**kwargs)
        except Exception as e:
            raise FactoryCreationError(
                f"Error creating {class_type!r} instance for {cls.__name__}: {e}"
            ) from e

    @classmethod
    def get_class_from_type(cls, class_type: ClassEnumT | str) -> type[ClassProtocolT]:
        if class_type not in cls._registry:
            raise TypeError(
                f"No class found for {class_type!r}. Please register the class first."
            )
        return cls._registry[class_type]

    @classmethod
    def get_all_class_types(cls) -> list[ClassEnumT | str]:
        return list(cls._registry.keys())


class InvokerFactory(FanoutFactory[InvokerType, "InvokerProtocol"]):
    """Factory for the ways of performing a single invocation.
    see: :class:`fanout.common.factories.FanoutFactory` for more details.
    """


class DispatchStrategyFactory(
    FanoutFactory[ConcurrencyMode, "DispatchStrategyProtocol"]
):
    """Factory for the dispatch strategy of each concurrency mode.
    see: :class:`fanout.common.factories.FanoutFactory` for more details.
    """


class DataExporterFactory(FanoutFactory[DataExporterType, "DataExporterProtocol"]):
    """Factory for batch result exporters.
    see: :class:`fanout.common.factories.FanoutFactory` for more details.
    """
