# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Protocol

import pytest

from fanout.common.decorators import DecoratorAttrs, implements_protocol
from fanout.common.enums import ConcurrencyMode, DataExporterType, InvokerType
from fanout.common.exceptions import FactoryCreationError
from fanout.common.factories import (
    DataExporterFactory,
    DispatchStrategyFactory,
    FanoutFactory,
    InvokerFactory,
)
from fanout.common.protocols import InvokerProtocol
from fanout.module_loader import ensure_modules_loaded


class _WidgetFactory(FanoutFactory[str, object]):
    pass


class TestFanoutFactory:
    def test_subclasses_have_separate_registries(self):
        @_WidgetFactory.register("widget")
        class Widget:
            def __init__(self, size: int = 1):
                self.size = size

        assert _WidgetFactory.get_all_class_types() == ["widget"]
        assert "widget" not in InvokerFactory.get_all_class_types()

        widget = _WidgetFactory.create_instance("widget", size=3)
        assert isinstance(widget, Widget)
        assert widget.size == 3

    def test_higher_priority_overrides(self):
        class _Factory(FanoutFactory[str, object]):
            pass

        @_Factory.register("thing")
        class Default:
            pass

        @_Factory.register("thing", override_priority=10)
        class Override:
            pass

        @_Factory.register("thing", override_priority=5)
        class Ignored:
            pass

        assert _Factory.get_class_from_type("thing") is Override

    def test_unknown_type(self):
        with pytest.raises(FactoryCreationError):
            _WidgetFactory.create_instance("gadget")
        with pytest.raises(TypeError):
            _WidgetFactory.get_class_from_type("gadget")

    def test_constructor_failure_is_wrapped(self):
        class _Factory(FanoutFactory[str, object]):
            pass

        @_Factory.register("broken")
        class Broken:
            def __init__(self):
                raise RuntimeError("boom")

        with pytest.raises(FactoryCreationError, match="boom"):
            _Factory.create_instance("broken")


class TestBuiltinRegistrations:
    def test_every_type_is_registered(self):
        ensure_modules_loaded()
        assert set(InvokerFactory.get_all_class_types()) == set(InvokerType)
        assert set(DispatchStrategyFactory.get_all_class_types()) == set(ConcurrencyMode)
        assert set(DataExporterFactory.get_all_class_types()) == set(DataExporterType)

    def test_invokers_implement_protocol(self):
        ensure_modules_loaded()
        for invoker_type in InvokerType:
            invoker_cls = InvokerFactory.get_class_from_type(invoker_type)
            assert getattr(invoker_cls, DecoratorAttrs.IMPLEMENTS_PROTOCOL) is InvokerProtocol


class TestImplementsProtocol:
    def test_rejects_non_runtime_protocol(self):
        class NotRuntime(Protocol):
            def run(self) -> None: ...

        with pytest.raises(TypeError):
            implements_protocol(NotRuntime)
