# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fanout.common.fanout_logger import _NOTICE, _SUCCESS, _TRACE, FanoutLogger
from fanout.common.mixins import FanoutLoggerMixin


class TestFanoutLogger:
    def test_lazy_message_not_evaluated_when_disabled(self):
        logger = FanoutLogger("test.lazy")
        logger.set_level(logging.INFO)
        message = MagicMock(return_value="expensive")
        logger.debug(message)
        message.assert_not_called()
        logger.info(message)
        message.assert_called_once()

    @pytest.mark.parametrize(
        "method, level",
        [("trace", _TRACE), ("notice", _NOTICE), ("success", _SUCCESS)],
    )
    def test_custom_levels(self, caplog, method, level):
        logger = FanoutLogger("test.levels")
        logger.set_level(_TRACE)
        with caplog.at_level(_TRACE, logger="test.levels"):
            getattr(logger, method)(lambda: f"{method} message")
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (level, f"{method} message")
        ]

    def test_records_point_at_the_caller(self, caplog):
        logger = FanoutLogger("test.caller")
        with caplog.at_level(logging.INFO, logger="test.caller"):
            logger.info("hello")
        assert Path(caplog.records[0].pathname).name == Path(__file__).name

    @pytest.mark.parametrize(
        "level, valid",
        [("trace", True), ("NOTICE", True), (logging.INFO, True), ("LOUD", False), (7, False)],
    )
    def test_is_valid_level(self, level, valid):
        assert FanoutLogger.is_valid_level(level) is valid

    def test_get_level_number(self):
        assert FanoutLogger.get_level_number("success") == _SUCCESS
        assert FanoutLogger.get_level_number(logging.ERROR) == logging.ERROR


class TestFanoutLoggerMixin:
    def test_logger_named_after_class(self, caplog):
        class Component(FanoutLoggerMixin):
            pass

        component = Component()
        assert component.logger.logger_name == "Component"
        with caplog.at_level(logging.WARNING, logger="Component"):
            component.warning("careful")
        assert caplog.records[0].name == "Component"
        assert Path(caplog.records[0].pathname).name == Path(__file__).name

    def test_explicit_logger_name(self):
        class Component(FanoutLoggerMixin):
            pass

        assert Component(logger_name="custom").logger.logger_name == "custom"
