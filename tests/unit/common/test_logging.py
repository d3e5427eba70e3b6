# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging

import pytest
from rich.logging import RichHandler

from fanout.common.config import ServiceConfig
from fanout.common.enums import FanoutLogLevel
from fanout.common.logging import create_file_handler, setup_rich_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


class TestSetupRichLogging:
    def test_console_and_file_handlers(self, root_logger, user_config):
        setup_rich_logging(ServiceConfig(log_level=FanoutLogLevel.DEBUG), user_config)
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root_logger.handlers)

        logging.getLogger("fanout.test").warning("written to the log file")
        for handler in root_logger.handlers:
            handler.flush()
        log_file = user_config.output.log_folder / "fanout.log"
        assert "written to the log file" in log_file.read_text()

    def test_without_user_config(self, root_logger):
        before = len(root_logger.handlers)
        setup_rich_logging(ServiceConfig(log_level=FanoutLogLevel.TRACE))
        assert root_logger.level == FanoutLogLevel.TRACE.level
        assert len(root_logger.handlers) == before + 1


class TestCreateFileHandler:
    def test_creates_folder(self, tmp_path):
        handler = create_file_handler(tmp_path / "nested" / "logs", "INFO")
        try:
            assert (tmp_path / "nested" / "logs").is_dir()
            assert handler.level == logging.INFO
        finally:
            handler.close()
