# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging

import pytest
from pydantic import ValidationError

from fanout.common.config import LoadGeneratorConfig, LoadGeneratorDefaults
from fanout.common.enums import ConcurrencyMode, FailurePolicy
from fanout.common.models import CommandTemplate


class TestLoadGeneratorConfig:
    def test_defaults(self):
        config = LoadGeneratorConfig()
        assert config.count == 150
        assert config.mode == ConcurrencyMode.PARALLEL
        assert config.commands == LoadGeneratorDefaults.COMMANDS
        assert config.max_concurrency == 256
        assert config.invocation_timeout == 30.0
        assert config.batch_timeout is None
        assert config.failure_policy == FailurePolicy.IGNORE

    def test_command_spec(self):
        spec = LoadGeneratorConfig().command_spec
        assert spec.commands == [
            CommandTemplate(name="PING"),
            CommandTemplate(name="ECHO", args=("Hello World!",)),
        ]

    def test_single_command_string(self):
        config = LoadGeneratorConfig(commands="SET key 'a, b'")
        assert config.commands == ["SET key 'a, b'"]
        assert config.command_spec.command_for(3).args == ("key", "a, b")

    @pytest.mark.parametrize("field", ["max_concurrency", "invocation_timeout"])
    def test_zero_disables_limit(self, field):
        assert getattr(LoadGeneratorConfig(**{field: 0}), field) is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"count": 0},
            {"count": -5},
            {"commands": []},
            {"commands": [""]},
            {"commands": ["ECHO 'unterminated"]},
            {"max_concurrency": -1},
            {"invocation_timeout": -1.0},
            {"batch_timeout": 0},
            {"mode": "round-robin"},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            LoadGeneratorConfig(**kwargs)

    def test_invocation_timeout_longer_than_batch_timeout_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            LoadGeneratorConfig(invocation_timeout=10.0, batch_timeout=1.0)
        assert "--invocation-timeout" in caplog.text
