# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging

import pytest

from fanout.common.enums import (
    ConcurrencyMode,
    FailureCause,
    FailurePolicy,
    FanoutLogLevel,
    InvocationOutcome,
    InvokerType,
)


class TestCaseInsensitiveStrEnum:
    @pytest.mark.parametrize("value", ["parallel", "PARALLEL", "Parallel"])
    def test_lookup_ignores_case(self, value):
        assert ConcurrencyMode(value) is ConcurrencyMode.PARALLEL

    @pytest.mark.parametrize("value", ["spawn-error", "SPAWN_ERROR", "spawn_error"])
    def test_lookup_ignores_dash_vs_underscore(self, value):
        assert FailureCause(value) is FailureCause.SPAWN_ERROR

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            ConcurrencyMode("round-robin")

    def test_compares_to_strings(self):
        assert ConcurrencyMode.SERIAL == "Serial"
        assert ConcurrencyMode.SERIAL != "parallel"
        assert ConcurrencyMode.SERIAL != None  # noqa: E711

    def test_str_is_value(self):
        assert str(InvokerType.TCP) == "tcp"
        assert f"{FailurePolicy.ANY}" == "any"

    def test_hash_matches_normalized_value(self):
        assert {FailureCause.ERROR_REPLY: 1}[FailureCause("ERROR-REPLY")] == 1


class TestInvocationOutcome:
    def test_terminal(self):
        assert not InvocationOutcome.RUNNING.is_terminal
        assert InvocationOutcome.SUCCEEDED.is_terminal
        assert InvocationOutcome.FAILED.is_terminal


class TestFanoutLogLevel:
    @pytest.mark.parametrize(
        "level, number",
        [
            (FanoutLogLevel.DEBUG, logging.DEBUG),
            (FanoutLogLevel.TRACE, logging.DEBUG - 5),
            (FanoutLogLevel.NOTICE, logging.WARNING - 5),
            (FanoutLogLevel.SUCCESS, logging.WARNING + 5),
        ],
    )
    def test_level(self, level, number):
        assert level.level == number
