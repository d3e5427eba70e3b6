# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from fanout.common.enums import FailureCause
from fanout.common.exceptions import (
    ConfigurationError,
    ConnectionFailure,
    DispatchFailure,
    ErrorReply,
    ExitStatusFailure,
    InvocationTimeout,
    SpawnFailure,
)


class TestExceptions:
    def test_str_includes_class_name(self):
        error = ConfigurationError("count must be at least 1")
        assert str(error) == "ConfigurationError: count must be at least 1"
        assert error.raw_str() == "count must be at least 1"

    def test_dispatch_failure_reports_dispatched(self):
        error = DispatchFailure("Unable to create worker task", dispatched=7)
        assert error.dispatched == 7
        assert "after 7 worker(s)" in error.raw_str()

    @pytest.mark.parametrize(
        "exception_cls, cause",
        [
            (InvocationTimeout, FailureCause.TIMEOUT),
            (SpawnFailure, FailureCause.SPAWN_ERROR),
            (ExitStatusFailure, FailureCause.EXIT_STATUS),
            (ConnectionFailure, FailureCause.CONNECTION_ERROR),
            (ErrorReply, FailureCause.ERROR_REPLY),
        ],
    )
    def test_invocation_failure_causes(self, exception_cls, cause):
        error = exception_cls("failed", exit_code=4)
        assert error.cause == cause
        assert error.exit_code == 4
