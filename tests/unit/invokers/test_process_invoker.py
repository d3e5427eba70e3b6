# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
import time
from unittest.mock import patch

import pytest

from fanout.common.config import TargetConfig
from fanout.common.enums import FailureCause, InvocationOutcome
from fanout.common.models import CommandTemplate, Invocation
from fanout.invokers import ProcessInvoker


def make_invocation(command: str) -> Invocation:
    return Invocation(index=0, command=CommandTemplate.parse(command))


class TestProcessInvoker:
    @pytest.mark.asyncio
    async def test_zero_exit_status_succeeds(self, python_client_config, target):
        invoker = ProcessInvoker(python_client_config())
        invocation = make_invocation("PING")
        await invoker.invoke(invocation, target)
        assert invocation.outcome == InvocationOutcome.SUCCEEDED
        assert invocation.exit_code == 0

    @pytest.mark.asyncio
    async def test_non_zero_exit_status_fails(self, python_client_config, target):
        invoker = ProcessInvoker(python_client_config())
        invocation = make_invocation("EXIT 3")
        await invoker.invoke(invocation, target)
        assert invocation.outcome == InvocationOutcome.FAILED
        assert invocation.failure_cause == FailureCause.EXIT_STATUS
        assert invocation.exit_code == 3
        assert invocation.error.code == 3
        assert invocation.error.type == "ExitStatusFailure"
        assert "client failed on purpose" not in invocation.error.message

    @pytest.mark.asyncio
    async def test_captured_stderr_in_error(self, python_client_config, target):
        invoker = ProcessInvoker(python_client_config(capture_output=True))
        invocation = make_invocation("EXIT 2")
        await invoker.invoke(invocation, target)
        assert invocation.failure_cause == FailureCause.EXIT_STATUS
        assert invocation.error.message.endswith(
            "exited with status 2: client failed on purpose"
        )

    @pytest.mark.asyncio
    async def test_missing_client_is_spawn_error(self, tmp_path, target):
        invoker = ProcessInvoker(TargetConfig(client=str(tmp_path / "no-such-client")))
        invocation = make_invocation("PING")
        await invoker.invoke(invocation, target)
        assert invocation.failure_cause == FailureCause.SPAWN_ERROR
        assert invocation.error.type == "SpawnFailure"
        assert invocation.exit_code is None

    @pytest.mark.asyncio
    async def test_argv_has_target_then_command(self, target):
        config = TargetConfig(client="redis-cli", client_args="-h {host} -p {port}")
        invoker = ProcessInvoker(config)
        with patch(
            "asyncio.create_subprocess_exec", side_effect=FileNotFoundError("missing")
        ) as mock_exec:
            await invoker.invoke(make_invocation("ECHO 'Hello World!'"), target)
        assert mock_exec.call_args.args == (
            "redis-cli",
            "-h",
            "127.0.0.1",
            "-p",
            "6379",
            "ECHO",
            "Hello World!",
        )

    @pytest.mark.asyncio
    async def test_cancelled_invocation_kills_client(self, python_client_config, target):
        invoker = ProcessInvoker(python_client_config())
        invocation = make_invocation("SLEEP 30")
        processes = []
        create_subprocess_exec = asyncio.create_subprocess_exec

        async def spawn(*args, **kwargs):
            process = await create_subprocess_exec(*args, **kwargs)
            processes.append(process)
            return process

        start = time.perf_counter()
        with patch("asyncio.create_subprocess_exec", side_effect=spawn):
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(invoker.invoke(invocation, target), timeout=1.0)

        assert time.perf_counter() - start < 10.0
        assert not invocation.done
        assert len(processes) == 1
        assert processes[0].returncode is not None
