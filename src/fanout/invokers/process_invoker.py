# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
import contextlib

from fanout.common.constants import MAX_CAPTURED_STDERR_CHARS, PROCESS_KILL_TIMEOUT
from fanout.common.enums import InvokerType
from fanout.common.exceptions import ExitStatusFailure, SpawnFailure
from fanout.common.factories import InvokerFactory
from fanout.common.models import CommandTemplate, TargetEndpoint
from fanout.invokers.base_invoker import BaseInvoker


@InvokerFactory.register(InvokerType.PROCESS)
class ProcessInvoker(BaseInvoker):
    """Runs the external client once per invocation, as in
    `redis-cli -h 127.0.0.1 -p 6379 PING`.

    A non-zero exit status is a failure. The child is killed if the invocation
    is cancelled or times out, so no client outlives its invocation.
    """

    async def _invoke(self, command: CommandTemplate, target: TargetEndpoint) -> int:
        argv = [*self.target_config.client_argv(target), *command.render()]
        capture = self.target_config.capture_output

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE if capture else asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise SpawnFailure(f"Unable to start {argv[0]!r}: {e}") from e

        try:
            _, stderr = await process.communicate()
        except asyncio.CancelledError:
            await self._kill(process)
            raise

        if process.returncode != 0:
            message = f"{argv[0]} exited with status {process.returncode}"
            if stderr:
                details = stderr.decode(errors="replace").strip()
                if details:
                    message = f"{message}: {details[:MAX_CAPTURED_STDERR_CHARS]}"
            raise ExitStatusFailure(message, exit_code=process.returncode)

        return process.returncode

    async def _kill(self, process: asyncio.subprocess.Process) -> None:
        if process.returncode is not None:
            return
        self.debug(lambda: f"Killing client process {process.pid}")
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        try:
            await asyncio.wait_for(process.wait(), timeout=PROCESS_KILL_TIMEOUT)
        except asyncio.TimeoutError:
            self.warning(
                f"Client process {process.pid} was not reaped within {PROCESS_KILL_TIMEOUT}s of being killed"
            )
