# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for testing Fanout.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

import asyncio
import logging
import socket
import sys
from collections.abc import AsyncGenerator, Callable

import pytest

from fanout.common.config import TargetConfig, UserConfig
from fanout.common.enums import FailureCause
from fanout.common.exceptions import ConnectionFailure
from fanout.common.fanout_logger import _TRACE
from fanout.common.models import Invocation, TargetEndpoint
from fanout.common.wait_group import WaitGroup

logging.basicConfig(level=_TRACE)


class FakeInvoker:
    """In-process invoker recording how it was driven.

    Invocations whose index is in `fail_indices` fail with a connection error, and
    those in `hang_indices` never finish on their own.
    """

    def __init__(
        self,
        delay: float = 0.0,
        fail_indices: set[int] | None = None,
        hang_indices: set[int] | None = None,
    ) -> None:
        self.delay = delay
        self.fail_indices = fail_indices or set()
        self.hang_indices = hang_indices or set()
        self.in_flight = 0
        self.max_in_flight = 0
        self.started: list[int] = []
        self.commands: list[str] = []

    async def invoke(self, invocation: Invocation, target: TargetEndpoint) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        self.started.append(invocation.index)
        self.commands.append(str(invocation.command))
        try:
            if invocation.index in self.hang_indices:
                await asyncio.Event().wait()
            if self.delay:
                await asyncio.sleep(self.delay)
            if invocation.index in self.fail_indices:
                invocation.mark_failed(
                    FailureCause.CONNECTION_ERROR,
                    ConnectionFailure(f"Unable to connect to {target}"),
                )
            else:
                invocation.mark_succeeded()
        finally:
            self.in_flight -= 1


@pytest.fixture
def fake_invoker_factory() -> Callable[..., FakeInvoker]:
    return FakeInvoker


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture
def target() -> TargetEndpoint:
    return TargetEndpoint(host="127.0.0.1", port=6379)


@pytest.fixture
def unreachable_target() -> TargetEndpoint:
    """An endpoint on a port that was just free, so connecting to it is refused."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return TargetEndpoint(host="127.0.0.1", port=port)


@pytest.fixture
def wait_group() -> WaitGroup:
    return WaitGroup()


class LineServer:
    """Minimal line protocol server: one request line, one reply line, then close.

    PING gets `+PONG`, ECHO gets its payload back, CLOSE drops the connection
    without a reply, HANG never answers, anything else gets an `-ERR` reply.
    """

    def __init__(self) -> None:
        self.received: list[bytes] = []
        self.endpoint: TargetEndpoint | None = None
        self._server: asyncio.Server | None = None
        self._handlers: set[asyncio.Task] = set()

    async def start(self) -> None:
        self._server = await asyncio.start_server(
            self._handle_client, host="127.0.0.1", port=0
        )
        port = self._server.sockets[0].getsockname()[1]
        self.endpoint = TargetEndpoint(host="127.0.0.1", port=port)

    async def stop(self) -> None:
        self._server.close()
        for task in list(self._handlers):
            task.cancel()
        await asyncio.gather(*self._handlers, return_exceptions=True)
        await self._server.wait_closed()

    async def _handle_client(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        task = asyncio.current_task()
        self._handlers.add(task)
        try:
            raw = await reader.readline()
            self.received.append(raw)
            line = raw.decode().strip()
            name = line.split(" ", 1)[0].upper() if line else ""
            if name == "PING":
                writer.write(b"+PONG\r\n")
            elif name == "ECHO":
                payload = line.split(" ", 1)[1] if " " in line else ""
                writer.write(f"+{payload}\r\n".encode())
            elif name == "CLOSE":
                return
            elif name == "HANG":
                await asyncio.sleep(3600)
            else:
                writer.write(f"-ERR unknown command '{name}'\r\n".encode())
            await writer.drain()
        except ConnectionError:
            pass
        finally:
            self._handlers.discard(task)
            writer.close()


@pytest.fixture
async def line_server() -> AsyncGenerator[LineServer, None]:
    """A real TCP server on an ephemeral localhost port."""
    server = LineServer()
    await server.start()
    try:
        yield server
    finally:
        await server.stop()


@pytest.fixture
def python_client_config(tmp_path) -> Callable[..., TargetConfig]:
    """Target config running the Python interpreter as the client executable.

    The client script receives the command as its arguments. `EXIT 3` writes to
    stderr and exits with status 3, `SLEEP 5` sleeps, anything else exits 0.
    """
    script = tmp_path / "client.py"
    script.write_text(
        "import sys, time\n"
        "args = sys.argv[1:]\n"
        "name = args[0] if args else ''\n"
        "if name == 'EXIT':\n"
        "    sys.stderr.write('client failed on purpose')\n"
        "    sys.exit(int(args[1]))\n"
        "if name == 'SLEEP':\n"
        "    time.sleep(float(args[1]))\n"
        "print(' '.join(args))\n"
    )

    def _make(**kwargs) -> TargetConfig:
        return TargetConfig(
            client=sys.executable,
            client_args=[str(script)],
            **kwargs,
        )

    return _make


@pytest.fixture
def user_config(tmp_path) -> UserConfig:
    return UserConfig(
        output={"artifact_directory": tmp_path / "artifacts"},
        cli_command="fanout run",
    )
