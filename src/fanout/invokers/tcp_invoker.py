# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
import contextlib

from fanout.common.constants import MAX_REPLY_LINE_BYTES, RESP_LINE_TERMINATOR
from fanout.common.enums import InvokerType
from fanout.common.exceptions import ConnectionFailure, ErrorReply
from fanout.common.factories import InvokerFactory
from fanout.common.models import CommandTemplate, TargetEndpoint
from fanout.invokers.base_invoker import BaseInvoker

_QUOTE_CHARS = frozenset(' \t\r\n"\'\\')


def _quote_inline_arg(arg: str) -> str:
    if arg and not _QUOTE_CHARS.intersection(arg):
        return arg
    escaped = (
        arg.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def encode_inline_command(command: CommandTemplate) -> bytes:
    """Encode a command as one inline request line, such as `ECHO "Hello World!"\\r\\n`.

    Arguments that are empty or contain whitespace, quotes or backslashes are
    double quoted with backslash escapes. CR and LF are escaped as `\\r` and `\\n`,
    so the request is always a single line.
    """
    line = " ".join(_quote_inline_arg(part) for part in command.render())
    return line.encode() + RESP_LINE_TERMINATOR


@InvokerFactory.register(InvokerType.TCP)
class TcpInvoker(BaseInvoker):
    """Sends one inline command over a fresh TCP connection and reads one reply line.

    A reply starting with `-` is an error reply. Any other reply is a success,
    its payload is not inspected.
    """

    async def _invoke(self, command: CommandTemplate, target: TargetEndpoint) -> None:
        reader, writer = await self._open_connection(target)
        try:
            writer.write(encode_inline_command(command))
            await writer.drain()
            line = await reader.readuntil(b"\n")
        except asyncio.IncompleteReadError as e:
            raise ConnectionFailure(
                f"Connection to {target} closed before a reply was received"
            ) from e
        except asyncio.LimitOverrunError as e:
            raise ConnectionFailure(
                f"Reply from {target} exceeded {MAX_REPLY_LINE_BYTES} bytes"
            ) from e
        except OSError as e:
            raise ConnectionFailure(f"Connection to {target} failed: {e}") from e
        finally:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()

        reply = line.rstrip(b"\r\n").decode(errors="replace")
        if reply.startswith("-"):
            raise ErrorReply(reply[1:].strip() or "Empty error reply")
        return None

    async def _open_connection(
        self, target: TargetEndpoint
    ) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        timeout = self.target_config.connect_timeout
        try:
            return await asyncio.wait_for(
                asyncio.open_connection(
                    target.host, target.port, limit=MAX_REPLY_LINE_BYTES
                ),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise ConnectionFailure(
                f"Timed out connecting to {target} after {timeout}s"
            ) from e
        except OSError as e:
            raise ConnectionFailure(f"Unable to connect to {target}: {e}") from e
