# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

NANOS_PER_SECOND = 1_000_000_000

DEFAULT_MAX_CONCURRENCY = 256
"""Default upper bound on the number of invocations running at once in parallel mode."""

DEFAULT_INVOCATION_TIMEOUT = 30.0
"""Default deadline for a single invocation in seconds."""

DEFAULT_CONNECT_TIMEOUT = 5.0
"""Default timeout for opening a TCP connection to the target in seconds."""

TASK_CANCEL_TIMEOUT_SHORT = 2.0
"""Maximum time to wait for worker tasks to settle after cancelling them."""

PROCESS_KILL_TIMEOUT = 2.0
"""Maximum time to wait for a killed client process to be reaped."""

MAX_REPLY_LINE_BYTES = 64 * 1024
"""Maximum length of a single reply line read by the TCP invoker."""

MAX_CAPTURED_STDERR_CHARS = 512
"""Maximum number of stderr characters kept in an invocation error message."""

RESP_LINE_TERMINATOR = b"\r\n"
