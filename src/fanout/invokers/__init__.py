# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "BaseInvoker",
    "ProcessInvoker",
    "TcpInvoker",
    "encode_inline_command",
]

from fanout.invokers.base_invoker import BaseInvoker
from fanout.invokers.process_invoker import ProcessInvoker
from fanout.invokers.tcp_invoker import TcpInvoker, encode_inline_command
