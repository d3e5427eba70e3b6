# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import shlex
from collections.abc import Sequence
from typing import Any

from cyclopts.token import Token

from fanout.common.exceptions import ConfigurationError
from fanout.common.models import CommandTemplate

"""
This module provides utility functions for validating and parsing configuration inputs.
"""


def parse_command_list(input: Any) -> list[str]:
    """
    Parses the input into a non-empty list of command strings. A single string is
    treated as one command, so commas and spaces inside a command are preserved.
    Each command must be parseable by :meth:`CommandTemplate.parse`.

    "PING" -> ["PING"]
    ["PING", "ECHO 'Hello World!'"] -> ["PING", "ECHO 'Hello World!'"]

    Raises:
        ValueError: If the input is empty, of the wrong type, or contains an unparseable command.
    """
    if isinstance(input, str):
        input = [input]
    elif isinstance(input, tuple):
        input = list(input)
    elif not isinstance(input, list):
        raise ValueError(f"User Config: {input} - must be a string or list of strings")

    if not input:
        raise ValueError("User Config: at least one command must be specified")

    output = []
    for item in input:
        if not isinstance(item, str):
            raise ValueError(f"User Config: {item!r} - commands must be strings")
        try:
            CommandTemplate.parse(item)
        except ConfigurationError as e:
            raise ValueError(f"User Config: {e.raw_str()}") from e
        output.append(item.strip())
    return output


def parse_client_args(input: Any) -> str:
    """
    Parses the client argument template. A list is joined back into a single shell-like
    string, and the result must be tokenizable with shlex.

    Raises:
        ValueError: If the input is not a string or list, or cannot be tokenized.
    """
    if isinstance(input, list | tuple):
        input = shlex.join(str(item) for item in input)
    if not isinstance(input, str):
        raise ValueError(f"User Config: {input} - must be a string or list")
    try:
        shlex.split(input)
    except ValueError as e:
        raise ValueError(f"User Config: unable to parse client args {input!r}: {e}") from e
    return input


def parse_zero_as_none(input: Any) -> Any:
    """Treats a value of 0 as None, meaning the limit is disabled."""
    if input is not None and not isinstance(input, bool) and input == 0:
        return None
    return input


def custom_enum_converter(type_: Any, value: Sequence[Token]) -> Any:
    """This is a custom converter for cyclopts that allows us to use our custom enum types"""
    if len(value) != 1:
        raise ValueError(f"Expected 1 value, but got {len(value)}")
    return type_(value[0].value)
