# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import shlex
from collections.abc import Sequence
from typing import Any

from pydantic import ConfigDict, Field

from fanout.common.exceptions import ConfigurationError
from fanout.common.models.base_models import FanoutBaseModel


class CommandTemplate(FanoutBaseModel):
    """A single command to send to the target, such as `PING` or `ECHO "Hello World!"`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="The command name, sent as the first word of the request.",
    )
    args: tuple[str, ...] = Field(
        default=(),
        description="The command arguments, sent in order after the name.",
    )

    @classmethod
    def parse(cls, text: str) -> "CommandTemplate":
        """Parse a shell-like command string. Quoted arguments keep their spaces.

        Raises:
            ConfigurationError: If the string is empty or cannot be tokenized.
        """
        try:
            parts = shlex.split(text)
        except ValueError as e:
            raise ConfigurationError(f"Unable to parse command {text!r}: {e}") from e
        if not parts:
            raise ConfigurationError("Command must not be empty")
        return cls(name=parts[0], args=tuple(parts[1:]))

    def render(self) -> list[str]:
        """Return the command as an argument vector."""
        return [self.name, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.render())


class CommandSpec(FanoutBaseModel):
    """The ordered, non-empty list of commands issued by a batch.

    Invocation `i` uses `commands[i % len(commands)]`, so a list of several
    commands is cycled through for the whole batch.
    """

    commands: list[CommandTemplate] = Field(
        ...,
        min_length=1,
        description="The commands to cycle through.",
    )

    def command_for(self, index: int) -> CommandTemplate:
        """Get the command used by the invocation at `index`."""
        return self.commands[index % len(self.commands)]

    def __len__(self) -> int:
        return len(self.commands)

    def __str__(self) -> str:
        return ", ".join(str(command) for command in self.commands)

    @classmethod
    def from_value(cls, value: Any) -> "CommandSpec":
        """Coerce a command spec, a command template, a command string, or a
        sequence of either into a CommandSpec.

        Raises:
            ConfigurationError: If the value is empty or of an unsupported type.
        """
        if isinstance(value, CommandSpec):
            if not value.commands:
                raise ConfigurationError("Command spec must not be empty")
            return value
        if isinstance(value, CommandTemplate | str):
            value = [value]
        if not isinstance(value, Sequence) or isinstance(value, bytes):
            raise ConfigurationError(
                f"Unsupported command spec type: {type(value).__name__}"
            )
        if not value:
            raise ConfigurationError("Command spec must not be empty")

        commands = []
        for item in value:
            if isinstance(item, CommandTemplate):
                commands.append(item)
            elif isinstance(item, str):
                commands.append(CommandTemplate.parse(item))
            else:
                raise ConfigurationError(
                    f"Unsupported command type: {type(item).__name__}"
                )
        return cls(commands=commands)
