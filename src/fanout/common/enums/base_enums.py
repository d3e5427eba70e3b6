# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum
from typing import Any


def normalize_enum_value(value: str) -> str:
    """Lowercase the value and treat `_` as `-`, so `SPAWN_ERROR` matches `spawn-error`."""
    return value.lower().replace("_", "-")


class CaseInsensitiveStrEnum(str, Enum):
    """
    String enum matched loosely against user input.

    `--mode PARALLEL`, `--mode parallel` and `FANOUT_LOG_LEVEL=debug` all resolve
    to their member, and members compare equal to any string that normalizes to
    the same value.
    """

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @property
    def normalized_value(self) -> str:
        return normalize_enum_value(self.value)

    @staticmethod
    def _normalized_other(other: Any) -> str | None:
        if isinstance(other, Enum):
            other = other.value
        if isinstance(other, str):
            return normalize_enum_value(other)
        return None

    def __eq__(self, other: object) -> bool:
        normalized = self._normalized_other(other)
        if normalized is None:
            return False
        return self.normalized_value == normalized

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.normalized_value)

    @classmethod
    def _missing_(cls, value: Any) -> "CaseInsensitiveStrEnum | None":
        if not isinstance(value, str):
            return None
        normalized = normalize_enum_value(value)
        return next(
            (member for member in cls if member.normalized_value == normalized), None
        )
