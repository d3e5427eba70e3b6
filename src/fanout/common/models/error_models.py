# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections import Counter
from collections.abc import Iterable

from pydantic import ConfigDict, Field

from fanout.common.exceptions import FanoutError
from fanout.common.models.base_models import FanoutBaseModel


class ErrorDetails(FanoutBaseModel):
    """What went wrong with a single invocation.

    Frozen, so identical errors hash alike and can be tallied by the batch summary.
    """

    model_config = ConfigDict(frozen=True)

    code: int | None = Field(
        default=None,
        description="Numeric detail of the failure, such as the exit status of the client process.",
    )
    type: str | None = Field(
        default=None,
        description="Short name of the failure, usually the exception class or failure cause.",
    )
    message: str = Field(
        ...,
        description="Human readable description of the failure.",
    )

    @classmethod
    def from_exception(cls, e: BaseException, code: int | None = None) -> "ErrorDetails":
        message = e.raw_str() if isinstance(e, FanoutError) else str(e)
        return cls(code=code, type=type(e).__name__, message=message)


class ErrorDetailsCount(FanoutBaseModel):
    """One distinct error and how many invocations ended with it."""

    error_details: ErrorDetails
    count: int = Field(
        ...,
        description="Number of invocations that failed with this error.",
    )

    @classmethod
    def summarize(cls, errors: Iterable[ErrorDetails]) -> list["ErrorDetailsCount"]:
        """Group identical errors, most frequent first."""
        tally = Counter(errors)
        return [
            cls(error_details=details, count=count)
            for details, count in tally.most_common()
        ]
