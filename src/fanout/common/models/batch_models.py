# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from fanout.common.constants import NANOS_PER_SECOND
from fanout.common.enums import ConcurrencyMode
from fanout.common.models.base_models import FanoutBaseModel
from fanout.common.models.endpoint_models import TargetEndpoint
from fanout.common.models.error_models import ErrorDetailsCount
from fanout.common.models.invocation_models import Invocation


class BatchResult(FanoutBaseModel):
    """Aggregate outcome of a retired batch."""

    succeeded: int = Field(
        ...,
        ge=0,
        description="Number of invocations that succeeded.",
    )
    failed: int = Field(
        ...,
        ge=0,
        description="Number of invocations that failed, for any reason.",
    )
    mode: ConcurrencyMode = Field(
        ...,
        description="The concurrency mode the batch was dispatched with.",
    )
    target: TargetEndpoint = Field(
        ...,
        description="The target endpoint the batch was run against.",
    )
    start_ns: int | None = Field(
        default=None,
        description="Wall clock time the batch started, in nanoseconds since the epoch.",
    )
    end_ns: int | None = Field(
        default=None,
        description="Wall clock time the batch retired, in nanoseconds since the epoch.",
    )
    duration_ns: int | None = Field(
        default=None,
        description="Monotonic duration of the batch from first dispatch to join, in nanoseconds.",
    )
    was_timed_out: bool = Field(
        default=False,
        description="Whether the batch deadline expired before every invocation finished.",
    )
    error_summary: list[ErrorDetailsCount] = Field(
        default_factory=list,
        description="Failures grouped by error, most frequent first.",
    )
    invocations: list[Invocation] = Field(
        default_factory=list,
        description="The invocations of the batch in dispatch order.",
    )

    @property
    def count(self) -> int:
        return self.succeeded + self.failed

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    @property
    def success_rate(self) -> float:
        return self.succeeded / self.count if self.count else 0.0

    @property
    def duration_sec(self) -> float | None:
        if self.duration_ns is None:
            return None
        return self.duration_ns / NANOS_PER_SECOND
