# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import ConfigDict, Field

from fanout.common.models.base_models import FanoutBaseModel


class TargetEndpoint(FanoutBaseModel):
    """Address of the server under test. Shared read-only by every invocation in a batch."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        ...,
        min_length=1,
        description="Host name or IP address of the target server.",
    )
    port: int = Field(
        ...,
        ge=1,
        le=65535,
        description="TCP port of the target server.",
    )

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        return self.address
