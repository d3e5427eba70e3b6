# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer

FanoutBaseModelT = TypeVar("FanoutBaseModelT", bound="FanoutBaseModel")


def exclude_if_none(*field_names: str):
    """Decorator to mark fields that should be left out of the serialized model when they are None."""

    def decorator(model: type[FanoutBaseModelT]) -> type[FanoutBaseModelT]:
        # Copy so that subclasses do not add to the parent's set
        model._exclude_if_none_fields = set(model._exclude_if_none_fields)
        model._exclude_if_none_fields.update(field_names)
        return model

    return decorator


class FanoutBaseModel(BaseModel):
    """Base model for all Fanout Pydantic models.

    Use the @exclude_if_none decorator to drop specific fields from the
    serialized output when they are None, since pydantic only supports
    exclude_none for the whole model.
    """

    _exclude_if_none_fields: ClassVar[set[str]] = set()

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @model_serializer
    def _serialize_model(self) -> dict[str, Any]:
        return {
            k: v
            for k, v in self
            if not (k in self._exclude_if_none_fields and v is None)
        }
