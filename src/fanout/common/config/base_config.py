# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import io
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

ADD_TO_TEMPLATE = "add_to_template"
"""json_schema_extra key. Fields marked with `{ADD_TO_TEMPLATE: False}` are left out of the YAML."""


def _in_template(field: FieldInfo | None) -> bool:
    extra = field.json_schema_extra if field is not None else None
    if isinstance(extra, dict):
        return bool(extra.get(ADD_TO_TEMPLATE, True))
    return True


class BaseConfig(BaseModel):
    """Base class for the user facing config models, which can render themselves as commented YAML."""

    def serialize_to_yaml(self, verbose: bool = False, indent: int = 4) -> str:
        """Render the config as YAML.

        Nested configs become nested mappings separated by a blank line. With `verbose`,
        every field description is written as a comment above its key.
        """
        # json mode turns enums, paths and tuples into plain YAML scalars and lists
        data = self.model_dump(mode="json")
        document = self._to_commented_map(self, data, verbose, indent, depth=0)

        yaml = YAML(pure=True)
        yaml.indent(mapping=indent, sequence=indent, offset=indent)
        with io.StringIO() as stream:
            yaml.dump(document, stream)
            return stream.getvalue()

    @classmethod
    def _to_commented_map(
        cls,
        model: BaseModel,
        data: dict[str, Any],
        verbose: bool,
        indent: int,
        depth: int,
    ) -> CommentedMap:
        fields = type(model).model_fields
        mapping = CommentedMap()

        for name, value in data.items():
            field = fields.get(name)
            if not _in_template(field):
                continue

            child = getattr(model, name, None)
            if isinstance(child, BaseModel) and isinstance(value, dict):
                mapping[name] = cls._to_commented_map(
                    child, value, verbose, indent, depth + 1
                )
                mapping.yaml_set_comment_before_after_key(
                    name, before="\n", indent=indent * (depth + 1)
                )
            else:
                mapping[name] = value

            if verbose and field is not None and field.description:
                mapping.yaml_set_comment_before_after_key(
                    name, before="\n" + field.description, indent=indent * depth
                )

        return mapping
