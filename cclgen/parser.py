"""Reading model definitions out of CCL source text."""

from __future__ import annotations

import os
import re
from typing import Union

from cclgen.errors import DuplicateFieldError, DuplicateModelError
from cclgen.values import FieldDefinition, ModelDefinition, SourceCodeDefinition

_MODEL_RE = re.compile(r"model\s+(\w+)\s*\{(.*?)\}", re.MULTILINE | re.DOTALL | re.ASCII)
_FIELD_RE = re.compile(r"(\w+)\s*:\s*(\w+)\s*(\[\s*\])?\s*;", re.ASCII)


def parse_source(text: str) -> SourceCodeDefinition:
    """Parse CCL source text into a SourceCodeDefinition.

    Raises DuplicateFieldError or DuplicateModelError when a name is declared twice.
    """
    definition = SourceCodeDefinition()
    models: list[ModelDefinition] = []
    model_names: set[str] = set()

    for model_match in _MODEL_RE.finditer(text):
        model_name, body = model_match.group(1), model_match.group(2)
        model = ModelDefinition(model_id=definition.next_model_id(), name=model_name)
        field_names: set[str] = set()

        for field_match in _FIELD_RE.finditer(body):
            field_name = field_match.group(1)
            if field_name in field_names:
                raise DuplicateFieldError(model_name, field_name)
            model.fields.append(
                FieldDefinition(
                    name=field_name,
                    type=field_match.group(2),
                    extra_operators=field_match.group(3) or "",
                    owned_by=model,
                )
            )
            field_names.add(field_name)

        if model_name in model_names:
            raise DuplicateModelError(model_name)
        models.append(model)
        model_names.add(model_name)

    definition.models = models
    return definition


def parse_source_file(path: Union[str, os.PathLike]) -> SourceCodeDefinition:
    """Read and parse the CCL source file at ``path``; OSError if it cannot be read."""
    with open(path, encoding="utf-8") as handle:
        return parse_source(handle.read())