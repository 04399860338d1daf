"""Built-in names of the CCL language and the definitions a source file yields."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

TYPE_NAME_STRING = "string"
TYPE_NAME_BYTES = "bytes"
TYPE_NAME_INT = "int"
TYPE_NAME_INT8 = "int8"
TYPE_NAME_INT16 = "int16"
TYPE_NAME_INT32 = "int32"
TYPE_NAME_INT64 = "int64"
TYPE_NAME_UINT = "uint"
TYPE_NAME_UINT8 = "uint8"
TYPE_NAME_UINT16 = "uint16"
TYPE_NAME_UINT32 = "uint32"
TYPE_NAME_UINT64 = "uint64"
TYPE_NAME_FLOAT = "float"
TYPE_NAME_FLOAT32 = "float32"
TYPE_NAME_FLOAT64 = "float64"
TYPE_NAME_BOOL = "bool"
TYPE_NAME_DATETIME = "datetime"

KEYWORD_NAME_MODEL = "model"

_TYPE_NAMES = {
    "string": TYPE_NAME_STRING,
    "String": TYPE_NAME_STRING,
    "bytes": TYPE_NAME_BYTES,
    "int": TYPE_NAME_INT,
    "int8": TYPE_NAME_INT8,
    "int16": TYPE_NAME_INT16,
    "int32": TYPE_NAME_INT32,
    "int64": TYPE_NAME_INT64,
    "uint": TYPE_NAME_UINT,
    "uint8": TYPE_NAME_UINT8,
    "uint16": TYPE_NAME_UINT16,
    "uint32": TYPE_NAME_UINT32,
    "uint64": TYPE_NAME_UINT64,
    "float": TYPE_NAME_FLOAT,
    "float32": TYPE_NAME_FLOAT32,
    "float64": TYPE_NAME_FLOAT64,
    "bool": TYPE_NAME_BOOL,
    "datetime": TYPE_NAME_DATETIME,
}

_KEYWORD_NAMES = {
    "model": KEYWORD_NAME_MODEL,
}


def is_type_name(value: str) -> bool:
    """Return True if ``value`` names a built-in type (custom models are not checked)."""
    return value in _TYPE_NAMES


def is_keyword_name(value: str) -> bool:
    """Return True if ``value`` is a language keyword."""
    return value in _KEYWORD_NAMES


def get_normalized_type_name(value: str) -> str:
    """Return the canonical spelling of a built-in type name, or "" if unknown."""
    return _TYPE_NAMES.get(value, "")


def get_normalized_keyword_name(value: str) -> str:
    """Return the canonical spelling of a keyword, or "" if unknown."""
    return _KEYWORD_NAMES.get(value, "")


@dataclass
class FieldDefinition:
    """One field of a model."""

    name: str
    type: str
    extra_operators: str = ""
    owned_by: Optional[ModelDefinition] = field(default=None, repr=False, compare=False)

    def is_array(self) -> bool:
        """Return True if the field was declared with ``[]``."""
        return self.extra_operators == "[]"


@dataclass
class ModelDefinition:
    """A model with its unique id, its fields in declaration order and its aliases."""

    model_id: int
    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Model {self.name} (ID: {self.model_id})"

    def does_alias_match(self, alias: str) -> bool:
        """Return True if ``alias`` is one of this model's aliases."""
        return alias in self.aliases

    def get_field_by_name(self, name: str) -> Optional[FieldDefinition]:
        """Return the field called ``name``, or None."""
        return next((f for f in self.fields if f.name == name), None)


@dataclass
class SourceCodeDefinition:
    """Everything defined in one CCL source file. Not thread-safe."""

    models: list[ModelDefinition] = field(default_factory=list)
    _model_id_counter: int = field(default=0, init=False, repr=False, compare=False)

    def next_model_id(self) -> int:
        """Return a fresh model id, counting up from 1."""
        self._model_id_counter += 1
        return self._model_id_counter

    def get_model_by_name(self, name: str) -> Optional[ModelDefinition]:
        """Return the model whose name or alias is ``name``, or None."""
        return next(
            (m for m in self.models if m.name == name or m.does_alias_match(name)),
            None,
        )

    def is_custom_type(self, type_name: str) -> bool:
        """Return True if ``type_name`` refers to a model defined in this source."""
        return self.get_model_by_name(type_name) is not None