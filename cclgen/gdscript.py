"""GDScript code generation: one class file per CCL model."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from cclgen.errors import UnsupportedFieldTypeError
from cclgen.generators import CodeGenerationOptions, CodeGenerationResult
from cclgen.values import (
    FieldDefinition,
    ModelDefinition,
    TYPE_NAME_BOOL,
    TYPE_NAME_BYTES,
    TYPE_NAME_DATETIME,
    TYPE_NAME_FLOAT,
    TYPE_NAME_FLOAT32,
    TYPE_NAME_FLOAT64,
    TYPE_NAME_INT,
    TYPE_NAME_INT8,
    TYPE_NAME_INT16,
    TYPE_NAME_INT32,
    TYPE_NAME_INT64,
    TYPE_NAME_STRING,
    TYPE_NAME_UINT,
    TYPE_NAME_UINT8,
    TYPE_NAME_UINT16,
    TYPE_NAME_UINT32,
    TYPE_NAME_UINT64,
)

LANGUAGE_NAME = "Go"

LANGUAGE_ALIASES = ("gd", "godot", "gdscript")

CCL_TYPES_TO_GD_TYPES = {
    "int": "int",
    "uint": "int",
    "int8": "int",
    "uint8": "int",
    "int16": "int",
    "uint16": "int",
    "int32": "int",
    "uint32": "int",
    "int64": "int",
    "uint64": "int",
    "float": "float",
    "float64": "float",
    "float32": "float",
    "string": "String",
    "bool": "bool",
    "datetime": "int",
    "bytes": "PackedByteArray",
}

_HEADER = "# THIS FILE IS AUTOGENERATED BY A CCL TOOL. DO NOT EDIT.\n\n"

_PUT_METHODS = {
    TYPE_NAME_INT: "put_32",
    TYPE_NAME_INT32: "put_32",
    TYPE_NAME_INT8: "put_8",
    TYPE_NAME_INT16: "put_16",
    TYPE_NAME_INT64: "put_64",
    TYPE_NAME_UINT: "put_u32",
    TYPE_NAME_UINT32: "put_u32",
    TYPE_NAME_UINT8: "put_u8",
    TYPE_NAME_UINT16: "put_u16",
    TYPE_NAME_UINT64: "put_u64",
    TYPE_NAME_FLOAT: "put_float",
    TYPE_NAME_FLOAT32: "put_float",
    TYPE_NAME_FLOAT64: "put_float",
}

# Getter, and whether the read comment is written a second time.
_GET_METHODS = {
    TYPE_NAME_INT: ("get_32", False),
    TYPE_NAME_INT32: ("get_32", False),
    TYPE_NAME_INT8: ("get_8", False),
    TYPE_NAME_INT16: ("get_16", False),
    TYPE_NAME_INT64: ("get_64", True),
    TYPE_NAME_UINT: ("get_u32", False),
    TYPE_NAME_UINT32: ("get_u32", False),
    TYPE_NAME_UINT8: ("get_u8", False),
    TYPE_NAME_UINT16: ("get_u16", False),
    TYPE_NAME_UINT64: ("get_u64", False),
    TYPE_NAME_FLOAT: ("get_float", True),
    TYPE_NAME_FLOAT32: ("get_float", True),
    TYPE_NAME_FLOAT64: ("get_float", True),
}


def _is_title_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def _title(word: str) -> str:
    chars = []
    prev = " "
    for ch in word:
        chars.append(ch.upper() if _is_title_separator(prev) else ch)
        prev = ch
    return "".join(chars)


def _snake_to_title(text: str) -> str:
    return "".join(_title(part) for part in text.split("_"))


def to_camel_case(text: str) -> str:
    """Turn ``snake_case`` into ``camelCase``; ValueError on an empty name."""
    title = _snake_to_title(text)
    if not title:
        raise ValueError("cannot convert an empty name")
    return title[0].lower() + title[1:]


def to_pascal_case(text: str) -> str:
    """Turn ``snake_case`` into ``PascalCase``; ValueError on an empty name."""
    title = _snake_to_title(text)
    if not title:
        raise ValueError("cannot convert an empty name")
    return title[0].upper() + title[1:]


def to_snake_case(camel: str) -> str:
    """Turn ``CamelCase`` into ``snake_case``.

    Every character below ``'a'`` is shifted down by the case distance, so
    capitals become lower case; an underscore goes before a capital that
    borders a lower-case letter.
    """
    diff = ord("a") - ord("A")
    length = len(camel)
    out = []
    for i, ch in enumerate(camel):
        if ch >= "a":
            out.append(ch)
            continue
        borders_lower = (i > 0 and camel[i - 1] >= "a") or (
            i < length - 1 and camel[i + 1] >= "a"
        )
        if (i != 0 or i == length - 1) and borders_lower:
            out.append("_")
        out.append(chr(ord(ch) + diff))
    return "".join(out)


@dataclass
class GDScriptGenerationContext:
    """Renders and writes the GDScript class files for a set of options."""

    options: CodeGenerationOptions

    @property
    def _definition(self):
        return self.options.definition

    def is_custom_type(self, type_name: str) -> bool:
        return self._definition.is_custom_type(type_name)

    def generate_code(self) -> None:
        """Write one ``<PascalName>.gd`` file per model into the output path."""
        for model in self._definition.models:
            content = self.render_model_class(model)
            file_name = to_pascal_case(model.name) + ".gd"
            Path(self.options.output_path, file_name).write_text(content, encoding="utf-8")

    def get_gdscript_type(self, field: FieldDefinition) -> str:
        """Return the GDScript type of ``field``, or "" if it has none."""
        gd_type = CCL_TYPES_TO_GD_TYPES.get(field.type, "")
        if not gd_type:
            if not self.is_custom_type(field.type):
                return ""
            gd_type = field.type
        if field.is_array():
            gd_type = f"Array[{gd_type}]"
        return gd_type

    def render_model_class(self, model: ModelDefinition) -> str:
        """Return the full GDScript source of ``model``'s class file.

        Raises UnsupportedFieldTypeError for a field type with no GDScript form.
        """
        const_name = "MODEL_ID_" + to_snake_case(model.name).upper()
        parts = [
            _HEADER,
            f"class_name {model.name}\n\n",
            f"const {const_name} = {model.model_id}\n\n",
        ]
        for field in model.fields:
            var_type = self.get_gdscript_type(field)
            if not var_type:
                raise UnsupportedFieldTypeError(
                    field.type, field.name, field.name, LANGUAGE_NAME
                )
            parts.append(f"var {to_snake_case(field.name)}: {var_type}\n")
        parts.append("\n")
        parts.append(f"func get_model_id() -> int:\n\treturn {const_name}\n\n")
        parts.append(
            f"func clone_empty() -> {model.name}:\n\treturn {model.name}.new()\n\n"
        )
        parts.append(self._render_serialize(model))
        parts.append(self._render_deserialize(model))
        return "".join(parts)

    def _render_serialize(self, model: ModelDefinition) -> str:
        parts = ["func serialize() -> PackedByteArray:\n", "\tvar buffer = StreamPeerBuffer.new()\n\n"]
        for field in model.fields:
            if field.is_array():
                parts.append(self._render_array_serialize(field))
            else:
                parts.append(self._render_field_serialize(field))
        parts.append("\treturn buffer.data_array\n\n")
        return "".join(parts)

    def _render_field_serialize(self, field: FieldDefinition) -> str:
        name = to_snake_case(field.name)
        put = _PUT_METHODS.get(field.type)
        if put is not None:
            return f"\t# Write {name}\n\tbuffer.{put}({name})\n\n"
        if field.type == TYPE_NAME_STRING:
            return (
                f"\t# Write {name}\n"
                f"\tbuffer.put_u32({name}.length())\n"
                f"\tbuffer.put_data({name}.to_utf8_buffer())\n\n"
            )
        if field.type == TYPE_NAME_BOOL:
            return f"\t# Write {name}\n\tbuffer.put_8(1 if {name} else 0)\n\n"
        if field.type == TYPE_NAME_BYTES:
            return (
                f"\t# Write {name}\n"
                f"\tbuffer.put_u32({name}.size())\n"
                f"\tbuffer.put_data({name})\n\n"
            )
        if field.type == TYPE_NAME_DATETIME:
            return f"\t# Write {name} as unix timestamp\n\tbuffer.put_64({name})\n\n"
        if self.is_custom_type(field.type):
            return (
                f"\t# Write custom type {name}\n"
                f"\tvar {name}_bytes = {name}.serialize() if {name} else PackedByteArray([0])\n"
                f"\tbuffer.put_u32({name}_bytes.size())\n"
                f"\tbuffer.put_data({name}_bytes)\n\n"
            )
        return ""

    def _render_array_serialize(self, field: FieldDefinition) -> str:
        name = to_snake_case(field.name)
        head = (
            f"\t# Write array {name}\n"
            f"\tbuffer.put_u32({name}.size())\n"
            f"\tfor item in {name}:\n"
        )
        put = _PUT_METHODS.get(field.type)
        if put is not None:
            body = f"\t\tbuffer.{put}(item)\n"
        elif field.type == TYPE_NAME_STRING:
            body = "\t\tbuffer.put_u32(item.length())\n\t\tbuffer.put_data(item.to_utf8_buffer())\n"
        elif field.type == TYPE_NAME_BOOL:
            body = "\t\tbuffer.put_8(1 if item else 0)\n"
        elif self.is_custom_type(field.type):
            body = (
                "\t\tvar item_bytes = item.serialize() if item else PackedByteArray([0])\n"
                "\t\tbuffer.put_u32(item_bytes.size())\n"
                "\t\tbuffer.put_data(item_bytes)\n"
            )
        else:
            body = ""
        return head + body + "\n"

    def _render_deserialize(self, model: ModelDefinition) -> str:
        parts = [
            f"static func deserialize(data: PackedByteArray) -> {model.name}:\n",
            "\tif not data or data.is_empty() or (data.size() == 1 and data[1] == 0):\n",
            "\t\treturn null\n\n",
            "\tvar buffer = StreamPeerBuffer.new()\n",
            "\tbuffer.data_array = data\n",
            f"\tvar result = {model.name}.new()\n\n",
        ]
        for field in model.fields:
            if field.is_array():
                parts.append(self._render_array_deserialize(field))
            else:
                parts.append(self._render_field_deserialize(field))
        parts.append("\treturn result\n")
        return "".join(parts)

    def _render_field_deserialize(self, field: FieldDefinition) -> str:
        name = to_snake_case(field.name)
        comment = f"\t# Read {name}\n"
        getter = _GET_METHODS.get(field.type)
        if getter is not None:
            method, repeat_comment = getter
            extra = comment if repeat_comment else ""
            return f"{comment}{extra}\tresult.{name} = buffer.{method}()\n\n"
        if field.type == TYPE_NAME_STRING:
            return (
                f"{comment}{comment}"
                f"\tvar {name}_len = buffer.get_u32()\n"
                f"\tresult.{name} = buffer.get_data({name}_len)[1].get_string_from_utf8()\n\n"
            )
        if field.type == TYPE_NAME_BOOL:
            return f"{comment}{comment}\tresult.{name} = buffer.get_8() != 0\n\n"
        if field.type == TYPE_NAME_BYTES:
            return (
                f"{comment}{comment}"
                f"\tvar {name}_len = buffer.get_u32()\n"
                f"\tresult.{name} = buffer.get_data({name}_len)[1]\n\n"
            )
        if field.type == TYPE_NAME_DATETIME:
            return (
                f"{comment}\t# Read {name} timestamp\n"
                f"\tresult.{name} = buffer.get_64()\n\n"
            )
        if self.is_custom_type(field.type):
            return (
                f"{comment}\t# Read custom type {name}\n"
                f"\tvar {name}_len = buffer.get_u32()\n"
                f"\tvar {name}_bytes = buffer.get_data({name}_len)[1]\n"
                f"\tresult.{name} = {field.type}.deserialize({name}_bytes)\n\n"
            )
        return comment

    def _render_array_deserialize(self, field: FieldDefinition) -> str:
        name = to_snake_case(field.name)
        head = (
            f"\t# Read array {name}\n"
            f"\tvar {name}_len = buffer.get_u32()\n"
            f"\tresult.{name} = []\n"
            f"\tfor i in range({name}_len):\n"
        )
        getter = _GET_METHODS.get(field.type)
        if getter is not None:
            body = f"\t\tresult.{name}.append(buffer.{getter[0]}())\n"
        elif field.type == TYPE_NAME_STRING:
            body = (
                "\t\tvar item_len = buffer.get_u32()\n"
                "\t\tvar item = buffer.get_data(item_len)[1].get_string_from_utf8()\n"
                f"\t\tresult.{name}.append(item)\n"
            )
        elif field.type == TYPE_NAME_BOOL:
            body = f"\t\tresult.{name}.append(buffer.get_8() != 0)\n"
        elif self.is_custom_type(field.type):
            body = (
                "\t\tvar item_len = buffer.get_u32()\n"
                "\t\tvar item_bytes = buffer.get_data(item_len)[1]\n"
                f"\t\tresult.{name}.append({field.type}.deserialize(item_bytes))\n"
            )
        else:
            body = ""
        return head + body + "\n"


def generate_gdscript(options: CodeGenerationOptions) -> CodeGenerationResult:
    """Generate GDScript class files for ``options``, creating the output directory."""
    os.makedirs(options.output_path, exist_ok=True)
    if not options.package_name:
        parts = [p for p in options.output_path.replace("\\", "/").split("/") if p]
        options.package_name = parts[-1] if parts else ""
    GDScriptGenerationContext(options).generate_code()
    return CodeGenerationResult()