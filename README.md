# cclgen

`cclgen` reads model definitions written in the CCL schema language and
generates GDScript classes with binary serialization from them.

A CCL source file declares models and their fields:

```
model UserInfo {
    Id: int64;
    Username: string;
    Email: string;
    ProfileImage: bytes;
    CreatedAt: datetime;
    UpdatedAt: datetime;
}

model GetUsersResult {
    Users: UserInfo[];
    OtherUsers: UserInfo[];
}
```

Built-in field types are `string`, `bytes`, `bool`, `datetime`, `int`,
`int8`, `int16`, `int32`, `int64`, `uint`, `uint8`, `uint16`, `uint32`,
`uint64`, `float`, `float32` and `float64`. Any model defined in the same file
may be used as a field type, and `[]` after a type makes the field an array.
Each model gets an ID from 1 upwards, in the order it appears in the file.

## Installation

```
pip install .
```

## Parsing

```python
from cclgen.parser import parse_source, parse_source_file

definition = parse_source_file("models.ccl")
for model in definition.models:
    print(model, [f.name for f in model.fields])
```

`parse_source` takes the text itself. Both return a
`cclgen.values.SourceCodeDefinition` holding `ModelDefinition` objects, each
with its `FieldDefinition` list. A repeated model name raises
`DuplicateModelError`; a repeated field name within a model raises
`DuplicateFieldError`.

## Generating GDScript

Generators are looked up by language alias in a registry. Register the
GDScript generator under its aliases, then ask for code:

```python
from cclgen.generators import CodeGenerationOptions, generate_code, register_generator
from cclgen.gdscript import LANGUAGE_ALIASES, generate_gdscript

register_generator(LANGUAGE_ALIASES, generate_gdscript)
generate_code(CodeGenerationOptions(
    definition=definition,
    output_path="out/models",
    target_language="gdscript",
))
```

The language name is matched in lower case; `gd`, `godot` and `gdscript` are
the GDScript aliases. An unregistered language raises
`LanguageNotSupportedError`. The output directory is created if needed, and
one `<ModelName>.gd` file is written per model, with a `MODEL_ID_...`
constant, typed variables, `get_model_id()`, `clone_empty()`, `serialize()`
and a static `deserialize()`. A field whose type is neither built-in nor a
defined model raises `UnsupportedFieldTypeError`.

`GDScriptGenerationContext.render_model_class` returns a model's class source
as a string without writing anything. `to_snake_case`, `to_camel_case` and
`to_pascal_case` are the name conversions the generator uses.

## Other pieces

- `cclgen.lexer.lex` turns CCL text into a list of `Token`s (type, value,
  line, column); bad input raises `UnexpectedCharacterError` or
  `UnexpectedEndOfStringLiteralError`.
- `cclgen.api_types` provides Python models `AuthRequest`, `AuthResponse`,
  `UserInfo` and `GetUsersResult` with `serialize()` and
  `deserialize(data)` using a little-endian binary layout: strings and bytes
  prefixed by a `uint32` length, times as `int64` nanoseconds since the Unix
  epoch, and nested models as length-prefixed blobs.
- All errors derive from `cclgen.errors.CCLError`.

## What this package does not do

- There is no command-line program; everything is used from Python.
- Only GDScript output is generated. There is no Go, C# or Python output, and
  no ready-made function that registers generators: register them yourself
  with `register_generator` as shown above.