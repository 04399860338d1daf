import pytest

from cclgen.errors import DuplicateFieldError, DuplicateModelError
from cclgen.parser import parse_source, parse_source_file

SOURCE = """
// This is a comment
[SerializationType("binary")]
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
    OtherUsers: UserInfo [ ];
}
"""


def test_models_are_parsed_in_order_with_ids():
    definition = parse_source(SOURCE)
    assert [m.name for m in definition.models] == ["UserInfo", "GetUsersResult"]
    assert [m.model_id for m in definition.models] == [1, 2]


def test_fields_are_parsed_in_order():
    definition = parse_source(SOURCE)
    user = definition.get_model_by_name("UserInfo")
    assert [(f.name, f.type) for f in user.fields] == [
        ("Id", "int64"),
        ("Username", "string"),
        ("Email", "string"),
        ("ProfileImage", "bytes"),
        ("CreatedAt", "datetime"),
        ("UpdatedAt", "datetime"),
    ]
    assert all(f.owned_by is user for f in user.fields)
    assert not any(f.is_array() for f in user.fields)


def test_array_operators_are_kept_verbatim():
    definition = parse_source(SOURCE)
    result = definition.get_model_by_name("GetUsersResult")
    users = result.get_field_by_name("Users")
    others = result.get_field_by_name("OtherUsers")
    assert users.extra_operators == "[]"
    assert users.is_array()
    assert others.extra_operators == "[ ]"
    assert not others.is_array()


def test_custom_type_is_recognised():
    definition = parse_source(SOURCE)
    assert definition.is_custom_type("UserInfo")
    assert not definition.is_custom_type("Missing")


def test_empty_source_has_no_models():
    assert parse_source("").models == []


def test_duplicate_field_raises():
    with pytest.raises(DuplicateFieldError) as info:
        parse_source("model A { x: int; x: string; }")
    assert info.value.model_name == "A"
    assert info.value.field_name == "x"


def test_duplicate_model_raises():
    with pytest.raises(DuplicateModelError) as info:
        parse_source("model A { x: int; } model A { y: int; }")
    assert str(info.value) == "Duplicate model: A"


def test_parse_source_file(tmp_path):
    path = tmp_path / "api.ccl"
    path.write_text(SOURCE, encoding="utf-8")
    definition = parse_source_file(path)
    assert len(definition.models) == 2
    assert definition.models[1].fields[0].type == "UserInfo"


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_source_file(tmp_path / "missing.ccl")