import pytest

from cclgen.values import (
    TYPE_NAME_STRING,
    FieldDefinition,
    ModelDefinition,
    SourceCodeDefinition,
    get_normalized_keyword_name,
    get_normalized_type_name,
    is_keyword_name,
    is_type_name,
)


@pytest.mark.parametrize(
    "name",
    ["string", "bytes", "int", "int8", "int16", "int32", "int64", "uint", "uint8",
     "uint16", "uint32", "uint64", "float", "float32", "float64", "bool", "datetime"],
)
def test_builtin_type_names_normalize_to_themselves(name):
    assert is_type_name(name)
    assert get_normalized_type_name(name) == name


def test_capitalized_string_normalizes():
    assert is_type_name("String")
    assert get_normalized_type_name("String") == TYPE_NAME_STRING


def test_unknown_type_name():
    assert not is_type_name("UserInfo")
    assert get_normalized_type_name("UserInfo") == ""


def test_keyword_names():
    assert is_keyword_name("model")
    assert get_normalized_keyword_name("model") == "model"
    assert not is_keyword_name("modelZ")
    assert get_normalized_keyword_name("modelZ") == ""


def test_next_model_id_counts_up():
    definition = SourceCodeDefinition()
    ids = [definition.next_model_id() for _ in range(4)]
    assert ids == [1, 2, 3, 4]


def test_get_model_by_name_and_custom_type():
    definition = SourceCodeDefinition()
    user = ModelDefinition(definition.next_model_id(), "UserInfo")
    result = ModelDefinition(definition.next_model_id(), "GetUsersResult")
    definition.models.extend([user, result])
    assert definition.get_model_by_name("GetUsersResult") is result
    assert definition.get_model_by_name("Missing") is None
    assert definition.is_custom_type("UserInfo")
    assert not definition.is_custom_type("string")


def test_model_str():
    model = ModelDefinition(3, "UserInfo")
    assert str(model) == "Model UserInfo (ID: 3)"


def test_alias_never_matches():
    model = ModelDefinition(1, "UserInfo")
    assert model.does_alias_match("UserInfo") is False


def test_get_field_by_name():
    model = ModelDefinition(1, "UserInfo")
    email = FieldDefinition("Email", "string", owned_by=model)
    model.fields.append(FieldDefinition("Id", "int64", owned_by=model))
    model.fields.append(email)
    assert model.get_field_by_name("Email") is email
    assert model.get_field_by_name("Missing") is None
    assert email.owned_by is model


@pytest.mark.parametrize("ops, expected", [("[]", True), ("", False), ("[ ]", False)])
def test_is_array(ops, expected):
    assert FieldDefinition("Users", "UserInfo", ops).is_array() is expected


def test_repr_does_not_recurse_through_owner():
    model = ModelDefinition(1, "UserInfo")
    model.fields.append(FieldDefinition("Id", "int64", owned_by=model))
    assert "Id" in repr(model)