import pytest

from cclgen.errors import LanguageNotSupportedError
from cclgen.generators import (
    CODE_GENERATORS,
    CodeGenerationOptions,
    CodeGenerationResult,
    generate_code,
    register_generator,
)
from cclgen.values import SourceCodeDefinition


@pytest.fixture
def recorder():
    calls = []

    def generator(options):
        calls.append(options)
        return CodeGenerationResult()

    aliases = ["testlang", "tl"]
    register_generator(aliases, generator)
    yield calls
    for alias in aliases:
        CODE_GENERATORS.pop(alias, None)


def _options(language):
    return CodeGenerationOptions(
        definition=SourceCodeDefinition(), output_path="out", target_language=language
    )


def test_registered_generator_receives_options(recorder):
    options = _options("testlang")
    result = generate_code(options)
    assert result == CodeGenerationResult()
    assert recorder == [options]


def test_language_lookup_is_case_insensitive(recorder):
    upper = _options("TL")
    mixed = _options("TestLang")
    assert generate_code(upper) == CodeGenerationResult()
    assert generate_code(mixed) == CodeGenerationResult()
    assert recorder == [upper, mixed]


def test_unknown_language_raises():
    with pytest.raises(LanguageNotSupportedError) as info:
        generate_code(_options("no-such-language"))
    assert str(info.value) == "language not supported"
    assert info.value.language == "no-such-language"


def test_single_string_alias_is_one_alias():
    def generator(options):
        return None

    try:
        register_generator("solo-alias", generator)
        assert CODE_GENERATORS["solo-alias"] is generator
        assert "s" not in CODE_GENERATORS or CODE_GENERATORS["s"] is not generator
        assert generate_code(_options("solo-alias")) is None
    finally:
        CODE_GENERATORS.pop("solo-alias", None)


def test_package_name_defaults_to_empty():
    assert _options("x").package_name == ""