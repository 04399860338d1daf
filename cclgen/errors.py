"""Errors raised while parsing CCL sources and generating code from them."""

from __future__ import annotations


class CCLError(Exception):
    """Base class of all CCL errors."""


class ValidationError(CCLError):
    """A source failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateFieldError(CCLError):
    """A model declares the same field twice."""

    def __init__(self, model_name: str, field_name: str) -> None:
        super().__init__(f"Duplicate field: {model_name}.{field_name}")
        self.model_name = model_name
        self.field_name = field_name


class DuplicateModelError(CCLError):
    """A source declares the same model twice."""

    def __init__(self, model_name: str) -> None:
        super().__init__(f"Duplicate model: {model_name}")
        self.model_name = model_name


class UnsupportedFieldTypeError(CCLError):
    """A field's type cannot be expressed in the target language."""

    def __init__(
        self, type_name: str, field_name: str, model_name: str, target_language: str
    ) -> None:
        super().__init__(
            f"Unsupported field type: {type_name} for field {field_name}"
            f" in model {model_name} when compiling to {target_language}"
        )
        self.type_name = type_name
        self.field_name = field_name
        self.model_name = model_name
        self.target_language = target_language


class LanguageNotSupportedError(CCLError):
    """No generator is registered for the requested language."""

    def __init__(self, language: str = "") -> None:
        super().__init__("language not supported")
        self.language = language