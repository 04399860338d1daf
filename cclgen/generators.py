"""Registry of code generators keyed by target-language alias."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from cclgen.errors import LanguageNotSupportedError
from cclgen.values import SourceCodeDefinition


@dataclass
class CodeGenerationOptions:
    """What to generate, and where."""

    definition: SourceCodeDefinition
    output_path: str
    target_language: str
    package_name: str = ""


@dataclass
class CodeGenerationResult:
    """Outcome of a successful generation run."""


Generator = Callable[[CodeGenerationOptions], Optional[CodeGenerationResult]]

CODE_GENERATORS: dict[str, Generator] = {}


def register_generator(aliases: Union[str, Iterable[str]], generator: Generator) -> None:
    """Make ``generator`` available under each of ``aliases``."""
    if isinstance(aliases, str):
        aliases = [aliases]
    for alias in aliases:
        CODE_GENERATORS[alias] = generator


def generate_code(options: CodeGenerationOptions) -> Optional[CodeGenerationResult]:
    """Run the generator registered for the options' target language.

    Raises LanguageNotSupportedError when none is registered.
    """
    generator = CODE_GENERATORS.get(options.target_language.lower())
    if generator is None:
        raise LanguageNotSupportedError(options.target_language)
    return generator(options)