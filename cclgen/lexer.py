"""Tokenizer for CCL source text."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from cclgen.errors import CCLError
from cclgen.values import (
    get_normalized_keyword_name,
    get_normalized_type_name,
    is_keyword_name,
    is_type_name,
)


class TokenType(enum.IntEnum):
    """Kinds of tokens the lexer produces."""

    RESERVED_FOR_FUTURE = -1
    ERROR = 0
    COMMENT = 1
    HASH = 2
    KEYWORD_MODEL = 3
    IDENTIFIER = 4
    COLON = 5
    SEMICOLON = 6
    DATA_TYPE = 7
    LEFT_BRACE = 8
    RIGHT_BRACE = 9
    LEFT_BRACKET = 10
    RIGHT_BRACKET = 11
    STRING_LITERAL = 12
    WHITESPACE = 13
    LEFT_PARENTHESIS = 14
    RIGHT_PARENTHESIS = 15
    DOT = 16
    COMMA = 17

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    """A token with its 1-based line and column."""

    type: TokenType
    value: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.value} -> {self.type}"


class LexerError(CCLError):
    """Base class of lexical errors; carries the position."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class UnexpectedCharacterError(LexerError):
    """A character that starts no token."""

    def __init__(self, character: str, line: int, column: int) -> None:
        super().__init__(
            f"unexpected character '{character}' at line {line}, column {column}",
            line,
            column,
        )
        self.character = character


class UnexpectedEndOfAttributeError(LexerError):
    """An attribute was not closed."""

    def __init__(self, line: int, column: int) -> None:
        super().__init__(
            f"unexpected end of attribute at line {line}, column {column}", line, column
        )


class UnexpectedEndOfStringLiteralError(LexerError):
    """A string literal was not closed before the end of input."""

    def __init__(self, line: int, column: int) -> None:
        super().__init__(
            f"unexpected end of string literal at line {line}, column {column}",
            line,
            column,
        )


_SIMPLE_TOKENS = {
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "(": TokenType.LEFT_PARENTHESIS,
    ")": TokenType.RIGHT_PARENTHESIS,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "#": TokenType.HASH,
}

_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_SPACE


def _is_alphanumeric(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal() or ch == "_"


def lex(text: str) -> list[Token]:
    """Split ``text`` into tokens, skipping whitespace; raise LexerError on bad input."""
    tokens: list[Token] = []
    line = 1
    column = 1
    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]

        if _is_whitespace(ch):
            if ch in "\n\r":
                line += 1
                column = 1
                # A following line feed belongs to the same line break.
                if pos + 1 < length and text[pos + 1] == "\n":
                    pos += 1
            else:
                column += 1
            pos += 1
            continue

        if text.startswith("//", pos):
            end = text.find("\n", pos)
            if end == -1:
                end = length
            comment = text[pos:end]
            tokens.append(Token(TokenType.COMMENT, comment, line, column))
            column += len(comment)
            pos = end
            continue

        simple = _SIMPLE_TOKENS.get(ch)
        if simple is not None:
            tokens.append(Token(simple, ch, line, column))
            pos += 1
            column += 1
            continue

        if ch == '"':
            end = text.find('"', pos + 1)
            if end == -1:
                raise UnexpectedEndOfStringLiteralError(line, column)
            literal = text[pos : end + 1]
            tokens.append(Token(TokenType.STRING_LITERAL, literal, line, column))
            column += len(literal)
            pos = end + 1
            continue

        end = pos
        while end < length and _is_alphanumeric(text[end]):
            end += 1
        if end > pos:
            word = text[pos:end]
            if is_keyword_name(word):
                token_type, word = TokenType.KEYWORD_MODEL, get_normalized_keyword_name(word)
            elif is_type_name(word):
                token_type, word = TokenType.DATA_TYPE, get_normalized_type_name(word)
            else:
                token_type = TokenType.IDENTIFIER
            tokens.append(Token(token_type, word, line, column))
            column += end - pos
            pos = end
            continue

        raise UnexpectedCharacterError(ch, line, column)

    return tokens