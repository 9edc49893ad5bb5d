"""Pull-style token cursor over JSON documents."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import UnmarshallingError


class TokenKind(str, Enum):
    START_OBJECT = "start_object"
    END_OBJECT = "end_object"
    START_ARRAY = "start_array"
    END_ARRAY = "end_array"
    FIELD_NAME = "field_name"
    VALUE_STRING = "value_string"
    VALUE_NUMBER = "value_number"
    VALUE_TRUE = "value_true"
    VALUE_FALSE = "value_false"
    VALUE_NULL = "value_null"

    @property
    def is_start(self) -> bool:
        return self in (TokenKind.START_OBJECT, TokenKind.START_ARRAY)

    @property
    def is_end(self) -> bool:
        return self in (TokenKind.END_OBJECT, TokenKind.END_ARRAY)

    @property
    def is_scalar(self) -> bool:
        return self in _SCALAR_TOKENS


_SCALAR_TOKENS = frozenset(
    {
        TokenKind.VALUE_STRING,
        TokenKind.VALUE_NUMBER,
        TokenKind.VALUE_TRUE,
        TokenKind.VALUE_FALSE,
        TokenKind.VALUE_NULL,
    }
)


@dataclass(frozen=True)
class Token:
    """One structural or scalar event of a JSON document."""

    kind: TokenKind
    text: str | None = None


class _NumberText(str):
    """Numeric literal kept as source text so decoders choose the numeric type."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _load(document: str | bytes | bytearray) -> Any:
    try:
        return json.loads(
            document,
            parse_int=_NumberText,
            parse_float=_NumberText,
            parse_constant=_reject_constant,
        )
    except (ValueError, UnicodeDecodeError) as exc:
        raise UnmarshallingError(f"Unable to parse JSON document: {exc}") from exc


def tokens_of(value: Any) -> Iterator[Token]:
    """Yield the token stream of an already-parsed JSON value."""
    if isinstance(value, dict):
        yield Token(TokenKind.START_OBJECT)
        for key, item in value.items():
            yield Token(TokenKind.FIELD_NAME, key)
            yield from tokens_of(item)
        yield Token(TokenKind.END_OBJECT)
    elif isinstance(value, list):
        yield Token(TokenKind.START_ARRAY)
        for item in value:
            yield from tokens_of(item)
        yield Token(TokenKind.END_ARRAY)
    elif value is None:
        yield Token(TokenKind.VALUE_NULL)
    elif value is True:
        yield Token(TokenKind.VALUE_TRUE, "true")
    elif value is False:
        yield Token(TokenKind.VALUE_FALSE, "false")
    elif isinstance(value, (_NumberText, int, float)):
        yield Token(TokenKind.VALUE_NUMBER, str(value))
    else:
        yield Token(TokenKind.VALUE_STRING, str(value))


class JsonTokenCursor:
    """Cursor over the tokens of one JSON document.

    ``depth`` counts the containers that are open after the current token,
    so the fields of the outermost object sit at depth 1.

    Text input is not parsed incrementally: the whole document goes through
    ``json.loads`` up front and the tokens are replayed from the parsed value.
    """

    def __init__(self, source: str | bytes | bytearray | Iterable[Token]) -> None:
        if isinstance(source, (str, bytes, bytearray)):
            self._tokens: Iterator[Token] = tokens_of(_load(source))
        else:
            self._tokens = iter(source)
        self._current: Token | None = None
        self._depth = 0
        self._current_field: str | None = None

    @property
    def current_token(self) -> Token | None:
        return self._current

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def current_field(self) -> str | None:
        return self._current_field

    def next_token(self) -> Token | None:
        """Advance and return the new current token, or None at end of stream."""
        token = next(self._tokens, None)
        self._current = token
        if token is None:
            return None
        if token.kind.is_start:
            self._depth += 1
        elif token.kind.is_end:
            self._depth -= 1
            if self._depth < 0:
                raise UnmarshallingError(f"Unbalanced {token.kind.value} token")
        elif token.kind is TokenKind.FIELD_NAME:
            self._current_field = token.text
        return token

    def test_expression(self, name: str, depth: int) -> bool:
        """Whether the current token is the field ``name`` at ``depth``."""
        token = self._current
        return (
            token is not None
            and token.kind is TokenKind.FIELD_NAME
            and token.text == name
            and self._depth == depth
        )
