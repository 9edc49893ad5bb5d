"""Depth-tracked decoding of JSON token streams into records."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

from loguru import logger

from ..errors import UnmarshallingError
from ..model import WireModel
from ..scalars import decode_blob, parse_boolean, parse_float, parse_integer, parse_json_timestamp
from ..shapes import Kind, Member, TypeRef, shape_for
from .common import construct_record, field_errors
from .tokens import JsonTokenCursor, Token, TokenKind

M = TypeVar("M", bound=WireModel)

Decoder = Callable[[JsonTokenCursor, TypeRef, str | None], Any]


def _premature_end(field: str | None) -> UnmarshallingError:
    return UnmarshallingError("Unexpected end of JSON stream", field)


class JsonUnmarshaller:
    """Decodes JSON token streams using the member tables of record types.

    Every decoder starts on the first token of its value and returns with the
    cursor on the last token of that value, so the caller's next advance
    lands on the following sibling.
    """

    def __init__(self) -> None:
        self._decoders: dict[Kind, Decoder] = {
            "string": self._string,
            "integer": self._integer,
            "float": self._float,
            "boolean": self._boolean,
            "timestamp": self._timestamp,
            "blob": self._blob,
            "enum": self._enum,
            "structure": self._structure,
            "list": self._list,
            "map": self._map,
        }

    def unmarshall(self, model: type[M], cursor: JsonTokenCursor) -> M | None:
        logger.debug("unmarshall.json.start shape={} depth={}", model.__name__, cursor.depth)
        try:
            return self._structure(cursor, TypeRef("structure", model), None)
        except UnmarshallingError as exc:
            logger.warning("unmarshall.json.error shape={} field={} error={}", model.__name__, exc.field, exc)
            raise

    def _value(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> Any:
        token = cursor.current_token
        if token is None:
            raise _premature_end(field)
        if token.kind is TokenKind.VALUE_NULL:
            return None
        return self._decoders[type_ref.kind](cursor, type_ref, field)

    def _member_value(self, cursor: JsonTokenCursor, member: Member) -> Any:
        with field_errors(member.wire_name):
            return self._value(cursor, member.type_ref, member.wire_name)

    def _structure(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> Any:
        model: type[WireModel] = type_ref.py_type
        token = cursor.current_token or cursor.next_token()
        if token is None:
            raise _premature_end(field)
        if token.kind is TokenKind.VALUE_NULL:
            return None
        if token.kind is not TokenKind.START_OBJECT:
            raise UnmarshallingError(
                f"Expected an object for {model.__name__} but found {token.kind.value}", field
            )

        shape = shape_for(model)
        target_depth = cursor.depth
        values: dict[str, Any] = {}
        while True:
            token = cursor.next_token()
            if token is None:
                raise _premature_end(field)
            if token.kind is TokenKind.FIELD_NAME and cursor.depth == target_depth:
                member = shape.member(token.text or "")
                if member is None:
                    logger.debug("unmarshall.json.skip shape={} field={}", model.__name__, token.text)
                    continue
                if cursor.next_token() is None:
                    raise _premature_end(member.wire_name)
                value = self._member_value(cursor, member)
                if value is not None:
                    values[member.name] = value
            elif token.kind.is_end and cursor.depth < target_depth:
                break

        return construct_record(model, values, field)

    def _list(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> list[Any]:
        self._expect(cursor, TokenKind.START_ARRAY, field)
        depth = cursor.depth
        items: list[Any] = []
        while True:
            token = cursor.next_token()
            if token is None:
                raise _premature_end(field)
            if token.kind is TokenKind.END_ARRAY and cursor.depth < depth:
                return items
            item = self._value(cursor, cast(TypeRef, type_ref.element), field)
            if item is not None:
                items.append(item)

    def _map(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> dict[str, Any]:
        self._expect(cursor, TokenKind.START_OBJECT, field)
        depth = cursor.depth
        entries: dict[str, Any] = {}
        while True:
            token = cursor.next_token()
            if token is None:
                raise _premature_end(field)
            if token.kind is TokenKind.END_OBJECT and cursor.depth < depth:
                return entries
            if token.kind is not TokenKind.FIELD_NAME:
                raise UnmarshallingError(f"Expected a map key but found {token.kind.value}", field)
            key = token.text or ""
            if cursor.next_token() is None:
                raise _premature_end(field)
            value = self._value(cursor, cast(TypeRef, type_ref.element), field)
            if value is not None:
                entries[key] = value

    @staticmethod
    def _expect(cursor: JsonTokenCursor, kind: TokenKind, field: str | None) -> Token:
        token = cursor.current_token
        if token is None:
            raise _premature_end(field)
        if token.kind is not kind:
            raise UnmarshallingError(f"Expected {kind.value} but found {token.kind.value}", field)
        return token

    @staticmethod
    def _scalar(cursor: JsonTokenCursor, field: str | None) -> Token:
        token = cursor.current_token
        if token is None:
            raise _premature_end(field)
        if not token.kind.is_scalar:
            raise UnmarshallingError(f"Expected a scalar value but found {token.kind.value}", field)
        return token

    def _string(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> str:
        return self._scalar(cursor, field).text or ""

    def _integer(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> int:
        return parse_integer(self._scalar(cursor, field).text or "")

    def _float(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> float:
        return parse_float(self._scalar(cursor, field).text or "")

    def _boolean(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> bool:
        token = self._scalar(cursor, field)
        if token.kind is TokenKind.VALUE_TRUE:
            return True
        if token.kind is TokenKind.VALUE_FALSE:
            return False
        return parse_boolean(token.text or "")

    def _timestamp(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> Any:
        token = self._scalar(cursor, field)
        return parse_json_timestamp(token.text or "", numeric=token.kind is TokenKind.VALUE_NUMBER)

    def _blob(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> bytes:
        return decode_blob(self._scalar(cursor, field).text or "")

    def _enum(self, cursor: JsonTokenCursor, type_ref: TypeRef, field: str | None) -> Any:
        return type_ref.py_type.from_wire(self._scalar(cursor, field).text)


_unmarshaller = JsonUnmarshaller()


def unmarshall_json(model: type[M], source: JsonTokenCursor | str | bytes | bytearray) -> M | None:
    """Decode a JSON document or token cursor into a ``model`` record.

    An explicit ``null`` document yields None. An empty body yields an empty
    record.
    """
    if isinstance(source, JsonTokenCursor):
        return _unmarshaller.unmarshall(model, source)
    if not source.strip():
        return model()
    return _unmarshaller.unmarshall(model, JsonTokenCursor(source))
