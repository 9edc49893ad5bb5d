"""Depth-tracked decoding of XML event streams into records."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

from loguru import logger

from ..errors import UnmarshallingError
from ..model import WireModel
from ..scalars import decode_blob, parse_boolean, parse_float, parse_integer, parse_xml_timestamp
from ..shapes import Kind, Member, TypeRef, shape_for
from .common import construct_record, field_errors
from .xml_cursor import StaxCursor, XmlEventKind

M = TypeVar("M", bound=WireModel)

ScalarParser = Callable[[str], Any]

_SCALAR_PARSERS: dict[Kind, ScalarParser] = {
    "integer": parse_integer,
    "float": parse_float,
    "boolean": parse_boolean,
    "timestamp": parse_xml_timestamp,
    "blob": decode_blob,
}


class StaxUnmarshaller:
    """Decodes XML event streams (query, EC2 and rest-xml responses) into records.

    A record's fields are the child elements one level below the record's
    own element. Unknown elements are passed over by depth alone.
    """

    def unmarshall(self, model: type[M], cursor: StaxCursor) -> M:
        logger.debug("unmarshall.xml.start shape={} depth={}", model.__name__, cursor.depth)
        try:
            return cast(M, self._structure(cursor, TypeRef("structure", model), None))
        except UnmarshallingError as exc:
            logger.warning("unmarshall.xml.error shape={} field={} error={}", model.__name__, exc.field, exc)
            raise

    def _value(self, cursor: StaxCursor, type_ref: TypeRef, member: Member | None) -> Any:
        field = member.wire_name if member is not None else None
        if type_ref.kind == "structure":
            return self._structure(cursor, type_ref, field)
        if type_ref.kind == "list":
            return self._list(cursor, type_ref, member)
        if type_ref.kind == "map":
            return self._map(cursor, type_ref, member)

        text = cursor.read_text()
        if type_ref.kind == "string":
            return text
        if not text.strip():
            return None
        if type_ref.kind == "enum":
            return type_ref.py_type.from_wire(text.strip())
        return _SCALAR_PARSERS[type_ref.kind](text)

    def _structure(self, cursor: StaxCursor, type_ref: TypeRef, field: str | None) -> WireModel:
        model: type[WireModel] = type_ref.py_type
        shape = shape_for(model)
        top_level = cursor.is_start_of_document
        original_depth = cursor.depth
        target_depth = original_depth + 1
        if top_level:
            target_depth += 1

        values: dict[str, Any] = {}
        while True:
            event = cursor.next_event()
            if event.kind is XmlEventKind.END_DOCUMENT:
                if not top_level:
                    raise UnmarshallingError("Unexpected end of XML document", field)
                break
            if event.kind is XmlEventKind.START_ELEMENT and cursor.depth == target_depth:
                member = shape.member(event.name or "")
                if member is None:
                    logger.debug("unmarshall.xml.skip shape={} element={}", model.__name__, event.name)
                    continue
                with field_errors(member.wire_name):
                    value = self._value(cursor, member.type_ref, member)
                if value is not None:
                    values[member.name] = value
            elif event.kind is XmlEventKind.END_ELEMENT and cursor.depth < original_depth:
                break

        return construct_record(model, values, field)

    def _list(self, cursor: StaxCursor, type_ref: TypeRef, member: Member | None) -> list[Any]:
        member_name = member.member_name if member is not None else "member"
        element = cast(TypeRef, type_ref.element)
        depth = cursor.depth
        items: list[Any] = []
        while True:
            event = cursor.next_event()
            if event.kind is XmlEventKind.START_ELEMENT and cursor.depth == depth + 1 and event.name == member_name:
                item = self._value(cursor, element, member)
                if item is not None:
                    items.append(item)
            elif event.kind is XmlEventKind.END_ELEMENT and cursor.depth < depth:
                return items
            elif event.kind is XmlEventKind.END_DOCUMENT:
                raise UnmarshallingError("Unexpected end of XML document", member.wire_name if member else None)

    def _map(self, cursor: StaxCursor, type_ref: TypeRef, member: Member | None) -> dict[str, Any]:
        element = cast(TypeRef, type_ref.element)
        depth = cursor.depth
        entries: dict[str, Any] = {}
        key: str | None = None
        value: Any = None
        while True:
            event = cursor.next_event()
            if event.kind is XmlEventKind.START_ELEMENT:
                if cursor.depth == depth + 1 and event.name == "entry":
                    key, value = None, None
                elif cursor.depth == depth + 2 and event.name == "key":
                    key = cursor.read_text()
                elif cursor.depth == depth + 2 and event.name == "value":
                    value = self._value(cursor, element, member)
            elif event.kind is XmlEventKind.END_ELEMENT:
                if cursor.depth < depth:
                    return entries
                if cursor.depth == depth and event.name == "entry" and key is not None and value is not None:
                    entries[key] = value
            elif event.kind is XmlEventKind.END_DOCUMENT:
                raise UnmarshallingError("Unexpected end of XML document", member.wire_name if member else None)


_unmarshaller = StaxUnmarshaller()


def unmarshall_xml(model: type[M], source: StaxCursor | str | bytes | bytearray) -> M:
    """Decode an XML document or event cursor into a ``model`` record."""
    cursor = source if isinstance(source, StaxCursor) else StaxCursor(source)
    return _unmarshaller.unmarshall(model, cursor)
