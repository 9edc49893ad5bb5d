"""Serialization of records into JSON bodies."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from ..config import TimestampFormat, get_settings
from ..enums import normalize_wire_value
from ..errors import InvalidArgumentError, MarshallingError
from ..model import WireModel
from ..scalars import encode_blob, format_timestamp
from ..shapes import Member, TypeRef, shape_for


class JsonMarshaller:
    """Writes the present body members of a record in declaration order."""

    def __init__(self, timestamp_format: TimestampFormat | None = None) -> None:
        self._timestamp_format = timestamp_format

    @property
    def timestamp_format(self) -> TimestampFormat:
        return self._timestamp_format or get_settings().json_timestamp_format

    def marshall(self, record: WireModel | None, members: list[Member] | None = None) -> dict[str, Any]:
        """Return the JSON object for ``record`` as an ordered dict.

        ``members`` restricts output to those members; by default every body
        member is considered.

        Raises:
            InvalidArgumentError: If record is None
            MarshallingError: If any member cannot be written
        """
        if record is None:
            raise InvalidArgumentError()
        try:
            return self._structure(record, members)
        except Exception as exc:
            logger.warning("marshall.json.error shape={} error={}", type(record).__name__, exc)
            raise MarshallingError(f"Unable to marshall request to JSON: {exc}", exc) from exc

    def to_bytes(self, record: WireModel | None, members: list[Member] | None = None) -> bytes:
        return self.encode(self.marshall(record, members))

    @staticmethod
    def encode(body: dict[str, Any]) -> bytes:
        try:
            return json.dumps(body, ensure_ascii=False, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise MarshallingError(f"Unable to marshall request to JSON: {exc}", exc) from exc

    def _structure(self, record: WireModel, members: list[Member] | None = None) -> dict[str, Any]:
        if members is None:
            members = shape_for(type(record)).located("body")
        body: dict[str, Any] = {}
        for member in members:
            if not record.is_present(member.name):
                continue
            body[member.wire_name] = self._value(member.type_ref, getattr(record, member.name), member)
        return body

    def _value(self, type_ref: TypeRef, value: Any, member: Member) -> Any:
        kind = type_ref.kind
        if kind == "structure":
            return self._structure(value)
        if kind == "list":
            element = type_ref.element
            return [self._value(element, item, member) for item in value if item is not None]
        if kind == "map":
            element = type_ref.element
            return {key: self._value(element, item, member) for key, item in value.items() if item is not None}
        if kind == "enum":
            return normalize_wire_value(value)
        if kind == "timestamp":
            return format_timestamp(value, member.timestamp_format or self.timestamp_format)
        if kind == "blob":
            return encode_blob(value)
        return value


_marshaller = JsonMarshaller()


def marshall_json(record: WireModel | None) -> bytes:
    """Encode ``record`` as a compact UTF-8 JSON body."""
    return _marshaller.to_bytes(record)
