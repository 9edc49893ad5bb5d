"""Scalar parsing and formatting shared by every protocol."""

from __future__ import annotations

import base64
import binascii
from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

from .config import TimestampFormat

ISO8601 = "%Y-%m-%dT%H:%M:%SZ"
ISO8601_MICRO = "%Y-%m-%dT%H:%M:%S.%fZ"


def parse_integer(text: str) -> int:
    return int(text.strip())


def parse_float(text: str) -> float:
    return float(text.strip())


def parse_boolean(text: str) -> bool:
    value = text.strip()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Invalid boolean literal: {text!r}")


def parse_iso8601(text: str) -> datetime:
    parsed = datetime.fromisoformat(text.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def parse_epoch(text: str) -> datetime:
    try:
        return datetime.fromtimestamp(float(text.strip()), tz=UTC)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {text!r}") from exc


def parse_rfc822(text: str) -> datetime:
    parsed = parsedate_to_datetime(text.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def parse_json_timestamp(text: str, *, numeric: bool) -> datetime:
    """JSON services send epoch seconds as numbers and ISO-8601 as strings."""
    if numeric:
        return parse_epoch(text)
    try:
        return parse_iso8601(text)
    except ValueError:
        return parse_epoch(text)


def parse_xml_timestamp(text: str) -> datetime:
    try:
        return parse_iso8601(text)
    except ValueError:
        return parse_rfc822(text)


def format_timestamp(value: datetime, timestamp_format: TimestampFormat) -> str | int | float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    if timestamp_format == "unixtimestamp":
        seconds = value.timestamp()
        return int(seconds) if seconds.is_integer() else seconds
    if timestamp_format == "rfc822":
        return format_datetime(value, usegmt=True)
    return value.strftime(ISO8601_MICRO if value.microsecond else ISO8601)


def encode_blob(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def decode_blob(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 data: {exc}") from exc
