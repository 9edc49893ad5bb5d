from datetime import UTC, datetime

import pytest

from awswire.scalars import (
    decode_blob,
    encode_blob,
    format_timestamp,
    parse_boolean,
    parse_json_timestamp,
    parse_xml_timestamp,
)

NOON = datetime(2015, 3, 1, 12, 0, 0, tzinfo=UTC)


def test_parse_boolean_accepts_only_lowercase_literals() -> None:
    assert parse_boolean("true") is True
    assert parse_boolean(" false ") is False
    with pytest.raises(ValueError):
        parse_boolean("True")


@pytest.mark.parametrize(
    ("text", "numeric"),
    [
        ("1425211200", True),
        ("2015-03-01T12:00:00Z", False),
        ("2015-03-01T12:00:00.000Z", False),
        ("2015-03-01T13:00:00+01:00", False),
    ],
)
def test_parse_json_timestamp(text: str, numeric: bool) -> None:
    assert parse_json_timestamp(text, numeric=numeric) == NOON


def test_parse_json_timestamp_keeps_fractional_seconds() -> None:
    parsed = parse_json_timestamp("1425211200.5", numeric=True)
    assert parsed.microsecond == 500000


@pytest.mark.parametrize("text", ["1e20", "1e400"])
def test_parse_json_timestamp_rejects_out_of_range_seconds(text: str) -> None:
    with pytest.raises(ValueError, match="out of range"):
        parse_json_timestamp(text, numeric=True)


@pytest.mark.parametrize("text", ["2015-03-01T12:00:00Z", "Sun, 01 Mar 2015 12:00:00 GMT"])
def test_parse_xml_timestamp(text: str) -> None:
    assert parse_xml_timestamp(text) == NOON


def test_parse_xml_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_xml_timestamp("yesterday")


@pytest.mark.parametrize(
    ("value", "timestamp_format", "expected"),
    [
        (NOON, "iso8601", "2015-03-01T12:00:00Z"),
        (NOON.replace(microsecond=500000), "iso8601", "2015-03-01T12:00:00.500000Z"),
        (NOON, "unixtimestamp", 1425211200),
        (NOON.replace(microsecond=500000), "unixtimestamp", 1425211200.5),
        (NOON, "rfc822", "Sun, 01 Mar 2015 12:00:00 GMT"),
        (datetime(2015, 3, 1, 12, 0, 0), "iso8601", "2015-03-01T12:00:00Z"),
    ],
)
def test_format_timestamp(value: datetime, timestamp_format: str, expected: object) -> None:
    formatted = format_timestamp(value, timestamp_format)
    assert formatted == expected
    assert type(formatted) is type(expected)


def test_blobs_are_base64() -> None:
    assert encode_blob(b"hi") == "aGk="
    assert decode_blob("aGk=") == b"hi"
    with pytest.raises(ValueError, match="Invalid base64"):
        decode_blob("not base64!")
