"""Helpers shared by the JSON and XML walkers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError

from ..errors import UnmarshallingError
from ..model import WireModel


@contextmanager
def field_errors(wire_name: str) -> Iterator[None]:
    """Turn scalar parse failures inside a field decoder into decode errors."""
    try:
        yield
    except UnmarshallingError:
        raise
    except (ValueError, TypeError) as exc:
        raise UnmarshallingError(f"Unable to unmarshall field '{wire_name}': {exc}", wire_name) from exc


def construct_record(model: type[WireModel], values: dict[str, Any], field: str | None) -> WireModel:
    try:
        return model(**values)
    except ValidationError as exc:
        raise UnmarshallingError(f"Invalid {model.__name__} record: {exc}", field) from exc
