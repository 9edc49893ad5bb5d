"""Record base classes and wire metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict

Location = Literal["body", "uri", "querystring", "header"]
WireCase = Literal["camel", "pascal"]
Protocol = Literal["rest-json", "json", "query"]


@dataclass(frozen=True)
class Wire:
    """Wire metadata for one record field.

    Attach with ``Annotated[int | None, Wire("FleetId")]``. Fields without
    metadata use the record's ``wire_case`` to derive their wire name.
    """

    name: str | None = None
    location: Location = "body"
    member_name: str = "member"
    timestamp_format: str | None = None


@dataclass(frozen=True)
class HttpBinding:
    """How a request record maps onto an HTTP request."""

    service_name: str
    http_method: str = "POST"
    request_uri: str = "/"
    protocol: Protocol = "rest-json"
    target: str | None = None
    action: str | None = None
    version: str | None = None
    content_type: str | None = None


class WireModel(BaseModel):
    """Base class for all request, response and nested records.

    Scalars default to ``None`` (absent). Collections default to an empty
    container and count as absent until assigned or filled.
    """

    wire_case: ClassVar[WireCase] = "camel"

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def is_present(self, name: str) -> bool:
        """Whether the field should be written to the wire."""
        value = getattr(self, name)
        if value is None:
            return False
        if isinstance(value, (list, dict)):
            return bool(value) or name in self.model_fields_set
        return True

    def with_values(self, **changes: Any) -> Self:
        """Assign several fields and return the record for chaining."""
        for name, value in changes.items():
            setattr(self, name, value)
        return self

    def clone(self) -> Self:
        """Return a deep copy of the record."""
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        from .shapes import shape_for

        shape = shape_for(type(self))
        rendered = [
            f"{member.wire_name}: {getattr(self, member.name)}"
            for member in shape.members
            if self.is_present(member.name)
        ]
        return "{" + ", ".join(rendered) + "}"


class ServiceRequest(WireModel):
    """A record that is sent as the input of one service operation."""

    binding: ClassVar[HttpBinding]
