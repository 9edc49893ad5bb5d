"""Amazon CloudWatch Events shapes (JSON 1.1)."""

from __future__ import annotations

from pydantic import Field

from ..model import WireModel
from ..registry import register_shape

register = register_shape("events")


@register
class PutEventsResultEntry(WireModel):
    """Outcome of one entry of a PutEvents call."""

    wire_case = "pascal"

    event_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None


@register
class PutEventsResult(WireModel):
    wire_case = "pascal"

    failed_entry_count: int | None = None
    entries: list[PutEventsResultEntry] = Field(default_factory=list)
