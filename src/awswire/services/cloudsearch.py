"""Amazon CloudSearch configuration shapes (query protocol, XML responses)."""

from __future__ import annotations

from datetime import datetime

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("cloudsearch")


@register
class OptionState(WireEnum):
    REQUIRES_INDEX_DOCUMENTS = "RequiresIndexDocuments"
    PROCESSING = "Processing"
    ACTIVE = "Active"
    FAILED_TO_VALIDATE = "FailedToValidate"


@register
class OptionStatus(WireModel):
    wire_case = "pascal"

    creation_date: datetime | None = None
    update_date: datetime | None = None
    update_version: int | None = None
    state: OptionState | None = None
    pending_deletion: bool | None = None


@register
class AccessPoliciesStatus(WireModel):
    """The access rules configured for a search domain and their status."""

    wire_case = "pascal"

    options: str | None = None
    status: OptionStatus | None = None
