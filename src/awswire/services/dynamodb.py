"""Amazon DynamoDB shapes (JSON 1.0)."""

from __future__ import annotations

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("dynamodb")


@register
class AttributeAction(WireEnum):
    ADD = "ADD"
    PUT = "PUT"
    DELETE = "DELETE"


@register
class IndexStatus(WireEnum):
    CREATING = "CREATING"
    UPDATING = "UPDATING"
    DELETING = "DELETING"
    ACTIVE = "ACTIVE"


@register
class GlobalSecondaryIndexDescription(WireModel):
    wire_case = "pascal"

    index_name: str | None = None
    index_status: IndexStatus | None = None
    backfilling: bool | None = None
    index_size_bytes: int | None = None
    item_count: int | None = None
    index_arn: str | None = None
