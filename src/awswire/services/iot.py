"""AWS IoT shapes (rest-json)."""

from __future__ import annotations

from datetime import datetime

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("iot")


@register
class CertificateStatus(WireEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    REVOKED = "REVOKED"
    PENDING_TRANSFER = "PENDING_TRANSFER"


@register
class CertificateDescription(WireModel):
    certificate_arn: str | None = None
    certificate_id: str | None = None
    status: CertificateStatus | None = None
    certificate_pem: str | None = None
    owned_by: str | None = None
    creation_date: datetime | None = None
    last_modified_date: datetime | None = None
