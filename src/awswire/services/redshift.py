"""Amazon Redshift shapes (query protocol)."""

from __future__ import annotations

from typing import ClassVar

from ..model import HttpBinding, ServiceRequest
from ..registry import register_shape

register = register_shape("redshift")


@register
class DisableSnapshotCopyRequest(ServiceRequest):
    binding: ClassVar[HttpBinding] = HttpBinding(
        service_name="AmazonRedshift",
        protocol="query",
        action="DisableSnapshotCopy",
        version="2012-12-01",
    )
    wire_case = "pascal"

    cluster_identifier: str | None = None
