"""AWS Storage Gateway shapes (JSON 1.1)."""

from __future__ import annotations

from ..model import WireModel
from ..registry import register_shape

register = register_shape("storagegateway")


@register
class NetworkInterface(WireModel):
    """A gateway's network interface."""

    wire_case = "pascal"

    ipv4_address: str | None = None
    mac_address: str | None = None
    ipv6_address: str | None = None
