"""Amazon CloudSearch domain (search and suggest) shapes."""

from __future__ import annotations

from ..model import WireModel
from ..registry import register_shape

register = register_shape("cloudsearchdomain")


@register
class SuggestStatus(WireModel):
    """Status information returned for a suggest request."""

    timems: int | None = None
    rid: str | None = None
