"""Amazon Inspector shapes (JSON 1.1)."""

from __future__ import annotations

from pydantic import Field

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("inspector")


@register
class AgentHealth(WireEnum):
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"


@register
class AgentsFilter(WireModel):
    agent_health_list: list[AgentHealth] = Field(default_factory=list)
