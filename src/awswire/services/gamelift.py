"""Amazon GameLift shapes (JSON 1.1)."""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from ..model import HttpBinding, ServiceRequest, Wire, WireModel
from ..registry import register_shape

register = register_shape("gamelift")


@register
class EC2InstanceCounts(WireModel):
    """Instance counts of a fleet, keyed by state."""

    desired: Annotated[int | None, Wire("DESIRED")] = None
    minimum: Annotated[int | None, Wire("MINIMUM")] = None
    maximum: Annotated[int | None, Wire("MAXIMUM")] = None
    pending: Annotated[int | None, Wire("PENDING")] = None
    active: Annotated[int | None, Wire("ACTIVE")] = None
    idle: Annotated[int | None, Wire("IDLE")] = None
    terminating: Annotated[int | None, Wire("TERMINATING")] = None


@register
class FleetCapacity(WireModel):
    wire_case = "pascal"

    fleet_id: str | None = None
    instance_type: str | None = None
    instance_counts: Annotated[EC2InstanceCounts | None, Wire("InstanceCounts")] = None


@register
class DescribeFleetCapacityRequest(ServiceRequest):
    binding: ClassVar[HttpBinding] = HttpBinding(
        service_name="AmazonGameLift",
        protocol="json",
        target="GameLift.DescribeFleetCapacity",
    )
    wire_case = "pascal"

    fleet_ids: list[str] = Field(default_factory=list)
    limit: int | None = None
    next_token: str | None = None


@register
class DescribeFleetCapacityResult(WireModel):
    wire_case = "pascal"

    fleet_capacity: list[FleetCapacity] = Field(default_factory=list)
    next_token: str | None = None
