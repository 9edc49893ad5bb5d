"""Auto Scaling shapes (query protocol, XML responses)."""

from __future__ import annotations

from datetime import datetime

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("autoscaling")


@register
class ScalingActivityStatusCode(WireEnum):
    PENDING_SPOT_BID_PLACEMENT = "PendingSpotBidPlacement"
    WAITING_FOR_SPOT_INSTANCE_REQUEST_ID = "WaitingForSpotInstanceRequestId"
    WAITING_FOR_SPOT_INSTANCE_ID = "WaitingForSpotInstanceId"
    WAITING_FOR_INSTANCE_ID = "WaitingForInstanceId"
    PRE_IN_SERVICE = "PreInService"
    IN_PROGRESS = "InProgress"
    WAITING_FOR_ELB_CONNECTION_DRAINING = "WaitingForELBConnectionDraining"
    MID_LIFECYCLE_ACTION = "MidLifecycleAction"
    WAITING_FOR_INSTANCE_WARMUP = "WaitingForInstanceWarmup"
    SUCCESSFUL = "Successful"
    FAILED = "Failed"
    CANCELLED = "Cancelled"


@register
class Activity(WireModel):
    """A scaling activity."""

    wire_case = "pascal"

    activity_id: str | None = None
    auto_scaling_group_name: str | None = None
    description: str | None = None
    cause: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    status_code: ScalingActivityStatusCode | None = None
    status_message: str | None = None
    progress: int | None = None
    details: str | None = None
