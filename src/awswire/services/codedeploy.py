"""AWS CodeDeploy shapes (JSON 1.1)."""

from __future__ import annotations

from datetime import datetime

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("codedeploy")


@register
class DeploymentStatus(WireEnum):
    CREATED = "Created"
    QUEUED = "Queued"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    STOPPED = "Stopped"


@register
class DeploymentInfo(WireModel):
    application_name: str | None = None
    deployment_group_name: str | None = None
    deployment_id: str | None = None
    status: DeploymentStatus | None = None
    create_time: datetime | None = None
    complete_time: datetime | None = None
    description: str | None = None
