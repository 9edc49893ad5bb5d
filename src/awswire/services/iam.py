"""AWS Identity and Access Management shapes (query protocol)."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from ..model import HttpBinding, ServiceRequest, WireModel
from ..registry import register_shape

register = register_shape("iam")


@register
class CreateUserRequest(ServiceRequest):
    binding: ClassVar[HttpBinding] = HttpBinding(
        service_name="AmazonIdentityManagement",
        protocol="query",
        action="CreateUser",
        version="2010-05-08",
    )
    wire_case = "pascal"

    path: str | None = None
    user_name: str | None = None


@register
class User(WireModel):
    wire_case = "pascal"

    path: str | None = None
    user_name: str | None = None
    user_id: str | None = None
    arn: str | None = None
    create_date: datetime | None = None
    password_last_used: datetime | None = None


@register
class CreateUserResult(WireModel):
    wire_case = "pascal"

    user: User | None = None
