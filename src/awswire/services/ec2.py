"""Amazon EC2 shapes (EC2 query protocol, XML responses)."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field

from ..enums import WireEnum
from ..model import Wire, WireModel
from ..registry import register_shape

register = register_shape("ec2")


@register
class InstanceType(WireEnum):
    T1_MICRO = "t1.micro"
    M1_SMALL = "m1.small"
    M1_MEDIUM = "m1.medium"
    M1_LARGE = "m1.large"
    M1_XLARGE = "m1.xlarge"
    M3_MEDIUM = "m3.medium"
    M3_LARGE = "m3.large"
    M3_XLARGE = "m3.xlarge"
    M3_2XLARGE = "m3.2xlarge"
    M4_LARGE = "m4.large"
    M4_XLARGE = "m4.xlarge"
    M4_2XLARGE = "m4.2xlarge"
    M4_4XLARGE = "m4.4xlarge"
    M4_10XLARGE = "m4.10xlarge"
    T2_NANO = "t2.nano"
    T2_MICRO = "t2.micro"
    T2_SMALL = "t2.small"
    T2_MEDIUM = "t2.medium"
    T2_LARGE = "t2.large"
    M2_XLARGE = "m2.xlarge"
    M2_2XLARGE = "m2.2xlarge"
    M2_4XLARGE = "m2.4xlarge"
    CR1_8XLARGE = "cr1.8xlarge"
    I2_XLARGE = "i2.xlarge"
    I2_2XLARGE = "i2.2xlarge"
    I2_4XLARGE = "i2.4xlarge"
    I2_8XLARGE = "i2.8xlarge"
    HI1_4XLARGE = "hi1.4xlarge"
    HS1_8XLARGE = "hs1.8xlarge"
    C1_MEDIUM = "c1.medium"
    C1_XLARGE = "c1.xlarge"
    C3_LARGE = "c3.large"
    C3_XLARGE = "c3.xlarge"
    C3_2XLARGE = "c3.2xlarge"
    C3_4XLARGE = "c3.4xlarge"
    C3_8XLARGE = "c3.8xlarge"
    C4_LARGE = "c4.large"
    C4_XLARGE = "c4.xlarge"
    C4_2XLARGE = "c4.2xlarge"
    C4_4XLARGE = "c4.4xlarge"
    C4_8XLARGE = "c4.8xlarge"
    CC1_4XLARGE = "cc1.4xlarge"
    CC2_8XLARGE = "cc2.8xlarge"
    G2_2XLARGE = "g2.2xlarge"
    G2_8XLARGE = "g2.8xlarge"
    CG1_4XLARGE = "cg1.4xlarge"
    R3_LARGE = "r3.large"
    R3_XLARGE = "r3.xlarge"
    R3_2XLARGE = "r3.2xlarge"
    R3_4XLARGE = "r3.4xlarge"
    R3_8XLARGE = "r3.8xlarge"
    D2_XLARGE = "d2.xlarge"
    D2_2XLARGE = "d2.2xlarge"
    D2_4XLARGE = "d2.4xlarge"
    D2_8XLARGE = "d2.8xlarge"


@register
class GroupIdentifier(WireModel):
    group_name: str | None = None
    group_id: str | None = None


@register
class Instance(WireModel):
    """Subset of the instance description returned by DescribeInstances."""

    instance_id: str | None = None
    image_id: str | None = None
    instance_type: InstanceType | None = None
    launch_time: datetime | None = None
    private_ip_address: str | None = None
    ebs_optimized: bool | None = None
    ami_launch_index: int | None = None
    security_groups: Annotated[list[GroupIdentifier], Wire("groupSet", member_name="item")] = Field(
        default_factory=list
    )
