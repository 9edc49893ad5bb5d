"""Amazon RDS shapes (query protocol, XML responses)."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field

from ..model import Wire, WireModel
from ..registry import register_shape

register = register_shape("rds")


@register
class Endpoint(WireModel):
    wire_case = "pascal"

    address: str | None = None
    port: int | None = None
    hosted_zone_id: str | None = None


@register
class DBSecurityGroupMembership(WireModel):
    db_security_group_name: Annotated[str | None, Wire("DBSecurityGroupName")] = None
    status: Annotated[str | None, Wire("Status")] = None


@register
class VpcSecurityGroupMembership(WireModel):
    wire_case = "pascal"

    vpc_security_group_id: str | None = None
    status: str | None = None


@register
class DBParameterGroupStatus(WireModel):
    db_parameter_group_name: Annotated[str | None, Wire("DBParameterGroupName")] = None
    parameter_apply_status: Annotated[str | None, Wire("ParameterApplyStatus")] = None


@register
class DBInstanceStatusInfo(WireModel):
    wire_case = "pascal"

    status_type: str | None = None
    normal: bool | None = None
    status: str | None = None
    message: str | None = None


@register
class DBInstance(WireModel):
    """A database instance as returned by DescribeDBInstances."""

    wire_case = "pascal"

    db_instance_identifier: Annotated[str | None, Wire("DBInstanceIdentifier")] = None
    db_instance_class: Annotated[str | None, Wire("DBInstanceClass")] = None
    engine: str | None = None
    db_instance_status: Annotated[str | None, Wire("DBInstanceStatus")] = None
    master_username: str | None = None
    db_name: Annotated[str | None, Wire("DBName")] = None
    endpoint: Endpoint | None = None
    allocated_storage: int | None = None
    instance_create_time: datetime | None = None
    preferred_backup_window: str | None = None
    backup_retention_period: int | None = None
    db_security_groups: Annotated[
        list[DBSecurityGroupMembership], Wire("DBSecurityGroups", member_name="DBSecurityGroup")
    ] = Field(default_factory=list)
    vpc_security_groups: Annotated[
        list[VpcSecurityGroupMembership], Wire("VpcSecurityGroups", member_name="VpcSecurityGroupMembership")
    ] = Field(default_factory=list)
    db_parameter_groups: Annotated[
        list[DBParameterGroupStatus], Wire("DBParameterGroups", member_name="DBParameterGroup")
    ] = Field(default_factory=list)
    availability_zone: str | None = None
    preferred_maintenance_window: str | None = None
    latest_restorable_time: datetime | None = None
    multi_az: Annotated[bool | None, Wire("MultiAZ")] = None
    engine_version: str | None = None
    auto_minor_version_upgrade: bool | None = None
    read_replica_source_db_instance_identifier: Annotated[
        str | None, Wire("ReadReplicaSourceDBInstanceIdentifier")
    ] = None
    read_replica_db_instance_identifiers: Annotated[
        list[str], Wire("ReadReplicaDBInstanceIdentifiers", member_name="ReadReplicaDBInstanceIdentifier")
    ] = Field(default_factory=list)
    license_model: str | None = None
    iops: int | None = None
    character_set_name: str | None = None
    secondary_availability_zone: str | None = None
    publicly_accessible: bool | None = None
    status_infos: Annotated[list[DBInstanceStatusInfo], Wire("StatusInfos", member_name="DBInstanceStatusInfo")] = (
        Field(default_factory=list)
    )
    storage_type: str | None = None
    tde_credential_arn: str | None = None
    db_instance_port: Annotated[int | None, Wire("DbInstancePort")] = None
    db_cluster_identifier: Annotated[str | None, Wire("DBClusterIdentifier")] = None
    storage_encrypted: bool | None = None
    kms_key_id: str | None = None
    dbi_resource_id: str | None = None
    ca_certificate_identifier: Annotated[str | None, Wire("CACertificateIdentifier")] = None
    copy_tags_to_snapshot: bool | None = None
    monitoring_interval: int | None = None
    enhanced_monitoring_resource_arn: str | None = None
    monitoring_role_arn: str | None = None
    promotion_tier: int | None = None


@register
class DescribeDBInstancesResult(WireModel):
    wire_case = "pascal"

    marker: str | None = None
    db_instances: Annotated[list[DBInstance], Wire("DBInstances", member_name="DBInstance")] = Field(
        default_factory=list
    )
