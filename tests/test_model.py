import pytest
from pydantic import ValidationError

from awswire.services import apigateway
from awswire.services.ec2 import GroupIdentifier, Instance
from awswire.services.gamelift import EC2InstanceCounts, FleetCapacity
from awswire.services.rds import DBInstance, Endpoint


def test_scalars_are_absent_until_set() -> None:
    instance = Instance()
    assert not instance.is_present("instance_id")

    instance.ami_launch_index = 0
    assert instance.is_present("ami_launch_index")


def test_empty_collections_are_absent_until_assigned() -> None:
    result = apigateway.TestInvokeAuthorizerResult()
    assert result.authorization == {}
    assert not result.is_present("authorization")

    result.authorization = {}
    assert result.is_present("authorization")


def test_filled_collections_are_present() -> None:
    instance = Instance(security_groups=[GroupIdentifier(group_id="sg-1")])
    assert instance.is_present("security_groups")


def test_with_values_assigns_and_returns_the_record() -> None:
    group = GroupIdentifier()
    assert group.with_values(group_name="web", group_id="sg-1") is group
    assert group.group_name == "web"
    assert group.group_id == "sg-1"


def test_clone_is_deep() -> None:
    original = DBInstance(db_instance_identifier="db-1", endpoint=Endpoint(address="a.example", port=5432))
    copy = original.clone()
    copy.endpoint.address = "b.example"

    assert original.endpoint.address == "a.example"
    assert copy.db_instance_identifier == "db-1"


def test_str_lists_present_members_by_wire_name() -> None:
    capacity = FleetCapacity(fleet_id="fleet-1", instance_counts=EC2InstanceCounts(desired=2))
    assert str(capacity) == "{FleetId: fleet-1, InstanceCounts: {DESIRED: 2}}"
    assert str(GroupIdentifier()) == "{}"


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        GroupIdentifier(group_nam="typo")


def test_assignment_is_validated() -> None:
    instance = Instance()
    with pytest.raises(ValidationError):
        instance.ami_launch_index = "not a number"
