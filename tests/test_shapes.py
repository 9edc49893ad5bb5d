from typing import Annotated

import pytest
from pydantic import Field

from awswire.errors import ShapeDefinitionError
from awswire.model import Wire, WireModel
from awswire.services import apigateway
from awswire.services.cloudwatch import Datapoint, StandardUnit
from awswire.services.ec2 import GroupIdentifier, Instance
from awswire.shapes import shape_for, wire_name_for


class DuplicateWireNames(WireModel):
    first: Annotated[str | None, Wire("Name")] = None
    second: Annotated[str | None, Wire("Name")] = None


class MixedUnion(WireModel):
    value: int | str | None = None


class IntegerKeys(WireModel):
    value: dict[int, str] = Field(default_factory=dict)


@pytest.mark.parametrize(
    ("name", "case", "expected"),
    [
        ("fleet_id", "pascal", "FleetId"),
        ("fleet_id", "camel", "fleetId"),
        ("label", "pascal", "Label"),
        ("path_with_query_string", "camel", "pathWithQueryString"),
    ],
)
def test_wire_name_for(name: str, case: str, expected: str) -> None:
    assert wire_name_for(name, case) == expected


def test_members_follow_declaration_order() -> None:
    shape = shape_for(Datapoint)
    assert [member.wire_name for member in shape.members] == [
        "Timestamp",
        "SampleCount",
        "Average",
        "Sum",
        "Minimum",
        "Maximum",
        "Unit",
    ]
    unit = shape.member("Unit")
    assert unit is not None
    assert unit.type_ref.kind == "enum"
    assert unit.type_ref.py_type is StandardUnit


def test_wire_metadata_overrides_defaults() -> None:
    member = shape_for(Instance).member("groupSet")
    assert member is not None
    assert member.name == "security_groups"
    assert member.member_name == "item"
    assert member.type_ref.kind == "list"
    assert member.type_ref.element.kind == "structure"
    assert member.type_ref.element.py_type is GroupIdentifier


def test_nested_collections_resolve() -> None:
    member = shape_for(apigateway.TestInvokeAuthorizerResult).member("authorization")
    assert member is not None
    assert member.type_ref.kind == "map"
    assert member.type_ref.element.kind == "list"
    assert member.type_ref.element.element.kind == "string"


def test_located_members() -> None:
    shape = shape_for(apigateway.UpdateDeploymentRequest)
    assert [member.wire_name for member in shape.located("uri")] == ["restapi_id", "deployment_id"]
    assert [member.wire_name for member in shape.located("body")] == ["patchOperations"]


def test_shape_is_cached_per_record_type() -> None:
    assert shape_for(Datapoint) is shape_for(Datapoint)


def test_duplicate_wire_names_are_rejected() -> None:
    with pytest.raises(ShapeDefinitionError, match="duplicate wire name 'Name'"):
        shape_for(DuplicateWireNames)


@pytest.mark.parametrize("model", [MixedUnion, IntegerKeys])
def test_unsupported_field_types_are_rejected(model: type[WireModel]) -> None:
    with pytest.raises(ShapeDefinitionError):
        shape_for(model)
