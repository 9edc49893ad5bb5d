import pytest

from awswire.enums import WireEnum, normalize_wire_value
from awswire.errors import UnrecognizedValueError, WireError
from awswire.registry import get_registry
from awswire.services.apigateway import Op, PatchOperation
from awswire.services.cloudwatch import StandardUnit
from awswire.services.ec2 import InstanceType


def _registered_enums() -> list[type[WireEnum]]:
    return [cls for cls in get_registry().list_shapes().values() if issubclass(cls, WireEnum)]


@pytest.mark.parametrize("enum_class", _registered_enums(), ids=lambda cls: cls.__name__)
def test_every_variant_round_trips_through_its_wire_value(enum_class: type[WireEnum]) -> None:
    for member in enum_class:
        assert enum_class.from_value(member.value) is member
        assert str(member) == member.value


@pytest.mark.parametrize("value", [None, ""])
def test_from_value_rejects_missing_values(value: str | None) -> None:
    with pytest.raises(UnrecognizedValueError, match="Value cannot be null or empty!"):
        InstanceType.from_value(value)


def test_from_value_is_case_sensitive() -> None:
    with pytest.raises(UnrecognizedValueError) as exc_info:
        InstanceType.from_value("T1.MICRO")

    assert str(exc_info.value) == "Cannot create enum from T1.MICRO value!"
    assert exc_info.value.value == "T1.MICRO"
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value, WireError)


def test_wire_values_with_punctuation() -> None:
    assert InstanceType.from_value("m3.2xlarge") is InstanceType.M3_2XLARGE
    assert StandardUnit.from_value("Bytes/Second") is StandardUnit.BYTES_SECOND
    assert StandardUnit.from_value("None") is StandardUnit.NONE


def test_values_keep_declaration_order() -> None:
    values = InstanceType.values()
    assert values[0] == "t1.micro"
    assert values[-1] == "d2.8xlarge"
    assert len(values) == len(set(values))


def test_normalize_wire_value() -> None:
    assert normalize_wire_value(Op.REPLACE) == "replace"
    assert normalize_wire_value("replace") == "replace"


def test_record_fields_accept_wire_strings() -> None:
    operation = PatchOperation(op="add", path="/name")
    assert operation.op is Op.ADD


def test_from_wire_keeps_unlisted_strings() -> None:
    unit = StandardUnit.from_wire("Furlongs/Fortnight")

    assert isinstance(unit, StandardUnit)
    assert unit.value == "Furlongs/Fortnight"
    assert unit == "Furlongs/Fortnight"
    assert StandardUnit.from_wire("Furlongs/Fortnight") is unit
    assert unit not in list(StandardUnit)
    assert "Furlongs/Fortnight" not in StandardUnit.values()
    with pytest.raises(UnrecognizedValueError):
        StandardUnit.from_value("Furlongs/Fortnight")


def test_from_wire_prefers_listed_variants() -> None:
    assert StandardUnit.from_wire("Bytes/Second") is StandardUnit.BYTES_SECOND


def test_record_fields_keep_unlisted_wire_strings() -> None:
    operation = PatchOperation(op="merge", path="/name")
    assert operation.op == "merge"
    assert normalize_wire_value(operation.op) == "merge"
