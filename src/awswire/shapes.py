"""Declarative member tables built once per record type."""

from __future__ import annotations

import threading
import types
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Union, get_args, get_origin

from .enums import WireEnum
from .errors import ShapeDefinitionError
from .model import Location, Wire, WireCase, WireModel

Kind = Literal[
    "string",
    "integer",
    "float",
    "boolean",
    "timestamp",
    "blob",
    "enum",
    "structure",
    "list",
    "map",
]

_SCALAR_KINDS: dict[type, Kind] = {
    bool: "boolean",
    int: "integer",
    float: "float",
    str: "string",
    bytes: "blob",
    datetime: "timestamp",
}


@dataclass(frozen=True)
class TypeRef:
    """Wire type of a field, a list element or a map value."""

    kind: Kind
    py_type: Any = None
    element: TypeRef | None = None


@dataclass(frozen=True)
class Member:
    """One field of a record as it appears on the wire."""

    name: str
    wire_name: str
    type_ref: TypeRef
    location: Location = "body"
    member_name: str = "member"
    timestamp_format: str | None = None


@dataclass(frozen=True)
class Shape:
    """Ordered members of one record type plus a wire-name index."""

    model: type[WireModel]
    members: tuple[Member, ...]
    by_wire_name: dict[str, Member] = field(default_factory=dict, compare=False)

    def member(self, wire_name: str) -> Member | None:
        return self.by_wire_name.get(wire_name)

    def located(self, location: Location) -> list[Member]:
        return [member for member in self.members if member.location == location]


def wire_name_for(name: str, case: WireCase) -> str:
    """Derive a wire name from a snake_case field name."""
    head, *rest = name.split("_")
    camel = head + "".join(part[:1].upper() + part[1:] for part in rest)
    if case == "pascal":
        return camel[:1].upper() + camel[1:]
    return camel


def resolve_type(annotation: Any, *, where: str) -> TypeRef:
    """Map a field annotation onto a wire type."""
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            raise ShapeDefinitionError(f"{where}: unions of several wire types are not supported")
        return resolve_type(args[0], where=where)
    if origin is list:
        (element,) = get_args(annotation)
        return TypeRef("list", list, resolve_type(element, where=where))
    if origin is dict:
        key, value = get_args(annotation)
        if key is not str:
            raise ShapeDefinitionError(f"{where}: map keys must be strings")
        return TypeRef("map", dict, resolve_type(value, where=where))
    if isinstance(annotation, type):
        if issubclass(annotation, WireEnum):
            return TypeRef("enum", annotation)
        if issubclass(annotation, WireModel):
            return TypeRef("structure", annotation)
        kind = _SCALAR_KINDS.get(annotation)
        if kind is not None:
            return TypeRef(kind, annotation)
    raise ShapeDefinitionError(f"{where}: unsupported field type {annotation!r}")


def build_shape(model: type[WireModel]) -> Shape:
    members: list[Member] = []
    by_wire_name: dict[str, Member] = {}
    for name, info in model.model_fields.items():
        wire = next((item for item in info.metadata if isinstance(item, Wire)), Wire())
        where = f"{model.__name__}.{name}"
        member = Member(
            name=name,
            wire_name=wire.name or wire_name_for(name, model.wire_case),
            type_ref=resolve_type(info.annotation, where=where),
            location=wire.location,
            member_name=wire.member_name,
            timestamp_format=wire.timestamp_format,
        )
        if member.wire_name in by_wire_name:
            raise ShapeDefinitionError(f"{where}: duplicate wire name {member.wire_name!r}")
        members.append(member)
        by_wire_name[member.wire_name] = member
    return Shape(model=model, members=tuple(members), by_wire_name=by_wire_name)


_shapes: dict[type[WireModel], Shape] = {}
_shapes_lock = threading.Lock()


def shape_for(model: type[WireModel]) -> Shape:
    """Return the cached shape of a record type, building it on first use."""
    shape = _shapes.get(model)
    if shape is not None:
        return shape
    with _shapes_lock:
        shape = _shapes.get(model)
        if shape is None:
            shape = build_shape(model)
            _shapes[model] = shape
    return shape
