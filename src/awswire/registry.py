"""Shape registry: qualified names to record and enum classes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .enums import WireEnum
from .errors import ShapeNotFoundError
from .model import WireModel

ShapeClass = type[WireModel] | type[WireEnum]
S = TypeVar("S", bound=ShapeClass)


class ShapeRegistry:
    """Registry of record and enum classes keyed by ``<service>.<Shape>``."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeClass] = {}
        self._names_by_class: dict[ShapeClass, str] = {}

    def register(self, name: str, shape_class: ShapeClass) -> ShapeClass:
        """Register a class under a qualified name.

        Raises:
            ValueError: If the name is already registered with a different class
        """
        existing = self._shapes.get(name)
        if existing is not None:
            if existing is not shape_class:
                msg = (
                    f"Shape '{name}' already registered with different class: "
                    f"{existing.__name__} vs {shape_class.__name__}"
                )
                raise ValueError(msg)
            return shape_class
        self._shapes[name] = shape_class
        self._names_by_class[shape_class] = name
        return shape_class

    def get_shape(self, name: str) -> ShapeClass | None:
        return self._shapes.get(name)

    def get_shape_or_raise(self, name: str) -> ShapeClass:
        """Get the class registered under ``name``.

        Raises:
            ShapeNotFoundError: If nothing is registered under the name
        """
        shape_class = self.get_shape(name)
        if shape_class is None:
            raise ShapeNotFoundError(name)
        return shape_class

    def name_of(self, shape_class: ShapeClass) -> str | None:
        return self._names_by_class.get(shape_class)

    def list_shapes(self) -> dict[str, ShapeClass]:
        return dict(sorted(self._shapes.items()))

    def is_registered(self, name: str) -> bool:
        return name in self._shapes

    def unregister(self, name: str) -> bool:
        shape_class = self._shapes.pop(name, None)
        if shape_class is None:
            return False
        self._names_by_class.pop(shape_class, None)
        return True


# Process-wide registry, filled when awswire.services is imported.
_global_registry = ShapeRegistry()


def register_shape(service: str) -> Callable[[S], S]:
    """Class decorator registering a record or enum under ``<service>.<ClassName>``."""

    def decorator(shape_class: S) -> S:
        _global_registry.register(f"{service}.{shape_class.__name__}", shape_class)
        return shape_class

    return decorator


def get_shape(name: str) -> ShapeClass | None:
    return _global_registry.get_shape(name)


def get_shape_or_raise(name: str) -> ShapeClass:
    return _global_registry.get_shape_or_raise(name)


def get_registry() -> ShapeRegistry:
    """Get the process-wide shape registry."""
    return _global_registry
