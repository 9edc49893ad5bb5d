"""String vocabularies with exact wire lookup."""

from __future__ import annotations

from enum import Enum
from typing import Self

from loguru import logger

from .errors import UnrecognizedValueError


class WireEnum(str, Enum):
    """Base class for enums whose values are canonical wire strings.

    ``from_value`` is exact and case-sensitive with no fallback variant.
    Services add literals over time, so decoding goes through ``from_wire``
    and keeps a string this client does not list as an unlisted variant:
    an instance of the enum whose value is the raw string. Unlisted variants
    never appear when iterating the enum.
    """

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return cls._value2member_map_.setdefault(value, member)

    @classmethod
    def from_value(cls, value: str | None) -> Self:
        """Return the variant whose wire string is exactly ``value``.

        Raises:
            UnrecognizedValueError: If value is None, empty, or unknown
        """
        if value is None or value == "":
            raise UnrecognizedValueError("Value cannot be null or empty!", value)
        for member in cls:
            if member.value == value:
                return member
        raise UnrecognizedValueError(f"Cannot create enum from {value} value!", value)

    @classmethod
    def from_wire(cls, value: str) -> Self:
        """Return the listed variant for ``value``, or an unlisted one carrying the raw string."""
        try:
            return cls.from_value(value)
        except UnrecognizedValueError:
            logger.debug("enum.unlisted enum={} value={!r}", cls.__name__, value)
            return cls(value)

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def normalize_wire_value(value: str | Enum) -> str:
    """Normalize an enum or plain string to its wire string."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
