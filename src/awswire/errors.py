"""Exception types for awswire."""

from __future__ import annotations


class WireError(Exception):
    """Base exception for awswire."""


class InvalidArgumentError(WireError):
    """Raised when a required argument to a marshaller is missing."""

    def __init__(self, message: str = "Invalid argument passed to marshall(...)") -> None:
        super().__init__(message)


class MarshallingError(WireError):
    """Raised when a record cannot be written to its wire representation."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnmarshallingError(WireError):
    """Raised when a token stream cannot be decoded into a record."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UnrecognizedValueError(WireError, ValueError):
    """Raised when a wire string does not name any variant of an enum."""

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class ShapeNotFoundError(WireError, LookupError):
    """Raised when no shape is registered under a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No shape registered under name: {name}")
        self.name = name


class ShapeDefinitionError(WireError, TypeError):
    """Raised when a record declares a field that cannot be put on the wire."""
