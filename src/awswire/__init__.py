"""awswire - typed AWS service records and their wire (un)marshallers."""

from loguru import logger

from .enums import WireEnum
from .errors import (
    InvalidArgumentError,
    MarshallingError,
    ShapeDefinitionError,
    ShapeNotFoundError,
    UnmarshallingError,
    UnrecognizedValueError,
    WireError,
)
from .model import HttpBinding, ServiceRequest, Wire, WireModel
from .protocol import (
    JsonMarshaller,
    JsonTokenCursor,
    JsonUnmarshaller,
    Request,
    RequestMarshaller,
    RequestOptions,
    StaxCursor,
    StaxUnmarshaller,
    marshall_json,
    marshall_request,
    unmarshall_json,
    unmarshall_xml,
)
from .registry import ShapeRegistry, get_registry, register_shape
from .shapes import shape_for

__version__ = "0.1.0"

# Libraries stay quiet until the application calls configure_logging().
logger.disable("awswire")

__all__ = [
    "HttpBinding",
    "InvalidArgumentError",
    "JsonMarshaller",
    "JsonTokenCursor",
    "JsonUnmarshaller",
    "MarshallingError",
    "Request",
    "RequestMarshaller",
    "RequestOptions",
    "ServiceRequest",
    "ShapeDefinitionError",
    "ShapeNotFoundError",
    "ShapeRegistry",
    "StaxCursor",
    "StaxUnmarshaller",
    "UnmarshallingError",
    "UnrecognizedValueError",
    "Wire",
    "WireEnum",
    "WireError",
    "WireModel",
    "get_registry",
    "marshall_json",
    "marshall_request",
    "register_shape",
    "shape_for",
    "unmarshall_json",
    "unmarshall_xml",
]
