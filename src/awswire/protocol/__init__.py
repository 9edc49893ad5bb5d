"""Wire protocols: token cursors, unmarshallers and marshallers."""

from .json_marshaller import JsonMarshaller, marshall_json
from .json_unmarshaller import JsonUnmarshaller, unmarshall_json
from .request import Request, RequestMarshaller, RequestOptions, marshall_request
from .stax_unmarshaller import StaxUnmarshaller, unmarshall_xml
from .tokens import JsonTokenCursor, Token, TokenKind
from .xml_cursor import StaxCursor, XmlEvent, XmlEventKind

__all__ = [
    "JsonMarshaller",
    "JsonTokenCursor",
    "JsonUnmarshaller",
    "Request",
    "RequestMarshaller",
    "RequestOptions",
    "StaxCursor",
    "StaxUnmarshaller",
    "Token",
    "TokenKind",
    "XmlEvent",
    "XmlEventKind",
    "marshall_json",
    "marshall_request",
    "unmarshall_json",
    "unmarshall_xml",
]
