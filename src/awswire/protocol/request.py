"""Request envelopes and request marshallers for rest-json, JSON 1.1 and query services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from loguru import logger

from ..config import get_settings
from ..enums import normalize_wire_value
from ..errors import InvalidArgumentError, MarshallingError
from ..model import HttpBinding, ServiceRequest, WireModel
from ..scalars import encode_blob, format_timestamp
from ..shapes import Member, Shape, TypeRef, shape_for
from .json_marshaller import JsonMarshaller

R = TypeVar("R", bound=ServiceRequest)

CONTENT_TYPE = "Content-Type"
CONTENT_LENGTH = "Content-Length"
TARGET_HEADER = "X-Amz-Target"


@dataclass(frozen=True)
class RequestOptions:
    """Caller-supplied additions carried next to the payload.

    ``max_error_retry`` is a hint for the transport layer; nothing here
    retries.
    """

    custom_headers: dict[str, str] = field(default_factory=dict)
    custom_query_parameters: dict[str, str] = field(default_factory=dict)
    max_error_retry: int | None = None


@dataclass
class Request(Generic[R]):
    """An HTTP request ready for signing and transport."""

    original: R
    service_name: str
    http_method: str = "POST"
    resource_path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    options: RequestOptions = field(default_factory=RequestOptions)

    def add_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def add_parameter(self, name: str, value: str) -> None:
        self.parameters[name] = value

    def has_header(self, name: str) -> bool:
        lowered = name.lower()
        return any(key.lower() == lowered for key in self.headers)


def string_form(value: Any, *, timestamp_format: str = "iso8601") -> str:
    """Render a scalar the way it appears in a path, query string or header."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(format_timestamp(value, timestamp_format))  # type: ignore[arg-type]
    if isinstance(value, bytes):
        return encode_blob(value)
    return normalize_wire_value(value)


class RequestMarshaller:
    """Builds a :class:`Request` from a request record and its HTTP binding."""

    def __init__(self, json_marshaller: JsonMarshaller | None = None) -> None:
        self._json = json_marshaller or JsonMarshaller()

    def marshall(self, payload: R | None, options: RequestOptions | None = None) -> Request[R]:
        """Marshall a request record into an HTTP request.

        Raises:
            InvalidArgumentError: If payload is None or has no HTTP binding
            MarshallingError: If the payload cannot be written
        """
        if payload is None:
            raise InvalidArgumentError()
        binding: HttpBinding | None = getattr(type(payload), "binding", None)
        if binding is None:
            raise InvalidArgumentError(f"{type(payload).__name__} has no HTTP binding")

        options = options or RequestOptions()
        request: Request[R] = Request(
            original=payload,
            service_name=binding.service_name,
            http_method=binding.http_method,
            options=options,
        )
        request.headers.update(options.custom_headers)
        request.parameters.update(options.custom_query_parameters)

        shape = shape_for(type(payload))
        logger.debug(
            "marshall.request.start shape={} protocol={} method={}",
            type(payload).__name__,
            binding.protocol,
            binding.http_method,
        )
        if binding.protocol == "query":
            self._query(payload, binding, request)
        else:
            self._json_request(payload, binding, shape, request)
        return request

    def _json_request(self, payload: R, binding: HttpBinding, shape: Shape, request: Request[R]) -> None:
        settings = get_settings()
        try:
            if binding.protocol == "json":
                request.resource_path = "/"
                if binding.target:
                    request.add_header(TARGET_HEADER, binding.target)
                body_members = shape.located("body")
                default_content_type = settings.default_content_type
            else:
                request.resource_path = self._resource_path(payload, binding, shape)
                for member in shape.located("querystring"):
                    if payload.is_present(member.name):
                        request.add_parameter(member.wire_name, self._location_value(payload, member))
                for member in shape.located("header"):
                    if payload.is_present(member.name):
                        request.add_header(
                            member.wire_name, self._location_value(payload, member, timestamp_format="rfc822")
                        )
                body_members = shape.located("body")
                default_content_type = settings.rest_json_content_type

            if body_members:
                content = self._json.to_bytes(payload, body_members)
                request.content = content
                request.add_header(CONTENT_LENGTH, str(len(content)))
        except MarshallingError:
            raise
        except Exception as exc:
            logger.warning("marshall.request.error shape={} error={}", type(payload).__name__, exc)
            raise MarshallingError(f"Unable to marshall request to JSON: {exc}", exc) from exc

        if not request.has_header(CONTENT_TYPE):
            request.add_header(CONTENT_TYPE, binding.content_type or default_content_type)

    def _resource_path(self, payload: WireModel, binding: HttpBinding, shape: Shape) -> str:
        path = binding.request_uri
        for member in shape.located("uri"):
            value = self._location_value(payload, member) if payload.is_present(member.name) else ""
            greedy = "{" + member.wire_name + "+}"
            if greedy in path:
                path = path.replace(greedy, quote(value, safe="/"))
            path = path.replace("{" + member.wire_name + "}", quote(value, safe=""))
        return path

    @staticmethod
    def _location_value(payload: WireModel, member: Member, *, timestamp_format: str = "iso8601") -> str:
        value = getattr(payload, member.name)
        fmt = member.timestamp_format or timestamp_format
        if isinstance(value, list):
            return ",".join(string_form(item, timestamp_format=fmt) for item in value if item is not None)
        return string_form(value, timestamp_format=fmt)

    def _query(self, payload: R, binding: HttpBinding, request: Request[R]) -> None:
        request.resource_path = "/"
        if binding.action:
            request.add_parameter("Action", binding.action)
        if binding.version:
            request.add_parameter("Version", binding.version)
        try:
            self._flatten(payload, "", request.parameters)
        except Exception as exc:
            logger.warning("marshall.request.error shape={} error={}", type(payload).__name__, exc)
            raise MarshallingError(f"Unable to marshall request to query string: {exc}", exc) from exc
        if not request.has_header(CONTENT_TYPE):
            request.add_header(CONTENT_TYPE, binding.content_type or get_settings().query_content_type)

    def _flatten(self, record: WireModel, prefix: str, params: dict[str, str]) -> None:
        for member in shape_for(type(record)).members:
            if not record.is_present(member.name):
                continue
            value = getattr(record, member.name)
            self._flatten_value(member, member.type_ref, value, prefix + member.wire_name, params)

    def _flatten_value(
        self, member: Member, type_ref: TypeRef, value: Any, name: str, params: dict[str, str]
    ) -> None:
        if type_ref.kind == "structure":
            self._flatten(value, name + ".", params)
        elif type_ref.kind == "list":
            items = [item for item in value if item is not None]
            if not items:
                params[name] = ""
            for index, item in enumerate(items, start=1):
                self._flatten_value(member, type_ref.element, item, f"{name}.{member.member_name}.{index}", params)
        elif type_ref.kind == "map":
            entries = [(key, item) for key, item in value.items() if item is not None]
            for index, (key, item) in enumerate(entries, start=1):
                params[f"{name}.entry.{index}.key"] = key
                self._flatten_value(member, type_ref.element, item, f"{name}.entry.{index}.value", params)
        else:
            params[name] = string_form(value, timestamp_format=member.timestamp_format or "iso8601")


_marshaller = RequestMarshaller()


def marshall_request(payload: R | None, options: RequestOptions | None = None) -> Request[R]:
    """Marshall a request record using the process-wide request marshaller."""
    return _marshaller.marshall(payload, options)
