"""Amazon API Gateway shapes (rest-json)."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar

from pydantic import Field

from ..enums import WireEnum
from ..model import HttpBinding, ServiceRequest, Wire, WireModel
from ..registry import register_shape

SERVICE_NAME = "AmazonApiGateway"

register = register_shape("apigateway")


@register
class Op(WireEnum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


@register
class IntegrationType(WireEnum):
    HTTP = "HTTP"
    AWS = "AWS"
    MOCK = "MOCK"


@register
class PatchOperation(WireModel):
    """One JSON-patch style change applied by an update operation."""

    op: Op | None = None
    path: str | None = None
    value: str | None = None
    from_: Annotated[str | None, Wire("from")] = None


@register
class UpdateDeploymentRequest(ServiceRequest):
    binding: ClassVar[HttpBinding] = HttpBinding(
        service_name=SERVICE_NAME,
        http_method="PATCH",
        request_uri="/restapis/{restapi_id}/deployments/{deployment_id}",
    )

    rest_api_id: Annotated[str | None, Wire("restapi_id", location="uri")] = None
    deployment_id: Annotated[str | None, Wire("deployment_id", location="uri")] = None
    patch_operations: list[PatchOperation] = Field(default_factory=list)


@register
class TestInvokeAuthorizerRequest(ServiceRequest):
    binding: ClassVar[HttpBinding] = HttpBinding(
        service_name=SERVICE_NAME,
        http_method="POST",
        request_uri="/restapis/{restapi_id}/authorizers/{authorizer_id}",
    )

    rest_api_id: Annotated[str | None, Wire("restapi_id", location="uri")] = None
    authorizer_id: Annotated[str | None, Wire("authorizer_id", location="uri")] = None
    headers: dict[str, str] = Field(default_factory=dict)
    path_with_query_string: str | None = None
    body: str | None = None
    stage_variables: dict[str, str] = Field(default_factory=dict)
    additional_context: dict[str, str] = Field(default_factory=dict)


@register
class TestInvokeAuthorizerResult(WireModel):
    client_status: int | None = None
    log: str | None = None
    latency: int | None = None
    principal_id: str | None = None
    policy: str | None = None
    authorization: dict[str, list[str]] = Field(default_factory=dict)


@register
class UpdateDomainNameResult(WireModel):
    domain_name: str | None = None
    certificate_name: str | None = None
    certificate_upload_date: datetime | None = None
    distribution_domain_name: str | None = None


@register
class IntegrationResponse(WireModel):
    status_code: str | None = None
    selection_pattern: str | None = None
    response_parameters: dict[str, str] = Field(default_factory=dict)
    response_templates: dict[str, str] = Field(default_factory=dict)


@register
class UpdateIntegrationResult(WireModel):
    type: IntegrationType | None = None
    http_method: str | None = None
    uri: str | None = None
    credentials: str | None = None
    request_parameters: dict[str, str] = Field(default_factory=dict)
    request_templates: dict[str, str] = Field(default_factory=dict)
    cache_namespace: str | None = None
    cache_key_parameters: list[str] = Field(default_factory=list)
    integration_responses: dict[str, IntegrationResponse] = Field(default_factory=dict)
