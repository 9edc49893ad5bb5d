"""Amazon Elastic Transcoder shapes (rest-json)."""

from __future__ import annotations

from typing import Annotated, ClassVar

from ..model import HttpBinding, ServiceRequest, Wire
from ..registry import register_shape

register = register_shape("elastictranscoder")


@register
class ReadPresetRequest(ServiceRequest):
    binding: ClassVar[HttpBinding] = HttpBinding(
        service_name="AmazonElasticTranscoder",
        http_method="GET",
        request_uri="/2012-09-25/presets/{Id}",
    )

    id: Annotated[str | None, Wire("Id", location="uri")] = None
