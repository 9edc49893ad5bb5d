"""Amazon CloudWatch shapes (query protocol, XML responses)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ..enums import WireEnum
from ..model import WireModel
from ..registry import register_shape

register = register_shape("cloudwatch")


@register
class StandardUnit(WireEnum):
    SECONDS = "Seconds"
    MICROSECONDS = "Microseconds"
    MILLISECONDS = "Milliseconds"
    BYTES = "Bytes"
    KILOBYTES = "Kilobytes"
    MEGABYTES = "Megabytes"
    GIGABYTES = "Gigabytes"
    TERABYTES = "Terabytes"
    BITS = "Bits"
    KILOBITS = "Kilobits"
    MEGABITS = "Megabits"
    GIGABITS = "Gigabits"
    TERABITS = "Terabits"
    PERCENT = "Percent"
    COUNT = "Count"
    BYTES_SECOND = "Bytes/Second"
    KILOBYTES_SECOND = "Kilobytes/Second"
    MEGABYTES_SECOND = "Megabytes/Second"
    GIGABYTES_SECOND = "Gigabytes/Second"
    TERABYTES_SECOND = "Terabytes/Second"
    BITS_SECOND = "Bits/Second"
    KILOBITS_SECOND = "Kilobits/Second"
    MEGABITS_SECOND = "Megabits/Second"
    GIGABITS_SECOND = "Gigabits/Second"
    TERABITS_SECOND = "Terabits/Second"
    COUNT_SECOND = "Count/Second"
    NONE = "None"


@register
class Datapoint(WireModel):
    """One aggregated statistic for a metric over a period."""

    wire_case = "pascal"

    timestamp: datetime | None = None
    sample_count: float | None = None
    average: float | None = None
    sum: float | None = None
    minimum: float | None = None
    maximum: float | None = None
    unit: StandardUnit | None = None


@register
class GetMetricStatisticsResult(WireModel):
    wire_case = "pascal"

    label: str | None = None
    datapoints: list[Datapoint] = Field(default_factory=list)
