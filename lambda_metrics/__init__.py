"""Collects AWS Lambda usage statistics from CloudWatch for a monitoring agent."""

from .catalog import CATALOG, MetricGroup, MetricOutput, StatisticKind
from .collector import collect
from .errors import LambdaMetricsError, NoData, SetupError, UpstreamError
from .record import MetricRecord

__all__ = [
    "CATALOG",
    "LambdaMetricsError",
    "MetricGroup",
    "MetricOutput",
    "MetricRecord",
    "NoData",
    "SetupError",
    "StatisticKind",
    "UpstreamError",
    "collect",
]
