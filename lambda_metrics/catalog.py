from dataclasses import dataclass
from enum import Enum
from typing import Tuple

NAMESPACE = "AWS/Lambda"
DIMENSION_NAME = "FunctionName"

# consumed by transform_metrics, never emitted
TOTAL_KEY = "invocations_total"
ERROR_KEY = "invocations_error"
SUCCESS_KEY = "invocations_success"


class StatisticKind(str, Enum):
    # value doubles as the CloudWatch statistic and the datapoint field name
    AVERAGE = "Average"
    SUM = "Sum"
    MAXIMUM = "Maximum"
    MINIMUM = "Minimum"


@dataclass(frozen=True)
class MetricOutput:
    name: str
    statistic: StatisticKind


@dataclass(frozen=True)
class MetricGroup:
    """One CloudWatch metric, fetched once, feeding one or more output values."""

    remote_name: str
    outputs: Tuple[MetricOutput, ...]

    def __post_init__(self):
        if not self.remote_name:
            raise ValueError("remote_name must not be empty")
        if not self.outputs:
            raise ValueError(f"{self.remote_name}: at least one output is required")

    @property
    def statistics(self):
        return [o.statistic.value for o in self.outputs]


CATALOG: Tuple[MetricGroup, ...] = (
    MetricGroup("Invocations", (MetricOutput(TOTAL_KEY, StatisticKind.SUM),)),
    MetricGroup("Errors", (MetricOutput(ERROR_KEY, StatisticKind.SUM),)),
    MetricGroup("Throttles", (MetricOutput("invocations_throttles", StatisticKind.SUM),)),
    MetricGroup("Duration", (
        MetricOutput("duration_avg", StatisticKind.AVERAGE),
        MetricOutput("duration_max", StatisticKind.MAXIMUM),
        MetricOutput("duration_min", StatisticKind.MINIMUM),
    )),
)


def _output_names(groups):
    names = [o.name for g in groups for o in g.outputs]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ValueError(f"duplicate output names: {dupes}")
    return frozenset(names)


OUTPUT_NAMES = _output_names(CATALOG)
