import pytest

from lambda_metrics.errors import UnknownMetricError
from lambda_metrics.record import MetricRecord


def test_values_are_floats() -> None:
    record = MetricRecord({"invocations_error": 3})
    assert isinstance(record["invocations_error"], float)
    assert record.as_dict() == {"invocations_error": 3.0}


def test_unknown_key_rejected() -> None:
    record = MetricRecord()
    with pytest.raises(UnknownMetricError):
        record["durations_avg"] = 1.0
    with pytest.raises(KeyError):
        record.update({"invocation_error": 1.0})
    assert len(record) == 0
