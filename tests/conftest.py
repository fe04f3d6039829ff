from datetime import datetime, timedelta, timezone

import pytest

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeCloudWatch:
    """Answers get_metric_statistics like CloudWatch would for one function."""

    def __init__(self, responses=None, errors=None, function_name="myFunction"):
        self.responses = responses or {}
        self.errors = errors or {}
        self.function_name = function_name
        self.calls = []

    def get_metric_statistics(self, **kwargs):
        self.calls.append(kwargs)
        name = kwargs["MetricName"]
        if name in self.errors:
            raise self.errors[name]
        expected = [{"Name": "FunctionName", "Value": self.function_name}] if self.function_name else []
        assert kwargs["Dimensions"] == expected
        return {"Label": name, "Datapoints": self.responses.get(name, [])}


def sum_points(now=NOW):
    return [
        {"Sum": 30.0, "Timestamp": now},
        {"Sum": 25.0, "Timestamp": now + timedelta(seconds=60)},
        {"Sum": 35.0, "Timestamp": now - timedelta(seconds=60)},
    ]


def duration_points(now=NOW):
    return [
        {"Average": 30.0, "Maximum": 50.0, "Minimum": 10.0, "Timestamp": now},
        {"Average": 25.0, "Maximum": 45.0, "Minimum": 5.0, "Timestamp": now + timedelta(seconds=60)},
        {"Average": 35.0, "Maximum": 55.0, "Minimum": 15.0, "Timestamp": now - timedelta(seconds=60)},
    ]


@pytest.fixture
def fake_cloudwatch():
    return FakeCloudWatch(responses={
        "Invocations": sum_points(),
        "Errors": sum_points(),
        "Throttles": sum_points(),
        "Duration": duration_points(),
    })
