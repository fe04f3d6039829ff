from datetime import timedelta

from botocore.exceptions import BotoCoreError, ClientError

from .catalog import DIMENSION_NAME, NAMESPACE
from .errors import NoData, UpstreamError

WINDOW = timedelta(seconds=180)
PERIOD = 600


def _dimensions(function_name):
    # no FunctionName dimension aggregates every function in the region
    if not function_name:
        return []
    return [{"Name": DIMENSION_NAME, "Value": function_name}]


def fetch(cloudwatch, group, function_name, now):
    """
    Query CloudWatch once for `group` over [now - 3min, now].
    Returns the raw datapoints. Raises NoData on an empty window and
    UpstreamError for anything the client or the response got wrong.
    """
    try:
        resp = cloudwatch.get_metric_statistics(
            Namespace=NAMESPACE,
            MetricName=group.remote_name,
            Dimensions=_dimensions(function_name),
            StartTime=now - WINDOW,
            EndTime=now,
            Period=PERIOD,
            Statistics=group.statistics,
        )
    except (BotoCoreError, ClientError) as e:
        raise UpstreamError(group.remote_name, e) from e

    datapoints = resp.get("Datapoints") if isinstance(resp, dict) else None
    if not isinstance(datapoints, list):
        cause = ValueError(f"malformed response: {resp!r}")
        raise UpstreamError(group.remote_name, cause) from cause
    if not datapoints:
        raise NoData(group.remote_name)
    return datapoints
