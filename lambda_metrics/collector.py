from datetime import datetime, timezone
from typing import Optional

from .catalog import CATALOG
from .errors import NoData, UpstreamError
from .fetcher import fetch
from .log import json_log
from .points import merge_stats, select_latest
from .record import MetricRecord
from .transform import transform_metrics


def collect(cloudwatch, function_name: str, now: Optional[datetime] = None, groups=CATALOG) -> MetricRecord:
    now = now or datetime.now(timezone.utc)
    record = MetricRecord()

    for group in groups:
        try:
            datapoints = fetch(cloudwatch, group, function_name, now)
        except NoData as e:
            json_log("no_datapoints", metric=group.remote_name, function_name=function_name, error=str(e))
            continue
        except UpstreamError as e:
            json_log("fetch_failed", level="warning", metric=group.remote_name,
                     function_name=function_name, error=str(e.cause))
            continue
        merge_stats(record, select_latest(datapoints), group)

    record = transform_metrics(record)
    json_log("collect_complete", function_name=function_name, metrics=sorted(record))
    return record
