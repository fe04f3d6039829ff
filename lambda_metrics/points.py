def select_latest(datapoints):
    """
    Pick the most recent datapoint.

    A candidate replaces the current best unless it is strictly earlier, so
    when several share the newest timestamp the last one in input order wins.
    """
    best = None
    for dp in datapoints:
        if best is not None and dp["Timestamp"] < best["Timestamp"]:
            continue
        best = dp
    if best is None:
        raise ValueError("select_latest() needs at least one datapoint")
    return best


def merge_stats(record, datapoint, group):
    for out in group.outputs:
        # requested statistics are always present on the datapoint
        record[out.name] = datapoint[out.statistic.value]
    return record
