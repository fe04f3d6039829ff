class LambdaMetricsError(Exception):
    pass


class SetupError(LambdaMetricsError):
    """CloudWatch client could not be built. Nothing is fetched after this."""


class NoData(LambdaMetricsError):
    """CloudWatch returned no datapoints for the window; the function may be idle."""

    def __init__(self, metric_name: str):
        super().__init__(f"fetched no datapoints for {metric_name}")
        self.metric_name = metric_name


class UpstreamError(LambdaMetricsError):
    def __init__(self, metric_name: str, cause):
        super().__init__(f"{metric_name}: {cause}")
        self.metric_name = metric_name
        self.cause = cause


class UnknownMetricError(KeyError, LambdaMetricsError):
    pass
