import argparse, os, sys
from datetime import datetime, timezone

from .collector import collect
from .config import build_client, resolve_config
from .errors import SetupError
from .graphs import format_definitions, format_values
from .log import STAGE, json_log


def _parser():
    p = argparse.ArgumentParser(prog="lambda-metrics",
                                description="Print AWS Lambda CloudWatch metrics for mackerel-agent.")
    p.add_argument("--access-key-id", default="", help="AWS Access Key ID")
    p.add_argument("--secret-access-key", default="", help="AWS Secret Access Key")
    p.add_argument("--region", default="", help="AWS Region")
    p.add_argument("--function-name", default="", help="Function Name")
    p.add_argument("--tempfile", default="", help="Temp file name (accepted, unused)")
    p.add_argument("--metric-key-prefix", default="lambda", help="Metric key prefix")
    return p


def main(argv=None, env=None, client_factory=build_client) -> int:
    env = os.environ if env is None else env
    args = _parser().parse_args(argv)

    if env.get("MACKEREL_AGENT_PLUGIN_META") == "1":
        print(format_definitions(args.metric_key_prefix))
        return 0

    config = resolve_config(args.region, args.access_key_id, args.secret_access_key, env=env)
    try:
        cloudwatch = client_factory(config)
    except SetupError as e:
        print(f"lambda-metrics: {e}", file=sys.stderr)
        return 1

    now = datetime.now(timezone.utc)
    record = collect(cloudwatch, args.function_name, now)
    for line in format_values(record, args.metric_key_prefix, now):
        print(line)
    return 0


def handler(event, context, client_factory=build_client):
    event = event or {}
    function_name = event.get("function_name") or os.environ.get("FUNCTION_NAME", "")
    config = resolve_config(event.get("region"))

    try:
        cloudwatch = client_factory(config)
    except SetupError as e:
        json_log("setup_failed", level="error", error=str(e))
        return {"stage": STAGE, "ok": False, "error": str(e)}

    record = collect(cloudwatch, function_name)
    return {
        "stage": STAGE,
        "ok": True,
        "function_name": function_name,
        "region": config.region,
        "metrics": record.as_dict(),
    }
