import json, sys, time

STAGE = "lambda_metrics"


def json_log(msg, level="info", **kw):
    # stdout is reserved for agent output
    print(json.dumps({"ts": int(time.time() * 1000), "stage": STAGE, "level": level, "msg": msg, **kw},
                     default=str), file=sys.stderr)
