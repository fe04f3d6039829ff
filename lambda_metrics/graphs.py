import json
import re

META_HEADER = "# mackerel-agent-plugin"

_GRAPHS = {
    "invocations": ("Invocations", "integer", True, [
        ("invocations_success", "Success"),
        ("invocations_error", "Error"),
        ("invocations_throttles", "Throttles"),
    ]),
    "duration": ("Duration", "float", False, [
        ("duration_avg", "Average"),
        ("duration_max", "Maximum"),
        ("duration_min", "Minimum"),
    ]),
}


def graph_definition(prefix="lambda"):
    # upper-case the first letter of each word, leave the rest alone
    label_prefix = re.sub(r"\b\w", lambda m: m.group().upper(), prefix)
    return {
        name: {
            "label": f"{label_prefix} {label}",
            "unit": unit,
            "metrics": [{"name": m, "label": l, "stacked": stacked} for m, l in metrics],
        }
        for name, (label, unit, stacked, metrics) in _GRAPHS.items()
    }


def format_definitions(prefix="lambda"):
    graphs = graph_definition(prefix)
    payload = {"graphs": {f"{prefix}.{name}": graphs[name] for name in sorted(graphs)}}
    return META_HEADER + "\n" + json.dumps(payload, separators=(",", ":"))


def format_values(record, prefix, now):
    """Agent value lines, `<prefix>.<graph>.<metric>\\t<value>\\t<epoch>`; missing metrics are skipped."""
    epoch = int(now.timestamp())
    lines = []
    for graph, (_, _, _, metrics) in _GRAPHS.items():
        for name, _ in metrics:
            if name in record:
                lines.append(f"{prefix}.{graph}.{name}\t{record[name]:f}\t{epoch}")
    return lines
