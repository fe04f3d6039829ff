import json

from lambda_metrics.graphs import format_definitions, format_values, graph_definition

from conftest import NOW


def test_graph_definition() -> None:
    graphdef = graph_definition("lambda")
    assert len(graphdef) == 2
    assert graphdef["invocations"]["label"] == "Lambda Invocations"
    assert graphdef["duration"]["unit"] == "float"
    assert all(m["stacked"] for m in graphdef["invocations"]["metrics"])


def test_format_definitions() -> None:
    header, body = format_definitions().split("\n")
    assert header == "# mackerel-agent-plugin"
    assert body == (
        '{"graphs":{"lambda.duration":{"label":"Lambda Duration","unit":"float","metrics":['
        '{"name":"duration_avg","label":"Average","stacked":false},'
        '{"name":"duration_max","label":"Maximum","stacked":false},'
        '{"name":"duration_min","label":"Minimum","stacked":false}]},'
        '"lambda.invocations":{"label":"Lambda Invocations","unit":"integer","metrics":['
        '{"name":"invocations_success","label":"Success","stacked":true},'
        '{"name":"invocations_error","label":"Error","stacked":true},'
        '{"name":"invocations_throttles","label":"Throttles","stacked":true}]}}}'
    )
    assert list(json.loads(format_definitions("fn").split("\n", 1)[1])["graphs"]) == ["fn.duration", "fn.invocations"]


def test_format_values_skips_missing() -> None:
    lines = format_values({"invocations_success": 120.0, "duration_avg": 250.5}, "lambda", NOW)
    epoch = int(NOW.timestamp())
    assert lines == [
        f"lambda.invocations.invocations_success\t120.000000\t{epoch}",
        f"lambda.duration.duration_avg\t250.500000\t{epoch}",
    ]


def test_graph_label_keeps_inner_capitals() -> None:
    assert graph_definition("myLambda")["invocations"]["label"] == "MyLambda Invocations"
    assert graph_definition("api gateway")["duration"]["label"] == "Api Gateway Duration"
