"""Tests for the chart renderer output contract."""

from __future__ import annotations

import logging
import re

import pytest

from core.charting.expression import make_expression
from core.charting.render import AbstractChart
from core.charting.schema import COMMON_BODY_ORDER, Engine
from core.charting.validator import SerializationError
from core.charting.variants import Highchart

pytestmark = pytest.mark.unit


def test_empty_chart_renders_empty_constructor(chart: Highchart) -> None:
    """A chart with no options renders a valid, empty constructor call."""

    assert chart.render() == "$(function () {\n    const chart = new Highcharts.Chart({\n    });\n});"
    assert chart.render(Engine.NONE) == "const chart = new Highcharts.Chart({\n    });"
    assert chart.render("mootools") == (
        "window.addEvent('domready', function () {\n    const chart = new Highcharts.Chart({\n    });\n});"
    )


def test_empty_engine_string_means_no_wrapper(chart: Highchart) -> None:
    """The legacy empty engine value renders without a wrapper."""

    assert chart.render("") == chart.render("none")


def test_unknown_engine_is_rejected(chart: Highchart) -> None:
    """Unknown engine names raise ValueError."""

    with pytest.raises(ValueError, match="Unknown engine"):
        chart.render("dojo")


def test_body_fields_use_fixed_layout(chart: Highchart) -> None:
    """Fields are indented by 8 spaces and separated by `,\\n` with no trailing comma."""

    chart.credits.set("enabled", True)
    chart.title.set("text", "T")
    assert chart.render("none") == (
        "const chart = new Highcharts.Chart({\n"
        '        credits: {"enabled":true},\n'
        '        title: {"text":"T"}\n'
        "    });"
    )


def test_body_order_is_declared_not_insertion(chart: Highchart) -> None:
    """Fields follow the declared order regardless of the order options were set in."""

    for name in reversed(COMMON_BODY_ORDER):
        if name == "colors":
            chart.set_colors(["#000000"])
        else:
            chart.set_option(name, "enabled", True)

    output = chart.render("none")
    positions = [output.index(f"\n        {name}: ") for name in COMMON_BODY_ORDER]
    assert positions == sorted(positions)
    assert output.endswith('accessibility: {"enabled":true}\n    });')


def test_global_options_block(chart: Highchart) -> None:
    """global and lang are emitted through Highcharts.setOptions, not the constructor."""

    chart.lang.set("thousandsSep", ",")
    chart.global_.set("useUTC", False)

    assert chart.render("none") == (
        "Highcharts.setOptions({\n"
        '    global: {"useUTC":false},\n'
        '    lang: {"thousandsSep":","},\n'
        "    });\n"
        "    const chart = new Highcharts.Chart({\n"
        "    });"
    )


def test_global_block_with_only_lang(chart: Highchart) -> None:
    """The setOptions block is emitted when only one of its containers has data."""

    chart.lang.set("decimalPoint", ",")
    output = chart.render()
    assert output.startswith("$(function () {\n    Highcharts.setOptions({\n    lang: ")
    assert "global:" not in output


def test_global_containers_are_reachable_by_name(chart: Highchart) -> None:
    """`global` is a Python keyword, so it is exposed as `global_` and via option()."""

    assert chart.option("global") is chart.global_


def test_render_to_defaults_and_overrides(chart: Highchart) -> None:
    """The constructor binds to `chart` unless chart.renderTo is set."""

    assert "const chart = new Highcharts.Chart({" in chart.render()
    chart.chart.set("renderTo", "container")
    output = chart.render()
    assert "const container = new Highcharts.Chart({" in output
    assert 'chart: {"renderTo":"container"}' in output


@pytest.mark.parametrize("render_to", ["", " ", "\t\n"])
def test_blank_render_to_falls_back_to_chart(chart: Highchart, render_to: str) -> None:
    """Empty and whitespace-only renderTo values bind to `chart`."""

    chart.chart.set("renderTo", render_to)
    assert "const chart = new Highcharts.Chart({" in chart.render("none")


def test_render_to_is_trimmed(chart: Highchart) -> None:
    """Surrounding whitespace is not part of the identifier."""

    chart.chart.set("renderTo", "  container ")
    assert chart.get_render_to() == "container"


def test_raw_expression_leaf_renders_unescaped(chart: Highchart) -> None:
    """An expression renders as code while sibling options stay JSON."""

    chart.tooltip.set("formatter", make_expression("function () {\n    return '<b>' + this.y + '</b>';\n}"))
    chart.tooltip.set("shared", True)

    output = chart.render()
    assert "        tooltip: {\"formatter\":function () { return '<b>' + this.y + '</b>'; },\"shared\":true}" in output


def test_sequence_containers_render_as_arrays(chart: Highchart) -> None:
    """Appended entries render as a JSON array."""

    chart.series.append({"name": "Tokyo", "data": [7.0, 6.9]})
    chart.series.append({"name": "London", "data": [3.9, 4.2]})
    assert 'series: [{"name":"Tokyo","data":[7.0,6.9]},{"name":"London","data":[3.9,4.2]}]' in chart.render()


def test_rendering_is_idempotent(chart: Highchart) -> None:
    """Rendering twice without mutation produces identical text."""

    chart.title.set("text", "Fruit")
    chart.set_colors(["#FF0000"])
    chart.tooltip.set("formatter", make_expression("function () { return this.y; }"))
    assert chart.render() == chart.render()


def test_credits_toggle_leaves_no_stale_fragment(chart: Highchart) -> None:
    """Re-rendering after a change reflects only the current state."""

    chart.credits.set("enabled", True)
    assert re.search(r'"enabled":true', chart.render())
    chart.credits.set("enabled", False)
    output = chart.render()
    assert re.search(r'"enabled":false', output)
    assert '"enabled":true' not in output

    chart.credits.unset("enabled")
    assert "credits:" not in chart.render()


def test_set_option_rejects_unknown_containers(chart: Highchart) -> None:
    """Only the fixed container set is addressable."""

    with pytest.raises(KeyError):
        chart.set_option("navigator", "enabled", True)
    with pytest.raises(KeyError):
        chart.option("colors")


def test_set_colors_validates_entries(chart: Highchart) -> None:
    """Colors must be a sequence of strings."""

    with pytest.raises(SerializationError):
        chart.set_colors(["#FF0000", 3])  # type: ignore[list-item]
    with pytest.raises(SerializationError):
        chart.set_colors("#FF0000")
    assert chart.colors == []


def test_abstract_chart_requires_chart_class() -> None:
    """The base class cannot be rendered without a constructor name."""

    with pytest.raises(TypeError):
        AbstractChart()


def test_export_options_lists_non_empty_containers(chart: Highchart) -> None:
    """export_options returns plain data for populated containers only."""

    chart.lang.set("noData", "Nothing")
    chart.title.set("text", "T")
    chart.set_colors(["#111111"])
    assert chart.export_options() == {
        "lang": {"noData": "Nothing"},
        "colors": ["#111111"],
        "title": {"text": "T"},
    }
    assert list(chart.export_options()) == ["lang", "colors", "title"]


def test_render_logs_debug_record(chart: Highchart, caplog: pytest.LogCaptureFixture) -> None:
    """Rendering emits a debug record naming the constructor."""

    with caplog.at_level(logging.DEBUG, logger="core.charting.render"):
        chart.render()
    assert any("Highcharts.Chart" in record.getMessage() for record in caplog.records)
