"""Django integration tests for the chart preview views."""

from __future__ import annotations

import pytest

from core.demo import build_demo_chart

pytestmark = pytest.mark.integration


def test_chart_preview_renders_demo_chart(client) -> None:
    """The preview page embeds the demo chart wrapped for jQuery by default."""

    response = client.get("/")
    assert response.status_code == 200
    content = response.content.decode("utf-8")
    assert build_demo_chart("chart").render("jquery") in content
    assert 'id="demoChart"' in content
    assert "jquery" in content


def test_chart_preview_stock_without_engine(client) -> None:
    """variant and engine query params select the chart class and wrapper."""

    response = client.get("/", {"variant": "stock", "engine": "none"})
    assert response.status_code == 200
    content = response.content.decode("utf-8")
    assert "const demoChart = new Highcharts.StockChart({" in content
    assert "$(function () {" not in content


def test_chart_preview_mootools(client) -> None:
    """The MooTools wrapper is used when requested."""

    response = client.get("/", {"engine": "mootools"})
    assert response.status_code == 200
    assert "window.addEvent('domready', function () {" in response.content.decode("utf-8")


@pytest.mark.parametrize("params", [{"engine": "dojo"}, {"variant": "map"}])
def test_chart_preview_rejects_unknown_params(client, params) -> None:
    """Unknown engines and variants are client errors."""

    response = client.get("/", params)
    assert response.status_code == 400


def test_chart_preview_is_get_only(client) -> None:
    """Only GET is allowed."""

    response = client.post("/")
    assert response.status_code == 405


def test_chart_options_returns_snapshot(client) -> None:
    """The JSON endpoint returns the demo chart snapshot."""

    response = client.get("/api/chart/", {"variant": "stock"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["variant"] == "stock"
    assert payload["options"]["navigator"] == {"enabled": True}
    assert payload["options"]["tooltip"]["formatter"]["$expr"].startswith("function () {")


def test_chart_options_rejects_unknown_variant(client) -> None:
    """Unknown variants are client errors."""

    response = client.get("/api/chart/", {"variant": "map"})
    assert response.status_code == 400
