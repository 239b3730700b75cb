"""Pytest fixtures shared across chart tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from core.charting.variants import Highchart, Highstock


@pytest.fixture(autouse=True)
def default_highcharts_settings(settings):
    """Pin HIGHCHARTS to its defaults so environment variables cannot leak into tests."""

    settings.HIGHCHARTS = {"ENGINE": "jquery", "NESTED_COLORS": True, "ESCAPE_SLASHES": True}
    return settings


@pytest.fixture
def chart() -> Highchart:
    """Return an empty regular chart."""

    return Highchart()


@pytest.fixture
def stock_chart() -> Highstock:
    """Return an empty stock chart."""

    return Highstock()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no Django request/response or IO.
    - `integration`: tests touching templates, views, commands, or files.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
