"""Demo chart builders for the preview page.

The preview renders a fixed, seeded chart so the bundle can be checked end to
end (options, expressions, engines) without any caller-supplied data.
"""

from __future__ import annotations

from typing import Final

from core.charting.expression import make_expression
from core.charting.render import AbstractChart
from core.charting.variants import ChartVariant, create_chart

DEMO_COLORS: Final[tuple[str, ...]] = ("#3366CC", "#DC3912", "#FF9900")

DEMO_CATEGORIES: Final[tuple[str, ...]] = ("Jan", "Feb", "Mar", "Apr", "May", "Jun")

DEMO_SERIES: Final[tuple[tuple[str, tuple[float, ...]], ...]] = (
    ("Tokyo", (7.0, 6.9, 9.5, 14.5, 18.2, 21.5)),
    ("London", (3.9, 4.2, 5.7, 8.5, 11.9, 15.2)),
)

# 2024-01-01T00:00:00Z, one point per day.
DEMO_STOCK_START_MS: Final[int] = 1704067200000
DEMO_STOCK_DAY_MS: Final[int] = 86_400_000
DEMO_STOCK_VALUES: Final[tuple[float, ...]] = (181.2, 183.7, 182.1, 185.9, 187.4, 186.0, 189.3)


def build_demo_chart(variant: ChartVariant | str = ChartVariant.CHART, *, render_to: str = "demoChart") -> AbstractChart:
    """Build the demo chart for a variant.

    Args:
        variant: Chart variant to build.
        render_to: DOM element id / JavaScript identifier for the chart.

    Returns:
        A fully configured chart.

    Raises:
        ValueError: When the variant is unknown.
    """

    chart = create_chart(variant)
    chart.chart.set("renderTo", render_to)
    chart.set_colors(DEMO_COLORS)
    chart.credits.set("enabled", False)
    chart.tooltip.set(
        "formatter",
        make_expression(
            """
            function () {
                return '<b>' + this.series.name + '</b>: ' + this.y;
            }
            """
        ),
    )

    if chart.variant == ChartVariant.STOCK.value:
        chart.title.set("text", "Daily close")
        chart.rangeSelector.update(selected=1, inputEnabled=False)  # type: ignore[attr-defined]
        chart.navigator.set("enabled", True)  # type: ignore[attr-defined]
        chart.series.append(
            {
                "name": "Close",
                "data": [
                    [DEMO_STOCK_START_MS + idx * DEMO_STOCK_DAY_MS, value]
                    for idx, value in enumerate(DEMO_STOCK_VALUES)
                ],
            }
        )
        return chart

    chart.chart.set("type", "line")
    chart.title.set("text", "Monthly Average Temperature")
    chart.subtitle.set("text", "Source: WorldClimate.com")
    chart.xAxis.set("categories", list(DEMO_CATEGORIES))
    chart.yAxis.set("title", {"text": "Temperature (°C)"})
    chart.legend.update(layout="vertical", align="right", verticalAlign="middle")
    for name, values in DEMO_SERIES:
        chart.series.append({"name": name, "data": list(values)})
    return chart
