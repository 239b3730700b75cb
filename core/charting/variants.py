"""Concrete chart variants.

A variant only declares the Highcharts constructor it calls and any option
containers it adds after the common body.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

from .render import AbstractChart


class ChartVariant(str, Enum):
    """Supported chart variants."""

    CHART = "chart"
    STOCK = "stock"


class Highchart(AbstractChart):
    """A regular chart (`new Highcharts.Chart`)."""

    chart_class = "Chart"
    variant = ChartVariant.CHART.value
    extra_option_names = ("drilldown", "noData", "pane")

    def __init__(self, *, nested_colors: bool | None = None) -> None:
        super().__init__(nested_colors=nested_colors)
        self.drilldown = self.option("drilldown")
        self.noData = self.option("noData")
        self.pane = self.option("pane")


class Highstock(AbstractChart):
    """A stock chart (`new Highcharts.StockChart`) with navigator and range selector."""

    chart_class = "StockChart"
    variant = ChartVariant.STOCK.value
    extra_option_names = ("navigator", "rangeSelector")

    def __init__(self, *, nested_colors: bool | None = None) -> None:
        super().__init__(nested_colors=nested_colors)
        self.navigator = self.option("navigator")
        self.rangeSelector = self.option("rangeSelector")


CHART_CLASSES: Final[dict[ChartVariant, type[AbstractChart]]] = {
    ChartVariant.CHART: Highchart,
    ChartVariant.STOCK: Highstock,
}


def create_chart(variant: ChartVariant | str, **kwargs: Any) -> AbstractChart:
    """Instantiate the chart class for `variant`.

    Args:
        variant: ChartVariant or its string value (`chart`, `stock`).
        **kwargs: Forwarded to the chart constructor.

    Returns:
        A new, empty chart.

    Raises:
        ValueError: When the variant is unknown.
    """

    try:
        resolved = ChartVariant(variant)
    except ValueError:
        allowed = ", ".join(v.value for v in ChartVariant)
        raise ValueError(f"Unknown chart variant {variant!r}; expected one of: {allowed}.") from None
    return CHART_CLASSES[resolved](**kwargs)
