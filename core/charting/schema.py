"""Schema types for Highcharts option trees.

A chart is a fixed set of named option containers. The names and the order in
which they are emitted are data, not control flow, so a chart variant can
extend the body without touching the renderer.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

COMMON_OPTION_NAMES: Final[tuple[str, ...]] = (
    "chart",
    "credits",
    "exporting",
    "global",
    "lang",
    "legend",
    "plotOptions",
    "scrollbar",
    "series",
    "subtitle",
    "title",
    "tooltip",
    "xAxis",
    "yAxis",
    "accessibility",
)

# Containers emitted through `Highcharts.setOptions` rather than the constructor.
GLOBAL_OPTION_NAMES: Final[tuple[str, ...]] = ("global", "lang")

COLORS_FIELD: Final[str] = "colors"

# Emission order of the constructor body. `colors` is the bare color list.
COMMON_BODY_ORDER: Final[tuple[str, ...]] = (
    "chart",
    COLORS_FIELD,
    "credits",
    "exporting",
    "legend",
    "scrollbar",
    "subtitle",
    "title",
    "xAxis",
    "yAxis",
    "plotOptions",
    "series",
    "tooltip",
    "accessibility",
)

DEFAULT_RENDER_TO: Final[str] = "chart"


class Engine(str, Enum):
    """DOM-ready wrapping style applied around the constructor call."""

    JQUERY = "jquery"
    MOOTOOLS = "mootools"
    NONE = "none"


ENGINE_OPENERS: Final[dict[Engine, str]] = {
    Engine.JQUERY: "$(function () {",
    Engine.MOOTOOLS: "window.addEvent('domready', function () {",
    Engine.NONE: "",
}


def coerce_engine(value: Engine | str | None) -> Engine:
    """Coerce a user-supplied engine value into an Engine.

    Args:
        value: Engine member, its string value, or an empty value for no wrapper.

    Returns:
        The matching Engine.

    Raises:
        ValueError: When the string is not a known engine.
    """

    if isinstance(value, Engine):
        return value
    if value is None or value == "":
        return Engine.NONE
    normalized = str(value).strip().casefold()
    try:
        return Engine(normalized)
    except ValueError:
        allowed = ", ".join(engine.value for engine in Engine)
        raise ValueError(f"Unknown engine {value!r}; expected one of: {allowed}.") from None
