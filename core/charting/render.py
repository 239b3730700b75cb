"""Rendering of chart option trees into inline JavaScript.

The output is a script fragment meant for a `<script>` block: an optional
DOM-ready wrapper, an optional `Highcharts.setOptions` call, and one
constructor call whose object literal holds every non-empty option container
in a fixed order. Whitespace and line endings are part of the output contract.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, Final

from .conf import get_highcharts_settings
from .encoder import encode_option_value
from .expression import RawExpression
from .options import ChartOption
from .schema import (
    COLORS_FIELD,
    COMMON_BODY_ORDER,
    COMMON_OPTION_NAMES,
    DEFAULT_RENDER_TO,
    ENGINE_OPENERS,
    GLOBAL_OPTION_NAMES,
    Engine,
    coerce_engine,
)
from .validator import OptionValue, SerializationError

logger = logging.getLogger(__name__)

END_LINE: Final[str] = ",\n"
HALF_SPACE: Final[str] = " " * 4
NEW_LINE: Final[str] = "\n"
SPACE: Final[str] = " " * 8


class AbstractChart:
    """Base chart: a fixed set of option containers plus the color list.

    Subclasses supply `chart_class` (the Highcharts constructor name) and may
    declare `extra_option_names`, which are created like the common containers
    and emitted after the common body.
    """

    chart_class: ClassVar[str] = ""
    variant: ClassVar[str] = ""
    extra_option_names: ClassVar[tuple[str, ...]] = ()

    def __init__(self, *, nested_colors: bool | None = None) -> None:
        """Create every option container for this chart.

        Args:
            nested_colors: Override `HIGHCHARTS["NESTED_COLORS"]` for this chart.
        """

        if not self.chart_class:
            raise TypeError(f"{type(self).__name__} must define chart_class.")

        self._options: dict[str, ChartOption] = {name: ChartOption(name) for name in self.option_names()}
        self.colors: list[str] = []
        self.nested_colors = nested_colors

        self.accessibility = self._options["accessibility"]
        self.chart = self._options["chart"]
        self.credits = self._options["credits"]
        self.exporting = self._options["exporting"]
        self.global_ = self._options["global"]
        self.lang = self._options["lang"]
        self.legend = self._options["legend"]
        self.plotOptions = self._options["plotOptions"]
        self.scrollbar = self._options["scrollbar"]
        self.series = self._options["series"]
        self.subtitle = self._options["subtitle"]
        self.title = self._options["title"]
        self.tooltip = self._options["tooltip"]
        self.xAxis = self._options["xAxis"]
        self.yAxis = self._options["yAxis"]

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        """Return every container name this chart owns."""

        return COMMON_OPTION_NAMES + cls.extra_option_names

    @classmethod
    def body_order(cls) -> tuple[str, ...]:
        """Return the emission order of the constructor body."""

        return COMMON_BODY_ORDER + cls.extra_option_names

    def option(self, name: str) -> ChartOption:
        """Return the container registered under `name`.

        Raises:
            KeyError: When this chart has no such container.
        """

        try:
            return self._options[name]
        except KeyError:
            raise KeyError(f"{type(self).__name__} has no option container {name!r}.") from None

    def set_option(self, name: str, key: str, value: Any) -> AbstractChart:
        """Set `key` on the container `name`; returns the chart for chaining."""

        self.option(name).set(key, value)
        return self

    def set_colors(self, colors: Sequence[str]) -> AbstractChart:
        """Replace the chart color list.

        Raises:
            SerializationError: When an entry is not a string.
        """

        if isinstance(colors, str):
            raise SerializationError(path=COLORS_FIELD, value=colors, reason="expected a sequence of color strings")
        for idx, color in enumerate(colors):
            if not isinstance(color, str):
                raise SerializationError(path=f"{COLORS_FIELD}[{idx}]", value=color, reason="color must be a string")
        self.colors = list(colors)
        return self

    def get_render_to(self) -> str:
        """Return the JavaScript identifier the chart instance is bound to."""

        render_to = self.chart.get("renderTo")
        if render_to is None:
            return DEFAULT_RENDER_TO
        text = render_to.text if isinstance(render_to, RawExpression) else str(render_to)
        return text.strip() or DEFAULT_RENDER_TO

    def render(self, engine: Engine | str | None = None) -> str:
        """Render the chart as a JavaScript snippet.

        Args:
            engine: DOM-ready wrapper; defaults to `HIGHCHARTS["ENGINE"]`.

        Returns:
            The script text, stripped of surrounding whitespace.

        Raises:
            ValueError: When `engine` is not a known engine.
        """

        config = get_highcharts_settings()
        resolved = config.engine if engine is None else coerce_engine(engine)
        nested_colors = config.nested_colors if self.nested_colors is None else self.nested_colors

        chart_js = ENGINE_OPENERS[resolved]
        chart_js += self._render_global_options(escape_slashes=config.escape_slashes)
        chart_js += self._render_chart_class()

        fields = self._render_body(nested_colors=nested_colors, escape_slashes=config.escape_slashes)
        if fields:
            chart_js += NEW_LINE + END_LINE.join(fields)
        chart_js += NEW_LINE + HALF_SPACE + "});" + NEW_LINE
        if resolved is not Engine.NONE:
            chart_js += "});" + NEW_LINE

        logger.debug(
            "Rendered Highcharts.%s with %d field(s) (engine=%s).",
            self.chart_class,
            len(fields),
            resolved.value,
        )
        return chart_js.strip()

    def export_options(self) -> dict[str, OptionValue]:
        """Return every non-empty container as plain data.

        Global containers come first, then the constructor body order. The
        color list is returned unwrapped.
        """

        exported: dict[str, OptionValue] = {}
        for name in GLOBAL_OPTION_NAMES + self.body_order():
            if name == COLORS_FIELD:
                if self.colors:
                    exported[COLORS_FIELD] = list(self.colors)
                continue
            option = self._options[name]
            if option.has_data():
                _, data = option.export()
                exported[name] = data
        return exported

    def _render_chart_class(self) -> str:
        render_to = self.get_render_to()
        return NEW_LINE + HALF_SPACE + f"const {render_to} = new Highcharts.{self.chart_class}({{"

    def _render_global_options(self, *, escape_slashes: bool) -> str:
        if not any(self._options[name].has_data() for name in GLOBAL_OPTION_NAMES):
            return ""

        result = NEW_LINE + HALF_SPACE + "Highcharts.setOptions({" + NEW_LINE
        for name in GLOBAL_OPTION_NAMES:
            field = self._encode_option(self._options[name], escape_slashes=escape_slashes)
            if field is not None:
                result += HALF_SPACE + field + END_LINE
        return result + HALF_SPACE + "});"

    def _render_body(self, *, nested_colors: bool, escape_slashes: bool) -> list[str]:
        fields: list[str] = []
        for name in self.body_order():
            if name == COLORS_FIELD:
                field = self._encode_colors(nested_colors=nested_colors, escape_slashes=escape_slashes)
            else:
                field = self._encode_option(self._options[name], escape_slashes=escape_slashes)
            if field is not None:
                fields.append(SPACE + field)
        return fields

    def _encode_option(self, option: ChartOption, *, escape_slashes: bool) -> str | None:
        if not option.has_data():
            return None
        name, data = option.export()
        return f"{name}: {encode_option_value(data, escape_slashes=escape_slashes, path=name)}"

    def _encode_colors(self, *, nested_colors: bool, escape_slashes: bool) -> str | None:
        if not self.colors:
            return None
        encoded = encode_option_value(self.colors, escape_slashes=escape_slashes, path=COLORS_FIELD)
        if nested_colors:
            encoded = f"[{encoded}]"
        return f"{COLORS_FIELD}: {encoded}"
