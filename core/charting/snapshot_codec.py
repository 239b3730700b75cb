"""Snapshot encoding/decoding helpers for chart option trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

from .expression import RawExpression
from .render import AbstractChart
from .schema import COLORS_FIELD
from .variants import create_chart

SNAPSHOT_VERSION: Final[str] = "highcharts_snapshot_v1"
EXPRESSION_KEY: Final[str] = "$expr"
# Wraps option mappings whose keys would otherwise read as a marker.
LITERAL_KEY: Final[str] = "$literal"
_MARKER_KEYS: Final[tuple[frozenset[str], ...]] = (frozenset({EXPRESSION_KEY}), frozenset({LITERAL_KEY}))


def encode_chart(chart: AbstractChart) -> dict[str, Any]:
    """Encode a chart into a JSON-serializable dictionary.

    Args:
        chart: Chart to encode.

    Returns:
        Dict payload; raw expressions are stored as `{"$expr": text}` and option
        mappings shaped like a marker as `{"$literal": mapping}`.
    """

    options = chart.export_options()
    colors = options.pop(COLORS_FIELD, [])
    return {
        "version": SNAPSHOT_VERSION,
        "variant": chart.variant,
        "options": {name: _encode_value(value) for name, value in options.items()},
        "colors": list(cast(list[str], colors)),
    }


def decode_chart(payload: Mapping[str, Any]) -> AbstractChart:
    """Decode a chart from a payload produced by `encode_chart`.

    Args:
        payload: Snapshot dictionary.

    Returns:
        A new chart of the stored variant with every option restored.

    Raises:
        ValueError: When the payload is malformed or names unknown options/variants.
    """

    if not isinstance(payload, Mapping):
        raise ValueError("Chart snapshot must be a JSON object.")

    version = payload.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"Unsupported chart snapshot version: {version!r}.")

    chart = create_chart(str(payload.get("variant") or "chart"))

    options = payload.get("options")
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise ValueError("Chart snapshot 'options' must be an object.")
    for name, data in options.items():
        try:
            option = chart.option(name)
        except KeyError as exc:
            raise ValueError(f"Unknown option container in snapshot: {name!r}.") from exc
        decoded = _decode_value(data)
        if isinstance(decoded, Mapping):
            option.update(decoded)
        elif isinstance(decoded, list):
            for entry in decoded:
                option.append(entry)
        else:
            raise ValueError(f"Snapshot option {name!r} must be an object or an array.")

    colors = payload.get("colors")
    if colors is None:
        colors = []
    if not isinstance(colors, list):
        raise ValueError("Chart snapshot 'colors' must be an array.")
    chart.set_colors(colors)
    return chart


def _encode_value(value: object) -> Any:
    if isinstance(value, RawExpression):
        return {EXPRESSION_KEY: value.text}
    if isinstance(value, Mapping):
        encoded = {key: _encode_value(item) for key, item in value.items()}
        if frozenset(value) in _MARKER_KEYS:
            return {LITERAL_KEY: encoded}
        return encoded
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    return value


def _decode_value(value: object) -> Any:
    if isinstance(value, Mapping):
        if set(value) == {EXPRESSION_KEY} and isinstance(value[EXPRESSION_KEY], str):
            return RawExpression(value[EXPRESSION_KEY])
        if set(value) == {LITERAL_KEY} and isinstance(value[LITERAL_KEY], Mapping):
            return {key: _decode_value(item) for key, item in value[LITERAL_KEY].items()}
        return {key: _decode_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_decode_value(item) for item in value]
    return value
