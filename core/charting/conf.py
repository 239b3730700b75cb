"""Runtime configuration for chart rendering.

Values come from `settings.HIGHCHARTS` when Django settings are configured and
fall back to built-in defaults otherwise, so the charting package stays usable
outside a Django process.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .schema import Engine, coerce_engine

SETTINGS_KEYS: Final[frozenset[str]] = frozenset({"ENGINE", "NESTED_COLORS", "ESCAPE_SLASHES"})


@dataclass(frozen=True, slots=True)
class HighchartsSettings:
    """Resolved rendering configuration.

    Args:
        engine: Default DOM-ready wrapper used when `render()` gets no engine.
        nested_colors: Emit the color list wrapped in one extra array, as the
            historical serializer did (`colors: [["#FF0000", ...]]`).
        escape_slashes: Escape `/` as `\\/` inside JSON strings, as the historical
            serializer did.
    """

    engine: Engine = Engine.JQUERY
    nested_colors: bool = True
    escape_slashes: bool = True


def get_highcharts_settings() -> HighchartsSettings:
    """Return the active HighchartsSettings.

    Raises:
        ImproperlyConfigured: When `settings.HIGHCHARTS` has unknown keys or invalid values.
    """

    if not settings.configured:
        return HighchartsSettings()
    raw = getattr(settings, "HIGHCHARTS", None) or {}
    return parse_highcharts_settings(raw)


def parse_highcharts_settings(raw: Mapping[str, Any]) -> HighchartsSettings:
    """Parse a `HIGHCHARTS` settings mapping.

    Args:
        raw: Mapping with optional `ENGINE`, `NESTED_COLORS`, `ESCAPE_SLASHES` keys.

    Returns:
        HighchartsSettings with defaults for missing keys.

    Raises:
        ImproperlyConfigured: When keys are unknown or values have the wrong type.
    """

    if not isinstance(raw, Mapping):
        raise ImproperlyConfigured("HIGHCHARTS must be a dict.")

    unknown = sorted(set(raw) - SETTINGS_KEYS)
    if unknown:
        raise ImproperlyConfigured(f"Unknown HIGHCHARTS settings: {', '.join(unknown)}.")

    defaults = HighchartsSettings()
    try:
        engine = coerce_engine(raw.get("ENGINE", defaults.engine))
    except ValueError as exc:
        raise ImproperlyConfigured(f"HIGHCHARTS['ENGINE']: {exc}") from exc

    return HighchartsSettings(
        engine=engine,
        nested_colors=_bool_setting(raw, "NESTED_COLORS", default=defaults.nested_colors),
        escape_slashes=_bool_setting(raw, "ESCAPE_SLASHES", default=defaults.escape_slashes),
    )


def _bool_setting(raw: Mapping[str, Any], key: str, *, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ImproperlyConfigured(f"HIGHCHARTS[{key!r}] must be a bool, got {value!r}.")
    return value
