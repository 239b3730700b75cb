"""Raw JavaScript expressions embedded in option trees.

Highcharts accepts callbacks (formatters, event handlers) where it otherwise
takes data. Those are carried as `RawExpression` markers and spliced into the
output unquoted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class RawExpression:
    """Source text emitted verbatim in place of a JSON value.

    Args:
        text: Pre-formatted JavaScript source, assumed well-formed.
    """

    text: str

    def __str__(self) -> str:
        return self.text


def make_expression(text: str) -> RawExpression:
    """Wrap JavaScript source as a RawExpression.

    Leading/trailing whitespace is trimmed and every internal whitespace run is
    collapsed to a single space, so multi-line callbacks render on one line.

    Args:
        text: JavaScript source, e.g. `function () { return this.y; }`.

    Returns:
        RawExpression holding the normalized text.
    """

    return RawExpression(_WHITESPACE_RUN.sub(" ", text.strip()))


def contains_expression(value: object) -> bool:
    """Return True when `value` is, or transitively contains, a RawExpression."""

    if isinstance(value, RawExpression):
        return True
    if isinstance(value, Mapping):
        return any(contains_expression(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return any(contains_expression(item) for item in value)
    return False
