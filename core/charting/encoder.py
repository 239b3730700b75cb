"""JSON encoding with raw JavaScript expression support.

Values without expressions go through `json.dumps` unchanged. A single
RawExpression anywhere in a value switches the whole value to the raw-aware
encoder, which emits the same compact JSON around the expressions and splices
each expression's text in unquoted.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from .expression import RawExpression, contains_expression
from .validator import validate_option_value

_SEPARATORS = (",", ":")


def encode_option_value(value: object, *, escape_slashes: bool = False, path: str = "value") -> str:
    """Encode an option value tree as JavaScript source.

    Args:
        value: Scalar, sequence, mapping, or RawExpression tree.
        escape_slashes: Escape every `/` as `\\/` inside JSON strings. Without
            it only `</` is escaped, so string data can never close a
            surrounding `<script>` element.
        path: Location used in error messages.

    Returns:
        Compact JSON text, with raw expressions emitted verbatim.

    Raises:
        SerializationError: When the tree contains a non-representable value.
    """

    validate_option_value(value, path=path)
    if contains_expression(value):
        return _encode_raw_aware(value, escape_slashes=escape_slashes)
    return _dumps(value, escape_slashes=escape_slashes)


def _dumps(value: object, *, escape_slashes: bool) -> str:
    """Strict compact JSON for expression-free values."""

    encoded = json.dumps(value, separators=_SEPARATORS, allow_nan=False, default=_mapping_default)
    # `/` and `<` only ever appear inside string literals in JSON output.
    if escape_slashes:
        return encoded.replace("/", "\\/")
    return encoded.replace("</", "<\\/")


def _mapping_default(value: object) -> object:
    """Let `json.dumps` encode Mapping types other than dict."""

    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _encode_raw_aware(value: object, *, escape_slashes: bool) -> str:
    """Encode a tree containing RawExpression leaves."""

    if isinstance(value, RawExpression):
        return value.text
    if isinstance(value, Mapping):
        members = (
            f"{_dumps(key, escape_slashes=escape_slashes)}:{_encode_raw_aware(item, escape_slashes=escape_slashes)}"
            for key, item in value.items()
        )
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode_raw_aware(item, escape_slashes=escape_slashes) for item in value) + "]"
    return _dumps(value, escape_slashes=escape_slashes)
