"""Validation for option values.

Option values are checked when they are stored, so a bad value fails next to
the call that introduced it rather than later during rendering.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TypeAlias, Union

from .expression import RawExpression

Scalar: TypeAlias = Union[None, bool, int, float, str]
OptionValue: TypeAlias = Union[
    Scalar,
    RawExpression,
    list["OptionValue"],
    tuple["OptionValue", ...],
    Mapping[str, "OptionValue"],
]


class SerializationError(ValueError):
    """Raised when a value cannot be represented in an option tree."""

    def __init__(self, *, path: str, value: object, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            path: Dotted location of the offending value (e.g. `credits.position.x`).
            value: The rejected value.
            reason: Optional detail appended to the message.
        """

        detail = reason or f"unsupported type {type(value).__name__}"
        super().__init__(f"Cannot serialize option value at {path!r}: {detail}.")
        self.path = path
        self.value = value


def validate_option_value(value: object, *, path: str) -> None:
    """Validate that `value` is a Scalar, Sequence, Mapping, or RawExpression tree.

    Args:
        value: Candidate option value.
        path: Location used in error messages.

    Raises:
        SerializationError: When any node of the tree is not representable.
    """

    if value is None or isinstance(value, (bool, int, str)):
        return
    if isinstance(value, RawExpression):
        if not isinstance(value.text, str):
            raise SerializationError(path=path, value=value, reason="expression text must be a string")
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(path=path, value=value, reason="non-finite float")
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise SerializationError(
                    path=path, value=value, reason=f"mapping key {key!r} is not a string"
                )
            validate_option_value(item, path=f"{path}.{key}")
        return
    if isinstance(value, (list, tuple)):
        for idx, item in enumerate(value):
            validate_option_value(item, path=f"{path}[{idx}]")
        return
    raise SerializationError(path=path, value=value)
