"""Named option containers.

A `ChartOption` is one top-level key of the Highcharts configuration object
(`title`, `legend`, `xAxis`, ...). It holds either keyed options or, for
families the library also accepts as arrays (`series`, multiple axes), a list
of entries. The two modes are exclusive.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from .validator import OptionValue, validate_option_value


class ChartOption:
    """A named bag of option values destined for one field of the output."""

    __slots__ = ("_name", "_data", "_entries")

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("ChartOption.name must be a non-empty string.")
        self._name = name
        self._data: dict[str, OptionValue] = {}
        self._entries: list[OptionValue] = []

    def __repr__(self) -> str:
        return f"ChartOption({self._name!r}, keys={sorted(self._data)!r}, entries={len(self._entries)})"

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data) or len(self._entries)

    @property
    def name(self) -> str:
        return self._name

    def set(self, key: str, value: Any) -> ChartOption:
        """Store `value` under `key`, replacing any previous value.

        Args:
            key: Option key (e.g. `enabled`, `position`).
            value: Any OptionValue tree.

        Returns:
            This container, for chaining.

        Raises:
            ValueError: When the key is empty or the container holds entries.
            SerializationError: When the value is not representable.
        """

        if not isinstance(key, str) or not key:
            raise ValueError(f"ChartOption[{self._name}] keys must be non-empty strings, got {key!r}.")
        if self._entries:
            raise ValueError(f"ChartOption[{self._name}] holds a sequence of entries; clear() it before setting keys.")
        validate_option_value(value, path=f"{self._name}.{key}")
        self._data[key] = value
        return self

    def update(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> ChartOption:
        """Set several keys at once from a mapping and/or keyword arguments."""

        merged = dict(options or {})
        merged.update(kwargs)
        for key, value in merged.items():
            self.set(key, value)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def unset(self, key: str) -> None:
        self._data.pop(key, None)

    def append(self, value: Any) -> ChartOption:
        """Append one entry, switching the container to sequence mode.

        Raises:
            ValueError: When the container already holds keyed options.
            SerializationError: When the value is not representable.
        """

        if self._data:
            raise ValueError(f"ChartOption[{self._name}] holds keyed options; clear() it before appending entries.")
        validate_option_value(value, path=f"{self._name}[{len(self._entries)}]")
        self._entries.append(value)
        return self

    def clear(self) -> None:
        self._data.clear()
        self._entries.clear()

    def has_data(self) -> bool:
        return bool(self._data) or bool(self._entries)

    def export(self) -> tuple[str, dict[str, OptionValue] | list[OptionValue]]:
        """Return the container name and a snapshot of its data.

        Keyed data comes back with top-level keys sorted, so the emitted order
        does not depend on the order options were set in. Nested values are
        deep-copied and keep their own order.
        """

        if self._entries:
            return self._name, copy.deepcopy(self._entries)
        snapshot = {key: copy.deepcopy(self._data[key]) for key in sorted(self._data)}
        return self._name, snapshot
