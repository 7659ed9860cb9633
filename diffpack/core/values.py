"""Ordered hierarchical value model shared by filtering and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """A leaf value: null, boolean, number or (possibly multi-line) string."""

    data: Any = None


@dataclass(frozen=True, slots=True)
class SequenceValue:
    """An ordered list of values."""

    items: tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class MappingValue:
    """Ordered key/value pairs with unique keys.

    Order is part of the value: two mappings with the same pairs in a
    different order are different values.
    """

    entries: tuple[tuple[Any, "Value"], ...] = ()

    def __post_init__(self) -> None:
        seen: set[Any] = set()
        for key, _ in self.entries:
            if key in seen:
                raise ValueError(f"Duplicate mapping key: {key!r}")
            seen.add(key)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> tuple[Any, ...]:
        return tuple(key for key, _ in self.entries)

    def get(self, key: Any, default: "Value | None" = None) -> "Value | None":
        for entry_key, entry_value in self.entries:
            if entry_key == key:
                return entry_value
        return default


Value = MappingValue | SequenceValue | ScalarValue

VALUE_TYPES: tuple[type, ...] = (MappingValue, SequenceValue, ScalarValue)


def is_value(obj: Any) -> bool:
    return isinstance(obj, VALUE_TYPES)


def from_python(obj: Any) -> Value:
    """Convert plain Python data into a value tree.

    Dicts keep their insertion order. Lists and tuples become sequences.
    Anything else is wrapped as a scalar unchanged, so unsupported objects
    only fail once something tries to serialize them.
    """
    if is_value(obj):
        return obj
    if isinstance(obj, dict):
        return MappingValue(tuple((key, from_python(value)) for key, value in obj.items()))
    if isinstance(obj, (list, tuple)):
        return SequenceValue(tuple(from_python(item) for item in obj))
    return ScalarValue(obj)


def to_python(value: Value) -> Any:
    """Convert a value tree back into dicts, lists and scalars."""
    if isinstance(value, MappingValue):
        return {key: to_python(child) for key, child in value.entries}
    if isinstance(value, SequenceValue):
        return [to_python(item) for item in value.items]
    if isinstance(value, ScalarValue):
        return value.data
    raise TypeError(f"Unsupported value node: {type(value).__name__}")
