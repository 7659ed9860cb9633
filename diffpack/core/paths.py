"""Document paths: parsing, canonical strings and sub-path enumeration."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterator

from diffpack.core.exceptions import PathEnumerationError, PathParseError
from diffpack.core.values import MappingValue, ScalarValue, SequenceValue, Value

PathElement = str | int

_DOT_SEGMENT_RE = re.compile(r"(?P<name>[^.\[\]]*)(?P<indices>(?:\[\d+\])*)")
_INDEX_RE = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True, slots=True)
class Path:
    """Location of a node in a document tree.

    Elements are field names (``str``) or sequence indices (``int``). The
    canonical string form is dot style, e.g. ``a.b[2].c``; the root path is
    the empty string.
    """

    elements: tuple[PathElement, ...] = ()

    @property
    def is_root(self) -> bool:
        return not self.elements

    def append(self, *elements: PathElement) -> "Path":
        return Path(self.elements + tuple(elements))

    def to_dot_style(self) -> str:
        parts: list[str] = []
        for element in self.elements:
            if isinstance(element, int):
                parts.append(f"[{element}]")
            elif parts:
                parts.append(f".{element}")
            else:
                parts.append(element)
        return "".join(parts)

    def to_slash_style(self) -> str:
        return "/" + "/".join(str(element) for element in self.elements)

    def __str__(self) -> str:
        return self.to_dot_style()


ROOT_PATH = Path()


def parse_path_string(text: str) -> Path:
    """Parse a dot style (``a.b[2]``) or slash style (``/a/b/2``) path.

    Raises:
        PathParseError: If the string does not follow either grammar.
    """
    if text.startswith("/"):
        return _parse_slash_style(text)
    return _parse_dot_style(text)


def _parse_slash_style(text: str) -> Path:
    if text == "/":
        return ROOT_PATH

    elements: list[PathElement] = []
    for segment in text[1:].split("/"):
        if not segment:
            raise PathParseError(f"Empty segment in path: {text!r}")
        elements.append(int(segment) if segment.isdigit() else segment)
    return Path(tuple(elements))


def _parse_dot_style(text: str) -> Path:
    if text == "":
        return ROOT_PATH

    elements: list[PathElement] = []
    for position, segment in enumerate(text.split(".")):
        match = _DOT_SEGMENT_RE.fullmatch(segment)
        if match is None:
            raise PathParseError(f"Malformed segment {segment!r} in path: {text!r}")

        name = match.group("name")
        indices = [int(raw) for raw in _INDEX_RE.findall(match.group("indices"))]
        # Only a leading segment may start with an index (root sequence).
        if not name and (position > 0 or not indices):
            raise PathParseError(f"Empty segment in path: {text!r}")

        if name:
            elements.append(name)
        elements.extend(indices)
    return Path(tuple(elements))


def append_path(base: Path, sub_path: Path) -> Path:
    """Concatenate a relative path onto a base path."""
    return Path(base.elements + sub_path.elements)


def list_paths_in_value(value: Value) -> list[Path]:
    """List every sub-path below ``value``, relative to it.

    Each mapping key and sequence index is visited recursively in document
    order. Scalars have no sub-paths. Values must form a tree.

    Raises:
        PathEnumerationError: If the value contains a node that is not part of
            the value model.
    """
    return list(_walk(value, ROOT_PATH))


def _walk(value: Value, path: Path) -> Iterator[Path]:
    if isinstance(value, MappingValue):
        for key, child in value.entries:
            child_path = path.append(str(key))
            yield child_path
            yield from _walk(child, child_path)
        return

    if isinstance(value, SequenceValue):
        for index, child in enumerate(value.items):
            child_path = path.append(index)
            yield child_path
            yield from _walk(child, child_path)
        return

    if isinstance(value, ScalarValue):
        return

    raise PathEnumerationError(
        f"Cannot list paths inside {type(value).__name__} at {path.to_dot_style() or '<root>'}"
    )
