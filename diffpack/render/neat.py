"""Neat, colorized YAML-like rendering of hierarchical values.

The renderer walks a value tree and writes indented text in which every
category of token (keys, booleans, numbers, null, multi-line text, empty
structures) is colored according to a color schema. Indentation is drawn
either with vertical guide lines or with plain spaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from diffpack.core.values import MappingValue, ScalarValue, SequenceValue, Value, from_python
from diffpack.render.colors import (
    DEFAULT_COLOR_SCHEMA,
    ColorSchema,
    colorize,
    emphasize,
)
from diffpack.render.exceptions import RenderError

MAX_RENDER_DEPTH = 200

_NO_LINE_WRAP = 2**31 - 1
_DOCUMENT_END_MARKER = "\n..."


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Presentation preferences for :class:`NeatRenderer`.

    A ``color_schema`` of ``None`` (or a schema without a given category)
    leaves the affected text uncolored.
    """

    use_indent_lines: bool = True
    bold_keys: bool = True
    color_schema: ColorSchema | None = field(default_factory=lambda: DEFAULT_COLOR_SCHEMA)


class _ScalarDumper(yaml.SafeDumper):
    """Safe dumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_str(data)


_ScalarDumper.add_representer(str, _represent_str)


class NeatRenderer:
    """Renders values as neat YAML text.

    Each call to :meth:`render` builds its output in a private buffer and
    returns it in one piece; nothing is kept between calls. Input values are
    expected to be trees; nesting deeper than ``MAX_RENDER_DEPTH`` raises
    :class:`RenderError`.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def render(self, obj: Any) -> str:
        """Render a value (or plain dict/list/scalar data) to text.

        Raises:
            RenderError: If a scalar cannot be serialized or the input is
                nested too deeply. No partial output is returned.
        """
        out: list[str] = []
        self._neat(out, "", False, from_python(obj), 0)
        return "".join(out)

    def _colorize(self, text: str, category: str) -> str:
        schema = self.config.color_schema
        if schema is not None:
            color = schema.get(category)
            if color is not None:
                return colorize(text, color)
        return text

    def _indent_unit(self) -> str:
        if self.config.use_indent_lines:
            return self._colorize("│ ", "indent_line")
        return self._colorize("  ", "indent_line")

    def _neat(
        self,
        out: list[str],
        prefix: str,
        skip_indent_on_first_line: bool,
        value: Value,
        depth: int,
    ) -> None:
        if depth > MAX_RENDER_DEPTH:
            raise RenderError(f"Value nesting exceeds {MAX_RENDER_DEPTH} levels")

        if isinstance(value, MappingValue):
            if not value.entries:
                self._neat_empty(out, prefix, skip_indent_on_first_line, "{}")
            else:
                self._neat_mapping(out, prefix, skip_indent_on_first_line, value, depth)
        elif isinstance(value, SequenceValue):
            if not value.items:
                self._neat_empty(out, prefix, skip_indent_on_first_line, "[]")
            else:
                self._neat_sequence(out, prefix, value, depth)
        elif isinstance(value, ScalarValue):
            self._neat_scalar(out, prefix, value)
        else:
            raise RenderError(f"Unsupported value node: {type(value).__name__}")

    def _neat_empty(
        self,
        out: list[str],
        prefix: str,
        skip_indent_on_first_line: bool,
        marker: str,
    ) -> None:
        if not skip_indent_on_first_line:
            out.append(prefix)
        out.append(self._colorize(marker, "empty_structure"))
        out.append("\n")

    def _neat_mapping(
        self,
        out: list[str],
        prefix: str,
        skip_indent_on_first_line: bool,
        mapping: MappingValue,
        depth: int,
    ) -> None:
        for index, (key, child) in enumerate(mapping.entries):
            if not skip_indent_on_first_line or index > 0:
                out.append(prefix)

            key_text = f"{key}:"
            if self.config.bold_keys:
                key_text = emphasize(key_text)
            out.append(self._colorize(key_text, "key"))

            if isinstance(child, MappingValue) and not child.entries:
                out.append(" ")
                out.append(self._colorize("{}", "empty_structure"))
                out.append("\n")
            elif isinstance(child, SequenceValue) and not child.items:
                out.append(" ")
                out.append(self._colorize("[]", "empty_structure"))
                out.append("\n")
            elif isinstance(child, MappingValue):
                out.append("\n")
                self._neat(out, prefix + self._indent_unit(), False, child, depth + 1)
            elif isinstance(child, SequenceValue):
                # Sequence items carry their own indentation via the dash marker.
                out.append("\n")
                self._neat(out, prefix, False, child, depth + 1)
            else:
                out.append(" ")
                self._neat(out, prefix, False, child, depth + 1)

    def _neat_sequence(
        self,
        out: list[str],
        prefix: str,
        sequence: SequenceValue,
        depth: int,
    ) -> None:
        # Every item writes the prefix, even right after an enclosing dash.
        for item in sequence.items:
            out.append(prefix)
            out.append(emphasize("- "))
            self._neat(out, prefix + self._indent_unit(), True, item, depth + 1)

    def _neat_scalar(self, out: list[str], prefix: str, scalar: ScalarValue) -> None:
        data = scalar.data
        if data is None:
            out.append(self._colorize("null", "null"))
            out.append("\n")
            return

        lines = _serialize_scalar(data).split("\n")

        if len(lines) > 1:
            category = "multi_line_text"
        elif isinstance(data, bool):
            category = "bool"
        elif isinstance(data, float):
            category = "float"
        elif isinstance(data, int):
            category = "int"
        else:
            category = "scalar_default"

        for index, line in enumerate(lines):
            if index > 0:
                out.append(prefix)
            out.append(self._colorize(line, category))
            out.append("\n")


def _serialize_scalar(data: Any) -> str:
    try:
        text = yaml.dump(
            data,
            Dumper=_ScalarDumper,
            allow_unicode=True,
            default_flow_style=False,
            width=_NO_LINE_WRAP,
        )
    except yaml.YAMLError as error:
        raise RenderError(
            f"Cannot serialize scalar of type {type(data).__name__}: {error}"
        ) from error

    text = text.strip()
    if text.endswith(_DOCUMENT_END_MARKER):
        text = text[: -len(_DOCUMENT_END_MARKER)].rstrip()
    return text


def render_value(obj: Any, config: RenderConfig | None = None) -> str:
    """Render ``obj`` with a one-off :class:`NeatRenderer`."""
    return NeatRenderer(config).render(obj)


def to_yaml_string(obj: Any) -> str:
    """Render ``obj`` using indent lines, bold keys and the default colors."""
    return NeatRenderer(RenderConfig()).render(obj)
