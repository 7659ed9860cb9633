"""Color schemas for neat output.

A schema maps semantic categories (keys, booleans, null, ...) to 24-bit
colors. Schemas are plain immutable values passed to the renderer; there is
no process-wide palette.
"""

from __future__ import annotations

import json
from pathlib import Path
import re
from types import MappingProxyType
from typing import Any, Literal, Mapping

import typer

from diffpack.render.exceptions import ColorSchemaConfigError

Color = tuple[int, int, int]
ColorSchema = Mapping[str, Color]

ColorCategory = Literal[
    "key",
    "indent_line",
    "scalar_default",
    "bool",
    "float",
    "int",
    "multi_line_text",
    "null",
    "empty_structure",
]

COLOR_CATEGORIES: tuple[str, ...] = (
    "key",
    "indent_line",
    "scalar_default",
    "bool",
    "float",
    "int",
    "multi_line_text",
    "null",
    "empty_structure",
)

NAMED_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "indianred": (205, 92, 92),
        "palegreen": (152, 251, 152),
        "moccasin": (255, 228, 181),
        "orange": (255, 165, 0),
        "mediumpurple": (147, 112, 219),
        "aquamarine": (127, 255, 212),
        "darkorange": (255, 140, 0),
        "palegoldenrod": (238, 232, 170),
        "dimgray": (105, 105, 105),
        "lightsteelblue": (176, 196, 222),
        "white": (255, 255, 255),
    }
)

# Loosely based on the Atom editor's YAML colors.
DEFAULT_COLOR_SCHEMA: ColorSchema = MappingProxyType(
    {
        "key": NAMED_COLORS["indianred"],
        "indent_line": (0x24, 0x24, 0x24),
        "scalar_default": NAMED_COLORS["palegreen"],
        "bool": NAMED_COLORS["moccasin"],
        "float": NAMED_COLORS["orange"],
        "int": NAMED_COLORS["mediumpurple"],
        "multi_line_text": NAMED_COLORS["aquamarine"],
        "null": NAMED_COLORS["darkorange"],
        "empty_structure": NAMED_COLORS["palegoldenrod"],
    }
)

_HEX_COLOR_RE = re.compile(r"^#?(?P<hex>[0-9A-Fa-f]{6})$")


def colorize(text: str, color: Color) -> str:
    """Wrap ``text`` in a 24-bit foreground color escape sequence."""
    return typer.style(text, fg=color)


def emphasize(text: str) -> str:
    return typer.style(text, bold=True)


def parse_color(raw: Any) -> Color:
    """Parse ``#rrggbb``, a known color name or an ``[r, g, b]`` list."""
    if isinstance(raw, str):
        match = _HEX_COLOR_RE.match(raw.strip())
        if match:
            value = int(match.group("hex"), 16)
            return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
        named = NAMED_COLORS.get(raw.strip().lower())
        if named is not None:
            return named
        raise ColorSchemaConfigError(f"Unknown color: {raw!r}")

    if isinstance(raw, (list, tuple)) and len(raw) == 3:
        channels = tuple(raw)
        if all(
            isinstance(channel, int) and not isinstance(channel, bool) and 0 <= channel <= 255
            for channel in channels
        ):
            return (channels[0], channels[1], channels[2])

    raise ColorSchemaConfigError(
        f"Color must be '#rrggbb', a color name or [r, g, b] with 0-255 channels: {raw!r}"
    )


def build_color_schema(
    overrides: Mapping[str, Color] | None = None,
    *,
    base_schema: ColorSchema = DEFAULT_COLOR_SCHEMA,
) -> ColorSchema:
    """Return an immutable schema with ``overrides`` applied on top of a base."""
    merged = dict(base_schema)
    for category, color in (overrides or {}).items():
        if category not in COLOR_CATEGORIES:
            raise ColorSchemaConfigError(f"Unsupported color category: {category}")
        merged[category] = color
    return MappingProxyType(merged)


def color_schema_from_config(
    config: Mapping[str, Any],
    *,
    base_schema: ColorSchema = DEFAULT_COLOR_SCHEMA,
) -> ColorSchema:
    """Create a color schema from a config mapping of category to color."""
    unknown = sorted(set(config.keys()) - set(COLOR_CATEGORIES))
    if unknown:
        raise ColorSchemaConfigError(
            "Unsupported color schema categories: " + ", ".join(str(key) for key in unknown)
        )

    overrides: dict[str, Color] = {}
    for category, raw in config.items():
        try:
            overrides[category] = parse_color(raw)
        except ColorSchemaConfigError as error:
            raise ColorSchemaConfigError(f"color schema key '{category}': {error}") from error
    return build_color_schema(overrides, base_schema=base_schema)


def load_color_schema_from_file(
    path: str | Path,
    *,
    base_schema: ColorSchema = DEFAULT_COLOR_SCHEMA,
) -> ColorSchema:
    """Load a color schema from a JSON object file."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise ColorSchemaConfigError(
            f"Invalid color schema JSON ({config_path}): {error}"
        ) from error

    if not isinstance(raw, dict):
        raise ColorSchemaConfigError(f"Color schema must be a JSON object ({config_path}).")

    return color_schema_from_config(raw, base_schema=base_schema)
