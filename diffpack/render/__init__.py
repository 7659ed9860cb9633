"""Neat colorized rendering for hierarchical values."""

from diffpack.render.colors import (
    COLOR_CATEGORIES,
    DEFAULT_COLOR_SCHEMA,
    NAMED_COLORS,
    Color,
    ColorCategory,
    ColorSchema,
    build_color_schema,
    color_schema_from_config,
    colorize,
    load_color_schema_from_file,
    parse_color,
)
from diffpack.render.exceptions import ColorSchemaConfigError, RenderError
from diffpack.render.neat import (
    MAX_RENDER_DEPTH,
    NeatRenderer,
    RenderConfig,
    render_value,
    to_yaml_string,
)

__all__ = [
    "Color",
    "ColorCategory",
    "ColorSchema",
    "COLOR_CATEGORIES",
    "DEFAULT_COLOR_SCHEMA",
    "NAMED_COLORS",
    "build_color_schema",
    "color_schema_from_config",
    "load_color_schema_from_file",
    "parse_color",
    "colorize",
    "RenderError",
    "ColorSchemaConfigError",
    "MAX_RENDER_DEPTH",
    "NeatRenderer",
    "RenderConfig",
    "render_value",
    "to_yaml_string",
]
