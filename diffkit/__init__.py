"""Stable public API surface for diffkit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from diffpack import __version__
from diffpack.core import Path as DocumentPath
from diffpack.core import parse_path_string
from diffpack.render import (
    DEFAULT_COLOR_SCHEMA,
    ColorSchema,
    RenderConfig,
    load_color_schema_from_file,
    render_value,
)
from diffpack.report import Detail, Diff, Report, read_report, render_report

__all__ = [
    "__version__",
    "Report",
    "Diff",
    "Detail",
    "DocumentPath",
    "RenderConfig",
    "DEFAULT_COLOR_SCHEMA",
    "parse_path_string",
    "filter_report",
    "neat",
    "describe",
    "load_report",
]


def load_report(path: str | Path) -> Report:
    """Read a JSON or YAML diff report file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        diffpack.report.ReportValidationError: If the file is not a report.
    """
    return read_report(path)


def filter_report(
    report: Report,
    *,
    paths: tuple[str, ...] = (),
    exclude: tuple[str, ...] = (),
    regexps: tuple[str, ...] = (),
    exclude_regexps: tuple[str, ...] = (),
    ignore_value_changes: bool = False,
) -> Report:
    """Narrow ``report`` with every given selector, applied in argument order.

    Empty selector tuples leave the report unchanged. Malformed path strings
    are ignored; an invalid regular expression raises
    ``diffpack.report.FilterPatternError``.
    """
    result = report.filter(*paths).exclude(*exclude)
    result = result.filter_regexp(*regexps).exclude_regexp(*exclude_regexps)
    if ignore_value_changes:
        result = result.ignore_value_changes()
    return result


def neat(
    value: Any,
    *,
    use_indent_lines: bool = True,
    bold_keys: bool = True,
    color_schema: ColorSchema | None = DEFAULT_COLOR_SCHEMA,
) -> str:
    """Render hierarchical data as neat, colorized YAML text."""
    return render_value(
        value,
        RenderConfig(
            use_indent_lines=use_indent_lines,
            bold_keys=bold_keys,
            color_schema=color_schema,
        ),
    )


def describe(
    report: Report,
    *,
    color_schema_path: str | Path | None = None,
) -> str:
    """Render a report as human-readable text.

    Args:
        report: Report to describe.
        color_schema_path: Optional JSON color schema overrides.
    """
    schema = (
        load_color_schema_from_file(color_schema_path)
        if color_schema_path is not None
        else DEFAULT_COLOR_SCHEMA
    )
    return render_report(report, RenderConfig(color_schema=schema))
