"""CLI-friendly rendering for diff reports."""

from __future__ import annotations

from diffpack.core.paths import Path
from diffpack.render.colors import emphasize
from diffpack.render.neat import NeatRenderer, RenderConfig
from diffpack.report.models import Detail, Report

_KIND_HEADERS = {
    "addition": "+ added",
    "removal": "- removed",
    "modification": "± value change",
    "order_change": "⇆ order changed",
}

_DETAIL_INDENT = "  "
_VALUE_INDENT = "    "


def render_report_summary(report: Report) -> str:
    summary = report.summary()
    return (
        f"from={report.from_id} to={report.to_id} diffs={len(report.diffs)} "
        f"addition={summary['addition']} removal={summary['removal']} "
        f"modification={summary['modification']} order_change={summary['order_change']}"
    )


def render_report(report: Report, config: RenderConfig | None = None) -> str:
    """Render each diff location followed by its details and values."""
    if not report.diffs:
        return "no differences found"

    renderer = NeatRenderer(config)
    lines: list[str] = []
    for diff in report.diffs:
        if lines:
            lines.append("")
        lines.append(emphasize(_path_label(diff.path)))
        for detail in diff.details:
            lines.append(f"{_DETAIL_INDENT}{_KIND_HEADERS[detail.kind]}")
            lines.extend(_render_detail_values(renderer, detail))

    return "\n".join(lines)


def _path_label(path: Path | None) -> str:
    if path is None:
        return "<unknown>"
    if path.is_root:
        return "<root>"
    return path.to_dot_style()


def _render_detail_values(renderer: NeatRenderer, detail: Detail) -> list[str]:
    both = detail.from_value is not None and detail.to_value is not None
    lines: list[str] = []
    for marker, value in (("- ", detail.from_value), ("+ ", detail.to_value)):
        if value is None:
            continue
        rendered = renderer.render(value).rstrip("\n").split("\n")
        for index, line in enumerate(rendered):
            if not both:
                lines.append(f"{_VALUE_INDENT}{line}")
            elif index == 0:
                lines.append(f"{_VALUE_INDENT}{marker}{line}")
            else:
                lines.append(f"{_VALUE_INDENT}  {line}")
    return lines
