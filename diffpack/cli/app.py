import json
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Any

import typer

from diffpack.core import DocumentLoadError, read_document
from diffpack.render import (
    DEFAULT_COLOR_SCHEMA,
    ColorSchema,
    ColorSchemaConfigError,
    RenderConfig,
    RenderError,
    load_color_schema_from_file,
    render_value,
)
from diffpack.report import (
    FilterPatternError,
    Report,
    ReportError,
    read_report,
    render_report,
    render_report_summary,
    write_report,
)
from diffpack.utils.logger import configure_cli_logging, get_logger

app = typer.Typer(help="diffkit CLI")

logger = get_logger(__name__)


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("diffkit")
    except PackageNotFoundError:
        from diffpack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show diffkit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug diagnostics to stderr.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json
    configure_cli_logging(verbose=verbose)


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=False)


def _fail(
    command: str,
    error: Exception,
    *,
    code: int,
    json_output: bool = False,
    extra: dict[str, Any] | None = None,
) -> typer.Exit:
    message = f"{command} failed: {error}"
    if json_output:
        _echo_json(
            {
                "status": "error",
                "exit_code": code,
                "message": message,
                **(extra or {}),
            }
        )
    else:
        _echo(message, err=True)
    return typer.Exit(code=code)


def _load_color_schema(config_path: Path | None) -> ColorSchema:
    if config_path is None:
        return DEFAULT_COLOR_SCHEMA
    try:
        return load_color_schema_from_file(config_path)
    except FileNotFoundError as error:
        raise ColorSchemaConfigError(f"color schema not found: {config_path}") from error


def _apply_filters(
    report: Report,
    *,
    filters: list[str],
    excludes: list[str],
    filter_patterns: list[str],
    exclude_patterns: list[str],
    ignore_value_changes: bool,
) -> Report:
    result = report.filter(*filters).exclude(*excludes)
    result = result.filter_regexp(*filter_patterns).exclude_regexp(*exclude_patterns)
    if ignore_value_changes:
        result = result.ignore_value_changes()
    return result


@app.command(name="filter")
def filter_command(
    report_path: Path = typer.Argument(..., help="Path to a JSON or YAML diff report."),
    filters: list[str] | None = typer.Option(
        None,
        "--filter",
        help="Keep only differences at this path (repeatable).",
    ),
    excludes: list[str] | None = typer.Option(
        None,
        "--exclude",
        help="Drop differences at this path (repeatable).",
    ),
    filter_patterns: list[str] | None = typer.Option(
        None,
        "--filter-regexp",
        help="Keep only differences whose path matches this regex (repeatable).",
    ),
    exclude_patterns: list[str] | None = typer.Option(
        None,
        "--exclude-regexp",
        help="Drop differences whose path matches this regex (repeatable).",
    ),
    ignore_value_changes: bool = typer.Option(
        False,
        "--ignore-value-changes",
        help="Drop differences that contain a value modification.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable filter output.",
    ),
    out: Path | None = typer.Option(
        None,
        "--out",
        help="Write the filtered report as JSON to this path.",
    ),
    indent_lines: bool = typer.Option(
        True,
        "--indent-lines/--plain-indent",
        help="Draw vertical indent guides (or plain spaces).",
    ),
    bold_keys: bool = typer.Option(
        True,
        "--bold-keys/--no-bold-keys",
        help="Emphasize mapping keys.",
    ),
    color_schema_path: Path | None = typer.Option(
        None,
        "--color-schema",
        help="Path to JSON color schema overrides.",
    ),
) -> None:
    """Narrow a diff report to the differences matching path filters."""
    try:
        report = read_report(report_path)
        color_schema = _load_color_schema(color_schema_path)
    except (ReportError, ColorSchemaConfigError, OSError) as error:
        raise _fail(
            "filter",
            error,
            code=1,
            json_output=json_output,
            extra={"report_path": str(report_path)},
        ) from error

    try:
        result = _apply_filters(
            report,
            filters=filters or [],
            excludes=excludes or [],
            filter_patterns=filter_patterns or [],
            exclude_patterns=exclude_patterns or [],
            ignore_value_changes=ignore_value_changes,
        )
    except FilterPatternError as error:
        raise _fail(
            "filter",
            error,
            code=2,
            json_output=json_output,
            extra={"report_path": str(report_path)},
        ) from error

    logger.debug("filtered %s: %d -> %d diffs", report_path, len(report.diffs), len(result.diffs))

    if out is not None:
        try:
            write_report(result, out)
        except OSError as error:
            raise _fail(
                "filter",
                error,
                code=1,
                json_output=json_output,
                extra={"report_path": str(report_path), "out_path": str(out)},
            ) from error

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "message": "filter completed",
                "report_path": str(report_path),
                "out_path": str(out) if out is not None else None,
                "total_diffs": len(report.diffs),
                "kept_diffs": len(result.diffs),
                "report": result.to_dict(),
            }
        )
        return

    config = RenderConfig(
        use_indent_lines=indent_lines,
        bold_keys=bold_keys,
        color_schema=color_schema,
    )
    try:
        rendered = render_report(result, config)
    except RenderError as error:
        raise _fail("filter", error, code=1) from error

    _echo(render_report_summary(result))
    _echo(rendered)


@app.command()
def render(
    document: Path = typer.Argument(..., help="Path to a JSON or YAML document."),
    indent_lines: bool = typer.Option(
        True,
        "--indent-lines/--plain-indent",
        help="Draw vertical indent guides (or plain spaces).",
    ),
    bold_keys: bool = typer.Option(
        True,
        "--bold-keys/--no-bold-keys",
        help="Emphasize mapping keys.",
    ),
    color_schema_path: Path | None = typer.Option(
        None,
        "--color-schema",
        help="Path to JSON color schema overrides.",
    ),
) -> None:
    """Print a document as neat, colorized YAML."""
    try:
        value = read_document(document)
        color_schema = _load_color_schema(color_schema_path)
    except (DocumentLoadError, ColorSchemaConfigError, OSError) as error:
        raise _fail("render", error, code=1) from error

    config = RenderConfig(
        use_indent_lines=indent_lines,
        bold_keys=bold_keys,
        color_schema=color_schema,
    )
    try:
        rendered = render_value(value, config)
    except RenderError as error:
        raise _fail("render", error, code=1) from error

    _echo(rendered.rstrip("\n"))


def main() -> None:
    app()
