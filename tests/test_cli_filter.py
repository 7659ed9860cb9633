import json
from pathlib import Path

from typer.testing import CliRunner

from diffpack.cli.app import app
from diffpack.report import read_report


def _write_report(path: Path) -> Path:
    path.write_text(
        json.dumps(
            {
                "from": "old.yaml",
                "to": "new.yaml",
                "diffs": [
                    {
                        "path": "spec.replicas",
                        "details": [{"kind": "modification", "from": 1, "to": 3}],
                    },
                    {
                        "path": "metadata.labels",
                        "details": [{"kind": "addition", "to": {"app": "web"}}],
                    },
                    {
                        "path": "spec.ports[0]",
                        "details": [{"kind": "removal", "from": 8080}],
                    },
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_cli_filter_text_output(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["--no-color", "filter", str(report_path), "--filter", "spec.replicas"],
    )

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == (
        "from=old.yaml to=new.yaml diffs=1 addition=0 removal=0 modification=1 order_change=0"
    )
    assert lines[1:] == ["spec.replicas", "  ± value change", "    - 1", "    + 3"]


def test_cli_filter_json_output(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["filter", str(report_path), "--exclude-regexp", r"^spec\.", "--json"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "ok"
    assert payload["total_diffs"] == 3
    assert payload["kept_diffs"] == 1
    assert [diff["path"] for diff in payload["report"]["diffs"]] == ["metadata.labels"]


def test_cli_filter_ignore_value_changes_and_out_file(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    out_path = tmp_path / "filtered.json"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "--quiet",
            "filter",
            str(report_path),
            "--ignore-value-changes",
            "--out",
            str(out_path),
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == ""
    filtered = read_report(out_path)
    assert [str(diff.path) for diff in filtered.diffs] == ["metadata.labels", "spec.ports[0]"]


def test_cli_filter_without_selectors_keeps_everything(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    runner = CliRunner()
    result = runner.invoke(app, ["filter", str(report_path), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert payload["kept_diffs"] == 3


def test_cli_filter_invalid_regexp_is_usage_error(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    runner = CliRunner()
    result = runner.invoke(app, ["filter", str(report_path), "--filter-regexp", "("])

    assert result.exit_code == 2
    assert "filter failed: Invalid filter pattern" in result.output


def test_cli_filter_invalid_regexp_json_payload(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["filter", str(report_path), "--exclude-regexp", "[", "--json"],
    )

    assert result.exit_code == 2
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["exit_code"] == 2


def test_cli_filter_missing_report(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["filter", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "filter failed" in result.output


def test_cli_filter_color_schema_errors(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    schema_path = tmp_path / "colors.json"
    schema_path.write_text(json.dumps({"unknown": "#ffffff"}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["filter", str(report_path), "--color-schema", str(schema_path)],
    )

    assert result.exit_code == 1
    assert "Unsupported color schema categories" in result.output


def test_cli_filter_report_that_is_not_utf8(tmp_path: Path) -> None:
    report_path = tmp_path / "report.yaml"
    report_path.write_bytes(b"from: \xff\xfe\n")
    runner = CliRunner()
    result = runner.invoke(app, ["filter", str(report_path)])

    assert result.exit_code == 1
    assert "filter failed: Not UTF-8 text" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_cli_filter_report_path_is_a_directory(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["filter", str(tmp_path), "--json"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, IsADirectoryError)
    payload = json.loads(result.stdout)
    assert payload["status"] == "error"
    assert payload["report_path"] == str(tmp_path)


def test_cli_filter_unwritable_out_path(tmp_path: Path) -> None:
    report_path = _write_report(tmp_path / "report.json")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    out_path = blocker / "filtered.json"
    runner = CliRunner()
    result = runner.invoke(app, ["filter", str(report_path), "--out", str(out_path)])

    assert result.exit_code == 1
    assert "filter failed" in result.output
    assert not isinstance(result.exception, OSError)
    assert blocker.read_text(encoding="utf-8") == "not a directory"
