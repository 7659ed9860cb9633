import re

from diffpack.core import ScalarValue, from_python, parse_path_string
from diffpack.render import RenderConfig
from diffpack.report import Detail, Diff, Report, render_report, render_report_summary

PLAIN = RenderConfig(use_indent_lines=False, bold_keys=False, color_schema=None)

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def _sample_report() -> Report:
    return Report(
        from_id="old.yaml",
        to_id="new.yaml",
        diffs=(
            Diff(
                path=parse_path_string("spec.replicas"),
                details=(
                    Detail(kind="modification", from_value=ScalarValue(1), to_value=ScalarValue(3)),
                ),
            ),
            Diff(
                path=parse_path_string("metadata.labels"),
                details=(Detail(kind="addition", to_value=from_python({"app": "web"})),),
            ),
        ),
    )


def test_render_report_summary_counts_detail_kinds() -> None:
    assert render_report_summary(_sample_report()) == (
        "from=old.yaml to=new.yaml diffs=2 addition=1 removal=0 modification=1 order_change=0"
    )


def test_render_report_lists_paths_details_and_values() -> None:
    rendered = _ANSI_PATTERN.sub("", render_report(_sample_report(), PLAIN))

    assert rendered.split("\n") == [
        "spec.replicas",
        "  ± value change",
        "    - 1",
        "    + 3",
        "",
        "metadata.labels",
        "  + added",
        "    app: web",
    ]


def test_render_report_aligns_multi_line_values_under_marker() -> None:
    report = Report(
        from_id="a",
        to_id="b",
        diffs=(
            Diff(
                path=parse_path_string("env"),
                details=(
                    Detail(
                        kind="modification",
                        from_value=from_python({"x": 1, "y": 2}),
                        to_value=from_python({"x": 2}),
                    ),
                ),
            ),
        ),
    )

    rendered = _ANSI_PATTERN.sub("", render_report(report, PLAIN))

    assert rendered.split("\n")[2:] == ["    - x: 1", "      y: 2", "    + x: 2"]


def test_render_report_labels_root_and_unknown_paths() -> None:
    report = Report(
        from_id="a",
        to_id="b",
        diffs=(
            Diff(path=parse_path_string(""), details=(Detail(kind="order_change"),)),
            Diff(path=None, details=(Detail(kind="removal", from_value=ScalarValue("x")),)),
        ),
    )

    rendered = _ANSI_PATTERN.sub("", render_report(report, PLAIN))

    assert "<root>\n  ⇆ order changed" in rendered
    assert "<unknown>\n  - removed\n    x" in rendered


def test_render_empty_report() -> None:
    assert render_report(Report(from_id="a", to_id="b")) == "no differences found"
