import logging

import pytest

from diffpack.core import from_python, parse_path_string
from diffpack.report import Detail, Diff, Report
from diffpack.utils.logger import configure_cli_logging, get_logger


def test_get_logger_prefixes_package_namespace() -> None:
    assert get_logger("report").name == "diffpack.report"
    assert get_logger("diffpack.render").name == "diffpack.render"
    assert get_logger("diffpack").name == "diffpack"


def test_dropped_filter_paths_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    report = Report(
        from_id="a",
        to_id="b",
        diffs=(
            Diff(
                path=parse_path_string("x"),
                details=(Detail(kind="addition", to_value=from_python(1)),),
            ),
        ),
    )

    with caplog.at_level(logging.DEBUG, logger="diffpack"):
        result = report.filter("x", "bad..path")

    assert len(result.diffs) == 1
    assert "dropping unparsable filter path 'bad..path'" in caplog.text


def test_configure_cli_logging_toggles_debug_handler() -> None:
    logger = logging.getLogger("diffpack")

    configure_cli_logging(verbose=True)
    try:
        assert logger.level == logging.DEBUG
        assert sum(1 for handler in logger.handlers if getattr(handler, "_diffpack_cli", False)) == 1
    finally:
        configure_cli_logging(verbose=False)

    assert logger.level == logging.WARNING
    assert not any(getattr(handler, "_diffpack_cli", False) for handler in logger.handlers)
