"""Report file reading and writing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from diffpack.core.documents import read_structured_file
from diffpack.core.exceptions import DocumentLoadError
from diffpack.report.exceptions import ReportValidationError
from diffpack.report.models import Report


def report_from_dict(raw: dict[str, Any]) -> Report:
    return Report.from_dict(raw)


def read_report(path: str | Path) -> Report:
    """Read a JSON or YAML report file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ReportValidationError: If the file is not a well-formed report.
    """
    try:
        raw = read_structured_file(path)
    except DocumentLoadError as error:
        raise ReportValidationError(str(error)) from error
    return Report.from_dict(raw)


def write_report(report: Report, path: str | Path) -> dict[str, Any]:
    """Write ``report`` as JSON and return the written payload."""
    payload = report.to_dict()
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return payload
