"""Data models for structural diff reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from diffpack.core.exceptions import PathParseError
from diffpack.core.paths import Path, parse_path_string
from diffpack.core.values import Value, from_python, to_python
from diffpack.report import filtering
from diffpack.report.exceptions import ReportValidationError
from diffpack.report.types import DETAIL_KINDS, DetailKind


@dataclass(frozen=True, slots=True)
class Detail:
    """One change at a diff location, with optional before/after values."""

    kind: DetailKind
    from_value: Value | None = None
    to_value: Value | None = None

    def __post_init__(self) -> None:
        if self.kind not in DETAIL_KINDS:
            raise ValueError(f"Unsupported detail kind: {self.kind}")

    def values(self) -> tuple[Value, ...]:
        """Present from/to values, in that order."""
        return tuple(value for value in (self.from_value, self.to_value) if value is not None)

    def to_dict(self) -> dict[str, Any]:
        # Absent values are omitted; an explicit null stays a null scalar.
        payload: dict[str, Any] = {"kind": self.kind}
        if self.from_value is not None:
            payload["from"] = to_python(self.from_value)
        if self.to_value is not None:
            payload["to"] = to_python(self.to_value)
        return payload

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Detail":
        if not isinstance(raw, dict):
            raise ReportValidationError("Detail entry must be an object.")
        kind = raw.get("kind")
        if kind not in DETAIL_KINDS:
            raise ReportValidationError(f"Unsupported detail kind: {kind!r}")
        return cls(
            kind=kind,
            from_value=from_python(raw["from"]) if "from" in raw else None,
            to_value=from_python(raw["to"]) if "to" in raw else None,
        )


@dataclass(frozen=True, slots=True)
class Diff:
    """All details recorded at one document location.

    ``path`` is ``None`` when the location is unknown.
    """

    path: Path | None
    details: tuple[Detail, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path.to_dot_style() if self.path is not None else None,
            "details": [detail.to_dict() for detail in self.details],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Diff":
        if not isinstance(raw, dict):
            raise ReportValidationError("Diff entry must be an object.")

        raw_path = raw.get("path")
        path: Path | None = None
        if raw_path is not None:
            if not isinstance(raw_path, str):
                raise ReportValidationError("Diff key 'path' must be a string or null.")
            try:
                path = parse_path_string(raw_path)
            except PathParseError as error:
                raise ReportValidationError(str(error)) from error

        raw_details = raw.get("details", [])
        if not isinstance(raw_details, list):
            raise ReportValidationError("Diff key 'details' must be a list.")

        return cls(
            path=path,
            details=tuple(Detail.from_dict(item) for item in raw_details),
        )


@dataclass(frozen=True, slots=True)
class Report:
    """Ordered diffs between two documents."""

    from_id: str
    to_id: str
    diffs: tuple[Diff, ...] = ()

    def filter(self, *paths: str) -> "Report":
        """Keep only diffs located at one of ``paths``."""
        return filtering.filter_paths(self, *paths)

    def exclude(self, *paths: str) -> "Report":
        """Drop diffs located at any of ``paths``."""
        return filtering.exclude_paths(self, *paths)

    def filter_regexp(self, *patterns: str) -> "Report":
        return filtering.filter_regexp(self, *patterns)

    def exclude_regexp(self, *patterns: str) -> "Report":
        return filtering.exclude_regexp(self, *patterns)

    def ignore_value_changes(self) -> "Report":
        return filtering.ignore_value_changes(self)

    def summary(self) -> dict[str, int]:
        counts = {kind: 0 for kind in DETAIL_KINDS}
        for diff in self.diffs:
            for detail in diff.details:
                counts[detail.kind] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.from_id,
            "to": self.to_id,
            "diffs": [diff.to_dict() for diff in self.diffs],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Report":
        if not isinstance(raw, dict):
            raise ReportValidationError("Report must be an object.")

        for key in ("from", "to"):
            if not isinstance(raw.get(key), str):
                raise ReportValidationError(f"Report key '{key}' must be a string.")

        raw_diffs = raw.get("diffs", [])
        if raw_diffs is None:
            raw_diffs = []
        if not isinstance(raw_diffs, list):
            raise ReportValidationError("Report key 'diffs' must be a list.")

        return cls(
            from_id=raw["from"],
            to_id=raw["to"],
            diffs=tuple(Diff.from_dict(item) for item in raw_diffs),
        )
