"""Path-predicate filtering over diff reports.

A diff survives a filter only if its own path and every sub-path inside its
changed values satisfy the predicate. Filtering never reorders anything, it
only drops diffs.
"""

from __future__ import annotations

from dataclasses import replace
import re
from typing import TYPE_CHECKING, Callable

from diffpack.core.exceptions import PathEnumerationError, PathParseError
from diffpack.core.paths import Path, append_path, list_paths_in_value, parse_path_string
from diffpack.report.exceptions import FilterPatternError
from diffpack.report.types import MODIFICATION
from diffpack.utils.logger import get_logger

if TYPE_CHECKING:
    from diffpack.report.models import Diff, Report

PathPredicate = Callable[[Path | None], bool]

logger = get_logger(__name__)


def build_path_filter(*paths: str) -> PathPredicate:
    """Match paths equal to one of ``paths``.

    Path strings that do not parse are dropped from the match set instead of
    raising; they simply never match.
    """
    wanted = _canonical_path_strings(paths)

    def has_path(path: Path | None) -> bool:
        return path is not None and path.to_dot_style() in wanted

    return has_path


def build_path_exclude(*paths: str) -> PathPredicate:
    """Match paths equal to none of ``paths``. Absent paths always match."""
    unwanted = _canonical_path_strings(paths)

    def lacks_path(path: Path | None) -> bool:
        return path is None or path.to_dot_style() not in unwanted

    return lacks_path


def build_regexp_filter(*patterns: str) -> PathPredicate:
    """Match paths whose canonical string matches at least one pattern.

    Raises:
        FilterPatternError: If any pattern fails to compile.
    """
    regexps = _compile_patterns(patterns)

    def matches_any(path: Path | None) -> bool:
        if path is None:
            return False
        text = path.to_dot_style()
        return any(regexp.search(text) for regexp in regexps)

    return matches_any


def build_regexp_exclude(*patterns: str) -> PathPredicate:
    """Match paths whose canonical string matches none of the patterns.

    Raises:
        FilterPatternError: If any pattern fails to compile.
    """
    regexps = _compile_patterns(patterns)

    def matches_none(path: Path | None) -> bool:
        if path is None:
            return True
        text = path.to_dot_style()
        return not any(regexp.search(text) for regexp in regexps)

    return matches_none


def filter_report(report: Report, predicate: PathPredicate) -> Report:
    """Return a new report with the diffs that fully satisfy ``predicate``."""
    kept = [diff for diff in report.diffs if _diff_satisfies(diff, predicate)]
    logger.debug(
        "filter kept %d of %d diffs (from=%s to=%s)",
        len(kept),
        len(report.diffs),
        report.from_id,
        report.to_id,
    )
    return replace(report, diffs=tuple(kept))


def filter_paths(report: Report, *paths: str) -> Report:
    if not paths:
        return report
    return filter_report(report, build_path_filter(*paths))


def exclude_paths(report: Report, *paths: str) -> Report:
    if not paths:
        return report
    return filter_report(report, build_path_exclude(*paths))


def filter_regexp(report: Report, *patterns: str) -> Report:
    if not patterns:
        return report
    return filter_report(report, build_regexp_filter(*patterns))


def exclude_regexp(report: Report, *patterns: str) -> Report:
    if not patterns:
        return report
    return filter_report(report, build_regexp_exclude(*patterns))


def ignore_value_changes(report: Report) -> Report:
    """Drop every diff that carries at least one modification detail."""
    kept = [
        diff
        for diff in report.diffs
        if not any(detail.kind == MODIFICATION for detail in diff.details)
    ]
    return replace(report, diffs=tuple(kept))


def _diff_satisfies(diff: Diff, predicate: PathPredicate) -> bool:
    if not predicate(diff.path):
        return False

    # An unknown location cannot be extended into sub-paths.
    if diff.path is None:
        return True

    for detail in diff.details:
        for value in detail.values():
            try:
                sub_paths = list_paths_in_value(value)
            except PathEnumerationError as error:
                logger.debug("no sub-paths for %s: %s", diff.path, error)
                continue

            for sub_path in sub_paths:
                if not predicate(append_path(diff.path, sub_path)):
                    return False
    return True


def _canonical_path_strings(paths: tuple[str, ...]) -> frozenset[str]:
    canonical: set[str] = set()
    for raw in paths:
        try:
            canonical.add(parse_path_string(raw).to_dot_style())
        except PathParseError as error:
            logger.debug("dropping unparsable filter path %r: %s", raw, error)
    return frozenset(canonical)


def _compile_patterns(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as error:
            raise FilterPatternError(f"Invalid filter pattern {pattern!r}: {error}") from error
    return tuple(compiled)
