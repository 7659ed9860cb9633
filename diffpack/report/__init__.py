"""Diff report models, filtering and presentation."""

from diffpack.report.exceptions import FilterPatternError, ReportError, ReportValidationError
from diffpack.report.filtering import (
    PathPredicate,
    build_path_exclude,
    build_path_filter,
    build_regexp_exclude,
    build_regexp_filter,
    exclude_paths,
    exclude_regexp,
    filter_paths,
    filter_regexp,
    filter_report,
    ignore_value_changes,
)
from diffpack.report.formatting import render_report, render_report_summary
from diffpack.report.io import read_report, report_from_dict, write_report
from diffpack.report.models import Detail, Diff, Report
from diffpack.report.types import (
    ADDITION,
    DETAIL_KINDS,
    MODIFICATION,
    ORDER_CHANGE,
    REMOVAL,
    DetailKind,
)

__all__ = [
    "ADDITION",
    "REMOVAL",
    "MODIFICATION",
    "ORDER_CHANGE",
    "DETAIL_KINDS",
    "DetailKind",
    "Detail",
    "Diff",
    "Report",
    "PathPredicate",
    "build_path_filter",
    "build_path_exclude",
    "build_regexp_filter",
    "build_regexp_exclude",
    "filter_report",
    "filter_paths",
    "exclude_paths",
    "filter_regexp",
    "exclude_regexp",
    "ignore_value_changes",
    "render_report",
    "render_report_summary",
    "read_report",
    "write_report",
    "report_from_dict",
    "ReportError",
    "ReportValidationError",
    "FilterPatternError",
]
