"""Report subsystem exceptions."""


class ReportError(Exception):
    """Base class for report errors."""


class ReportValidationError(ReportError):
    """Report payload is missing fields or has values of the wrong shape."""


class FilterPatternError(ReportError):
    """A filter regular expression failed to compile."""
