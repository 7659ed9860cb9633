"""Core subsystem exceptions."""


class PathError(Exception):
    """Base class for document path errors."""


class PathParseError(PathError, ValueError):
    """Path string does not follow the dot or slash path grammar."""


class PathEnumerationError(PathError):
    """Sub-paths of a value could not be listed."""


class DocumentLoadError(Exception):
    """A JSON/YAML document could not be read or parsed."""
