"""Core value and path models for diffpack."""

from diffpack.core.documents import read_document, read_structured_file
from diffpack.core.exceptions import (
    DocumentLoadError,
    PathEnumerationError,
    PathError,
    PathParseError,
)
from diffpack.core.paths import (
    ROOT_PATH,
    Path,
    PathElement,
    append_path,
    list_paths_in_value,
    parse_path_string,
)
from diffpack.core.values import (
    MappingValue,
    ScalarValue,
    SequenceValue,
    Value,
    from_python,
    is_value,
    to_python,
)

__all__ = [
    "MappingValue",
    "SequenceValue",
    "ScalarValue",
    "Value",
    "from_python",
    "to_python",
    "is_value",
    "Path",
    "PathElement",
    "ROOT_PATH",
    "parse_path_string",
    "append_path",
    "list_paths_in_value",
    "PathError",
    "PathParseError",
    "PathEnumerationError",
    "DocumentLoadError",
    "read_document",
    "read_structured_file",
]
