"""Loading JSON/YAML documents into value trees."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from diffpack.core.exceptions import DocumentLoadError
from diffpack.core.values import Value, from_python

JSON_SUFFIXES = frozenset({".json"})


def load_structured_text(text: str, *, source: str, json_only: bool = False) -> Any:
    """Parse JSON (or YAML, a superset of it) into plain Python data."""
    try:
        if json_only:
            return json.loads(text)
        return yaml.safe_load(text)
    except json.JSONDecodeError as error:
        raise DocumentLoadError(f"Invalid JSON ({source}): {error}") from error
    except yaml.YAMLError as error:
        raise DocumentLoadError(f"Invalid YAML ({source}): {error}") from error


def read_structured_file(path: str | Path) -> Any:
    """Read a ``.json`` file as JSON and anything else as YAML.

    Raises:
        OSError: If the file cannot be read.
        DocumentLoadError: If the file is not UTF-8 text or does not parse.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise DocumentLoadError(f"Not UTF-8 text ({source}): {error}") from error
    return load_structured_text(
        text,
        source=str(source),
        json_only=source.suffix.lower() in JSON_SUFFIXES,
    )


def read_document(path: str | Path) -> Value:
    """Read a document file into a value tree, keeping key order."""
    return from_python(read_structured_file(path))
