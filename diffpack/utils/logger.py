"""Logging helpers for diffpack.

Library modules log through standard library loggers under the ``diffpack``
namespace and never install handlers themselves.
"""

from __future__ import annotations

import logging
import sys

_ROOT_LOGGER_NAME = "diffpack"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``diffpack``.

    Example:
        >>> get_logger("report").name
        'diffpack.report'
    """
    if not (name == _ROOT_LOGGER_NAME or name.startswith(f"{_ROOT_LOGGER_NAME}.")):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_cli_logging(*, verbose: bool) -> None:
    """Attach a stderr handler to the package logger for CLI runs."""
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_diffpack_cli", False):
            logger.removeHandler(handler)

    if not verbose:
        logger.setLevel(logging.WARNING)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._diffpack_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
