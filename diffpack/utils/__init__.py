"""Small shared utilities for diffpack."""

from diffpack.utils.logger import get_logger

__all__ = ["get_logger"]
