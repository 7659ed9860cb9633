"""Render subsystem exceptions."""


class RenderError(Exception):
    """A value could not be rendered as text."""


class ColorSchemaConfigError(ValueError):
    """Raised when a color schema config payload is invalid."""
