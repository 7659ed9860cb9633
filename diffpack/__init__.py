"""Implementation package for diffkit."""

__version__ = "0.1.0"
