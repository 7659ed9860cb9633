"""Command line interface for diffkit."""
