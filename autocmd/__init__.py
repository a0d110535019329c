"""Typed wrapper around the `auto` release-automation CLI."""

__version__ = "0.1.0"
