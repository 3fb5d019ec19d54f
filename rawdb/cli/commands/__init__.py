"""CLI commands module."""

from . import rows

__all__ = ["rows"]
