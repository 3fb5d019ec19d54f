"""Command-line interface for the record store."""

from rawdb.cli.main import cli, main

__all__ = ["cli", "main"]
