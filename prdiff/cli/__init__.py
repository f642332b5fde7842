"""Command-line interface for prdiff."""

from prdiff.cli.app import main

__all__ = ["main"]
