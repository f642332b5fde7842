"""Argument parsing for the prdiff CLI."""

import argparse
from collections.abc import Sequence
from pathlib import Path


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="prdiff",
        description="Split a pull request's git diff into per-file records",
    )
    parser.add_argument(
        "source",
        help="Pull request URL, path to a diff file, or '-' to read stdin",
    )
    parser.add_argument(
        "--ignore", "-i",
        dest="ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Regex matched against each file's new path; matches are skipped (repeatable)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Config file (default: ./.prdiff.json if present)",
    )
    parser.add_argument(
        "--token",
        help="GitHub token (overrides config and $GITHUB_TOKEN)",
    )
    parser.add_argument(
        "--no-body",
        dest="show_body",
        action="store_false",
        help="Only print file headers, not diff contents",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser.parse_args(argv)
