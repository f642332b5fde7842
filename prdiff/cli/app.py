"""Entry point for the prdiff command."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from prdiff.cli.arg_parser import parse_args
from prdiff.cli.output import print_error, print_record, print_summary
from prdiff.config import GitHubSettings, load_config
from prdiff.core.errors import PrdiffError
from prdiff.core.logging import configure_logging
from prdiff.diff import SegmentError, parse_git_diff
from prdiff.github import GitHubClient, parse_pull_request_url

logger = logging.getLogger(__name__)


async def fetch_pull_request_diff(url: str, settings: GitHubSettings) -> str:
    """Resolve a pull request URL to its combined diff text."""
    pr = parse_pull_request_url(url)
    async with GitHubClient(settings) as client:
        return await client.get_pull_request_diff(pr)


def read_source(source: str, settings: GitHubSettings) -> str:
    """Get diff text from a pull request URL, a file, or stdin ('-')."""
    if source.startswith(("https://", "http://")):
        return asyncio.run(fetch_pull_request_diff(source, settings))
    try:
        if source == "-":
            return sys.stdin.read()
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        name = "stdin" if source == "-" else source
        raise PrdiffError(f"Failed to read {name}: {e}") from e


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config)
        settings = config.github
        if args.token:
            settings = settings.model_copy(update={"token": args.token})

        diff_text = read_source(args.source, settings)
    except PrdiffError as e:
        print_error(e.message)
        return 1

    patterns = [*config.ignore_patterns, *args.ignore]
    logger.debug("Ignore patterns: %s", patterns)

    errors: list[SegmentError] = []
    records = parse_git_diff(diff_text, patterns, errors=errors)

    for record in records:
        print_record(record, show_body=args.show_body)
    print_summary(records, dropped=len(errors))
    return 0
