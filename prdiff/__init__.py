"""prdiff - split pull request diffs into per-file records.

Main entry points:
- parse_git_diff(): diff text to a list of DiffRecord, minus ignored files
- parse_pull_request_url() / GitHubClient: fetch the diff for a pull request
"""

from prdiff.core.errors import DiffParseError, ParseErrorKind, PrdiffError
from prdiff.diff import DiffRecord, parse_file_diff, parse_git_diff, split_diff_into_files
from prdiff.github import GitHubClient, PullRequestURL, parse_pull_request_url

__version__ = "0.1.0"

__all__ = [
    "DiffParseError",
    "DiffRecord",
    "GitHubClient",
    "ParseErrorKind",
    "PrdiffError",
    "PullRequestURL",
    "parse_file_diff",
    "parse_git_diff",
    "parse_pull_request_url",
    "split_diff_into_files",
]
