"""GitHub pull request access: URL parsing and an async API client."""

from prdiff.github.client import GitHubAPIError, GitHubClient
from prdiff.github.url import PullRequestURL, parse_pull_request_url

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "PullRequestURL",
    "parse_pull_request_url",
]
