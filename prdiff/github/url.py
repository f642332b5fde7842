"""Pull request URL parsing."""

from __future__ import annotations

from dataclasses import dataclass

from prdiff.core.errors import PullRequestURLError


@dataclass(frozen=True)
class PullRequestURL:
    """Owner, repository and number identifying a GitHub pull request."""

    owner: str
    repo: str
    number: int

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}/pull/{self.number}"

    @property
    def diff_url(self) -> str:
        """Get the URL serving this pull request's combined diff."""
        return f"{self.html_url}.diff"


def parse_pull_request_url(url: str) -> PullRequestURL:
    """Parse ``https://github.com/<owner>/<repo>/pull/<number>``.

    The URL must split into exactly seven ``/``-separated parts, so query
    strings, fragments and trailing slashes are rejected.

    Raises:
        PullRequestURLError: If the URL has the wrong shape or the number
            is not an integer.

    Example:
        >>> parse_pull_request_url("https://github.com/google/go-github/pull/1234")
        PullRequestURL(owner='google', repo='go-github', number=1234)
    """
    parts = url.split("/")
    if len(parts) != 7:
        raise PullRequestURLError(url)

    owner, repo = parts[3], parts[4]
    if not owner or not repo:
        raise PullRequestURLError(url)

    try:
        number = int(parts[6])
    except ValueError as e:
        raise PullRequestURLError(url, "invalid pull request number") from e

    return PullRequestURL(owner=owner, repo=repo, number=number)
