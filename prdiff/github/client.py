"""Async HTTP client for the GitHub pull request API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from prdiff.config.schema import GitHubSettings
from prdiff.core.errors import PrdiffError
from prdiff.github.url import PullRequestURL

logger = logging.getLogger(__name__)


class GitHubAPIError(PrdiffError):
    """GitHub API error with status code and message.

    A status code of 0 means the request never got a response.
    """

    def __init__(self, status_code: int, message: str, response_body: Any = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(f"GitHub API error {status_code}: {message}")


class GitHubClient:
    """
    Async HTTP client for fetching pull requests and their diffs.

    Features:
    - Async-native with httpx
    - Optional token auth, sent to the API host only
    - Retry with exponential backoff on rate limits, 5xx and timeouts
    - Connection pooling
    """

    MAX_RETRIES = 3
    RETRY_BACKOFF = 1.5
    DEFAULT_RETRY_AFTER = 5

    def __init__(self, settings: GitHubSettings | None = None):
        self._settings = settings or GitHubSettings()
        self._base_url = self._settings.api_url
        self._timeout = self._settings.timeout
        self._http: httpx.AsyncClient | None = None
        self._token: str | None = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Lazily create HTTP client."""
        if self._http is None or self._http.is_closed:
            self._token = self._settings.get_token()
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={"User-Agent": "prdiff/0.1"},
                # github.com diff URLs redirect to patch-diff.githubusercontent.com
                follow_redirects=True,
            )
        return self._http

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http and not self._http.is_closed:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> GitHubClient:
        self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _send(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        retry: int = 0,
    ) -> httpx.Response:
        """
        GET a URL, retrying rate limits, server errors and timeouts.

        Returns the final response whatever its status.
        Raises GitHubAPIError(0, ...) if no response could be obtained.
        """
        client = self._ensure_client()
        request_headers = dict(headers or {})
        if self._token and url.startswith(self._base_url):
            request_headers["Authorization"] = f"Bearer {self._token}"

        logger.debug("GET %s (attempt %d)", url, retry + 1)
        try:
            response = await client.get(url, headers=request_headers)
        except httpx.TimeoutException:
            if retry < self.MAX_RETRIES:
                await asyncio.sleep(self.RETRY_BACKOFF ** retry)
                return await self._send(url, headers, retry + 1)
            raise GitHubAPIError(0, "Request timeout")
        except httpx.RequestError as e:
            raise GitHubAPIError(0, f"Request failed: {e}") from e

        if response.status_code == 429 and retry < self.MAX_RETRIES:
            retry_after = _retry_after_seconds(response.headers.get("Retry-After"))
            logger.warning("Rate limited by GitHub, retrying in %ds", retry_after)
            await asyncio.sleep(min(retry_after, 60))
            return await self._send(url, headers, retry + 1)

        if response.status_code >= 500 and retry < self.MAX_RETRIES:
            await asyncio.sleep(self.RETRY_BACKOFF ** retry)
            return await self._send(url, headers, retry + 1)

        return response

    async def get_pull_request(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        """Fetch a pull request's details from the REST API.

        Raises:
            GitHubAPIError: On any 4xx/5xx response or transport failure.
        """
        url = f"{self._base_url}/repos/{owner}/{repo}/pulls/{number}"
        response = await self._send(url, headers={"Accept": "application/vnd.github+json"})

        if response.status_code >= 400:
            try:
                body = response.json()
                message = body.get("message", str(body))
            except ValueError:
                body = None
                message = response.text
            raise GitHubAPIError(response.status_code, message, body)

        return response.json()

    async def get_diff_contents(self, diff_url: str) -> str:
        """Fetch raw diff text from a diff URL.

        Raises:
            GitHubAPIError: If the final response is anything but 200.
        """
        response = await self._send(diff_url)
        if response.status_code != 200:
            raise GitHubAPIError(
                response.status_code, "failed to get diff contents", response.text
            )
        return response.text

    async def get_pull_request_diff(self, pr: PullRequestURL) -> str:
        """Fetch a pull request, then the combined diff it links to."""
        details = await self.get_pull_request(pr.owner, pr.repo, pr.number)
        diff_url = details.get("diff_url") or pr.diff_url
        logger.debug("Fetching diff for %s/%s#%d from %s", pr.owner, pr.repo, pr.number, diff_url)
        return await self.get_diff_contents(diff_url)


def _retry_after_seconds(value: str | None) -> int:
    """Seconds to wait from a Retry-After header given in seconds.

    HTTP-date values, garbage and a missing header all fall back to
    GitHubClient.DEFAULT_RETRY_AFTER.
    """
    if value is None:
        return GitHubClient.DEFAULT_RETRY_AFTER
    try:
        seconds = int(value)
    except ValueError:
        return GitHubClient.DEFAULT_RETRY_AFTER
    return max(seconds, 0)
