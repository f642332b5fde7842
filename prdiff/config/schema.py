"""Pydantic models for prdiff configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitHubSettings(BaseModel):
    """Connection settings for the GitHub API."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = "https://api.github.com"
    token: str | None = None
    token_env: str | None = "GITHUB_TOKEN"
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"api_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    def get_token(self) -> str | None:
        """
        Resolve token from config or environment.

        Resolution order:
        1. Direct token value (if set)
        2. Environment variable from token_env
        3. None (unauthenticated requests)
        """
        if self.token:
            return self.token
        if self.token_env:
            return os.environ.get(self.token_env) or None
        return None


class PrdiffConfig(BaseModel):
    """Top-level prdiff configuration."""

    model_config = ConfigDict(extra="forbid")

    ignore_patterns: list[str] = []
    github: GitHubSettings = Field(default_factory=GitHubSettings)
