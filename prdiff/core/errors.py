"""Typed exception hierarchy for prdiff."""

from __future__ import annotations

from enum import Enum


class PrdiffError(Exception):
    """Base class for all prdiff errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(PrdiffError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class ParseErrorKind(Enum):
    """Why a single-file diff segment could not be parsed."""

    INVALID_PATHS = "invalid file paths"
    INVALID_FORMAT = "invalid git diff format"


class DiffParseError(PrdiffError):
    """Raised when a single-file diff segment cannot be turned into a DiffRecord."""

    def __init__(self, kind: ParseErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)


class PullRequestURLError(PrdiffError):
    """Raised when a pull request URL does not have the expected shape."""

    def __init__(self, url: str, reason: str = "invalid pull request URL") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url!r}")
