"""Core utilities shared across prdiff: errors and logging setup."""

from prdiff.core.errors import (
    ConfigError,
    DiffParseError,
    ParseErrorKind,
    PrdiffError,
    PullRequestURLError,
)

__all__ = [
    "ConfigError",
    "DiffParseError",
    "ParseErrorKind",
    "PrdiffError",
    "PullRequestURLError",
]
