"""Types for per-file git diff records.

This module provides the immutable record produced for each file in a
multi-file ``git diff`` blob, plus the diagnostic entry used when callers
ask to be told about segments that could not be parsed.
"""

from __future__ import annotations

from dataclasses import dataclass

from prdiff.core.errors import DiffParseError


@dataclass(frozen=True)
class DiffRecord:
    """A single file's change within a larger diff.

    Attributes:
        old_path: Path before the change, as written on the ``diff --git``
            line (keeps its ``a/`` prefix).
        new_path: Path after the change (keeps its ``b/`` prefix).
        index: Content of the ``index`` line after the ``index `` prefix,
            e.g. ``"123abc..456def 100644"``.
        body: Every other line of the segment joined with ``\\n``, including
            the ``---``/``+++`` headers and all hunks.
    """

    old_path: str
    new_path: str
    index: str
    body: str

    @property
    def path(self) -> str:
        """Get the new path without its ``b/`` prefix, for display."""
        if self.new_path.startswith("b/"):
            return self.new_path[2:]
        return self.new_path


@dataclass(frozen=True)
class SegmentError:
    """A segment dropped by parse_git_diff because it failed to parse.

    Attributes:
        position: Zero-based position of the segment in the split diff.
        segment: The segment text that failed.
        error: The parse error raised for it.
    """

    position: int
    segment: str
    error: DiffParseError
