"""Split a multi-file git diff into single-file segments."""

from __future__ import annotations

import re

DIFF_HEADER = "diff --git"

# Only LF, CRLF and bare CR end a line; form feeds, U+2028 etc. are content
LINE_BREAK_RE = re.compile(r"\r?\n|\r")


def split_lines(text: str) -> list[str]:
    """Split text into lines without their terminators.

    Unlike str.splitlines(), characters such as ``\\x0c`` or U+2028 stay
    inside the line they appear in. A trailing terminator does not produce
    an extra empty line.

    Example:
        >>> split_lines("a\\r\\nb\\x0cc\\n")
        ['a', 'b\\x0cc']
    """
    if not text:
        return []
    lines = LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def split_diff_into_files(diff_text: str) -> list[str]:
    """Split a combined diff into one string per file.

    Every line starting with ``diff --git`` opens a new segment; all
    following lines belong to it until the next such line. Each segment is
    stripped of surrounding whitespace. Text before the first header (or a
    diff with no header at all) becomes a segment of its own, which will
    normally fail to parse downstream.

    Args:
        diff_text: The full diff, as returned for a pull request.

    Returns:
        Segments in the order they appear. Empty for empty input.
    """
    files: list[str] = []
    current: list[str] = []

    for line in split_lines(diff_text):
        if line.startswith(DIFF_HEADER) and current:
            _flush(current, files)
            current = []
        current.append(line)

    if current:
        _flush(current, files)

    return files


def _flush(lines: list[str], files: list[str]) -> None:
    segment = "\n".join(lines).strip()
    if segment:
        files.append(segment)
