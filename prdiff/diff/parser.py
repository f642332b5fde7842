"""Parser for multi-file git diffs.

This module turns ``git diff`` text (as served for a pull request) into
DiffRecord objects, one per file, dropping segments that cannot be parsed
and files whose new path matches an ignore pattern.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from prdiff.core.errors import DiffParseError, ParseErrorKind
from prdiff.diff.filter import is_ignored
from prdiff.diff.splitter import DIFF_HEADER, split_diff_into_files, split_lines
from prdiff.diff.types import DiffRecord, SegmentError

logger = logging.getLogger(__name__)

INDEX_PREFIX = "index "


def parse_file_diff(segment: str) -> DiffRecord:
    """Parse one file's diff segment into a DiffRecord.

    The ``diff --git`` line supplies the old and new paths, the ``index``
    line supplies the hash range and mode, and every other line is kept,
    in order, as the body. If either header line repeats, the last one wins.

    Args:
        segment: Text of a single file's diff, starting at ``diff --git``.

    Returns:
        The parsed record.

    Raises:
        DiffParseError: ``INVALID_PATHS`` as soon as a ``diff --git`` line
            does not carry exactly two paths; ``INVALID_FORMAT`` if, after
            the scan, the paths, the index line, or the body is missing.

    Example:
        >>> record = parse_file_diff(
        ...     "diff --git a/f.go b/f.go\\n"
        ...     "index 1a..2b 100644\\n"
        ...     "--- a/f.go\\n"
        ...     "+++ b/f.go"
        ... )
        >>> record.new_path, record.index
        ('b/f.go', '1a..2b 100644')
    """
    paths: list[str] = []
    index = ""
    body: list[str] = []

    for line in split_lines(segment):
        if line.startswith(DIFF_HEADER):
            paths = line.split()[2:]
            if len(paths) != 2:
                raise DiffParseError(ParseErrorKind.INVALID_PATHS)
        elif line.startswith(INDEX_PREFIX):
            index = line[len(INDEX_PREFIX):].strip()
        else:
            body.append(line)

    if not paths or not index or not body:
        raise DiffParseError(ParseErrorKind.INVALID_FORMAT)

    return DiffRecord(
        old_path=paths[0],
        new_path=paths[1],
        index=index,
        body="\n".join(body),
    )


def parse_git_diff(
    diff_text: str,
    ignore_patterns: Sequence[str] = (),
    errors: list[SegmentError] | None = None,
) -> list[DiffRecord]:
    """Parse a combined diff into per-file records, skipping ignored files.

    Segments that fail to parse are dropped without raising. Pass a list as
    ``errors`` to have a SegmentError appended for each of them.

    Args:
        diff_text: The full diff text.
        ignore_patterns: Regular expressions searched against each record's
            new path; a match drops the record. See is_ignored().
        errors: Optional collector for segments that failed to parse.

    Returns:
        Parsed, non-ignored records in diff order. Empty if none remain.

    Example:
        >>> diff_text = '''diff --git a/main.go b/main.go
        ... index 123abc..456def 100644
        ... --- a/main.go
        ... +++ b/main.go
        ... @@ -1,3 +1,4 @@
        ... +import "fmt"
        ... diff --git a/go.mod b/go.mod
        ... index 234bcd..567efa 100644
        ... --- a/go.mod
        ... +++ b/go.mod
        ... @@ -2,5 +2,6 @@
        ... +require example.com/lib v1.0.0'''
        >>> [r.new_path for r in parse_git_diff(diff_text, [r"\\.mod$"])]
        ['b/main.go']
    """
    result: list[DiffRecord] = []

    for position, segment in enumerate(split_diff_into_files(diff_text)):
        try:
            record = parse_file_diff(segment)
        except DiffParseError as e:
            logger.debug("Skipping segment %d: %s", position, e)
            if errors is not None:
                errors.append(SegmentError(position=position, segment=segment, error=e))
            continue

        if is_ignored(record, ignore_patterns):
            logger.debug("Ignoring %s", record.new_path)
            continue

        result.append(record)

    return result
