"""Ignore-pattern filtering for parsed diff records."""

from __future__ import annotations

import logging
import posixpath
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prdiff.diff.types import DiffRecord

logger = logging.getLogger(__name__)


def match_pattern(pattern: str, path: str) -> bool:
    """Check whether a regex pattern matches anywhere in a path.

    An empty pattern never matches.

    Raises:
        re.error: If the pattern is not a valid regular expression.
    """
    if not pattern:
        return False
    return re.compile(pattern).search(path) is not None


def is_ignored(record: DiffRecord, patterns: Sequence[str]) -> bool:
    """Check whether a record's new path matches any ignore pattern.

    Patterns are tried in order and the first match wins. A pattern that
    fails to compile stops the check and the record is kept, so a bad
    pattern can never hide a file (later patterns in the list are not
    consulted for this record either).

    Args:
        record: The parsed file diff.
        patterns: Regular expressions searched (not fully matched) against
            ``record.new_path``.

    Returns:
        True if the record should be dropped.
    """
    for pattern in patterns:
        try:
            if match_pattern(pattern, record.new_path):
                return True
        except re.error as e:
            logger.warning("Invalid ignore pattern %r: %s", pattern, e)
            return False
    return False


def get_file_extension(path: str) -> str:
    """Get the extension of the file a path points at.

    Returns an empty string for directories (trailing ``/``), empty paths
    and files without an extension. A dot-file with no other dot, such as
    ``.gitignore``, is its own extension.

    Example:
        >>> get_file_extension("/path.to/my.file.txt")
        '.txt'
        >>> get_file_extension("/path/to/.myfile")
        '.myfile'
    """
    if path.endswith("/"):
        return ""

    name = posixpath.basename(path)
    if name in ("", ".", ".."):
        return ""

    if len(name) > 1 and name[0] == "." and name.count(".") == 1:
        return name

    return posixpath.splitext(name)[1]
