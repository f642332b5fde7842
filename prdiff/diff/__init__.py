"""Diff module for splitting and parsing multi-file git diffs.

This module turns the text of a pull request's ``git diff`` into one
structured record per changed file.

Main components:
- Types: DiffRecord, SegmentError - per-file record and dropped-segment diagnostic
- Splitter: split_diff_into_files() - cut the text at ``diff --git`` lines
- Parser: parse_file_diff(), parse_git_diff() - segments to records
- Filter: is_ignored(), match_pattern() - drop files by regex on the new path

Example usage:
    >>> from prdiff.diff import parse_git_diff
    >>> diff_text = '''diff --git a/file1.go b/file1.go
    ... index 123abc..456def 100644
    ... --- a/file1.go
    ... +++ b/file1.go
    ... @@ -1,3 +1,4 @@
    ... +import "fmt"'''
    >>> records = parse_git_diff(diff_text, ignore_patterns=[".mod"])
    >>> records[0].old_path, records[0].new_path
    ('a/file1.go', 'b/file1.go')
"""

from prdiff.diff.filter import get_file_extension, is_ignored, match_pattern
from prdiff.diff.parser import parse_file_diff, parse_git_diff
from prdiff.diff.splitter import split_diff_into_files, split_lines
from prdiff.diff.types import DiffRecord, SegmentError

__all__ = [
    # Types
    "DiffRecord",
    "SegmentError",
    # Splitter
    "split_diff_into_files",
    "split_lines",
    # Parser
    "parse_file_diff",
    "parse_git_diff",
    # Filter
    "get_file_extension",
    "is_ignored",
    "match_pattern",
]
