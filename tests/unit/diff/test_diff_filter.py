"""Unit tests for prdiff.diff.filter module."""

import logging
import re

import pytest

from prdiff.diff import DiffRecord, get_file_extension, is_ignored, match_pattern


def _record(new_path: str) -> DiffRecord:
    return DiffRecord(old_path="a/x", new_path=new_path, index="1a..2b 100644", body="+x")


class TestMatchPattern:
    """Tests for match_pattern function."""

    def test_empty_pattern_never_matches(self) -> None:
        """An empty pattern is a no-match, not an error."""
        assert match_pattern("", "b/go.mod") is False

    def test_substring_search(self) -> None:
        """Patterns match anywhere in the path, not only at the start."""
        assert match_pattern(r"vendor/", "b/third_party/vendor/lib.go") is True
        assert match_pattern(r"^vendor/", "b/vendor/lib.go") is False

    def test_invalid_pattern_raises(self) -> None:
        """A pattern that cannot compile raises re.error."""
        with pytest.raises(re.error):
            match_pattern("[unclosed", "b/file.go")


class TestIsIgnored:
    """Tests for is_ignored function."""

    def test_no_patterns(self) -> None:
        """An empty pattern list ignores nothing."""
        assert is_ignored(_record("b/go.mod"), []) is False

    def test_extension_pattern(self) -> None:
        r"""'\.mod' matches go.mod, '\.go' does not."""
        record = _record("b/go.mod")

        assert is_ignored(record, [r"\.mod"]) is True
        assert is_ignored(record, [r"\.go"]) is False

    def test_matches_new_path_only(self) -> None:
        """The old path is never consulted."""
        record = DiffRecord(old_path="a/go.mod", new_path="b/go.sum", index="1..2", body="+x")

        assert is_ignored(record, [r"\.mod$"]) is False

    def test_any_pattern_in_list(self) -> None:
        """A later pattern can match after earlier ones miss."""
        assert is_ignored(_record("b/package-lock.json"), [r"\.mod$", "", r"lock\.json$"]) is True

    def test_invalid_pattern_alone(self) -> None:
        """A bad pattern keeps the record and does not raise."""
        assert is_ignored(_record("b/go.mod"), ["[unclosed"]) is False

    def test_invalid_pattern_stops_checking(self) -> None:
        """Patterns after a bad one are not consulted for that record."""
        record = _record("b/go.mod")

        assert is_ignored(record, ["[unclosed", r"\.mod"]) is False
        assert is_ignored(record, [r"\.mod", "[unclosed"]) is True

    def test_invalid_pattern_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """The offending pattern is named in a warning."""
        with caplog.at_level(logging.WARNING, logger="prdiff.diff.filter"):
            is_ignored(_record("b/go.mod"), ["(bad"])

        assert "(bad" in caplog.text

    def test_repeated_calls_are_consistent(self) -> None:
        """Same patterns and record give the same answer every call."""
        record = _record("b/docs/readme.md")
        patterns = [r"^b/docs/"]

        assert [is_ignored(record, patterns) for _ in range(3)] == [True, True, True]


class TestGetFileExtension:
    """Tests for get_file_extension function."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/myfile.txt", ".txt"),
            ("/path/to/myfile.mp3", ".mp3"),
            ("/path/to/myfile", ""),
            ("/path.to/my.file.txt", ".txt"),
            ("", ""),
            ("/path/to/.myfile", ".myfile"),
            ("/path/to/", ""),
            ("b/go.mod", ".mod"),
        ],
    )
    def test_extensions(self, path: str, expected: str) -> None:
        """Extension rules for files, dot-files and directories."""
        assert get_file_extension(path) == expected
