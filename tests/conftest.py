"""Shared pytest fixtures for prdiff tests."""

import logging
from collections.abc import Iterator

import pytest

FILE1_SEGMENT = """\
diff --git a/file1.go b/file1.go
index 123abc..456def 100644
--- a/file1.go
+++ b/file1.go
@@ -1,3 +1,4 @@
+import "fmt\""""

GO_MOD_SEGMENT = """\
diff --git a/go.mod b/go.mod
index 234bcd..567efa 100644
--- a/go.mod
+++ b/go.mod
@@ -2,5 +2,6 @@
+module example.com/project"""


@pytest.fixture
def file1_segment() -> str:
    """A well-formed single-file diff for file1.go."""
    return FILE1_SEGMENT


@pytest.fixture
def two_file_diff() -> str:
    """A diff touching file1.go and go.mod."""
    return FILE1_SEGMENT + "\n" + GO_MOD_SEGMENT


@pytest.fixture(autouse=True)
def reset_prdiff_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog sees prdiff records in every test."""
    yield
    prdiff_logger = logging.getLogger("prdiff")
    prdiff_logger.handlers.clear()
    prdiff_logger.setLevel(logging.NOTSET)
    prdiff_logger.propagate = True
