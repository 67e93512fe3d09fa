"""Tests for unified diff classification and moved-line detection."""

import pytest

from graphoria.diff.parser import (
    classify_line,
    normalize_moved_key,
    parse_unified_diff,
    summarize_diff_lines,
)
from graphoria.models.diff import DiffLineKind


def _kinds(raw: str):
    return [line.kind for line in parse_unified_diff(raw)]


def test_parse_unified_diff_basic():
    """Metadata, hunk, change and context lines are classified by prefix."""
    diff = """diff --git a/app.py b/app.py
index 1111111..2222222 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,3 @@
 keep
-print("hello")
+print("hi")
"""
    lines = parse_unified_diff(diff)

    assert [line.kind for line in lines] == [
        DiffLineKind.META,
        DiffLineKind.META,
        DiffLineKind.META,
        DiffLineKind.META,
        DiffLineKind.HUNK,
        DiffLineKind.CTX,
        DiffLineKind.DEL,
        DiffLineKind.ADD,
        DiffLineKind.CTX,
    ]
    assert lines[6].text == '-print("hello")'
    assert lines[-1].text == ""


def test_moved_pair_same_content():
    """A removed line re-added with identical content is a move."""
    assert _kinds("-foo\n+foo") == [DiffLineKind.MOVED_DEL, DiffLineKind.MOVED_ADD]


def test_no_spurious_move_for_different_content():
    assert _kinds("-foo\n+bar") == [DiffLineKind.DEL, DiffLineKind.ADD]


def test_move_ignores_whitespace_differences():
    """Indentation changes and inner whitespace runs still count as a move."""
    assert _kinds("-    foo   bar\n+foo\tbar  ") == [
        DiffLineKind.MOVED_DEL,
        DiffLineKind.MOVED_ADD,
    ]


@pytest.mark.parametrize("raw", ["-\n+", "-   \n+\t", "- \n+"])
def test_blank_lines_never_match(raw):
    assert _kinds(raw) == [DiffLineKind.DEL, DiffLineKind.ADD]


def test_earliest_unmatched_addition_wins():
    """Duplicate additions are consumed oldest first."""
    assert _kinds("+x\n+x\n-x") == [
        DiffLineKind.MOVED_ADD,
        DiffLineKind.ADD,
        DiffLineKind.MOVED_DEL,
    ]


def test_each_addition_matched_once():
    """Two deletions of the same content need two additions."""
    assert _kinds("-a\n-a\n+a") == [
        DiffLineKind.MOVED_DEL,
        DiffLineKind.DEL,
        DiffLineKind.MOVED_ADD,
    ]


def test_moves_cross_hunk_and_file_boundaries():
    diff = """diff --git a/one.py b/one.py
--- a/one.py
+++ b/one.py
@@ -1 +0,0 @@
-shared_line()
diff --git a/two.py b/two.py
--- a/two.py
+++ b/two.py
@@ -0,0 +1 @@
+shared_line()"""
    kinds = _kinds(diff)

    assert kinds[4] == DiffLineKind.MOVED_DEL
    assert kinds[-1] == DiffLineKind.MOVED_ADD


def test_crlf_line_endings_normalized():
    lines = parse_unified_diff("-a\r\n+b\r\n")

    assert [line.text for line in lines] == ["-a", "+b", ""]
    assert [line.kind for line in lines] == [DiffLineKind.DEL, DiffLineKind.ADD, DiffLineKind.CTX]


def test_non_diff_text_is_context():
    """Arbitrary text never fails and yields only context lines."""
    assert _kinds("hello\nworld") == [DiffLineKind.CTX, DiffLineKind.CTX]


def test_empty_input():
    lines = parse_unified_diff("")

    assert len(lines) == 1
    assert lines[0].kind == DiffLineKind.CTX


class TestClassifyLine:
    """Prefix rules for single lines"""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("diff --git a/x b/x", DiffLineKind.META),
            ("index abc..def 100644", DiffLineKind.META),
            ("--- a/x", DiffLineKind.META),
            ("+++ b/x", DiffLineKind.META),
            ("@@ -1 +1 @@ header", DiffLineKind.HUNK),
            ("@@", DiffLineKind.HUNK),
            ("+++x", DiffLineKind.ADD),
            ("+", DiffLineKind.ADD),
            ("---x", DiffLineKind.DEL),
            ("-", DiffLineKind.DEL),
            (" context", DiffLineKind.CTX),
            ("\\ No newline at end of file", DiffLineKind.CTX),
            ("diff", DiffLineKind.CTX),
        ],
    )
    def test_prefixes(self, line, expected):
        assert classify_line(line) == expected

    def test_normalize_moved_key(self):
        assert normalize_moved_key("  a \t b\n ") == "a b"
        assert normalize_moved_key("   ") == ""


class TestSummarize:
    """Line counts over a classified diff"""

    def test_counts(self):
        diff = "diff --git a/x b/x\n@@ -1 +1 @@\n ctx\n-moved\n-gone\n+new\n+moved"
        summary = summarize_diff_lines(parse_unified_diff(diff))

        assert summary.added_lines == 2
        assert summary.removed_lines == 2
        assert summary.moved_pairs == 1
        assert summary.hunks == 1
        assert summary.meta_lines == 1
        assert summary.context_lines == 1

    def test_to_dict(self):
        summary = summarize_diff_lines(parse_unified_diff("+a"))

        assert summary.to_dict() == {
            "added_lines": 1,
            "removed_lines": 0,
            "moved_pairs": 0,
            "hunks": 0,
            "meta_lines": 0,
            "context_lines": 0,
        }
