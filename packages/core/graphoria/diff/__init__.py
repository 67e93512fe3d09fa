"""Diff parsing, line diffing and partial patch helpers."""

from graphoria.diff.parser import (
    DiffSummary,
    classify_line,
    normalize_moved_key,
    parse_unified_diff,
    summarize_diff_lines,
)
from graphoria.diff.engine import (
    diff_lines,
    diff_texts,
    dp_diff,
    myers_diff,
    reconstruct_sides,
    split_lines,
)
from graphoria.diff.patch import (
    build_patch_from_selected_hunks,
    build_patch_from_unselected_hunks,
    compute_hunk_ranges,
)
from graphoria.diff.rows import (
    build_mini_marks,
    build_split_rows,
    build_split_rows_from_ops,
    row_change_kind,
)

__all__ = [
    "DiffSummary",
    "classify_line",
    "normalize_moved_key",
    "parse_unified_diff",
    "summarize_diff_lines",
    "diff_lines",
    "diff_texts",
    "dp_diff",
    "myers_diff",
    "reconstruct_sides",
    "split_lines",
    "build_patch_from_selected_hunks",
    "build_patch_from_unselected_hunks",
    "compute_hunk_ranges",
    "build_mini_marks",
    "build_split_rows",
    "build_split_rows_from_ops",
    "row_change_kind",
]
