"""
Graphoria - line diff engine and commit graph lane layout
"""

from graphoria.diff.parser import parse_unified_diff
from graphoria.diff.engine import diff_lines
from graphoria.diff.patch import (
    build_patch_from_selected_hunks,
    build_patch_from_unselected_hunks,
    compute_hunk_ranges,
)
from graphoria.diff.rows import build_split_rows
from graphoria.graph.lanes import compute_commit_lane_rows, compute_compact_lane_by_hash
from graphoria.models.graph import Commit, HistoryOrder

__version__ = "0.1.0"

__all__ = [
    "parse_unified_diff",
    "diff_lines",
    "build_patch_from_selected_hunks",
    "build_patch_from_unselected_hunks",
    "compute_hunk_ranges",
    "build_split_rows",
    "compute_commit_lane_rows",
    "compute_compact_lane_by_hash",
    "Commit",
    "HistoryOrder",
]
