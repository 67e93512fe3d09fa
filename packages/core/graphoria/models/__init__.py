"""Data models for Graphoria"""

from graphoria.models.diff import (
    DiffLine,
    DiffLineKind,
    DiffOp,
    DiffOpKind,
    Hunk,
    HunkRanges,
    MiniMark,
    MiniMarkKind,
    SplitCellKind,
    SplitRow,
)
from graphoria.models.graph import Commit, CommitLaneRow, HistoryOrder, LaneLayout

__all__ = [
    "DiffLine",
    "DiffLineKind",
    "DiffOp",
    "DiffOpKind",
    "Hunk",
    "HunkRanges",
    "MiniMark",
    "MiniMarkKind",
    "SplitCellKind",
    "SplitRow",
    "Commit",
    "CommitLaneRow",
    "HistoryOrder",
    "LaneLayout",
]
