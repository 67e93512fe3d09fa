"""Commit graph lane layout and row geometry."""

from graphoria.graph.lanes import (
    compute_commit_lane_rows,
    compute_compact_lane_by_hash,
    lane_stroke_color,
)
from graphoria.graph.geometry import RowGeometry, compute_row_geometry, row_width
from graphoria.graph.log_input import parse_commit_log

__all__ = [
    "compute_commit_lane_rows",
    "compute_compact_lane_by_hash",
    "lane_stroke_color",
    "RowGeometry",
    "compute_row_geometry",
    "row_width",
    "parse_commit_log",
]
