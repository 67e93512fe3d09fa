"""Drawing geometry for one commit-graph row.

Turns a CommitLaneRow into the straight segments and cubic curves a
renderer strokes inside a fixed-height cell. Coordinates are in cell pixels
with the origin at the top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from graphoria.graph.lanes import lane_stroke_color
from graphoria.models.graph import CommitLaneRow

LANE_STEP = 12
LANE_PAD = 10
ROW_HEIGHT = 64
CURVE_BEND = 18
EXTRA_WIDTH = 56
MIN_WIDTH = 28
MAX_WIDTH_LANES = 10


@dataclass
class LaneSegment:
    """Vertical half-row line for a lane"""

    lane: int
    x: int
    y1: int
    y2: int
    color: str

    def to_dict(self) -> dict:
        return {"lane": self.lane, "x": self.x, "y1": self.y1, "y2": self.y2, "color": self.color}


@dataclass
class LaneCurve:
    """Cubic curve between the node and another lane, as an SVG path"""

    lane: int
    d: str
    color: str

    def to_dict(self) -> dict:
        return {"lane": self.lane, "d": self.d, "color": self.color}


@dataclass
class RowGeometry:
    width: int
    height: int
    node_x: int
    node_y: int
    node_color: str
    top_lines: List[LaneSegment] = field(default_factory=list)
    bottom_lines: List[LaneSegment] = field(default_factory=list)
    parent_curves: List[LaneCurve] = field(default_factory=list)
    join_curves: List[LaneCurve] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "node": {"x": self.node_x, "y": self.node_y, "color": self.node_color},
            "top_lines": [s.to_dict() for s in self.top_lines],
            "bottom_lines": [s.to_dict() for s in self.bottom_lines],
            "parent_curves": [c.to_dict() for c in self.parent_curves],
            "join_curves": [c.to_dict() for c in self.join_curves],
        }


def x_for_lane(lane: int) -> int:
    return LANE_PAD + lane * LANE_STEP


def row_width(max_lanes: int) -> int:
    """Cell width for a graph whose widest row has ``max_lanes`` lanes (capped at 10)."""
    shown = max(1, min(max_lanes, MAX_WIDTH_LANES))
    return max(MIN_WIDTH, LANE_PAD * 2 + shown * LANE_STEP + EXTRA_WIDTH)


def compute_row_geometry(row: CommitLaneRow, max_lanes: int, theme: str = "dark") -> RowGeometry:
    """Compute what to stroke for one row.

    - Upper half-lines for lanes active above, except lanes joining the node
      (those are drawn as join curves).
    - Lower half-lines for lanes active below, except parent lanes that open
      at this row; a parent lane already running from above keeps its line
      unless it is also a join lane.
    - A curve from the node down into each parent lane, and from each join
      lane down into the node.
    """
    y_mid = ROW_HEIGHT // 2
    y_top = 0
    y_bottom = ROW_HEIGHT

    parent_set = set(row.parent_lanes)
    join_set = set(row.join_lanes)
    top_set = set(row.active_top)

    node_x = x_for_lane(row.lane)
    geometry = RowGeometry(
        width=row_width(max_lanes),
        height=ROW_HEIGHT,
        node_x=node_x,
        node_y=y_mid,
        node_color=lane_stroke_color(row.lane, theme),
    )

    for lane in row.active_top:
        if lane in join_set:
            continue
        geometry.top_lines.append(
            LaneSegment(lane, x_for_lane(lane), y_top, y_mid, lane_stroke_color(lane, theme))
        )

    for lane in row.active_bottom:
        if lane in parent_set and (lane not in top_set or lane in join_set):
            continue
        geometry.bottom_lines.append(
            LaneSegment(lane, x_for_lane(lane), y_mid, y_bottom, lane_stroke_color(lane, theme))
        )

    for lane in row.parent_lanes:
        x1 = x_for_lane(lane)
        bend = y_mid + CURVE_BEND
        d = f"M {node_x} {y_mid} C {node_x} {bend}, {x1} {bend}, {x1} {y_bottom}"
        geometry.parent_curves.append(LaneCurve(lane, d, lane_stroke_color(lane, theme)))

    for lane in row.join_lanes:
        x0 = x_for_lane(lane)
        bend = y_mid - CURVE_BEND
        d = f"M {x0} {y_top} C {x0} {bend}, {node_x} {bend}, {node_x} {y_mid}"
        geometry.join_curves.append(LaneCurve(lane, d, lane_stroke_color(lane, theme)))

    return geometry
