"""Commit graph lane layout.

Commits arrive newest first. A column table tracks, per lane, the hash of
the commit that lane is waiting for (the parent of the last commit drawn in
it) or ``None`` when the lane is free. The table lives for a single call.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Union

from graphoria.models.graph import Commit, CommitLaneRow, HistoryOrder, LaneLayout

logger = logging.getLogger(__name__)

HistoryOrderLike = Union[HistoryOrder, str]


def lane_stroke_color(lane: int, theme: str = "dark") -> str:
    """CSS colour for a lane; hues step by 47 degrees per lane."""
    hue = (lane * 47) % 360
    sat = 72 if theme == "dark" else 66
    light = 62 if theme == "dark" else 44
    return f"hsl({hue} {sat}% {light}%)"


def _parents_to_follow(commit: Commit, order: HistoryOrder) -> Sequence[str]:
    """Secondary parents considered for lane allocation."""
    if order == HistoryOrder.FIRST_PARENT:
        return ()
    return commit.parents[1:]


def _active_lanes(cols: List[Optional[str]]) -> List[int]:
    return [i for i, pending in enumerate(cols) if pending is not None]


def _index_of(cols: List[Optional[str]], value: Optional[str]) -> int:
    try:
        return cols.index(value)
    except ValueError:
        return -1


def _ensure_lane(cols: List[Optional[str]], commit_hash: str) -> int:
    """Lane reserved for ``commit_hash``, else the first free one, else a new one."""
    lane = _index_of(cols, commit_hash)
    if lane >= 0:
        return lane
    lane = _index_of(cols, None)
    if lane >= 0:
        cols[lane] = commit_hash
        return lane
    cols.append(commit_hash)
    return len(cols) - 1


def _alloc_lane_after(cols: List[Optional[str]], after: int) -> int:
    for i in range(after + 1, len(cols)):
        if cols[i] is None:
            return i
    cols.append(None)
    return len(cols) - 1


def compute_commit_lane_rows(
    commits: Iterable[Commit],
    history_order: HistoryOrderLike = HistoryOrder.ALL,
) -> LaneLayout:
    """Assign a lane and drawing geometry to every commit.

    Args:
        commits: Commits in display order (children before parents).
        history_order: ``all`` follows every parent; ``first_parent`` ignores
            merged-in parents.

    Returns:
        LaneLayout with one row per commit and the widest column count seen.
        Parents missing from ``commits`` end their history line.
    """
    order = HistoryOrder(history_order)
    commit_list = list(commits)
    present = {c.hash for c in commit_list}

    cols: List[Optional[str]] = []
    rows: List[CommitLaneRow] = []
    max_lanes = 0

    for commit in commit_list:
        active_top = _active_lanes(cols)

        lane = _ensure_lane(cols, commit.hash)

        join_lanes: List[int] = []
        for i, pending in enumerate(cols):
            if i != lane and pending == commit.hash:
                join_lanes.append(i)
                cols[i] = None

        first_parent = commit.parents[0] if commit.parents else None
        cols[lane] = first_parent if first_parent and first_parent in present else None

        parent_lanes: List[int] = []
        for parent in _parents_to_follow(commit, order):
            if not parent or parent not in present:
                continue
            existing = _index_of(cols, parent)
            if existing >= 0:
                parent_lanes.append(existing)
                continue
            parent_lane = _alloc_lane_after(cols, lane)
            cols[parent_lane] = parent
            parent_lanes.append(parent_lane)

        while cols and cols[-1] is None:
            cols.pop()

        max_lanes = max(max_lanes, len(cols))
        rows.append(
            CommitLaneRow(
                hash=commit.hash,
                lane=lane,
                active_top=active_top,
                active_bottom=_active_lanes(cols),
                parent_lanes=parent_lanes,
                join_lanes=join_lanes,
            )
        )

    logger.debug("Laid out %d commits across %d lanes", len(rows), max_lanes)
    return LaneLayout(rows=rows, max_lanes=max_lanes)


def compute_compact_lane_by_hash(
    commits: Iterable[Commit],
    history_order: HistoryOrderLike = HistoryOrder.ALL,
) -> Dict[str, int]:
    """Lane index per commit for small preview graphs.

    Columns are removed rather than left empty when a line ends, so lanes
    stay packed to the left. A commit keeps the first column reserved for it
    and duplicate reservations are dropped; no row geometry is produced.
    """
    order = HistoryOrder(history_order)
    commit_list = list(commits)
    present = {c.hash for c in commit_list}
    cols: List[str] = []
    lane_by_hash: Dict[str, int] = {}

    for commit in commit_list:
        lane = _index_of(cols, commit.hash)
        if lane < 0:
            lane = len(cols)
            cols.append(commit.hash)

        for i in range(len(cols) - 1, -1, -1):
            if i == lane or cols[i] != commit.hash:
                continue
            del cols[i]
            if i < lane:
                lane -= 1
        lane_by_hash[commit.hash] = lane

        first_parent = commit.parents[0] if commit.parents else None
        primary = first_parent if first_parent and first_parent in present else None
        if primary:
            cols[lane] = primary
        else:
            del cols[lane]

        insert_at = min(lane + 1 if primary else lane, len(cols))
        for parent in _parents_to_follow(commit, order):
            if not parent or parent not in present or parent in cols:
                continue
            cols.insert(insert_at, parent)
            insert_at += 1

    return lane_by_hash
