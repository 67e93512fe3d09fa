"""Commit graph data models"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple


class HistoryOrder(str, Enum):
    """History traversal mode used for lane layout"""
    ALL = "all"
    FIRST_PARENT = "first_parent"

    @classmethod
    def _missing_(cls, value):
        """Accept dashed spellings and the long form of the all-parents mode"""
        if isinstance(value, str):
            value = value.strip().lower().replace("-", "_")
            if value == "all_parents":
                return cls.ALL
            if value == "first_parent_only":
                return cls.FIRST_PARENT
            for member in cls:
                if member.value == value:
                    return member
        return None


@dataclass(frozen=True)
class Commit:
    """A commit as seen by the layout: its hash and ordered parent hashes."""

    hash: str
    parents: Tuple[str, ...] = ()

    @classmethod
    def of(cls, hash: str, parents: Sequence[str] = ()) -> "Commit":
        return cls(hash=hash, parents=tuple(parents))

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


@dataclass
class CommitLaneRow:
    """Per-commit lane layout result.

    Attributes:
        hash: Commit hash
        lane: Column the commit node is drawn in
        active_top: Lanes carrying a vertical line into this row from above
        active_bottom: Lanes carrying a vertical line out of this row below
        parent_lanes: Lanes this commit curves down into (parents after the first)
        join_lanes: Lanes that terminate into this commit's node from above
    """

    hash: str
    lane: int
    active_top: List[int] = field(default_factory=list)
    active_bottom: List[int] = field(default_factory=list)
    parent_lanes: List[int] = field(default_factory=list)
    join_lanes: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hash": self.hash,
            "lane": self.lane,
            "active_top": list(self.active_top),
            "active_bottom": list(self.active_bottom),
            "parent_lanes": list(self.parent_lanes),
            "join_lanes": list(self.join_lanes),
        }


@dataclass
class LaneLayout:
    """Rows for an ordered commit list plus the widest lane count observed"""

    rows: List[CommitLaneRow] = field(default_factory=list)
    max_lanes: int = 0

    def lane_by_hash(self) -> dict:
        return {row.hash: row.lane for row in self.rows}

    def to_dict(self) -> dict:
        return {
            "max_lanes": self.max_lanes,
            "rows": [row.to_dict() for row in self.rows],
        }
