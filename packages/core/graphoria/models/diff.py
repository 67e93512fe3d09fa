"""Diff data models"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DiffLineKind(str, Enum):
    """Classification of a single unified-diff line"""
    META = "meta"
    HUNK = "hunk"
    ADD = "add"
    DEL = "del"
    CTX = "ctx"
    MOVED_ADD = "moved_add"
    MOVED_DEL = "moved_del"

    @property
    def is_addition(self) -> bool:
        return self in (DiffLineKind.ADD, DiffLineKind.MOVED_ADD)

    @property
    def is_deletion(self) -> bool:
        return self in (DiffLineKind.DEL, DiffLineKind.MOVED_DEL)


class DiffOpKind(str, Enum):
    """Edit script operation"""
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


class SplitCellKind(str, Enum):
    """Side-by-side cell styling"""
    CTX = "ctx"
    ADD = "add"
    DEL = "del"


class MiniMarkKind(str, Enum):
    """Change minimap mark kind"""
    ADD = "add"
    DEL = "del"
    MOD = "mod"


@dataclass(frozen=True)
class DiffLine:
    """A classified line of unified diff text (prefix included)."""

    kind: DiffLineKind
    text: str

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class DiffOp:
    """One step of an edit script between a source and a target sequence."""

    kind: DiffOpKind
    text: str

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "text": self.text}


@dataclass
class SplitRow:
    """One row of a side-by-side comparison.

    Pairs at most one deleted line (left) with at most one inserted line
    (right). Line numbers are 1-based and ``None`` for padding cells.
    """

    left_text: str
    right_text: str
    left_kind: SplitCellKind
    right_kind: SplitCellKind
    left_no: Optional[int]
    right_no: Optional[int]

    @property
    def is_changed(self) -> bool:
        return self.left_kind == SplitCellKind.DEL or self.right_kind == SplitCellKind.ADD

    def to_dict(self) -> dict:
        return {
            "left_text": self.left_text,
            "right_text": self.right_text,
            "left_kind": self.left_kind.value,
            "right_kind": self.right_kind.value,
            "left_no": self.left_no,
            "right_no": self.right_no,
        }


@dataclass
class MiniMark:
    """A run of changed rows, positioned as fractions of the total row count."""

    top_pct: float
    height_pct: float
    kind: MiniMarkKind

    def to_dict(self) -> dict:
        return {
            "top_pct": self.top_pct,
            "height_pct": self.height_pct,
            "kind": self.kind.value,
        }


@dataclass
class Hunk:
    """A hunk of diff text: ``lines[start:end]`` starting at an ``@@`` line."""

    index: int
    header: str
    start: int
    end: int

    @property
    def line_count(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "header": self.header,
            "start": self.start,
            "end": self.end,
        }


@dataclass
class HunkRanges:
    """Hunk segmentation of a diff.

    ``lines[:header_end]`` is the preamble (file metadata) that precedes the
    first hunk.
    """

    lines: List[str] = field(default_factory=list)
    hunks: List[Hunk] = field(default_factory=list)
    header_end: int = 0

    @property
    def preamble(self) -> List[str]:
        return self.lines[: self.header_end]

    def hunk_lines(self, hunk: Hunk) -> List[str]:
        return self.lines[hunk.start : hunk.end]

    def to_dict(self) -> dict:
        return {
            "header_end": self.header_end,
            "hunks": [h.to_dict() for h in self.hunks],
        }
