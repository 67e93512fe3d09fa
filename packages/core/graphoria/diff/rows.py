"""Side-by-side rows and change minimap marks."""

from __future__ import annotations

from typing import List, Optional, Sequence

from graphoria.diff.engine import diff_lines, split_lines
from graphoria.models.diff import (
    DiffOp,
    DiffOpKind,
    MiniMark,
    MiniMarkKind,
    SplitCellKind,
    SplitRow,
)


def build_split_rows_from_ops(ops: Sequence[DiffOp]) -> List[SplitRow]:
    """Lay an edit script out as side-by-side rows.

    Each ``equal`` op is one row. A maximal run of insert/delete ops pairs its
    j-th deletion with its j-th insertion; the shorter side is padded with
    blank cells. Line numbers advance per side, only on cells with content.
    """
    rows: List[SplitRow] = []
    left_no = 1
    right_no = 1
    i = 0

    while i < len(ops):
        op = ops[i]
        if op.kind == DiffOpKind.EQUAL:
            rows.append(
                SplitRow(
                    left_text=op.text,
                    right_text=op.text,
                    left_kind=SplitCellKind.CTX,
                    right_kind=SplitCellKind.CTX,
                    left_no=left_no,
                    right_no=right_no,
                )
            )
            left_no += 1
            right_no += 1
            i += 1
            continue

        deleted: List[str] = []
        inserted: List[str] = []
        while i < len(ops) and ops[i].kind != DiffOpKind.EQUAL:
            if ops[i].kind == DiffOpKind.DELETE:
                deleted.append(ops[i].text)
            else:
                inserted.append(ops[i].text)
            i += 1

        for j in range(max(len(deleted), len(inserted))):
            has_left = j < len(deleted)
            has_right = j < len(inserted)
            rows.append(
                SplitRow(
                    left_text=deleted[j] if has_left else "",
                    right_text=inserted[j] if has_right else "",
                    left_kind=SplitCellKind.DEL if has_left else SplitCellKind.CTX,
                    right_kind=SplitCellKind.ADD if has_right else SplitCellKind.CTX,
                    left_no=left_no if has_left else None,
                    right_no=right_no if has_right else None,
                )
            )
            if has_left:
                left_no += 1
            if has_right:
                right_no += 1

    return rows


def build_split_rows(
    left_text: str,
    right_text: str,
    threshold: Optional[int] = None,
) -> List[SplitRow]:
    """Diff two texts and lay the result out as side-by-side rows."""
    ops = diff_lines(split_lines(left_text), split_lines(right_text), threshold=threshold)
    return build_split_rows_from_ops(ops)


def row_change_kind(row: SplitRow) -> Optional[MiniMarkKind]:
    has_del = row.left_kind == SplitCellKind.DEL
    has_add = row.right_kind == SplitCellKind.ADD
    if has_del and has_add:
        return MiniMarkKind.MOD
    if has_del:
        return MiniMarkKind.DEL
    if has_add:
        return MiniMarkKind.ADD
    return None


def build_mini_marks(rows: Sequence[SplitRow]) -> List[MiniMark]:
    """Group consecutive changed rows into minimap marks.

    A run mixing additions and deletions, or holding any paired row, is a
    modification.
    """
    total = len(rows)
    marks: List[MiniMark] = []
    i = 0

    while i < total:
        kind = row_change_kind(rows[i])
        if kind is None:
            i += 1
            continue

        start = i
        seen = {kind}
        i += 1
        while i < total:
            next_kind = row_change_kind(rows[i])
            if next_kind is None:
                break
            seen.add(next_kind)
            i += 1

        if MiniMarkKind.MOD in seen or len(seen) > 1:
            run_kind = MiniMarkKind.MOD
        else:
            run_kind = kind
        marks.append(
            MiniMark(
                top_pct=start / total,
                height_pct=(i - start) / total,
                kind=run_kind,
            )
        )

    return marks
