"""Line diff engine.

Two algorithms produce an edit script of equal/insert/delete operations:

- A full edit-distance table (unit cost insert, delete and substitute) for
  small inputs. It finds a true minimum alignment in which a changed line
  is a substitution, emitted as an adjacent insert/delete pair.
- Myers' O((N+M)·D) greedy algorithm for everything larger. It finds a
  shortest insert/delete script; a changed line is one delete plus one
  insert that may not be adjacent.

``diff_lines`` picks between them on ``len(a) * len(b)``.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from graphoria.config import DiffConfig
from graphoria.diff.parser import normalize_lf
from graphoria.models.diff import DiffOp, DiffOpKind

logger = logging.getLogger(__name__)

# Backtrack directions in the edit-distance table
_DIAGONAL = 0
_UP = 1
_LEFT = 2


def split_lines(text: str) -> List[str]:
    """Split text into lines, normalizing CRLF. An empty text is one empty line."""
    return normalize_lf(text).split("\n")


def diff_lines(
    a: Sequence[str],
    b: Sequence[str],
    threshold: Optional[int] = None,
) -> List[DiffOp]:
    """Compute an edit script transforming ``a`` into ``b``.

    Args:
        a: Source lines
        b: Target lines
        threshold: Largest ``len(a) * len(b)`` handled by the edit-distance
            table; ``None`` reads it from DiffConfig.

    Returns:
        Operations in forward order. ``equal`` + ``delete`` texts rebuild
        ``a``; ``equal`` + ``insert`` texts rebuild ``b``.
    """
    if not a and not b:
        return []

    limit = DiffConfig.get_dp_threshold() if threshold is None else threshold
    cells = len(a) * len(b)
    if cells <= limit:
        logger.debug("Edit-distance diff for %dx%d lines", len(a), len(b))
        return dp_diff(a, b)

    logger.debug("Myers diff for %dx%d lines (%d cells > %d)", len(a), len(b), cells, limit)
    return myers_diff(a, b)


def diff_texts(left: str, right: str, threshold: Optional[int] = None) -> List[DiffOp]:
    """Diff two text buffers line by line."""
    return diff_lines(split_lines(left), split_lines(right), threshold=threshold)


def dp_diff(a: Sequence[str], b: Sequence[str]) -> List[DiffOp]:
    """Edit-distance alignment with substitution.

    On equal cost the diagonal step wins over a deletion, and a deletion
    wins over an insertion.
    """
    n = len(a)
    m = len(b)

    cost: List[List[int]] = [[0] * (m + 1) for _ in range(n + 1)]
    direction: List[List[int]] = [[_DIAGONAL] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        cost[i][0] = i
        direction[i][0] = _UP
    for j in range(1, m + 1):
        cost[0][j] = j
        direction[0][j] = _LEFT

    for i in range(1, n + 1):
        source = a[i - 1]
        row = cost[i]
        prev_row = cost[i - 1]
        dir_row = direction[i]
        for j in range(1, m + 1):
            best = prev_row[j - 1] + (0 if source == b[j - 1] else 1)
            step = _DIAGONAL
            up = prev_row[j] + 1
            if up < best:
                best = up
                step = _UP
            left = row[j - 1] + 1
            if left < best:
                best = left
                step = _LEFT
            row[j] = best
            dir_row[j] = step

    ops: List[DiffOp] = []
    i, j = n, m
    while i > 0 or j > 0:
        step = direction[i][j]
        if step == _DIAGONAL:
            if a[i - 1] == b[j - 1]:
                ops.append(DiffOp(DiffOpKind.EQUAL, a[i - 1]))
            else:
                ops.append(DiffOp(DiffOpKind.INSERT, b[j - 1]))
                ops.append(DiffOp(DiffOpKind.DELETE, a[i - 1]))
            i -= 1
            j -= 1
        elif step == _UP:
            ops.append(DiffOp(DiffOpKind.DELETE, a[i - 1]))
            i -= 1
        else:
            ops.append(DiffOp(DiffOpKind.INSERT, b[j - 1]))
            j -= 1

    ops.reverse()
    return ops


def myers_diff(a: Sequence[str], b: Sequence[str]) -> List[DiffOp]:
    """Myers' greedy shortest edit script over diagonals ``k = x - y``.

    The frontier (furthest ``x`` per diagonal) is snapshotted before each
    edit distance ``d`` so the path can be walked back once both sequences
    are consumed.
    """
    n = len(a)
    m = len(b)
    if n == 0 and m == 0:
        return []

    v: Dict[int, int] = {1: 0}
    trace: List[Dict[int, int]] = []

    for d in range(n + m + 1):
        trace.append(dict(v))
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                logger.debug("Myers diff finished at edit distance %d", d)
                return _myers_backtrack(a, b, trace)

    # Unreachable: d == n + m always reaches the end point
    return []


def _myers_backtrack(
    a: Sequence[str],
    b: Sequence[str],
    trace: List[Dict[int, int]],
) -> List[DiffOp]:
    ops: List[DiffOp] = []
    x = len(a)
    y = len(b)

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v.get(k - 1, -1) < v.get(k + 1, -1)):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v.get(prev_k, 0)
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            ops.append(DiffOp(DiffOpKind.EQUAL, a[x - 1]))
            x -= 1
            y -= 1

        if d > 0:
            if x == prev_x:
                ops.append(DiffOp(DiffOpKind.INSERT, b[y - 1]))
            else:
                ops.append(DiffOp(DiffOpKind.DELETE, a[x - 1]))
            x, y = prev_x, prev_y

    ops.reverse()
    return ops


def reconstruct_sides(ops: Sequence[DiffOp]) -> Tuple[List[str], List[str]]:
    """Replay an edit script into its (source, target) line lists."""
    source: List[str] = []
    target: List[str] = []
    for op in ops:
        if op.kind != DiffOpKind.INSERT:
            source.append(op.text)
        if op.kind != DiffOpKind.DELETE:
            target.append(op.text)
    return source, target
