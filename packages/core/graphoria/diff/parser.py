"""Unified diff line classification and moved-line detection."""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Tuple

from graphoria.models.diff import DiffLine, DiffLineKind

logger = logging.getLogger(__name__)

META_PREFIXES = ("diff ", "index ", "--- ", "+++ ")
HUNK_PREFIX = "@@"

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class DiffSummary:
    """Line counts for a classified diff."""

    added_lines: int
    removed_lines: int
    moved_pairs: int
    hunks: int
    meta_lines: int
    context_lines: int

    def to_dict(self) -> dict:
        """Serialize summary to JSON-safe dict."""
        return {
            "added_lines": self.added_lines,
            "removed_lines": self.removed_lines,
            "moved_pairs": self.moved_pairs,
            "hunks": self.hunks,
            "meta_lines": self.meta_lines,
            "context_lines": self.context_lines,
        }


def normalize_lf(text: str) -> str:
    return text.replace("\r\n", "\n")


def normalize_moved_key(content: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", content).strip()


def classify_line(line: str) -> DiffLineKind:
    """Classify one diff line by its prefix.

    Metadata prefixes win over the ``+``/``-`` change prefixes, so ``+++ b/x``
    is metadata while ``+++x`` is an addition.
    """
    if line.startswith(META_PREFIXES):
        return DiffLineKind.META
    if line.startswith(HUNK_PREFIX):
        return DiffLineKind.HUNK
    if line.startswith("+"):
        return DiffLineKind.ADD
    if line.startswith("-"):
        return DiffLineKind.DEL
    return DiffLineKind.CTX


def _build_queue(entries: Iterable[Tuple[int, str]]) -> Dict[str, Deque[int]]:
    """Index positions by normalized content, oldest first.

    Lines with empty normalized content are excluded since they match too
    broadly.
    """
    index: Dict[str, Deque[int]] = {}
    for position, key in entries:
        if not key:
            continue
        index.setdefault(key, deque()).append(position)
    return index


def parse_unified_diff(raw: str) -> List[DiffLine]:
    """Classify every line of a unified diff and mark moved line pairs.

    A removed line whose normalized content equals that of an added line
    anywhere in the diff is paired with the earliest still-unmatched such
    addition; both are reclassified as moved. The pairing ignores hunk and
    file boundaries.

    Args:
        raw: Diff text with LF or CRLF line endings. Any text is accepted.

    Returns:
        One DiffLine per input line, in input order.
    """
    kinds: List[DiffLineKind] = []
    texts: List[str] = []
    adds: List[Tuple[int, str]] = []
    dels: List[Tuple[int, str]] = []

    for line in normalize_lf(raw).split("\n"):
        kind = classify_line(line)
        position = len(kinds)
        if kind == DiffLineKind.ADD:
            adds.append((position, normalize_moved_key(line[1:])))
        elif kind == DiffLineKind.DEL:
            dels.append((position, normalize_moved_key(line[1:])))
        kinds.append(kind)
        texts.append(line)

    add_queue = _build_queue(adds)
    moved = 0
    for del_position, key in dels:
        if not key:
            continue
        candidates = add_queue.get(key)
        if not candidates:
            continue
        add_position = candidates.popleft()
        kinds[del_position] = DiffLineKind.MOVED_DEL
        kinds[add_position] = DiffLineKind.MOVED_ADD
        moved += 1

    if moved:
        logger.debug("Detected %d moved line pair(s) in %d diff lines", moved, len(kinds))

    return [DiffLine(kind=kind, text=text) for kind, text in zip(kinds, texts)]


def summarize_diff_lines(lines: Iterable[DiffLine]) -> DiffSummary:
    """Count line kinds of a classified diff.

    Moved lines count towards both the added/removed totals and ``moved_pairs``.
    """
    added = removed = moved = hunks = meta = context = 0
    for line in lines:
        if line.kind.is_addition:
            added += 1
        elif line.kind.is_deletion:
            removed += 1
            if line.kind == DiffLineKind.MOVED_DEL:
                moved += 1
        elif line.kind == DiffLineKind.HUNK:
            hunks += 1
        elif line.kind == DiffLineKind.META:
            meta += 1
        else:
            context += 1
    return DiffSummary(
        added_lines=added,
        removed_lines=removed,
        moved_pairs=moved,
        hunks=hunks,
        meta_lines=meta,
        context_lines=context,
    )
