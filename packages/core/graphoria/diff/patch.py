"""Hunk segmentation and partial patch construction.

Supports "stage/stash/commit only some hunks" workflows: a diff is split at
its ``@@`` lines and a new patch is assembled from the file preamble plus a
chosen subset of hunks.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, List, Set

from graphoria.diff.parser import HUNK_PREFIX, normalize_lf
from graphoria.models.diff import Hunk, HunkRanges

logger = logging.getLogger(__name__)


def compute_hunk_ranges(diff_text: str) -> HunkRanges:
    """Locate every hunk in a unified diff.

    Trailing empty lines are dropped before segmentation. Each hunk runs from
    its ``@@`` line up to (not including) the next one, the last hunk to the
    end of the text.

    Args:
        diff_text: Unified diff text, LF or CRLF.

    Returns:
        HunkRanges with the normalized lines, hunks and preamble bound. Text
        without ``@@`` lines yields no hunks and a preamble covering all lines.
    """
    lines = normalize_lf(diff_text).split("\n")
    while lines and lines[-1] == "":
        lines.pop()

    starts = [i for i, line in enumerate(lines) if line.startswith(HUNK_PREFIX)]
    hunks: List[Hunk] = []
    for index, start in enumerate(starts):
        end = starts[index + 1] if index + 1 < len(starts) else len(lines)
        hunks.append(Hunk(index=index, header=lines[start], start=start, end=end))

    header_end = starts[0] if starts else len(lines)
    return HunkRanges(lines=lines, hunks=hunks, header_end=header_end)


def _assemble(ranges: HunkRanges, keep: AbstractSet[int]) -> str:
    out: List[str] = list(ranges.preamble)
    for hunk in ranges.hunks:
        if hunk.index in keep:
            out.extend(ranges.hunk_lines(hunk))

    joined = "\n".join(out)
    return joined if joined.endswith("\n") else f"{joined}\n"


def build_patch_from_selected_hunks(diff_text: str, selected: Iterable[int]) -> str:
    """Build a patch holding the preamble and only the selected hunks.

    Hunks keep their original order. Indices that match no hunk are ignored.

    Returns:
        Patch text ending in a newline, or an empty string when the diff has
        no hunks or the selection is empty.
    """
    ranges = compute_hunk_ranges(diff_text)
    selection: Set[int] = set(selected)
    if not ranges.hunks or not selection:
        return ""

    known = {hunk.index for hunk in ranges.hunks}
    ignored = selection - known
    if ignored:
        logger.debug("Ignoring unknown hunk indices: %s", sorted(ignored))

    return _assemble(ranges, selection)


def build_patch_from_unselected_hunks(diff_text: str, selected: Iterable[int]) -> str:
    """Build the complementary patch: every hunk not in ``selected``."""
    ranges = compute_hunk_ranges(diff_text)
    if not ranges.hunks:
        return ""

    selection = set(selected)
    keep = {hunk.index for hunk in ranges.hunks if hunk.index not in selection}
    return build_patch_from_selected_hunks(diff_text, keep)
