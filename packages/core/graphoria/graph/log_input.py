"""Commit list input parsing."""

from __future__ import annotations

from typing import List

from graphoria.models.graph import Commit


def parse_commit_log(text: str) -> List[Commit]:
    """Parse ``git log --format='%H %P'`` style output.

    Each non-blank line is a commit hash followed by its parent hashes,
    separated by whitespace. Order is preserved.

    Args:
        text: Log text, LF or CRLF.

    Returns:
        Commits in input order.
    """
    commits: List[Commit] = []
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        commits.append(Commit(hash=parts[0], parents=tuple(parts[1:])))
    return commits
