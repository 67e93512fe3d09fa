"""Plain-text output reporter"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from graphoria.models.diff import SplitCellKind, SplitRow
from graphoria.models.graph import LaneLayout

_CELL_MARKERS = {
    SplitCellKind.CTX: " ",
    SplitCellKind.ADD: "+",
    SplitCellKind.DEL: "-",
}


def _clip(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: max(0, width - 1)] + "…"


class TextReporter:
    """Renders layouts and comparisons as monospace text"""

    @staticmethod
    def save(content: str, output_path: Union[str, Path]) -> None:
        """
        Save rendered text to a file

        Args:
            content: Text produced by one of the generate_* methods
            output_path: Path to output file
        """
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")

    @staticmethod
    def generate_graph(
        layout: LaneLayout,
        labels: Optional[Dict[str, str]] = None,
        hash_length: int = 8,
    ) -> str:
        """
        Render a lane layout as an ASCII commit graph

        Each row shows ``*`` at the commit's lane and ``|`` on every other lane
        carrying a line through the row, followed by the short hash and an
        optional label (e.g. the commit subject).

        Args:
            layout: Result of compute_commit_lane_rows
            labels: Optional mapping of commit hash to label text
            hash_length: Number of hash characters shown

        Returns:
            Graph text, one line per commit
        """
        labels = labels or {}
        # max_lanes is measured after trailing free lanes are trimmed, so a
        # root commit in a freshly appended lane can sit beyond it
        width = max(
            [layout.max_lanes, 1]
            + [row.lane + 1 for row in layout.rows]
            + [lane + 1 for row in layout.rows for lane in row.active_top]
        )
        lines = []

        for row in layout.rows:
            through = set(row.active_top) | set(row.active_bottom)
            cells = []
            for lane in range(width):
                if lane == row.lane:
                    cells.append("*")
                elif lane in through:
                    cells.append("|")
                else:
                    cells.append(" ")
            graph = " ".join(cells)
            text = f"{graph}  {row.hash[:hash_length]}"
            label = labels.get(row.hash)
            if label:
                text += f" {label}"
            lines.append(text.rstrip())

        return "\n".join(lines) + ("\n" if lines else "")

    @staticmethod
    def generate_side_by_side(rows: Sequence[SplitRow], column_width: int = 60) -> str:
        """
        Render split rows as two columns

        Args:
            rows: Result of build_split_rows
            column_width: Width of each text column

        Returns:
            Text with one line per row: ``NNNN ±left | NNNN ±right``
        """
        lines: List[str] = []
        for row in rows:
            left_no = "" if row.left_no is None else str(row.left_no)
            right_no = "" if row.right_no is None else str(row.right_no)
            left = _clip(row.left_text, column_width)
            right = _clip(row.right_text, column_width)
            lines.append(
                f"{left_no:>4} {_CELL_MARKERS[row.left_kind]}{left:<{column_width}} | "
                f"{right_no:>4} {_CELL_MARKERS[row.right_kind]}{right}".rstrip()
            )
        return "\n".join(lines) + ("\n" if lines else "")
