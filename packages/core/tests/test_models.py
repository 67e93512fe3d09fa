"""Tests for data models"""

import pytest

from graphoria.models.diff import DiffLine, DiffLineKind, DiffOp, DiffOpKind, Hunk, HunkRanges
from graphoria.models.graph import Commit, CommitLaneRow, HistoryOrder, LaneLayout


class TestDiffLineKind:
    def test_values(self):
        assert {kind.value for kind in DiffLineKind} == {
            "meta",
            "hunk",
            "add",
            "del",
            "ctx",
            "moved_add",
            "moved_del",
        }

    def test_addition_and_deletion(self):
        assert DiffLineKind.MOVED_ADD.is_addition
        assert DiffLineKind.ADD.is_addition
        assert not DiffLineKind.CTX.is_addition
        assert DiffLineKind.MOVED_DEL.is_deletion
        assert not DiffLineKind.ADD.is_deletion


class TestDiffRecords:
    def test_diff_line_to_dict(self):
        assert DiffLine(DiffLineKind.MOVED_DEL, "-x").to_dict() == {"kind": "moved_del", "text": "-x"}

    def test_diff_op_is_frozen(self):
        op = DiffOp(DiffOpKind.EQUAL, "a")
        with pytest.raises(AttributeError):
            op.text = "b"

    def test_hunk_ranges(self):
        ranges = HunkRanges(
            lines=["diff", "@@ a", "+x", "@@ b", "-y"],
            hunks=[Hunk(0, "@@ a", 1, 3), Hunk(1, "@@ b", 3, 5)],
            header_end=1,
        )

        assert ranges.preamble == ["diff"]
        assert ranges.hunk_lines(ranges.hunks[1]) == ["@@ b", "-y"]
        assert ranges.hunks[0].line_count == 2


class TestHistoryOrder:
    """Test history order parsing"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("all", HistoryOrder.ALL),
            ("all_parents", HistoryOrder.ALL),
            ("ALL", HistoryOrder.ALL),
            ("first_parent", HistoryOrder.FIRST_PARENT),
            ("first-parent", HistoryOrder.FIRST_PARENT),
            ("first_parent_only", HistoryOrder.FIRST_PARENT),
        ],
    )
    def test_parse(self, value, expected):
        assert HistoryOrder(value) == expected

    def test_invalid(self):
        with pytest.raises(ValueError):
            HistoryOrder("topo")


class TestGraphRecords:
    def test_commit_of(self):
        commit = Commit.of("m", ["a", "b"])

        assert commit.parents == ("a", "b")
        assert commit.is_merge
        assert not Commit.of("a").is_merge

    def test_commits_hashable(self):
        assert len({Commit.of("a", ["b"]), Commit.of("a", ["b"])}) == 1

    def test_layout_to_dict(self):
        layout = LaneLayout(
            rows=[CommitLaneRow("a", 0, active_bottom=[0]), CommitLaneRow("b", 0, active_top=[0])],
            max_lanes=1,
        )

        assert layout.to_dict() == {
            "max_lanes": 1,
            "rows": [
                {
                    "hash": "a",
                    "lane": 0,
                    "active_top": [],
                    "active_bottom": [0],
                    "parent_lanes": [],
                    "join_lanes": [],
                },
                {
                    "hash": "b",
                    "lane": 0,
                    "active_top": [0],
                    "active_bottom": [],
                    "parent_lanes": [],
                    "join_lanes": [],
                },
            ],
        }
        assert layout.lane_by_hash() == {"a": 0, "b": 0}
