"""Main CLI entry point for Graphoria"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Set

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from graphoria import __version__
from graphoria.config import DiffConfig, LayoutConfig
from graphoria.diff.engine import diff_texts
from graphoria.diff.parser import parse_unified_diff, summarize_diff_lines
from graphoria.diff.patch import (
    build_patch_from_selected_hunks,
    build_patch_from_unselected_hunks,
    compute_hunk_ranges,
)
from graphoria.diff.rows import build_mini_marks, build_split_rows_from_ops
from graphoria.graph.geometry import compute_row_geometry
from graphoria.graph.lanes import compute_commit_lane_rows, compute_compact_lane_by_hash
from graphoria.graph.log_input import parse_commit_log
from graphoria.models.diff import DiffLineKind, SplitCellKind
from graphoria.models.graph import HistoryOrder
from graphoria.reporters.text_reporter import TextReporter

console = Console()

LINE_STYLES = {
    DiffLineKind.META: "bold",
    DiffLineKind.HUNK: "cyan",
    DiffLineKind.ADD: "green",
    DiffLineKind.DEL: "red",
    DiffLineKind.CTX: "",
    DiffLineKind.MOVED_ADD: "blue",
    DiffLineKind.MOVED_DEL: "yellow",
}

CELL_STYLES = {
    SplitCellKind.CTX: "",
    SplitCellKind.ADD: "green",
    SplitCellKind.DEL: "red",
}


def _read_input(path: str) -> str:
    """Read a text input, ``-`` meaning stdin."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except (IOError, OSError) as exc:
        console.print(f"[bold red]❌ Error reading input:[/bold red] {escape(str(exc))}")
        sys.exit(1)


def _parse_hunk_indices(ctx, param, value: Optional[str]) -> Set[int]:
    """Parse a comma-separated list of hunk indices."""
    if not value:
        return set()
    indices: Set[int] = set()
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            indices.add(int(part))
        except ValueError:
            raise click.BadParameter(f"'{part}' is not a hunk index")
    return indices


def _write_or_echo(content: str, output: Optional[str], label: str) -> None:
    if not output:
        click.echo(content, nl=False)
        return
    try:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        console.print(f"\n✅ {label} saved to: {output_path}")
    except (IOError, OSError, PermissionError) as exc:
        console.print(f"[bold red]❌ Error writing output file:[/bold red] {escape(str(exc))}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="graphoria")
@click.option("--debug", is_flag=True, help="Show verbose diagnostic output")
def cli(debug: bool):
    """
    Graphoria - diff and commit graph layout engine

    Classify unified diffs, build partial patches, compare texts side by side
    and lay out commit history as lanes.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("diff_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "table", "json"]),
    default="text",
    help="Output format (default: text)",
)
def parse(diff_file: str, output_format: str):
    """Classify diff lines and highlight moved lines."""
    lines = parse_unified_diff(_read_input(diff_file))
    summary = summarize_diff_lines(lines)

    if output_format == "json":
        console.print_json(
            data={"summary": summary.to_dict(), "lines": [line.to_dict() for line in lines]}
        )
        return

    if output_format == "table":
        stats_table = Table(show_header=False, box=box.SIMPLE)
        stats_table.add_row("Added lines:", f"[green]{summary.added_lines}[/green]")
        stats_table.add_row("Removed lines:", f"[red]{summary.removed_lines}[/red]")
        stats_table.add_row("Moved pairs:", f"[yellow]{summary.moved_pairs}[/yellow]")
        stats_table.add_row("Hunks:", f"[cyan]{summary.hunks}[/cyan]")
        console.print(stats_table)
        return

    for line in lines:
        console.print(Text(line.text, style=LINE_STYLES[line.kind]), soft_wrap=True)


@cli.command()
@click.argument("diff_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
def hunks(diff_file: str, output_format: str):
    """List the hunks of a diff with their indices."""
    ranges = compute_hunk_ranges(_read_input(diff_file))

    if output_format == "json":
        console.print_json(data=ranges.to_dict())
        return

    if not ranges.hunks:
        console.print("[yellow]No hunks found[/yellow]")
        return

    table = Table(title="Hunks", box=box.ROUNDED)
    table.add_column("#", style="dim", width=3)
    table.add_column("Header", style="cyan")
    table.add_column("Lines", justify="right")
    for hunk in ranges.hunks:
        table.add_row(str(hunk.index), escape(hunk.header), str(hunk.line_count))
    console.print(table)


@cli.command()
@click.argument("diff_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--hunks",
    "-s",
    "selected",
    callback=_parse_hunk_indices,
    help="Comma-separated hunk indices (see 'graphoria hunks')",
)
@click.option(
    "--unselected",
    is_flag=True,
    help="Keep every hunk except the selected ones",
)
@click.option("--output", "-o", type=click.Path(), help="Output file path")
def patch(diff_file: str, selected: Set[int], unselected: bool, output: Optional[str]):
    """Build a patch from a subset of a diff's hunks."""
    diff_text = _read_input(diff_file)
    if unselected:
        result = build_patch_from_unselected_hunks(diff_text, selected)
    else:
        result = build_patch_from_selected_hunks(diff_text, selected)

    if not result:
        console.print("[yellow]⚠️  Selection produced an empty patch[/yellow]")
        return

    _write_or_echo(result, output, "Patch")


@cli.command()
@click.argument("left", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("right", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "table", "json"]),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--threshold",
    type=click.IntRange(min=0),
    default=None,
    help="Largest line-count product diffed with the edit-distance table",
)
@click.option("--width", type=click.IntRange(min=8), default=None, help="Column width for text output")
def compare(left: str, right: str, output_format: str, threshold: Optional[int], width: Optional[int]):
    """Compare two files side by side."""
    if left == "-" and right == "-":
        raise click.BadParameter("only one side can be read from stdin", param_hint="RIGHT")

    ops = diff_texts(_read_input(left), _read_input(right), threshold=threshold)
    rows = build_split_rows_from_ops(ops)

    if output_format == "json":
        console.print_json(
            data={
                "rows": [row.to_dict() for row in rows],
                "marks": [mark.to_dict() for mark in build_mini_marks(rows)],
            }
        )
        return

    if output_format == "table":
        table = Table(box=box.SIMPLE_HEAD, show_lines=False)
        table.add_column("#", style="dim", justify="right")
        table.add_column(left)
        table.add_column("#", style="dim", justify="right")
        table.add_column(right)
        for row in rows:
            table.add_row(
                "" if row.left_no is None else str(row.left_no),
                Text(row.left_text, style=CELL_STYLES[row.left_kind]),
                "" if row.right_no is None else str(row.right_no),
                Text(row.right_text, style=CELL_STYLES[row.right_kind]),
            )
        console.print(table)
        return

    column_width = width or DiffConfig.get_column_width()
    click.echo(TextReporter.generate_side_by_side(rows, column_width=column_width), nl=False)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--history-order",
    type=click.Choice([order.value for order in HistoryOrder]),
    default=None,
    help="Follow all parents or only first parents (default: GRAPHORIA_HISTORY_ORDER or all)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "table", "json"]),
    default="text",
    help="Output format (default: text)",
)
@click.option("--compact", is_flag=True, help="Only compute packed preview lanes")
@click.option("--geometry", is_flag=True, help="Include drawing geometry in JSON output")
def lanes(log_file: str, history_order: Optional[str], output_format: str, compact: bool, geometry: bool):
    """
    Lay out a commit list as graph lanes.

    LOG_FILE holds one commit per line, newest first:
    "<hash> <parent> ..." as printed by git log --format='%H %P'.
    """
    if geometry and (compact or output_format != "json"):
        raise click.BadParameter(
            "geometry is only available with --format json and without --compact",
            param_hint="'--geometry'",
        )

    commits = parse_commit_log(_read_input(log_file))
    order = HistoryOrder(history_order) if history_order else LayoutConfig.get_history_order()

    if compact:
        lane_by_hash = compute_compact_lane_by_hash(commits, order)
        if output_format == "json":
            console.print_json(data=lane_by_hash)
        elif output_format == "table":
            table = Table(title="Compact lanes", box=box.ROUNDED)
            table.add_column("Commit", style="cyan")
            table.add_column("Lane", justify="right")
            for commit in commits:
                table.add_row(commit.hash[:12], str(lane_by_hash[commit.hash]))
            console.print(table)
        else:
            for commit in commits:
                click.echo(f"{lane_by_hash[commit.hash]:>3}  {commit.hash}")
        return

    layout = compute_commit_lane_rows(commits, order)

    if output_format == "json":
        data = layout.to_dict()
        if geometry:
            theme = LayoutConfig.get_theme()
            for row_data, row in zip(data["rows"], layout.rows):
                row_data["geometry"] = compute_row_geometry(row, layout.max_lanes, theme).to_dict()
        console.print_json(data=data)
        return

    if output_format == "table":
        table = Table(title=f"Lanes (max {layout.max_lanes})", box=box.ROUNDED)
        table.add_column("Commit", style="cyan")
        table.add_column("Lane", justify="right")
        table.add_column("Parents", style="dim")
        table.add_column("Joins", style="dim")
        for row in layout.rows:
            table.add_row(
                row.hash[:12],
                str(row.lane),
                _format_lanes(row.parent_lanes),
                _format_lanes(row.join_lanes),
            )
        console.print(table)
        return

    click.echo(TextReporter.generate_graph(layout), nl=False)


def _format_lanes(values: List[int]) -> str:
    return ", ".join(str(v) for v in values) if values else "-"


def main():
    cli()


if __name__ == "__main__":
    main()
