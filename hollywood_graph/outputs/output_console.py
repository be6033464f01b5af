"""Console output: actor numbers, graph stats and the adjacency dump."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hollywood_graph.model import ActorNumberEntry, AnalysisResult, GraphStats, SlotEntry


def format_slot(entry: SlotEntry) -> str:
    """'[index = 3]: empty' or '[index = 3]: Alice --> M1 --> M2'."""
    if entry.head is None:
        return f"[index = {entry.index}]: empty"
    return f"[index = {entry.index}]: " + " --> ".join([entry.head, *entry.chain])


def render_console(result: AnalysisResult, plain: bool = False, top: int = 0) -> None:
    """Print actor numbers and graph stats to stdout."""
    if plain:
        _render_plain(result, top)
    else:
        _render_rich(result, top)


def render_table(table: list[SlotEntry], stats: GraphStats, plain: bool = False) -> None:
    """Print the adjacency dump followed by vertex and edge counts."""
    if plain:
        for entry in table:
            print(format_slot(entry))
        _print_plain_stats(stats)
        sys.stdout.flush()
        return

    from rich.console import Console
    from rich.markup import escape

    console = Console()
    for entry in table:
        if entry.head is None:
            console.print(f"[dim]{escape(format_slot(entry))}[/dim]")
        else:
            console.print(escape(format_slot(entry)))
    console.print(f"\nVertex size: {stats.vertex_count}")
    console.print(f"Edge size: {stats.edge_count}")


def _shown(entries: list[ActorNumberEntry], top: int) -> list[ActorNumberEntry]:
    return entries[:top] if top else entries


def _render_rich(result: AnalysisResult, top: int) -> None:
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    console = Console()
    numbers = result.numbers

    if result.table:
        render_table(result.table, result.graph)
        console.print()

    if not numbers.found:
        console.print(f"[red]No actor named '{escape(numbers.source)}' in the graph[/red]")
        return

    table = Table(title=f"Actor Numbers from {escape(numbers.source)}")
    table.add_column("Actor", style="bold")
    table.add_column("Actor Number", justify="right")
    for entry in _shown(numbers.entries, top):
        table.add_row(escape(entry.name), str(entry.hop))
    console.print(table)

    hist = Table(title="Actors per Hop")
    hist.add_column("Hop", justify="right")
    hist.add_column("Actors", justify="right")
    for hop, count in numbers.histogram.items():
        hist.add_row(str(hop), str(count))
    console.print(hist)

    console.print(f'\nThe average "Actor Number" above is: {numbers.average:.2f}')
    console.print(
        f"Reachable actors: {numbers.reachable}, farthest at {numbers.max_hop} hop(s)"
    )
    console.print(
        f"Vertices: {result.graph.vertex_count}, edges: {result.graph.edge_count}, "
        f"capacity: {result.graph.capacity}"
    )


def _render_plain(result: AnalysisResult, top: int) -> None:
    numbers = result.numbers

    if result.table:
        for entry in result.table:
            print(format_slot(entry))
        _print_plain_stats(result.graph)
        print()

    if not numbers.found:
        print(f"No actor named '{numbers.source}' in the graph")
        sys.stdout.flush()
        return

    print("Actor Numbers")
    print("*************")
    for entry in _shown(numbers.entries, top):
        print(f"{entry.name} : {entry.hop}")

    print(f'\nThe average "Actor Number" above is: {numbers.average:.2f}')
    print(f"Reachable actors: {numbers.reachable}, farthest at {numbers.max_hop} hop(s)")
    sys.stdout.flush()


def _print_plain_stats(stats: GraphStats) -> None:
    print(f"\nVertex size: {stats.vertex_count}")
    print(f"Edge size: {stats.edge_count}")
