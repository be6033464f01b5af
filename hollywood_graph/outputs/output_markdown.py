"""Markdown output: report.md generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from hollywood_graph.model import AnalysisResult

from hollywood_graph.outputs.output_console import format_slot


def render_markdown(
    result: AnalysisResult,
    out_path: Path,
    run_meta: dict[str, str],
    top: int = 0,
) -> Path:
    """Write report.md to the given directory and return the written path."""
    from pathlib import Path as _Path

    lines: list[str] = []
    lines.append("# Hollywood Graph Report\n")

    _run_metadata_section(lines, run_meta)
    _summary_section(lines, result)
    _numbers_section(lines, result, top)
    _histogram_section(lines, result)
    _graph_section(lines, result)
    _methodology_section(lines)

    _Path(str(out_path)).mkdir(parents=True, exist_ok=True)
    out_file = _Path(str(out_path), "report.md")
    out_file.write_text("\n".join(lines), encoding="utf-8")
    return out_file


def _run_metadata_section(lines: list[str], run_meta: dict[str, str]) -> None:
    lines.append("## Run Metadata\n")
    for key in sorted(run_meta):
        lines.append(f"- **{key}:** `{run_meta[key]}`")
    lines.append("")


def _summary_section(lines: list[str], result: AnalysisResult) -> None:
    numbers = result.numbers
    lines.append("## Summary\n")
    if not numbers.found:
        lines.append(f"Source actor **{numbers.source}** is not in the graph.\n")
        return
    lines.append(f"**Source actor:** {numbers.source}\n")
    lines.append(f"- Reachable actors: {numbers.reachable}")
    lines.append(f'- Average "Actor Number": {numbers.average:.2f}')
    lines.append(f"- Farthest actor number: {numbers.max_hop}")
    lines.append("")


def _numbers_section(lines: list[str], result: AnalysisResult, top: int) -> None:
    numbers = result.numbers
    if not numbers.found:
        return
    lines.append("## Actor Numbers\n")
    lines.append("| Actor | Actor Number |")
    lines.append("|-------|-------------:|")
    entries = numbers.entries[:top] if top else numbers.entries
    for entry in entries:
        name = entry.name.replace("|", "\\|")
        lines.append(f"| {name} | {entry.hop} |")
    if len(entries) < len(numbers.entries):
        lines.append(f"\n_{len(numbers.entries) - len(entries)} more actor(s) not shown._")
    lines.append("")


def _histogram_section(lines: list[str], result: AnalysisResult) -> None:
    if not result.numbers.found:
        return
    lines.append("## Actors per Hop\n")
    for hop, count in result.numbers.histogram.items():
        lines.append(f"- {hop}: {count}")
    lines.append("")


def _graph_section(lines: list[str], result: AnalysisResult) -> None:
    g = result.graph
    lines.append("## Graph\n")
    lines.append(f"- Records read: {result.read_stats.records}")
    lines.append(f"- Blank lines skipped: {result.read_stats.skipped}")
    lines.append(f"- Vertices: {g.vertex_count}")
    lines.append(f"- Edges: {g.edge_count}")
    lines.append(f"- Table capacity: {g.capacity} (load {g.load:.2f})")
    lines.append("")

    if result.table:
        lines.append("### Adjacency Table\n")
        lines.append("```")
        lines.extend(format_slot(entry) for entry in result.table)
        lines.append("```\n")


def _methodology_section(lines: list[str]) -> None:
    lines.append("## Methodology\n")
    lines.append(
        "Actors and movies are vertices of a bipartite graph, with an edge whenever "
        "an actor appears in a movie. The actor number of an actor is the number of "
        "shared-movie links on the shortest chain from the source actor, found by a "
        "breadth-first search that alternates between actor and movie layers and "
        "reports only the actor layers.\n"
    )
