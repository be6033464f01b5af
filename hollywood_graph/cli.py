"""CLI entry point and pipeline orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from hollywood_graph.adapters.adapter_protocol import READERS
from hollywood_graph.config import load_config
from hollywood_graph.errors import HollywoodGraphError
from hollywood_graph.model import AnalysisResult, HollywoodConfig, ReadStats
from hollywood_graph.outputs.output_console import render_console, render_table
from hollywood_graph.outputs.output_json import render_json
from hollywood_graph.outputs.output_markdown import render_markdown
from hollywood_graph.outputs.output_run_metadata import build_run_metadata, write_run_metadata
from hollywood_graph.records import load_graph
from hollywood_graph.summary import summarize
from hollywood_graph.traversal import compute_actor_numbers

if TYPE_CHECKING:
    from hollywood_graph.store import GraphStore

app = typer.Typer(no_args_is_help=True)

DataArg = Annotated[Path, typer.Argument(help="Records file: actor | movie | movie ...")]
ConfigOpt = Annotated[Path | None, typer.Option("--config", help="Path to hollywood.yml")]
FormatOpt = Annotated[
    str | None, typer.Option("--format", help="Record format (pipe, tsv)")
]
PlainOpt = Annotated[bool, typer.Option("--plain", help="Plain text instead of rich tables")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """Hollywood Graph: actor numbers over an actor/movie graph."""


def _setup_logging(verbose: bool) -> None:
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)


def _build(
    data: Path, config_path: Path | None, fmt: str | None
) -> tuple[GraphStore, ReadStats, HollywoodConfig]:
    cfg = load_config(config_path)
    if fmt is not None:
        cfg.input.format = fmt

    if cfg.input.format not in READERS:
        valid = ", ".join(sorted(READERS))
        typer.echo(
            f"Error: unknown format '{cfg.input.format}'. Valid values: {valid}.",
            err=True,
        )
        raise SystemExit(2)

    try:
        store, read_stats = load_graph(data, cfg)
    except HollywoodGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904

    return store, read_stats, cfg


@app.command()
def table(
    data: DataArg,
    config_path: ConfigOpt = None,
    fmt: FormatOpt = None,
    plain: PlainOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Build the graph and print its adjacency table and counts."""
    _setup_logging(verbose)
    store, _, _ = _build(data, config_path, fmt)
    render_table(store.dump(), store.stats(), plain=plain)


@app.command("numbers")
def actor_numbers(
    data: DataArg,
    source: Annotated[
        str | None, typer.Option("--source", help="Source actor (prompted if omitted)")
    ] = None,
    config_path: ConfigOpt = None,
    fmt: FormatOpt = None,
    out: Annotated[
        Path | None, typer.Option("--out", help="Output directory for reports")
    ] = None,
    show_table: Annotated[
        bool, typer.Option("--show-table", help="Include the adjacency table")
    ] = False,
    top: Annotated[
        int | None, typer.Option("--top", min=0, help="List only the first N actors (0 = all)")
    ] = None,
    plain: PlainOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Compute the actor number of every actor reachable from a source actor."""
    _setup_logging(verbose)
    store, read_stats, cfg = _build(data, config_path, fmt)

    if source is None:
        source = typer.prompt("Enter a source actor")

    report = summarize(source, compute_actor_numbers(store, source))
    include_table = show_table or cfg.report.show_table
    limit = cfg.report.top if top is None else top

    result = AnalysisResult(
        data_path=str(data),
        read_stats=read_stats,
        graph=store.stats(),
        numbers=report,
        table=store.dump() if include_table else [],
    )

    render_console(result, plain=plain, top=limit)

    if out is not None:
        run_meta = build_run_metadata(data, out, source)

        try:
            md_path = render_markdown(result, out, run_meta, top=limit)
            typer.echo(f"Wrote report (MD): {md_path.resolve()}")
        except OSError as e:
            typer.echo(f"Error writing markdown: {e}", err=True)
            raise

        try:
            json_path = render_json(result, out)
            typer.echo(f"Wrote report (JSON): {json_path.resolve()}")
        except OSError as e:
            typer.echo(f"Error writing JSON: {e}", err=True)
            raise

        try:
            meta_path = write_run_metadata(run_meta, out)
            typer.echo(f"Wrote run metadata (JSON): {meta_path.resolve()}")
        except OSError as e:
            typer.echo(f"Error writing run metadata: {e}", err=True)
            raise

    if not report.found:
        raise SystemExit(1)
