"""CLI entry point for nodegraph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from nodegraph.config import NodegraphConfig, load_config
from nodegraph.config.loader import DEFAULT_CONFIG_TEMPLATE
from nodegraph.errors import GraphError
from nodegraph.graph import Graph
from nodegraph.models import Edge, Node

app = typer.Typer(
    name="nodegraph",
    help="Structural queries over a directed graph of nodes and edges.",
)

config_app = typer.Typer(help="Manage nodegraph configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: NodegraphConfig | None = None

# config spells it "warn"; logging wants WARNING
_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> NodegraphConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to nodegraph.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    logging.basicConfig(level=_LOG_LEVELS[_config.log_level])


def build_sample_graph(with_cycle: bool = False, max_depth: int | None = None) -> Graph[int]:
    """Two roots (1 and 4) sharing node 2, with a longest branch 4-5-6-7."""
    kwargs = {} if max_depth is None else {"max_depth": max_depth}
    graph: Graph[int] = Graph(**kwargs)
    for node_id in range(1, 8):
        graph.add_node(Node(node_id))

    graph.add_edge(Edge(1, 2))
    graph.add_edge(Edge(2, 3))
    graph.add_edge(Edge(4, 2))
    graph.add_edge(Edge(4, 5))
    graph.add_edge(Edge(5, 6))
    graph.add_edge(Edge(6, 7))
    if with_cycle:
        graph.add_edge(Edge(7, 6))
    return graph


def _format_ids(nodes: list[Node]) -> str:
    return ", ".join(str(n.id) for n in nodes) if nodes else "-"


@app.command()
def demo(
    with_cycle: Annotated[
        bool, typer.Option("--with-cycle", help="Add edge 7 -> 6 to close a circular path")
    ] = False,
) -> None:
    """Build the sample graph and print its structure."""
    cfg = _get_config()
    graph = build_sample_graph(with_cycle=with_cycle, max_depth=cfg.traversal.max_depth)

    table = Table(title=f"Sample graph ({len(graph.nodes)} nodes, {len(graph.edges)} edges)")
    table.add_column("Query", style="cyan")
    table.add_column("Result", justify="right")
    table.add_row("Root nodes", _format_ids(graph.get_root_nodes()))
    table.add_row("Leaf nodes", _format_ids(graph.get_leaf_nodes()))
    table.add_row("Orphans", _format_ids(graph.find_orphans()))

    try:
        table.add_row("Has circular paths", "yes" if graph.has_circular_paths() else "no")
        table.add_row("Max depth", str(graph.get_max_depth()))
    except GraphError as e:
        rprint(table)
        rprint(Panel(escape(str(e)), title="Graph error", border_style="red"))
        raise typer.Exit(1)

    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default nodegraph.yaml in current directory."""
    target = Path("nodegraph.yaml")
    if target.exists() and not force:
        rprint("[yellow]nodegraph.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
