"""CLI entry point for ambush-graph."""

import logging
import sys

import click

from ambush_graph.errors import AmbushGraphError
from ambush_graph.layout import layout_graph
from ambush_graph.parsers import parse_edge_list
from ambush_graph.renderers.base import Renderer
from ambush_graph.renderers.table import TableRenderer


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--width", "-W", "width", type=int, default=1280, help="Canvas width in pixels")
@click.option("--height", "-H", "height", type=int, default=1024, help="Canvas height in pixels")
@click.option("--seed", "-s", "seed", type=int, default=None, help="Seed for placement jitter")
@click.option("--head", "head", type=str, default=None, help="Head node identifier (default: first seen)")
@click.option("--no-simplify", "no_simplify", is_flag=True, help="Keep redundant join nodes")
@click.option("--no-edges", "no_edges", is_flag=True, help="Only print the node table")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log simplification and layout details")
def main(
    input: str | None,
    width: int,
    height: int,
    seed: int | None,
    head: str | None,
    no_simplify: bool,
    no_edges: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """Execution graph edge list to a node layout table."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        parsed = parse_edge_list(text, head)
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    try:
        dataset = layout_graph(parsed.graph, parsed.head, width, height, seed, simplify=not no_simplify)
    except (ValueError, AmbushGraphError) as e:
        click.echo(f"layout error: {e}", err=True)
        sys.exit(1)

    renderer: Renderer = TableRenderer(show_edges=not no_edges)
    rendered = renderer.render(dataset)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
