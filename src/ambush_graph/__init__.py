"""ambush-graph: simplify and lay out execution graphs with join nodes."""

from ambush_graph.config import LayoutConfig, ViewConfig
from ambush_graph.ir.graph import ExecutionGraph
from ambush_graph.ir.simplify import simplify_graph
from ambush_graph.layout import GraphDataSet, GraphView, layout_graph
from ambush_graph.parsers import parse_edge_list
from ambush_graph.renderers.table import TableRenderer
from ambush_graph.types import NodeKind


def render_edge_list(
    src: str,
    width: int = 1280,
    height: int = 1024,
    seed: int | None = None,
    head: str | None = None,
    simplify: bool = True,
) -> str:
    """Parse an edge list, lay it out and render the layout table.

    Args:
        src: Edge-list source text.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        seed: Seed for the placement jitter; None picks a random one.
        head: Identifier of the head node; None uses the first one seen.
        simplify: False skips join node simplification.

    Returns:
        The rendered table.

    Raises:
        ValueError: If the input cannot be parsed or the canvas is too small.
    """
    parsed = parse_edge_list(src, head)
    dataset = layout_graph(parsed.graph, parsed.head, width, height, seed, simplify)
    return TableRenderer().render(dataset)


__all__ = [
    "ExecutionGraph",
    "GraphDataSet",
    "GraphView",
    "LayoutConfig",
    "NodeKind",
    "ViewConfig",
    "layout_graph",
    "parse_edge_list",
    "render_edge_list",
    "simplify_graph",
]
