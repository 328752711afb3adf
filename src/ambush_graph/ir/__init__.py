"""Graph model and in-place simplification."""

from ambush_graph.ir.graph import ExecutionGraph, NodeData
from ambush_graph.ir.simplify import simplify_graph

__all__ = [
    "ExecutionGraph",
    "NodeData",
    "simplify_graph",
]
