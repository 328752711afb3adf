"""Layout passes and public layout API."""

from __future__ import annotations

import random

from ambush_graph.config import LayoutConfig
from ambush_graph.ir.graph import ExecutionGraph
from ambush_graph.layout.cluster import cluster_positions
from ambush_graph.layout.coords import SoftGrid, soft_grid_point
from ambush_graph.layout.engine import GraphView, build_dataset
from ambush_graph.layout.regions import RegionAssignment, assign_regions
from ambush_graph.layout.types import Fixed, GraphDataSet, LayoutPoint, Segment, Unresolved

__all__ = [
    "Fixed",
    "GraphDataSet",
    "GraphView",
    "LayoutPoint",
    "RegionAssignment",
    "Segment",
    "SoftGrid",
    "Unresolved",
    "assign_regions",
    "build_dataset",
    "cluster_positions",
    "layout_graph",
    "soft_grid_point",
]


def layout_graph(
    graph: ExecutionGraph,
    head: int,
    width: int = 1280,
    height: int = 1024,
    seed: int | None = None,
    simplify: bool = True,
    config: LayoutConfig | None = None,
) -> GraphDataSet:
    """Run the full layout pipeline with a fresh seeded random source."""
    return build_dataset(graph, head, width, height, random.Random(seed), config, simplify)
