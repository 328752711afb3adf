"""Clustering pass — second layout pass.

Walks breadth-first from the head's grandchildren and pulls each node's y
position part of the way towards the mean y of its positioned parents.
Each node is visited once. Within one breadth-first level every move is
computed from the positions as they were before that level moved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ambush_graph.ir.graph import ExecutionGraph
from ambush_graph.layout.types import GraphDataSet

logger = logging.getLogger(__name__)


def cluster_positions(graph: ExecutionGraph, dataset: GraphDataSet, squeeze_factor: int = 2) -> int:
    """Nudge nodes towards their parents. Returns how many nodes moved."""
    if squeeze_factor < 1:
        raise ValueError(f"squeeze_factor must be >= 1, got {squeeze_factor}")
    head = dataset.head
    if head is None or not graph.contains(head):
        return 0

    frontier = _unique(grandchild for child in graph.children(head) for grandchild in graph.children(child))
    visited: set[int] = set()
    moved = 0

    while frontier:
        level = [node for node in frontier if node not in visited]
        visited.update(level)

        moves: list[tuple[int, int]] = []
        next_frontier: list[int] = []
        for node in level:
            point = dataset.points.get(node)
            if point is None or not graph.contains(node):
                logger.warning("unknown node: %s", graph.label(node))
                continue
            parent_ys = _parent_positions(graph, dataset, node)
            if parent_ys:
                mean = int(sum(parent_ys) / len(parent_ys))
                moves.append((node, int((mean - point.y) / squeeze_factor)))
            next_frontier.extend(graph.children(node))

        for node, dy in moves:
            if dy:
                dataset.points[node].move_y(dy)
                moved += 1

        frontier = _unique(n for n in next_frontier if n not in visited)

    logger.debug("clustering moved %d of %d nodes", moved, len(dataset.points))
    return moved


def _parent_positions(graph: ExecutionGraph, dataset: GraphDataSet, node: int) -> list[int]:
    """Current y of each positioned parent.

    Parents outside the snapshot (reachable only from another root) are left
    out of the mean; their edges stay in the graph.
    """
    ys: list[int] = []
    for parent in graph.parents(node):
        point = dataset.points.get(parent)
        if point is None:
            logger.debug("ignoring unpositioned parent %s of %s", graph.label(parent), graph.label(node))
            continue
        ys.append(point.y)
    return ys


def _unique(nodes: Iterable[int]) -> list[int]:
    return list(dict.fromkeys(nodes))
