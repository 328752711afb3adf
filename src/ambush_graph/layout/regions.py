"""Region assignment — first layout pass.

Every node reachable from the head gets an integer (x_region, y_region)
pair. x_region is the depth column: 1 for the head and 1 + the length of
the longest path from the head for everything else, so edges never run
backwards. y_region is the node's dense rank within its column, following
the top-to-bottom order of the depth-first traversal.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from ambush_graph.errors import GraphCycleError, InvalidRegionError
from ambush_graph.ir.graph import ExecutionGraph


@dataclass
class RegionAssignment:
    """Final regions plus the per-column node lists they were ranked from."""

    regions: dict[int, tuple[int, int]] = field(default_factory=dict)
    columns: dict[int, list[int]] = field(default_factory=dict)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def column_size(self, x_region: int) -> int:
        if x_region not in self.columns:
            raise InvalidRegionError(f"Column {x_region} is not in 1..{self.column_count}")
        return len(self.columns[x_region])

    def x_region(self, node: int) -> int:
        return self.regions[node][0]

    def y_region(self, node: int) -> int:
        return self.regions[node][1]

    def ordered_nodes(self) -> list[int]:
        """Nodes column by column, top to bottom."""
        return [node for x in sorted(self.columns) for node in self.columns[x]]


class _Columns:
    """Per-column buckets that remember the order nodes entered them."""

    def __init__(self) -> None:
        self.buckets: dict[int, dict[int, None]] = {}

    def enter(self, node: int, x_region: int) -> None:
        self.buckets.setdefault(x_region, {})[node] = None

    def move(self, node: int, old_x: int, new_x: int) -> None:
        self.buckets.get(old_x, {}).pop(node, None)
        self.enter(node, new_x)


def assign_regions(graph: ExecutionGraph, head: int) -> RegionAssignment:
    """Assign (x_region, y_region) to every node reachable from head."""
    x_of: dict[int, int] = {}
    y_of: dict[int, int] = {}
    columns = _Columns()
    max_y = 0

    # (node, x_region, y_region) frames, popped in depth-first pre-order
    stack: list[tuple[int, int, int]] = [(head, 1, 1)]
    while stack:
        node, x_region, y_region = stack.pop()
        max_y = max(max_y, y_region)
        if node not in x_of:
            x_of[node] = x_region
            y_of[node] = y_region
            columns.enter(node, x_region)
            base = max_y
            frames = [(child, x_region + 1, base + i + 1) for i, child in enumerate(graph.children(node))]
            stack.extend(reversed(frames))
        elif x_region > x_of[node]:
            _shift_right(graph, node, x_region, x_of, columns)

    return _rank_columns(columns, x_of, y_of)


def _shift_right(
    graph: ExecutionGraph,
    node: int,
    new_x: int,
    x_of: dict[int, int],
    columns: _Columns,
) -> None:
    """Move node to new_x and push its already placed descendants right as needed."""
    shifted: set[int] = {node}
    pending = [node]
    while pending:
        current = pending.pop()
        for child in graph.children(current):
            if child in x_of and child not in shifted:
                shifted.add(child)
                pending.append(child)

    try:
        order = list(nx.topological_sort(graph.digraph.subgraph(shifted)))
    except nx.NetworkXUnfeasible as e:
        raise GraphCycleError(f"Cycle through {graph.label(node)} reachable from the layout head") from e

    for current in order:
        target = new_x if current == node else x_of[current]
        for parent in graph.parents(current):
            if parent in x_of:
                target = max(target, x_of[parent] + 1)
        if target > x_of[current]:
            columns.move(current, x_of[current], target)
            x_of[current] = target


def _rank_columns(columns: _Columns, x_of: dict[int, int], y_of: dict[int, int]) -> RegionAssignment:
    result = RegionAssignment()
    for x_region in sorted(columns.buckets):
        bucket = list(columns.buckets[x_region])
        if not bucket:
            continue
        bucket.sort(key=lambda n: y_of[n])
        result.columns[x_region] = bucket
        for rank, node in enumerate(bucket, start=1):
            result.regions[node] = (x_of[node], rank)
    return result
