"""Execution graph model — an arena of task and join nodes.

Nodes are addressed by integer handles that are allocated once and never
reused. Adjacency lives in a networkx DiGraph keyed by handle, which keeps
parent and child lists symmetric and preserves insertion order, so
``children()`` is also the traversal order used by layout.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from ambush_graph.errors import GraphStructureError, UnknownNodeError
from ambush_graph.types import NodeKind


@dataclass(frozen=True)
class NodeData:
    kind: NodeKind
    label: str = ""

    @property
    def name(self) -> str:
        if self.kind is NodeKind.Join:
            return ""
        return self.label


class ExecutionGraph:
    """Arena of nodes plus directed parent -> child edges."""

    def __init__(self) -> None:
        self.digraph: nx.DiGraph = nx.DiGraph()
        self._next_handle = 0

    # ─── Construction ────────────────────────────────────────────────────

    def add_task(self, name: str) -> int:
        return self._add(NodeData(kind=NodeKind.Task, label=name))

    def add_join(self) -> int:
        return self._add(NodeData(kind=NodeKind.Join))

    def _add(self, data: NodeData) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.digraph.add_node(handle, data=data)
        return handle

    def add_edge(self, parent: int, child: int) -> None:
        """Connect parent -> child. Adding an existing edge is a no-op."""
        self._check(parent)
        self._check(child)
        if parent == child:
            raise GraphStructureError(f"Self loop on {self.label(parent)}")
        if not self.digraph.has_edge(parent, child):
            self.digraph.add_edge(parent, child)

    def remove_edge(self, parent: int, child: int) -> None:
        if self.digraph.has_edge(parent, child):
            self.digraph.remove_edge(parent, child)

    def delete_node(self, node: int) -> None:
        """Remove a node, stripping it from every neighbour on both sides."""
        self._check(node)
        self.digraph.remove_node(node)

    # ─── Queries ─────────────────────────────────────────────────────────

    def contains(self, node: int) -> bool:
        return node in self.digraph

    def data(self, node: int) -> NodeData:
        self._check(node)
        return self.digraph.nodes[node]["data"]

    def kind(self, node: int) -> NodeKind:
        return self.data(node).kind

    def is_join(self, node: int) -> bool:
        return self.data(node).kind is NodeKind.Join

    def name(self, node: int) -> str:
        return self.data(node).name

    def label(self, node: int) -> str:
        """Diagnostic label for log messages."""
        if node not in self.digraph:
            return f"node:#{node}"
        if self.is_join(node):
            return f"node:<join #{node}>"
        return f"node:{self.name(node)}"

    def children(self, node: int) -> list[int]:
        self._check(node)
        return list(self.digraph.successors(node))

    def parents(self, node: int) -> list[int]:
        self._check(node)
        return list(self.digraph.predecessors(node))

    def nodes(self) -> list[int]:
        return list(self.digraph.nodes)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def reachable_from(self, head: int) -> list[int]:
        """Depth-first pre-order of every node reachable from head."""
        self._check(head)
        order: list[int] = []
        seen: set[int] = set()
        stack = [head]
        while stack:
            node = stack.pop()
            if node in seen:
                continue
            seen.add(node)
            order.append(node)
            stack.extend(reversed([c for c in self.digraph.successors(node) if c not in seen]))
        return order

    def _check(self, node: int) -> None:
        if node not in self.digraph:
            raise UnknownNodeError(node)
