"""Edge-list parser — builds an ExecutionGraph from ``parent -> child`` lines.

Format:
    # comment
    start -> fetch -> &sync
    start -> parse -> &sync
    &sync -> report

Identifiers starting with ``&`` are join nodes; the identifier only ties
lines together, the join itself stays nameless. A line holding a single
identifier declares a node without edges. The first identifier seen is the
head unless the caller picks another one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ambush_graph.errors import GraphStructureError
from ambush_graph.ir.graph import ExecutionGraph

_COMMENT_RE = re.compile(r"#.*$")
_IDENT_RE = re.compile(r"&?[A-Za-z0-9_.:-]+")
_ARROW = "->"
JOIN_PREFIX = "&"


@dataclass
class ParsedGraph:
    graph: ExecutionGraph
    head: int
    handles: dict[str, int] = field(default_factory=dict)

    def handle(self, ident: str) -> int:
        if ident not in self.handles:
            raise ValueError(f"Unknown node '{ident}'")
        return self.handles[ident]


class EdgeListParser:
    """Line-oriented parser for the edge-list format."""

    def parse(self, src: str, head: str | None = None) -> ParsedGraph:
        graph = ExecutionGraph()
        handles: dict[str, int] = {}

        def handle_for(ident: str) -> int:
            if ident not in handles:
                if ident.startswith(JOIN_PREFIX):
                    handles[ident] = graph.add_join()
                else:
                    handles[ident] = graph.add_task(ident)
            return handles[ident]

        for lineno, raw in enumerate(src.splitlines(), start=1):
            line = _COMMENT_RE.sub("", raw).strip()
            if not line:
                continue
            idents = [part.strip() for part in line.split(_ARROW)]
            for ident in idents:
                if not _IDENT_RE.fullmatch(ident):
                    raise ValueError(f"line {lineno}: invalid node identifier '{ident}'")
            chain = [handle_for(ident) for ident in idents]
            for parent, child in zip(chain, chain[1:]):
                try:
                    graph.add_edge(parent, child)
                except GraphStructureError as e:
                    raise ValueError(f"line {lineno}: {e}") from e

        if not handles:
            raise ValueError("Edge list is empty")
        if head is None:
            head_handle = next(iter(handles.values()))
        elif head in handles:
            head_handle = handles[head]
        else:
            raise ValueError(f"Head node '{head}' does not appear in the edge list")
        return ParsedGraph(graph=graph, head=head_handle, handles=handles)
