"""Parser entry point for graph source text."""

from __future__ import annotations

from ambush_graph.parsers.edgelist import EdgeListParser, ParsedGraph


def parse_edge_list(src: str, head: str | None = None) -> ParsedGraph:
    """Parse edge-list text into an ExecutionGraph plus its head handle."""
    return EdgeListParser().parse(src, head)


__all__ = ["EdgeListParser", "ParsedGraph", "parse_edge_list"]
