"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from ambush_graph.layout.types import GraphDataSet


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, dataset: GraphDataSet) -> str:
        """Render a laid-out snapshot to an output string."""
        ...
