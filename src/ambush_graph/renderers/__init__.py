"""Renderers that turn a layout snapshot into text."""

from ambush_graph.renderers.base import Renderer
from ambush_graph.renderers.table import TableRenderer

__all__ = ["Renderer", "TableRenderer"]
