"""Centralized configuration for ambush-graph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Configuration for the layout pipeline."""

    grid_softness: int = 50  # jitter range for point placement
    edge_margin: int = 50  # points are never placed closer than this to an edge
    squeeze_factor: int = 2  # smaller numbers result in tighter plot groups
    max_nodes_draw_all_labels: int = 20
    color_max: int = 150

    def validate_canvas(self, width: int, height: int) -> None:
        """Reject canvases too small to keep the edge margin on both sides."""
        minimum = 2 * self.edge_margin
        if width < minimum or height < minimum:
            raise ValueError(f"Canvas {width}x{height} is smaller than the {minimum}x{minimum} minimum")
        if self.squeeze_factor < 1:
            raise ValueError(f"squeeze_factor must be >= 1, got {self.squeeze_factor}")


@dataclass
class ViewConfig:
    """Configuration for the interactive view state."""

    width: int = 1280
    height: int = 1024
    min_zoom: float = 0.7
    max_zoom: float = 5.1
    zoom_step: float = 0.1
    drag_tolerance: int = 25
