"""Soft grid coordinate generator.

Each axis is split into equal slots, one per region; a point starts at the
centre of its slot and is nudged by a bounded random jitter that never
pushes it past the edge margin. All randomness comes from the injected
``random.Random`` so a fixed seed reproduces the same picture.
"""

from __future__ import annotations

import random

from ambush_graph.config import LayoutConfig
from ambush_graph.errors import InvalidRegionError
from ambush_graph.layout.regions import RegionAssignment


def soft_grid_point(
    region: int,
    total_regions: int,
    max_dimension: int,
    rng: random.Random,
    softness: int,
    margin: int,
) -> int:
    """Pixel position for a 1-based region on one axis."""
    if region < 1:
        raise InvalidRegionError(f"Region must be >= 1: {region}")
    if region > total_regions:
        raise InvalidRegionError(f"Region can not be beyond total regions: {region} / {total_regions}")

    space_per_region = max_dimension // total_regions
    pos = space_per_region // 2 + (region - 1) * space_per_region

    jitter = rng.randrange(softness // 2) if softness >= 2 else 0
    if pos < margin or (pos < max_dimension - margin and rng.random() < 0.5):
        pos += jitter
    else:
        pos -= jitter

    return max(margin, min(pos, max_dimension - margin))


class SoftGrid:
    """Binds a region assignment to a canvas and a random source."""

    def __init__(
        self,
        assignment: RegionAssignment,
        width: int,
        height: int,
        rng: random.Random,
        config: LayoutConfig | None = None,
    ) -> None:
        self.config = config or LayoutConfig()
        self.config.validate_canvas(width, height)
        self.assignment = assignment
        self.width = width
        self.height = height
        self.rng = rng

    def point_for(self, x_region: int, y_region: int) -> tuple[int, int]:
        cfg = self.config
        if x_region == 1:
            # the head column is pinned so the graph always starts at the same spot
            x = cfg.edge_margin
        else:
            x = soft_grid_point(
                x_region, self.assignment.column_count, self.width, self.rng, cfg.grid_softness, cfg.edge_margin
            )
        y = soft_grid_point(
            y_region,
            self.assignment.column_size(x_region),
            self.height,
            self.rng,
            cfg.grid_softness,
            cfg.edge_margin,
        )
        return x, y

    def random_color(self) -> tuple[int, int, int]:
        limit = self.config.color_max
        return self.rng.randrange(limit), self.rng.randrange(limit), self.rng.randrange(limit)
