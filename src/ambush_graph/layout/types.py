"""Layout types shared by the layout passes, the view and renderers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from ambush_graph.ir.graph import ExecutionGraph

logger = logging.getLogger(__name__)


class _UnresolvedType:
    """Position not derived from the region grid yet."""

    _instance: _UnresolvedType | None = None

    def __new__(cls) -> _UnresolvedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Unresolved"


Unresolved = _UnresolvedType()


@dataclass(frozen=True)
class Fixed:
    """A pixel position that is authoritative from now on."""

    x: int
    y: int


class PositionSource(Protocol):
    """Anything that can turn a region pair into pixel coordinates."""

    def point_for(self, x_region: int, y_region: int) -> tuple[int, int]: ...


@dataclass
class LayoutPoint:
    """Per-node layout state: regions plus a lazily resolved position."""

    node: int
    color: tuple[int, int, int]
    x_region: int
    y_region: int
    position: Fixed | _UnresolvedType = Unresolved
    user_fixed: bool = False
    source: PositionSource | None = field(default=None, repr=False, compare=False)

    @property
    def resolved(self) -> bool:
        return isinstance(self.position, Fixed)

    def resolve(self) -> Fixed:
        """Derive the position from regions once; later calls return the cached value."""
        if isinstance(self.position, Fixed):
            return self.position
        if self.source is None:
            raise RuntimeError(f"LayoutPoint for node {self.node} has no position source")
        x, y = self.source.point_for(self.x_region, self.y_region)
        self.position = Fixed(x, y)
        self.source = None  # no longer needed
        return self.position

    @property
    def x(self) -> int:
        return self.resolve().x

    @property
    def y(self) -> int:
        return self.resolve().y

    def set_position(self, x: int, y: int) -> None:
        """Overwrite the position; it is never re-derived from regions again."""
        self.position = Fixed(x, y)
        self.user_fixed = True
        self.source = None

    def move_y(self, dy: int) -> None:
        pos = self.resolve()
        self.position = Fixed(pos.x, pos.y + dy)


@dataclass
class Segment:
    """An edge line in view coordinates (zoom applied, origin subtracted)."""

    parent: int
    child: int
    x1: int
    y1: int
    x2: int
    y2: int


@dataclass
class GraphDataSet:
    """Snapshot of one layout run plus the view state that goes with it."""

    width: int
    height: int
    graph: ExecutionGraph | None = None
    head: int | None = None
    points: dict[int, LayoutPoint] = field(default_factory=dict)
    zoom_factor: float = 1.0
    origin_x: int = 0
    origin_y: int = 0
    draw_all_labels: bool = True
    highlighted: int | None = None
    moving: int | None = None

    def set_data(
        self, graph: ExecutionGraph, head: int, points: dict[int, LayoutPoint], max_labelled: int = 20
    ) -> None:
        self.graph = graph
        self.head = head
        self.points = points
        self.draw_all_labels = len(points) <= max_labelled

    def position_of(self, node: int) -> tuple[int, int] | None:
        point = self.points.get(node)
        if point is None:
            return None
        return point.x, point.y

    def to_view(self, x: int, y: int) -> tuple[int, int]:
        return int(x * self.zoom_factor) - self.origin_x, int(y * self.zoom_factor) - self.origin_y

    def edges(self) -> list[tuple[int, int]]:
        """Edges between positioned nodes; dangling ones are reported and skipped."""
        if self.graph is None:
            return []
        result: list[tuple[int, int]] = []
        for node in self.points:
            if not self.graph.contains(node):
                logger.warning("%s has a position but is no longer in the graph", self.graph.label(node))
                continue
            for child in self.graph.children(node):
                if child not in self.points:
                    logger.warning(
                        "%s is connected to an unknown node: %s", self.graph.label(node), self.graph.label(child)
                    )
                    continue
                result.append((node, child))
        return result

    def segments(self) -> list[Segment]:
        segments: list[Segment] = []
        for parent, child in self.edges():
            x1, y1 = self.to_view(self.points[parent].x, self.points[parent].y)
            x2, y2 = self.to_view(self.points[child].x, self.points[child].y)
            segments.append(Segment(parent=parent, child=child, x1=x1, y1=y1, x2=x2, y2=y2))
        return segments
