"""Layout pipeline and the published view state.

``build_dataset`` runs simplify -> regions -> coordinates -> clustering and
returns a finished snapshot. ``GraphView`` owns the currently published
snapshot, swaps in a new one only after a full pipeline run, and exposes the
few mutation entry points an interactive front end needs.
"""

from __future__ import annotations

import logging
import math
import random
import threading

from ambush_graph.config import LayoutConfig, ViewConfig
from ambush_graph.errors import UnknownNodeError
from ambush_graph.ir.graph import ExecutionGraph
from ambush_graph.ir.simplify import simplify_graph
from ambush_graph.layout.cluster import cluster_positions
from ambush_graph.layout.coords import SoftGrid
from ambush_graph.layout.regions import assign_regions
from ambush_graph.layout.types import GraphDataSet, LayoutPoint

logger = logging.getLogger(__name__)


def build_dataset(
    graph: ExecutionGraph,
    head: int,
    width: int,
    height: int,
    rng: random.Random,
    config: LayoutConfig | None = None,
    simplify: bool = True,
) -> GraphDataSet:
    """Run the full layout pipeline for the graph reachable from head."""
    config = config or LayoutConfig()
    config.validate_canvas(width, height)
    if not graph.contains(head):
        raise UnknownNodeError(head)

    if simplify:
        simplify_graph(graph, head)
    assignment = assign_regions(graph, head)
    grid = SoftGrid(assignment, width, height, rng, config)

    points: dict[int, LayoutPoint] = {}
    for node in assignment.ordered_nodes():
        x_region, y_region = assignment.regions[node]
        points[node] = LayoutPoint(
            node=node,
            color=grid.random_color(),
            x_region=x_region,
            y_region=y_region,
            source=grid,
        )
    # resolve in column order so a seed always maps to the same picture
    for point in points.values():
        point.resolve()

    dataset = GraphDataSet(width=width, height=height)
    dataset.set_data(graph, head, points, config.max_nodes_draw_all_labels)
    cluster_positions(graph, dataset, config.squeeze_factor)
    logger.debug(
        "laid out %d nodes in %d columns on %dx%d", len(points), assignment.column_count, width, height
    )
    return dataset


class GraphView:
    """Holds the published snapshot and applies view mutations to it."""

    def __init__(
        self,
        graph: ExecutionGraph,
        width: int | None = None,
        height: int | None = None,
        config: LayoutConfig | None = None,
        view_config: ViewConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.graph = graph
        self.config = config or LayoutConfig()
        self.view_config = view_config or ViewConfig()
        self.width = width if width is not None else self.view_config.width
        self.height = height if height is not None else self.view_config.height
        self.config.validate_canvas(self.width, self.height)
        self.rng = rng or random.Random()
        self._lock = threading.Lock()
        self.current = GraphDataSet(width=self.width, height=self.height)

    def recompute_layout(self, head: int) -> GraphDataSet:
        """Lay the graph out again and publish the result.

        If any pass raises, the previously published snapshot stays current.
        """
        dataset = build_dataset(self.graph, head, self.width, self.height, self.rng, self.config)
        with self._lock:
            self.current = dataset
        return dataset

    def set_node_position(self, node: int, x: int, y: int) -> None:
        point = self.current.points.get(node)
        if point is None:
            raise UnknownNodeError(node)
        point.set_position(x, y)

    def set_view_origin(self, x: int, y: int) -> None:
        """Move the view origin, keeping it inside the zoomed canvas."""
        dataset = self.current
        max_x = int(dataset.width * dataset.zoom_factor) - dataset.width
        max_y = int(dataset.height * dataset.zoom_factor) - dataset.height
        dataset.origin_x = max(0, min(x, max_x))
        dataset.origin_y = max(0, min(y, max_y))

    def set_zoom(self, factor: float) -> float:
        cfg = self.view_config
        factor = max(cfg.min_zoom, min(factor, cfg.max_zoom))
        self.current.zoom_factor = factor
        self.set_view_origin(self.current.origin_x, self.current.origin_y)
        return factor

    def zoom_in(self) -> float:
        return self._step_zoom(self.view_config.zoom_step)

    def zoom_out(self) -> float:
        return self._step_zoom(-self.view_config.zoom_step)

    def _step_zoom(self, step: float) -> float:
        dataset = self.current
        old = dataset.zoom_factor
        new = self.set_zoom(old + step)
        # keep the centre of the canvas in place
        x_change = int(dataset.width * new - dataset.width * old)
        y_change = int(dataset.height * new - dataset.height * old)
        self.set_view_origin(dataset.origin_x + x_change // 2, dataset.origin_y + y_change // 2)
        return new

    def zoomed_in(self, viewport_width: int, viewport_height: int) -> bool:
        dataset = self.current
        return (
            dataset.zoom_factor > 1
            or dataset.width > viewport_width + 10
            or dataset.height > viewport_height + 10
        )

    def closest_node(self, x: int, y: int) -> int | None:
        """Nearest node to a view coordinate, within the drag tolerance."""
        dataset = self.current
        tolerance = self.view_config.drag_tolerance
        best: int | None = None
        best_distance = math.inf
        for node, point in dataset.points.items():
            px, py = dataset.to_view(point.x, point.y)
            dx = abs(px - x)
            dy = abs(py - y)
            if dx <= tolerance and dy <= tolerance:
                distance = math.hypot(dx, dy)
                if distance < best_distance:
                    best_distance = distance
                    best = node
        return best

    def start_drag(self, x: int, y: int) -> int | None:
        """Pick up the node under a view coordinate, if any."""
        self.current.moving = self.closest_node(x, y)
        return self.current.moving

    def drag_to(self, x: int, y: int) -> bool:
        """Move the picked-up node to a view coordinate, kept on the canvas."""
        dataset = self.current
        if dataset.moving is None:
            return False
        canvas_x = int((x + dataset.origin_x) / dataset.zoom_factor)
        canvas_y = int((y + dataset.origin_y) / dataset.zoom_factor)
        self.set_node_position(
            dataset.moving,
            max(0, min(canvas_x, dataset.width)),
            max(0, min(canvas_y, dataset.height)),
        )
        return True

    def end_drag(self) -> None:
        self.current.moving = None

    def highlight_at(self, x: int, y: int) -> bool:
        """Highlight the node under the cursor. Returns True if it changed."""
        dataset = self.current
        if dataset.draw_all_labels:
            return False
        previous = dataset.highlighted
        dataset.highlighted = self.closest_node(x, y)
        return previous != dataset.highlighted

    def toggle_labels(self) -> bool:
        dataset = self.current
        dataset.draw_all_labels = not dataset.draw_all_labels
        if not dataset.draw_all_labels:
            dataset.highlighted = None
        return dataset.draw_all_labels
