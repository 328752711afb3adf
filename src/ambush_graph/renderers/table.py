"""Plain-text table renderer — one row per positioned node, then the edges."""

from __future__ import annotations

from ambush_graph.layout.types import GraphDataSet

_HEADERS = ("name", "kind", "x_region", "y_region", "x", "y")
JOIN_DISPLAY = "<join>"


class TableRenderer:
    def __init__(self, show_edges: bool = True) -> None:
        self.show_edges = show_edges

    def render(self, dataset: GraphDataSet) -> str:
        graph = dataset.graph
        if graph is None or not dataset.points:
            return ""

        rows: list[tuple[str, ...]] = [_HEADERS]
        for node, point in dataset.points.items():
            rows.append(
                (
                    _display_name(dataset, node),
                    graph.kind(node).name.lower() if graph.contains(node) else "?",
                    str(point.x_region),
                    str(point.y_region),
                    str(point.x),
                    str(point.y),
                )
            )

        widths = [max(len(row[i]) for row in rows) for i in range(len(_HEADERS))]
        lines = ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]

        if self.show_edges:
            edges = dataset.edges()
            if edges:
                lines.append("")
                for parent, child in edges:
                    lines.append(f"{_display_name(dataset, parent)} -> {_display_name(dataset, child)}")

        return "\n".join(lines) + "\n"


def _display_name(dataset: GraphDataSet, node: int) -> str:
    graph = dataset.graph
    if graph is None or not graph.contains(node):
        return f"#{node}"
    if graph.is_join(node):
        return f"{JOIN_DISPLAY}#{node}"
    return graph.name(node)
