"""Exception types raised by the graph model and layout engine."""

from __future__ import annotations


class AmbushGraphError(Exception):
    """Base class for all ambush-graph errors."""


class GraphStructureError(AmbushGraphError, ValueError):
    """An edge or node would break the graph's structural rules."""


class GraphCycleError(GraphStructureError):
    """A cycle is reachable from the layout head."""


class UnknownNodeError(AmbushGraphError, KeyError):
    """A node handle does not belong to the graph arena."""


class InvalidRegionError(AmbushGraphError, ValueError):
    """A region index is outside 1..total for its axis.

    This signals a broken region assignment, so it is never clamped.
    """
