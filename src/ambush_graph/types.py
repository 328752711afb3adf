"""Shared type definitions for ambush-graph.

Enums used across the graph model, layout and renderers.
"""

from __future__ import annotations

from enum import Enum, auto


class NodeKind(Enum):
    Task = auto()  # named unit of work
    Join = auto()  # synthetic sync point, no name
