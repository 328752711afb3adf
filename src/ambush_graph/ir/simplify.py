"""Graph simplifier — collapses redundant join nodes in place.

Rewrite rules, applied per node until nothing changes:
  1. A task whose only parent is a join with fewer than two children takes
     over that join's parents; the join is deleted.
  2. A join with no children is a dead end and is deleted.
  3. A join with exactly one parent is dissolved into that parent, which
     adopts its children and is re-checked.
  4. A join whose children are all joins absorbs every child join that has
     it as sole parent; checks restart at the join if anything merged.
  5. A join with one child and several parents is bypassed: its parents
     connect straight to the child.

The head node is never deleted. Traversal is a sweep over the depth-first
pre-order of the graph repeated until a full sweep makes no change; each
node is settled with an explicit re-check stack. Every rewrite deletes a
node, so the work is bounded by graph size rather than call depth.
"""

from __future__ import annotations

import logging

from ambush_graph.ir.graph import ExecutionGraph

logger = logging.getLogger(__name__)


def simplify_graph(graph: ExecutionGraph, head: int) -> int:
    """Simplify the graph reachable from head. Returns the number of rewrites."""
    total = 0
    sweeps = 0
    while True:
        sweeps += 1
        applied = 0
        for node in graph.reachable_from(head):
            if graph.contains(node):
                applied += _settle(graph, node, head)
        total += applied
        if applied == 0:
            break
    logger.debug("simplified graph: %d rewrites in %d sweeps", total, sweeps)
    return total


def _settle(graph: ExecutionGraph, node: int, head: int) -> int:
    """Rewrite node, and anything a rewrite hands back, to a local fixed point."""
    applied = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if not graph.contains(current):
            continue
        recheck = _rewrite(graph, current, head)
        if recheck is None:
            continue
        applied += 1
        # re-check in the order returned
        stack.extend(reversed(recheck))
    return applied


def _rewrite(graph: ExecutionGraph, node: int, head: int) -> list[int] | None:
    """Apply the first matching rule. Returns nodes to re-check, or None."""
    if not graph.is_join(node):
        return _absorb_single_join_parent(graph, node, head)

    children = graph.children(node)
    parents = graph.parents(node)

    if node != head:
        if not children:
            logger.debug("removing dead-end %s", graph.label(node))
            graph.delete_node(node)
            return parents

        if len(parents) == 1:
            parent = parents[0]
            if parent in children:
                return None
            logger.debug("dissolving %s into %s", graph.label(node), graph.label(parent))
            graph.delete_node(node)
            for child in children:
                graph.add_edge(parent, child)
            return [parent, *children]

        if len(children) == 1 and len(parents) > 1:
            child = children[0]
            if child in parents:
                return None
            logger.debug("bypassing %s towards %s", graph.label(node), graph.label(child))
            graph.delete_node(node)
            for parent in parents:
                graph.add_edge(parent, child)
            return [child, *parents]

    if _merge_join_children(graph, node):
        return [node]
    return None


def _absorb_single_join_parent(graph: ExecutionGraph, node: int, head: int) -> list[int] | None:
    parents = graph.parents(node)
    if len(parents) != 1:
        return None
    parent = parents[0]
    if parent == head or not graph.is_join(parent) or len(graph.children(parent)) >= 2:
        return None
    grandparents = graph.parents(parent)
    if node in grandparents:
        return None
    logger.debug("%s replaces join parent %s", graph.label(node), graph.label(parent))
    graph.delete_node(parent)
    for grandparent in grandparents:
        graph.add_edge(grandparent, node)
    return [node, *grandparents]


def _merge_join_children(graph: ExecutionGraph, node: int) -> bool:
    """Fold child joins that hang only off node into node itself."""
    merged = False
    while True:
        children = graph.children(node)
        if not children or not all(graph.is_join(c) for c in children):
            return merged
        absorbed = False
        for child in children:
            if not graph.contains(child) or graph.parents(child) != [node]:
                continue
            grandchildren = graph.children(child)
            if node in grandchildren:
                continue
            logger.debug("merging %s into %s", graph.label(child), graph.label(node))
            graph.delete_node(child)
            for grandchild in grandchildren:
                graph.add_edge(node, grandchild)
            absorbed = True
        if not absorbed:
            return merged
        merged = True
