"""
Graph walks over an indexed graph.

This module provides depth-first and breadth-first traversal and
reachability queries. Walks only read the store.
"""

import logging
from collections import deque
from enum import Enum
from typing import Iterator, List, Set, Union

from ..core.graph import IndexedGraph

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    """Available traversal orders."""
    DEPTH_FIRST = "dfs"
    BREADTH_FIRST = "bfs"


def _resolve_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    if isinstance(order, TraversalOrder):
        return order
    try:
        return TraversalOrder(order)
    except ValueError:
        raise ValueError(f"Unknown traversal order: {order!r}") from None


def successors(graph: IndexedGraph, index: int) -> List[int]:
    """
    Get the targets of the live outgoing edges of a node, in edge insertion order.

    Unlike IndexedGraph.neighbors, a node that is no longer live yields an
    empty list, so a walk in progress survives concurrent removals.
    """
    targets = []
    for edge_index in graph.adjacency_list.get(index, ()):
        pEdge = graph.aEdge[edge_index]
        if pEdge is not None:
            targets.append(pEdge.to_index)
    return targets


def _is_live(graph: IndexedGraph, index: int) -> bool:
    return index < len(graph.aNode) and graph.aNode[index] is not None


def _walk_depth_first(graph: IndexedGraph, start_index: int) -> Iterator[int]:
    seen: Set[int] = set()
    stack = [start_index]

    while stack:
        current_id = stack.pop()
        if current_id in seen or not _is_live(graph, current_id):
            continue

        seen.add(current_id)
        yield current_id

        # Reverse so the earliest-inserted edge is popped first
        for neighbor_id in reversed(successors(graph, current_id)):
            if neighbor_id not in seen:
                stack.append(neighbor_id)


def _walk_breadth_first(graph: IndexedGraph, start_index: int) -> Iterator[int]:
    seen: Set[int] = {start_index}
    queue = deque([start_index])

    while queue:
        current_id = queue.popleft()
        if not _is_live(graph, current_id):
            continue

        yield current_id

        for neighbor_id in successors(graph, current_id):
            if neighbor_id not in seen:
                seen.add(neighbor_id)
                queue.append(neighbor_id)


def traverse(graph: IndexedGraph, start_index: int,
             order: Union[TraversalOrder, str] = TraversalOrder.DEPTH_FIRST) -> Iterator[int]:
    """
    Walk the graph from a start node, yielding each reachable node index once.

    The start node is checked when this function is called, not when the
    returned iterator is first advanced. Each call starts a fresh walk.
    Mutating the graph while iterating gives unspecified results.

    Args:
        graph: IndexedGraph to walk
        start_index: Index of the start node
        order: TraversalOrder or its string value ("dfs" / "bfs")

    Returns:
        Lazy iterator of node indices in visit order

    Raises:
        UnknownNode: If start_index is not live
        ValueError: If the order is not recognized
    """
    method = _resolve_order(order)
    graph.get_node_record(start_index)

    if method is TraversalOrder.DEPTH_FIRST:
        return _walk_depth_first(graph, start_index)
    return _walk_breadth_first(graph, start_index)


def find_reachable(graph: IndexedGraph, start_index: int) -> Set[int]:
    """
    Find all node indices reachable from a start node, the start included.

    Raises:
        UnknownNode: If start_index is not live
    """
    reachable = set(traverse(graph, start_index, TraversalOrder.BREADTH_FIRST))
    logger.debug(f"Found {len(reachable)} nodes reachable from {start_index}")
    return reachable


def is_reachable(graph: IndexedGraph, start_index: int, end_index: int) -> bool:
    """
    Check whether end_index can be reached from start_index.

    Raises:
        UnknownNode: If either endpoint is not live
    """
    graph.get_node_record(end_index)
    for node_id in traverse(graph, start_index, TraversalOrder.BREADTH_FIRST):
        if node_id == end_index:
            return True
    return False
