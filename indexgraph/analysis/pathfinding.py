"""
Path finding for indexed graphs.

This module enumerates every simple path between two nodes by backtracking
depth-first search, and provides helpers for working with the result.
"""

import logging
from numbers import Integral
from typing import Iterator, List, Optional, Sequence

import numpy as np

from ..classes.path import pypath
from ..core.graph import IndexedGraph

logger = logging.getLogger(__name__)


def _check_max_depth(max_depth: Optional[int]) -> None:
    if max_depth is None:
        return
    if isinstance(max_depth, bool) or not isinstance(max_depth, Integral):
        raise TypeError(f"max_depth must be an int or None, got {type(max_depth).__name__}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")


def _search(graph: IndexedGraph, start_index: int, end_index: int,
            max_depth: Optional[int]) -> Iterator[pypath]:
    """
    Backtracking search driven by an explicit frame stack.

    Each frame holds the outgoing edge indices of one node on the current path
    and the position of the next edge to try. The current path is kept in
    parallel lists (nodes, edges, running weight totals) plus a set of the
    nodes on it for constant-time revisit checks.
    """
    if start_index == end_index:
        # The zero-length path is complete as soon as it starts
        yield pypath((), (start_index,), 0)
        return

    node_path: List[int] = [start_index]
    edge_path: List[int] = []
    totals = [0]
    on_path = {start_index}
    frames = [[list(graph.adjacency_list.get(start_index, ())), 0]]

    while frames:
        frame = frames[-1]
        edge_indices, position = frame

        if position >= len(edge_indices):
            frames.pop()
            if frames:
                # Backtrack out of the node that owned this frame
                on_path.discard(node_path.pop())
                edge_path.pop()
                totals.pop()
            continue

        frame[1] = position + 1

        edge_index = edge_indices[position]
        # The store may have been cleared or edited since this frame was built
        if edge_index >= len(graph.aEdge) or graph.aEdge[edge_index] is None:
            continue
        pEdge = graph.aEdge[edge_index]
        target_id = pEdge.to_index
        if target_id in on_path:
            continue
        if max_depth is not None and len(edge_path) >= max_depth:
            continue

        total = totals[-1] + pEdge.weight_or_zero

        if target_id == end_index:
            yield pypath(edge_path + [pEdge.index], node_path + [target_id], total)
            continue

        node_path.append(target_id)
        edge_path.append(pEdge.index)
        totals.append(total)
        on_path.add(target_id)
        frames.append([list(graph.adjacency_list.get(target_id, ())), 0])


def enumerate_simple_paths(graph: IndexedGraph, start_index: int, end_index: int,
                           max_depth: Optional[int] = None) -> Iterator[pypath]:
    """
    Enumerate every simple path from start_index to end_index.

    Paths come out depth-first, following outgoing edges in insertion order at
    every node, so the sequence is reproducible for the same insertion
    history. A path never revisits a node and stops as soon as it reaches
    end_index. When both endpoints are the same node only the zero-length
    path is produced. Path weight is the sum of edge weights with unweighted
    edges counted as 0.

    Endpoints are checked when this function is called. Mutating the graph
    while iterating gives unspecified results.

    Args:
        graph: IndexedGraph to search
        start_index: Index of the start node
        end_index: Index of the end node
        max_depth: Optional maximum number of edges per path (None = no limit)

    Returns:
        Lazy iterator of pypath objects

    Raises:
        UnknownNode: If either endpoint is not live
    """
    graph.get_node_record(start_index)
    graph.get_node_record(end_index)
    _check_max_depth(max_depth)
    return _search(graph, start_index, end_index, max_depth)


class PathFinder:
    """
    Path finding algorithms for indexed graphs.

    This class provides methods for:
    - Enumerating all simple paths between nodes
    - Counting paths
    - Converting node sequences to edge sequences
    - Ranking paths by total weight
    """

    def __init__(self, graph: IndexedGraph):
        """
        Initialize the path finder.

        Args:
            graph: IndexedGraph instance to analyze
        """
        self.graph = graph

    def enumerate_simple_paths(self, start_id: int, target_id: int,
                               max_depth: Optional[int] = None) -> Iterator[pypath]:
        """Lazily enumerate simple paths, see enumerate_simple_paths."""
        return enumerate_simple_paths(self.graph, start_id, target_id, max_depth)

    def find_all_paths(self, start_id: int, target_id: int,
                       max_depth: Optional[int] = None) -> List[pypath]:
        """
        Find all simple paths from start to target node.

        Args:
            start_id: Starting node index
            target_id: Target node index
            max_depth: Optional maximum number of edges per path

        Returns:
            List of paths in enumeration order
        """
        paths = list(self.enumerate_simple_paths(start_id, target_id, max_depth))
        logger.info(f"Found {len(paths)} simple paths from {start_id} to {target_id}")
        return paths

    def count_paths(self, start_id: int, target_id: int, max_depth: Optional[int] = None) -> int:
        """Count simple paths without keeping them."""
        return sum(1 for _ in self.enumerate_simple_paths(start_id, target_id, max_depth))

    def path_to_edges(self, path: Sequence[int]) -> List[int]:
        """
        Convert a path of node indices to edge indices.

        For each hop the first live edge in insertion order is used.

        Args:
            path: List of node indices representing a path

        Returns:
            List of edge indices

        Raises:
            UnknownNode: If a node in the path is not live
            ValueError: If two consecutive nodes are not joined by an edge
        """
        edge_indices = []

        for i in range(len(path) - 1):
            start_id = path[i]
            end_id = path[i + 1]

            for edge_index, neighbor_id, _ in self.graph.neighbors(start_id):
                if neighbor_id == end_id:
                    edge_indices.append(edge_index)
                    break
            else:
                raise ValueError(f"No edge from node {start_id} to node {end_id}")

        return edge_indices

    def rank_paths(self, paths: Sequence[pypath], descending: bool = False) -> List[pypath]:
        """
        Order paths by total weight.

        The sort is stable, so paths of equal weight keep their enumeration order.

        Args:
            paths: Paths to rank
            descending: Heaviest first when True

        Returns:
            New list of paths
        """
        paths = list(paths)
        if not paths:
            return []

        aWeight = np.asarray([path.weight for path in paths], dtype=float)
        if descending:
            aWeight = -aWeight
        aIndex_order = np.argsort(aWeight, kind="stable")
        return [paths[k] for k in aIndex_order]
