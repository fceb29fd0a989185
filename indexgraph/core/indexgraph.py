"""
Main facade class for indexed graphs.

This module provides the pyindexgraph class that owns a store and delegates
to the traversal and path modules.
"""

import logging
from typing import Any, Hashable, Iterator, List, Optional, Set, Tuple, Union

from ..classes.node import pynode
from ..classes.edge import pyedge
from ..classes.path import pypath
from .graph import IndexedGraph
from ..analysis.traversal import TraversalOrder, traverse, find_reachable, is_reachable
from ..analysis.pathfinding import PathFinder
from ..analysis.matrix import adjacency_matrix

logger = logging.getLogger(__name__)


class pyindexgraph:
    """
    Main facade class for indexed graph work.

    Store operations go to the IndexedGraph, walks to the traversal module
    and path queries to a PathFinder bound to the same store.
    """

    def __init__(self, graph: Optional[IndexedGraph] = None):
        """
        Initialize the facade.

        Args:
            graph: Optional existing store to wrap; a new empty one is created otherwise
        """
        self._graph = graph if graph is not None else IndexedGraph()
        self._pathfinder = PathFinder(self._graph)

    @property
    def graph(self) -> IndexedGraph:
        return self._graph

    # ========================================================================
    # STORE OPERATIONS
    # ========================================================================

    def insert_node(self, node_id: Hashable, value: Any = None) -> int:
        """Insert a node or return the index of the existing one."""
        return self._graph.insert_node(node_id, value)

    def get_node(self, node_id: Hashable) -> Optional[int]:
        """Get the index of a live node by id."""
        return self._graph.get_node(node_id)

    def get_node_record(self, index: int) -> pynode:
        return self._graph.get_node_record(index)

    def insert_edge(self, from_index: int, to_index: int, weight: Optional[float] = None) -> int:
        """Insert a directed edge between two live nodes."""
        return self._graph.insert_edge(from_index, to_index, weight)

    def get_edge(self, index: int) -> pyedge:
        return self._graph.get_edge(index)

    def remove_node(self, index: int) -> None:
        """Remove a node and every edge touching it."""
        self._graph.remove_node(index)

    def remove_edge(self, index: int) -> None:
        """Remove a single edge."""
        self._graph.remove_edge(index)

    def pop_first_node(self) -> Optional[pynode]:
        """Remove and return the earliest-inserted live node."""
        return self._graph.pop_first_node()

    def pop_last_node(self) -> Optional[pynode]:
        """Remove and return the most recently inserted live node."""
        return self._graph.pop_last_node()

    def neighbors(self, index: int) -> List[Tuple[int, int, Optional[float]]]:
        """Get live outgoing edges as (edge_index, to_index, weight)."""
        return self._graph.neighbors(index)

    def get_sources(self) -> List[int]:
        return self._graph.get_sources()

    def get_sinks(self) -> List[int]:
        return self._graph.get_sinks()

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, node_id: Hashable) -> bool:
        return node_id in self._graph

    # ========================================================================
    # TRAVERSAL & PATHS
    # ========================================================================

    def traverse(self, start_index: int,
                 order: Union[TraversalOrder, str] = TraversalOrder.DEPTH_FIRST) -> Iterator[int]:
        """Walk from a start node, yielding each reachable node once."""
        return traverse(self._graph, start_index, order)

    def find_reachable(self, start_index: int) -> Set[int]:
        return find_reachable(self._graph, start_index)

    def is_reachable(self, start_index: int, end_index: int) -> bool:
        return is_reachable(self._graph, start_index, end_index)

    def enumerate_simple_paths(self, start_index: int, end_index: int,
                               max_depth: Optional[int] = None) -> Iterator[pypath]:
        """Lazily enumerate every simple path between two nodes."""
        return self._pathfinder.enumerate_simple_paths(start_index, end_index, max_depth)

    def find_all_paths(self, start_index: int, end_index: int,
                       max_depth: Optional[int] = None) -> List[pypath]:
        return self._pathfinder.find_all_paths(start_index, end_index, max_depth)

    def count_paths(self, start_index: int, end_index: int, max_depth: Optional[int] = None) -> int:
        return self._pathfinder.count_paths(start_index, end_index, max_depth)

    def path_to_edges(self, path: List[int]) -> List[int]:
        return self._pathfinder.path_to_edges(path)

    def rank_paths(self, paths: List[pypath], descending: bool = False) -> List[pypath]:
        """Order paths by total weight, stable for ties."""
        return self._pathfinder.rank_paths(paths, descending)

    def adjacency_matrix(self, weighted: bool = False):
        """Dense adjacency matrix over live nodes, see analysis.matrix."""
        return adjacency_matrix(self._graph, weighted)

    def __repr__(self):
        return f"pyindexgraph({self._graph!r})"
