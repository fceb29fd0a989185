"""
Core graph data structure for the indexed graph.

This module provides the node/edge store without traversal or path algorithms.
"""

import logging
from numbers import Integral
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from ..classes.node import pynode
from ..classes.edge import pyedge, validate_weight
from .errors import UnknownNode, UnknownEdge

logger = logging.getLogger(__name__)


class IndexedGraph:
    """
    Node/edge store for directed multigraphs.

    Nodes and edges live in flat lists addressed by stable integer indices.
    Removal tombstones a slot (sets it to None) instead of compacting, so an
    index is never handed out twice. This class provides:
    - Node insertion and identity lookup (id -> index)
    - Edge insertion, with parallel edges allowed
    - Node removal cascading to every touching edge
    - Adjacency queries in edge insertion order
    - Degree tracking and basic queries (sources, sinks)
    """

    def __init__(self):
        """Initialize an empty store."""
        # Record tables, None marks a tombstone
        self.aNode: List[Optional[pynode]] = []
        self.aEdge: List[Optional[pyedge]] = []

        # Identity mapping over live nodes
        self.id_to_index: Dict[Hashable, int] = {}

        # Graph structure: node index -> edge indices in insertion order
        self.adjacency_list: Dict[int, List[int]] = {}
        self.reverse_adjacency: Dict[int, List[int]] = {}

        self.nNode_live = 0
        self.nEdge_live = 0

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #
    def _require_node(self, index) -> pynode:
        if isinstance(index, Integral) and not isinstance(index, bool) and 0 <= index < len(self.aNode):
            pNode = self.aNode[index]
            if pNode is not None:
                return pNode
        raise UnknownNode(index)

    def _require_edge(self, index) -> pyedge:
        if isinstance(index, Integral) and not isinstance(index, bool) and 0 <= index < len(self.aEdge):
            pEdge = self.aEdge[index]
            if pEdge is not None:
                return pEdge
        raise UnknownEdge(index)

    # ------------------------------------------------------------------ #
    # Nodes
    # ------------------------------------------------------------------ #
    def insert_node(self, node_id: Hashable, value: Any = None) -> int:
        """
        Insert a node, or return the index of the live node with the same id.

        Args:
            node_id: Caller-assigned identity
            value: Optional payload; replaces the stored payload of an existing
                node when not None

        Returns:
            Index of the node
        """
        existing = self.id_to_index.get(node_id)
        if existing is not None:
            if value is not None:
                self.aNode[existing] = self.aNode[existing].with_value(value)
            return existing

        index = len(self.aNode)
        self.aNode.append(pynode(node_id, index, value))
        self.id_to_index[node_id] = index
        self.adjacency_list[index] = []
        self.reverse_adjacency[index] = []
        self.nNode_live += 1

        logger.debug(f"Inserted node {node_id!r} at index {index}")
        return index

    def get_node(self, node_id: Hashable) -> Optional[int]:
        """
        Get the index of a live node by its id.

        Args:
            node_id: Caller-assigned identity

        Returns:
            Node index, or None if absent or removed
        """
        return self.id_to_index.get(node_id)

    def get_node_record(self, index: int) -> pynode:
        """
        Get the node record stored at an index.

        Raises:
            UnknownNode: If the index is not live
        """
        return self._require_node(index)

    def get_node_id(self, index: int) -> Hashable:
        """Get the caller id of the node at an index."""
        return self._require_node(index).id

    def contains_node(self, node_id: Hashable) -> bool:
        return node_id in self.id_to_index

    def remove_node(self, index: int) -> None:
        """
        Remove a node and every edge touching it.

        Args:
            index: Node index

        Raises:
            UnknownNode: If the index is not live
        """
        pNode = self._require_node(index)

        # A self-loop appears in both lists; collect it once
        touching = dict.fromkeys(self.adjacency_list[index] + self.reverse_adjacency[index])
        for edge_index in touching:
            self._detach_edge(self.aEdge[edge_index])

        del self.adjacency_list[index]
        del self.reverse_adjacency[index]
        del self.id_to_index[pNode.id]
        self.aNode[index] = None
        self.nNode_live -= 1

        logger.debug(f"Removed node {pNode.id!r} at index {index}, cascaded to {len(touching)} edges")

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def insert_edge(self, from_index: int, to_index: int, weight: Optional[float] = None) -> int:
        """
        Insert a directed edge. Parallel edges between the same pair are allowed.

        Args:
            from_index: Source node index
            to_index: Target node index
            weight: Optional numeric weight

        Returns:
            Index of the new edge

        Raises:
            UnknownNode: If either endpoint is not live
            TypeError: If the weight is not a real number or None
            ValueError: If the weight is NaN
        """
        self._require_node(from_index)
        self._require_node(to_index)
        weight = validate_weight(weight)
        from_index, to_index = int(from_index), int(to_index)

        index = len(self.aEdge)
        self.aEdge.append(pyedge(index, from_index, to_index, weight))
        self.adjacency_list[from_index].append(index)
        self.reverse_adjacency[to_index].append(index)
        self.nEdge_live += 1

        logger.debug(f"Inserted edge {index}: {from_index} -> {to_index} (weight={weight})")
        return index

    def get_edge(self, index: int) -> pyedge:
        """
        Get the edge record stored at an index.

        Raises:
            UnknownEdge: If the index is not live
        """
        return self._require_edge(index)

    def contains_edge(self, index: int) -> bool:
        try:
            self._require_edge(index)
        except UnknownEdge:
            return False
        return True

    def remove_edge(self, index: int) -> None:
        """
        Remove a single edge.

        Raises:
            UnknownEdge: If the index is not live
        """
        pEdge = self._require_edge(index)
        self._detach_edge(pEdge)
        logger.debug(f"Removed edge {index}: {pEdge.from_index} -> {pEdge.to_index}")

    def _detach_edge(self, pEdge: pyedge) -> None:
        self.adjacency_list[pEdge.from_index].remove(pEdge.index)
        self.reverse_adjacency[pEdge.to_index].remove(pEdge.index)
        self.aEdge[pEdge.index] = None
        self.nEdge_live -= 1

    # ------------------------------------------------------------------ #
    # Adjacency queries
    # ------------------------------------------------------------------ #
    def neighbors(self, index: int) -> List[Tuple[int, int, Optional[float]]]:
        """
        Get the live outgoing edges of a node in insertion order.

        Args:
            index: Node index

        Returns:
            List of (edge_index, to_index, weight) tuples

        Raises:
            UnknownNode: If the index is not live
        """
        self._require_node(index)
        return [self.aEdge[edge_index].as_tuple() for edge_index in self.adjacency_list[index]]

    def predecessors(self, index: int) -> List[Tuple[int, int, Optional[float]]]:
        """
        Get the live incoming edges of a node in insertion order.

        Returns:
            List of (edge_index, from_index, weight) tuples
        """
        self._require_node(index)
        result = []
        for edge_index in self.reverse_adjacency[index]:
            pEdge = self.aEdge[edge_index]
            result.append((pEdge.index, pEdge.from_index, pEdge.weight))
        return result

    def out_degree(self, index: int) -> int:
        self._require_node(index)
        return len(self.adjacency_list[index])

    def in_degree(self, index: int) -> int:
        self._require_node(index)
        return len(self.reverse_adjacency[index])

    def get_sources(self) -> List[int]:
        """Get live nodes with no incoming edges."""
        return [pNode.index for pNode in self.nodes() if not self.reverse_adjacency[pNode.index]]

    def get_sinks(self) -> List[int]:
        """Get live nodes with no outgoing edges."""
        return [pNode.index for pNode in self.nodes() if not self.adjacency_list[pNode.index]]

    # ------------------------------------------------------------------ #
    # Whole-store queries
    # ------------------------------------------------------------------ #
    def nodes(self) -> Iterator[pynode]:
        """Iterate over live node records in insertion order."""
        return (pNode for pNode in self.aNode if pNode is not None)

    def edges(self) -> Iterator[pyedge]:
        """Iterate over live edge records in insertion order."""
        return (pEdge for pEdge in self.aEdge if pEdge is not None)

    def first_node(self) -> Optional[pynode]:
        return next(self.nodes(), None)

    def last_node(self) -> Optional[pynode]:
        for pNode in reversed(self.aNode):
            if pNode is not None:
                return pNode
        return None

    def pop_first_node(self) -> Optional[pynode]:
        """
        Remove the earliest-inserted live node, cascading to its edges.

        Returns:
            The removed node record, or None if the graph is empty
        """
        pNode = self.first_node()
        if pNode is not None:
            self.remove_node(pNode.index)
        return pNode

    def pop_last_node(self) -> Optional[pynode]:
        """
        Remove the most recently inserted live node, cascading to its edges.

        Returns:
            The removed node record, or None if the graph is empty
        """
        pNode = self.last_node()
        if pNode is not None:
            self.remove_node(pNode.index)
        return pNode

    def node_count(self) -> int:
        return self.nNode_live

    def edge_count(self) -> int:
        return self.nEdge_live

    def is_empty(self) -> bool:
        return self.nNode_live == 0

    def clear(self) -> None:
        """Drop every node and edge and restart index allocation."""
        self.aNode.clear()
        self.aEdge.clear()
        self.id_to_index.clear()
        self.adjacency_list.clear()
        self.reverse_adjacency.clear()
        self.nNode_live = 0
        self.nEdge_live = 0
        logger.debug("Cleared graph")

    def __len__(self) -> int:
        return self.nNode_live

    def __contains__(self, node_id: Hashable) -> bool:
        return self.contains_node(node_id)

    def __repr__(self):
        return f"IndexedGraph(nodes={self.nNode_live}, edges={self.nEdge_live})"
