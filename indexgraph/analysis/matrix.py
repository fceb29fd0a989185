"""
Dense numeric views of an indexed graph.
"""

import logging
from typing import List, Tuple

import numpy as np

from ..core.graph import IndexedGraph

logger = logging.getLogger(__name__)


def adjacency_matrix(graph: IndexedGraph, weighted: bool = False) -> Tuple[np.ndarray, List[int]]:
    """
    Build a dense adjacency matrix over the live nodes.

    Rows and columns follow node insertion order. Parallel edges accumulate:
    each cell holds the number of edges from row to column, or the sum of
    their weights (unweighted edges counted as 0) when weighted is True.

    Args:
        graph: IndexedGraph to convert
        weighted: Sum weights instead of counting edges

    Returns:
        Tuple of (matrix, node indices labelling rows and columns)
    """
    aIndex = [pNode.index for pNode in graph.nodes()]
    position = {index: k for k, index in enumerate(aIndex)}
    nNode = len(aIndex)

    matrix = np.zeros((nNode, nNode), dtype=float if weighted else np.int64)
    for pEdge in graph.edges():
        row = position[pEdge.from_index]
        col = position[pEdge.to_index]
        matrix[row, col] += pEdge.weight_or_zero if weighted else 1

    logger.debug(f"Built {nNode}x{nNode} adjacency matrix from {graph.edge_count()} edges")
    return matrix, aIndex
