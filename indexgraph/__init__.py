"""
IndexGraph - Indexed Directed Multigraph Library

A Python library for modelling highly interconnected structures as a
directed multigraph. Nodes and edges are stored in flat tables addressed by
stable integer indices, and the path engine enumerates every simple path
between two nodes.

Main Classes:
    pyindexgraph: Main class for graph work (facade)
    IndexedGraph: Node/edge store
    PathFinder: Simple path enumeration and ranking
    pynode: Node record
    pyedge: Edge record
    pypath: Simple path with total weight

Example:
    >>> from indexgraph import pyindexgraph
    >>> graph = pyindexgraph()
    >>> a = graph.insert_node("A")
    >>> b = graph.insert_node("B")
    >>> graph.insert_edge(a, b, 2.0)
    0
    >>> [path.weight for path in graph.enumerate_simple_paths(a, b)]
    [2.0]
"""

__version__ = "0.1.0"

from indexgraph.classes.node import pynode
from indexgraph.classes.edge import pyedge
from indexgraph.classes.path import pypath
from indexgraph.core.errors import IndexGraphError, UnknownNode, UnknownEdge
from indexgraph.core.graph import IndexedGraph
from indexgraph.analysis.traversal import TraversalOrder, traverse, find_reachable, is_reachable
from indexgraph.analysis.pathfinding import PathFinder, enumerate_simple_paths
from indexgraph.analysis.matrix import adjacency_matrix
from indexgraph.core.indexgraph import pyindexgraph

__all__ = [
    'pyindexgraph',
    'IndexedGraph',
    'PathFinder',
    'pynode',
    'pyedge',
    'pypath',
    'IndexGraphError',
    'UnknownNode',
    'UnknownEdge',
    'TraversalOrder',
    'traverse',
    'find_reachable',
    'is_reachable',
    'enumerate_simple_paths',
    'adjacency_matrix',
]
