"""
Core graph data structures and management.

This module contains the node/edge store and its error kinds, without
traversal or path algorithms.
"""

from .errors import IndexGraphError, UnknownNode, UnknownEdge
from .graph import IndexedGraph

__all__ = ['IndexGraphError', 'UnknownNode', 'UnknownEdge', 'IndexedGraph']
