"""
Record types for the indexed graph.

This module contains the node, edge and path records used throughout
the indexgraph library.
"""

from .node import pynode
from .edge import pyedge
from .path import pypath

__all__ = [
    'pynode',
    'pyedge',
    'pypath',
]
