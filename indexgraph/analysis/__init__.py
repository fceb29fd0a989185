"""
Read-only algorithms over an indexed graph.

This module contains traversal, simple path enumeration and numeric views.
"""

__all__ = ['traversal', 'pathfinding', 'matrix']
