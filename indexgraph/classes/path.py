"""
Simple path produced by the path engine.
"""

from typing import Iterator, Sequence, Tuple


class pypath:
    """
    An ordered walk of edges from a start node to an end node.

    A path is immutable once built. ``edges`` holds edge indices in walk
    order, ``nodes`` the node indices visited (start first, end last), so
    ``len(nodes) == len(edges) + 1``. The zero-length path has no edges and
    a single node.

    Attributes:
        edges: Edge indices along the path
        nodes: Node indices along the path
        weight: Sum of the edge weights, unweighted edges counted as 0
    """

    __slots__ = ('edges', 'nodes', 'weight')

    def __init__(self, edges: Sequence[int], nodes: Sequence[int], weight: float = 0):
        if len(nodes) != len(edges) + 1:
            raise ValueError(
                f"A path over {len(edges)} edges must visit {len(edges) + 1} nodes, got {len(nodes)}"
            )
        self.edges: Tuple[int, ...] = tuple(edges)
        self.nodes: Tuple[int, ...] = tuple(nodes)
        self.weight = weight

    @property
    def start(self) -> int:
        return self.nodes[0]

    @property
    def end(self) -> int:
        return self.nodes[-1]

    def is_empty(self) -> bool:
        """True for the zero-length path."""
        return not self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[int]:
        return iter(self.edges)

    def __eq__(self, other):
        if not isinstance(other, pypath):
            return NotImplemented
        return self.edges == other.edges and self.nodes == other.nodes and self.weight == other.weight

    def __hash__(self):
        return hash((self.edges, self.nodes))

    def __repr__(self):
        return f"pypath(edges={list(self.edges)}, nodes={list(self.nodes)}, weight={self.weight!r})"
