"""
Edge record stored by the indexed graph.
"""

import math
from numbers import Real
from typing import Optional


def validate_weight(weight) -> Optional[float]:
    """
    Check that an edge weight is a real number or None.

    Args:
        weight: Candidate weight

    Returns:
        The weight unchanged

    Raises:
        TypeError: If the weight is not a real number (bool is rejected)
        ValueError: If the weight is NaN
    """
    if weight is None:
        return None
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise TypeError(f"Edge weight must be a real number or None, got {type(weight).__name__}")
    if math.isnan(weight):
        raise ValueError("Edge weight must not be NaN")
    return weight


class pyedge:
    """
    A directed edge between two node indices.

    Attributes:
        index: Stable integer handle assigned by the store
        from_index: Index of the source node
        to_index: Index of the target node
        weight: Optional numeric weight (None means unweighted)

    Records are read-only.
    """

    __slots__ = ('_index', '_from_index', '_to_index', '_weight')

    def __init__(self, index: int, from_index: int, to_index: int, weight: Optional[float] = None):
        self._index = index
        self._from_index = from_index
        self._to_index = to_index
        self._weight = weight

    @property
    def index(self) -> int:
        return self._index

    @property
    def from_index(self) -> int:
        return self._from_index

    @property
    def to_index(self) -> int:
        return self._to_index

    @property
    def weight(self) -> Optional[float]:
        return self._weight

    @property
    def weight_or_zero(self) -> float:
        """Weight used for aggregation; unweighted edges contribute 0."""
        return 0 if self.weight is None else self.weight

    def is_self_loop(self) -> bool:
        return self.from_index == self.to_index

    def as_tuple(self):
        """Return (edge_index, to_index, weight), the shape used by neighbor queries."""
        return (self.index, self.to_index, self.weight)

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return (self.index, self.from_index, self.to_index, self.weight) == \
            (other.index, other.from_index, other.to_index, other.weight)

    def __hash__(self):
        return hash((self.index, self.from_index, self.to_index))

    def __repr__(self):
        return (f"pyedge(index={self.index}, from_index={self.from_index}, "
                f"to_index={self.to_index}, weight={self.weight!r})")
