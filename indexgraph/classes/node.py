"""
Node record stored by the indexed graph.
"""

from typing import Any, Hashable


class pynode:
    """
    A live node in an IndexedGraph.

    Attributes:
        id: Caller-assigned identity (any hashable value)
        index: Stable integer handle assigned by the store
        value: Optional payload attached by the caller

    Records are read-only; the store replaces a record to change its payload.
    """

    __slots__ = ('_id', '_index', '_value')

    def __init__(self, node_id: Hashable, index: int, value: Any = None):
        """
        Initialize a node record.

        Args:
            node_id: Caller-assigned identity
            index: Stable integer handle
            value: Optional payload
        """
        self._id = node_id
        self._index = index
        self._value = value

    @property
    def id(self) -> Hashable:
        return self._id

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> Any:
        return self._value

    def with_value(self, value: Any) -> 'pynode':
        """Return a copy of this record carrying a different payload."""
        return pynode(self._id, self._index, value)

    def __eq__(self, other):
        if not isinstance(other, pynode):
            return NotImplemented
        return self.index == other.index and self.id == other.id

    def __hash__(self):
        return hash((self.index, self.id))

    def __repr__(self):
        return f"pynode(id={self.id!r}, index={self.index}, value={self.value!r})"
