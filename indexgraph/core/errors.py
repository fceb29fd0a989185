"""
Error kinds raised by the indexed graph.

Both lookup errors subclass KeyError so callers that already guard
dictionary-style lookups keep working.
"""


class IndexGraphError(Exception):
    """Base class for indexed graph errors."""


class UnknownNode(IndexGraphError, KeyError):
    """A node index or id was referenced that is not currently live."""

    def __init__(self, ref):
        self.ref = ref
        super().__init__(ref)

    def __str__(self):
        return f"Unknown node: {self.ref!r}"


class UnknownEdge(IndexGraphError, KeyError):
    """An edge index was referenced that is not currently live."""

    def __init__(self, ref):
        self.ref = ref
        super().__init__(ref)

    def __str__(self):
        return f"Unknown edge: {self.ref!r}"
