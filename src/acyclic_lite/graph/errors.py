"""Integrity errors raised when a graph breaks its own contract.

None of these are caused by the shape of the input.  Any directed
graph is valid input, cyclic or not.  They mean the graph handed us a
vertex it cannot index, or the timestamp tables ended up in a state a
correct DFS cannot produce.  Callers should let them propagate.
"""
from __future__ import annotations


class GraphIntegrityError(Exception):
    """Base class for broken-collaborator and broken-invariant failures."""


class VertexNotFoundError(GraphIntegrityError):
    """Raised when a vertex produced by the graph has no index."""

    def __init__(self, vertex: object, source: int | None = None) -> None:
        self.vertex = vertex
        self.source = source
        if source is None:
            msg = f"Vertex {vertex!r} not found"
        else:
            msg = f"Neighbor {vertex!r} of vertex index {source} not found"
        super().__init__(msg)


class IllegalTimestampError(GraphIntegrityError):
    """Raised when an edge's timestamps fit no classification pattern."""
