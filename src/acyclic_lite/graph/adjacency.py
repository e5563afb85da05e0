"""Indexed directed graph using adjacency lists.

The cycle detector never looks inside a graph directly.  It talks to
it through the small read-only IndexedGraph protocol: how many
vertices there are, how to enumerate them, how to turn a vertex into
its stable integer index, which vertices one hop away a given index
points at, and every edge as an index pair.

Graph is the concrete implementation shipped with the package.
Vertices are stored in insertion order in a list, so the index of a
vertex is simply its position.  A dict maps vertex -> index for O(1)
lookup, and the adjacency lists hold indices rather than vertices.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, Protocol, TypeVar

T = TypeVar("T", bound=Hashable)


class IndexedGraph(Protocol[T]):
    """Read-only view of a directed graph with integer vertex indices."""

    @property
    def vertex_count(self) -> int: ...

    def vertices(self) -> Iterator[T]: ...

    def index_of(self, vertex: T) -> int | None: ...

    def neighbors_of(self, index: int) -> list[T]: ...

    def edges(self) -> Iterator[tuple[int, int]]: ...


class Graph(Generic[T]):
    """Directed graph backed by index-based adjacency lists.

    Duplicate edges are kept.  Each copy shows up in edges() and
    therefore gets classified on its own.
    """

    __slots__ = ("_vertices", "_index", "_adj")

    def __init__(self) -> None:
        self._vertices: list[T] = []
        self._index: dict[T, int] = {}
        self._adj: list[list[int]] = []

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[T, T]], vertices: Iterable[T] = ()
    ) -> Graph[T]:
        """Build a graph from *edges*, adding isolated *vertices* first."""
        g: Graph[T] = cls()
        for vertex in vertices:
            g.add_vertex(vertex)
        for src, dst in edges:
            g.add_edge(src, dst)
        return g

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: T) -> int:
        """Add *vertex* if missing and return its index."""
        idx = self._index.get(vertex)
        if idx is None:
            idx = len(self._vertices)
            self._vertices.append(vertex)
            self._index[vertex] = idx
            self._adj.append([])
        return idx

    def add_edge(self, src: T, dst: T) -> None:
        """Add a directed edge src -> dst, creating both vertices if needed."""
        u = self.add_vertex(src)
        v = self.add_vertex(dst)
        self._adj[u].append(v)

    # ---- IndexedGraph ----------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def vertices(self) -> Iterator[T]:
        return iter(self._vertices)

    def index_of(self, vertex: T) -> int | None:
        return self._index.get(vertex)

    def neighbors_of(self, index: int) -> list[T]:
        """Vertices reachable from *index* along one outgoing edge."""
        return [self._vertices[v] for v in self._adj[index]]

    def edges(self) -> Iterator[tuple[int, int]]:
        for u, targets in enumerate(self._adj):
            for v in targets:
                yield u, v

    # ---- queries ---------------------------------------------------------

    def vertex_at(self, index: int) -> T:
        return self._vertices[index]

    def has_edge(self, src: T, dst: T) -> bool:
        u = self._index.get(src)
        v = self._index.get(dst)
        if u is None or v is None:
            return False
        return v in self._adj[u]

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adj)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
