"""Depth-first search forest with discovery/finish timestamps.

Every vertex is visited exactly once.  Roots are taken in the graph's
own vertex order, so disconnected components each get their own tree,
and the shared clock keeps running across trees.

Two strategies produce the same timestamps:

  iterative  -- explicit stack of (vertex, neighbor iterator) frames.
                A vertex is discovered when its frame is pushed and
                finished when its frame is popped after the iterator
                runs dry.  Safe on arbitrarily deep graphs.
  recursive  -- the textbook explore(v) recursion.  Limited by the
                interpreter's recursion limit (~1000 frames).

The iterative version is the default.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator, TypeVar

from acyclic_lite.graph.adjacency import IndexedGraph
from acyclic_lite.graph.errors import VertexNotFoundError
from acyclic_lite.graph.timestamps import TimestampRecorder

T = TypeVar("T", bound=Hashable)

STRATEGIES = ("iterative", "recursive")


@dataclass(slots=True)
class DfsForest:
    """Everything one full DFS run leaves behind."""
    timestamps: TimestampRecorder
    visited: list[bool]
    parents: list[int | None]   # tree parent, None for roots
    roots: list[int]            # in the order trees were started

    @property
    def discovery(self) -> list[int | None]:
        return self.timestamps.discovery

    @property
    def finish(self) -> list[int | None]:
        return self.timestamps.finish

    def interval(self, index: int) -> tuple[int, int]:
        return self.timestamps.interval(index)


def _resolve(graph: IndexedGraph[T], vertex: T, source: int | None = None) -> int:
    idx = graph.index_of(vertex)
    if idx is None or not 0 <= idx < graph.vertex_count:
        raise VertexNotFoundError(vertex, source)
    return idx


def dfs_forest(graph: IndexedGraph[T], strategy: str = "iterative") -> DfsForest:
    """Run DFS from every unvisited vertex of *graph* and return the forest.

    Raises VertexNotFoundError if the graph yields a vertex (directly
    or as a neighbor) that index_of cannot resolve.
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}"
        )

    n = graph.vertex_count
    stamps = TimestampRecorder(n)
    visited = [False] * n
    parents: list[int | None] = [None] * n
    roots: list[int] = []

    def _explore_recursive(v: int) -> None:
        visited[v] = True
        stamps.record_discovery(v)
        for neighbor in graph.neighbors_of(v):
            w = _resolve(graph, neighbor, v)
            if not visited[w]:
                parents[w] = v
                _explore_recursive(w)
        stamps.record_finish(v)

    def _explore_iterative(root: int) -> None:
        visited[root] = True
        stamps.record_discovery(root)
        stack: list[tuple[int, Iterator[T]]] = [
            (root, iter(graph.neighbors_of(root)))
        ]
        while stack:
            v, neighbors = stack[-1]
            for neighbor in neighbors:
                w = _resolve(graph, neighbor, v)
                if not visited[w]:
                    visited[w] = True
                    parents[w] = v
                    stamps.record_discovery(w)
                    stack.append((w, iter(graph.neighbors_of(w))))
                    break
            else:
                # all neighbors handled
                stack.pop()
                stamps.record_finish(v)

    explore = _explore_iterative if strategy == "iterative" else _explore_recursive

    for vertex in graph.vertices():
        v = _resolve(graph, vertex)
        if not visited[v]:
            roots.append(v)
            explore(v)

    return DfsForest(timestamps=stamps, visited=visited, parents=parents, roots=roots)
