"""Topological order from DFS finish times.

In a DAG every edge u -> v satisfies post[u] > post[v] (tree, forward
and cross edges all finish the target first), so sorting vertices by
descending finish time is a valid topological order.  Back edges are
the only edges that break this, and they exist exactly when the graph
has a cycle.
"""
from __future__ import annotations

from typing import Hashable, TypeVar

from acyclic_lite.graph.adjacency import Graph
from acyclic_lite.graph.cycle_detector import ClassifiedEdge, analyze

T = TypeVar("T", bound=Hashable)


class CyclicDependencyError(Exception):
    """Raised when a topological order is requested for a cyclic graph."""

    def __init__(self, back_edges: list[ClassifiedEdge]) -> None:
        self.back_edges = back_edges
        super().__init__(
            f"Cycle detected: {len(back_edges)} back edge(s) close a cycle"
        )


def topological_sort(graph: Graph[T], strategy: str = "iterative") -> list[T]:
    """Return vertices so that every edge points forward in the list.

    Takes a Graph rather than any IndexedGraph because mapping indices
    back to vertices needs vertex_at.

    Raises CyclicDependencyError if the graph contains a cycle.
    """
    report = analyze(graph, strategy=strategy)
    if not report.is_acyclic:
        raise CyclicDependencyError(report.back_edges)

    finish = report.forest.finish
    order = sorted(range(graph.vertex_count), key=lambda i: finish[i], reverse=True)
    return [graph.vertex_at(i) for i in order]
