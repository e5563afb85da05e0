"""DFS-timestamp cycle detection for directed graphs."""

from acyclic_lite.graph.adjacency import Graph, IndexedGraph
from acyclic_lite.graph.classify import EdgeType, classify_edge
from acyclic_lite.graph.cycle_detector import (
    ClassifiedEdge,
    CycleReport,
    analyze,
    classify_edges,
    is_acyclic,
)
from acyclic_lite.graph.errors import (
    GraphIntegrityError,
    IllegalTimestampError,
    VertexNotFoundError,
)
from acyclic_lite.graph.timestamps import TimestampRecorder
from acyclic_lite.graph.topological import (
    CyclicDependencyError,
    topological_sort,
)
from acyclic_lite.graph.traversal import DfsForest, dfs_forest

__all__ = [
    "ClassifiedEdge",
    "CycleReport",
    "CyclicDependencyError",
    "DfsForest",
    "EdgeType",
    "Graph",
    "GraphIntegrityError",
    "IllegalTimestampError",
    "IndexedGraph",
    "TimestampRecorder",
    "VertexNotFoundError",
    "analyze",
    "classify_edge",
    "classify_edges",
    "dfs_forest",
    "is_acyclic",
    "topological_sort",
]
