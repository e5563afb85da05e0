"""Edge classification from DFS timestamps.

For an edge u -> v the two intervals [pre, post] are either nested or
disjoint (the parenthesis property of DFS).  Which one, and in which
direction, tells us the edge type:

  pre_u < pre_v < post_v < post_u   v inside u    TREE_FORWARD
  pre_v < pre_u < post_u < post_v   u inside v    BACK
  pre_v < post_v < pre_u < post_u   v before u    CROSS

A self-loop has identical intervals on both ends and matches none of
the strict patterns, so it is checked first and counted as BACK.
The fourth disjoint order (u entirely before v) cannot happen for an
edge u -> v: v would have been discovered from u.
"""
from __future__ import annotations

from enum import Enum

from acyclic_lite.graph.errors import IllegalTimestampError


class EdgeType(Enum):
    """Kind of a directed edge relative to the DFS forest."""
    TREE_FORWARD = "tree_forward"
    BACK = "back"
    CROSS = "cross"


def classify_edge(pre_u: int, post_u: int, pre_v: int, post_v: int) -> EdgeType:
    """Classify edge u -> v from the four timestamps of its endpoints.

    Raises IllegalTimestampError for any configuration a single DFS
    run cannot produce.
    """
    if pre_u == pre_v and post_u == post_v:
        return EdgeType.BACK
    if pre_u < pre_v < post_v < post_u:
        return EdgeType.TREE_FORWARD
    if pre_v < pre_u < post_u < post_v:
        return EdgeType.BACK
    if pre_v < post_v < pre_u < post_u:
        return EdgeType.CROSS
    raise IllegalTimestampError(
        f"Illegal timestamps for edge: u=[{pre_u}, {post_u}], "
        f"v=[{pre_v}, {post_v}]"
    )
