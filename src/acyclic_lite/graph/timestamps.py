"""Discovery/finish timestamps for a DFS run.

One logical clock is shared by the whole forest.  It starts at 1 and
ticks once when a vertex is discovered and once when it finishes, so
every value handed out during a run is distinct and a vertex's
discovery always precedes its finish.
"""
from __future__ import annotations

from acyclic_lite.graph.errors import IllegalTimestampError


class TimestampRecorder:
    """Logical clock plus the discovery and finish tables.

    The recorder trusts its caller: discovery before finish, each at
    most once per vertex.  The traversal guarantees that ordering.
    """

    __slots__ = ("_clock", "_discovery", "_finish")

    def __init__(self, vertex_count: int) -> None:
        self._clock = 1
        self._discovery: list[int | None] = [None] * vertex_count
        self._finish: list[int | None] = [None] * vertex_count

    def record_discovery(self, index: int) -> int:
        stamp = self._clock
        self._discovery[index] = stamp
        self._clock += 1
        return stamp

    def record_finish(self, index: int) -> int:
        stamp = self._clock
        self._finish[index] = stamp
        self._clock += 1
        return stamp

    @property
    def clock(self) -> int:
        """The value the next recorded event will receive."""
        return self._clock

    @property
    def discovery(self) -> list[int | None]:
        return list(self._discovery)

    @property
    def finish(self) -> list[int | None]:
        return list(self._finish)

    def interval(self, index: int) -> tuple[int, int]:
        """Return (discovery, finish) for *index*.

        Raises IllegalTimestampError if either side was never recorded
        or *index* is outside the table.
        """
        if not 0 <= index < len(self._discovery):
            raise IllegalTimestampError(
                f"Vertex index {index} out of range for {len(self._discovery)} vertices"
            )
        pre = self._discovery[index]
        post = self._finish[index]
        if pre is None or post is None:
            raise IllegalTimestampError(
                f"Vertex index {index} was never visited "
                f"(discovery={pre}, finish={post})"
            )
        return pre, post

    def __repr__(self) -> str:
        return f"TimestampRecorder(vertices={len(self._discovery)}, clock={self._clock})"
