"""Edge classification for Dots and Boxes.

Buckets the board's free edges once per decision so that every
sub-algorithm works from the same view of the position.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..board import BoardLike


def count_filled(board: BoardLike, box: int) -> int:
    """Number of filled sides of ``box`` (0-4)."""
    return sum(1 for e in board.box_edges(box) if board.is_filled(e))


@dataclass(frozen=True)
class EdgeSnapshot:
    """Free edges of one position, split by what playing them does.

    Attributes:
        free: Every unfilled edge, ascending.
        closers: Free edges that complete at least one box.
        safes: Free edges that leave no box with three filled sides.
    """
    free: tuple[int, ...]
    closers: tuple[int, ...]
    safes: tuple[int, ...]

    @property
    def is_empty(self) -> bool:
        return not self.free


def classify(board: BoardLike) -> EdgeSnapshot:
    """Classify every free edge of ``board``.

    An edge next to a box with three filled sides is a closer; an edge next
    to a box with two filled sides is unsafe. A closer whose other side is
    not at two filled sides is listed in both buckets.
    """
    free = board.free_edges()
    closers: list[int] = []
    safes: list[int] = []
    for edge in free:
        counts = [count_filled(board, b) for b in board.edge_boxes(edge)]
        if 3 in counts:
            closers.append(edge)
        if 2 not in counts:
            safes.append(edge)
    return EdgeSnapshot(free=tuple(free), closers=tuple(closers), safes=tuple(safes))
