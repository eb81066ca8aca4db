"""Safe-edge heuristics for Dots and Boxes.

Border edges and edges next to boxes that already have sides filled are
preferred: they rarely open new chains. ``best_safe_edge`` adds a one-ply
lookahead that penalises safe moves which still leave capturable boxes.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..board import BoardLike
from .components import collect_hot
from .edges import count_filled

BORDER_BONUS = 3


def score_safe_edge(board: BoardLike, edge: int) -> int:
    """Structural score of a safe edge (higher is better)."""
    adjacent = board.edge_boxes(edge)
    bonus = BORDER_BONUS if len(adjacent) == 1 else 0
    return bonus + max((count_filled(board, b) for b in adjacent), default=0)


def rank_safe_edges(
    board: BoardLike,
    candidates: Sequence[int],
    limit: int | None = None,
) -> list[int]:
    """Candidates ordered by :func:`score_safe_edge`, best first.

    The sort is stable so equally scored edges keep their input order.
    """
    ranked = sorted(candidates, key=lambda e: -score_safe_edge(board, e))
    return ranked if limit is None else ranked[:limit]


def best_safe_edge(board: BoardLike, candidates: Sequence[int]) -> int | None:
    """Pick the safe edge with the best one-ply score.

    Each candidate is applied to ``board``, the hot components of the result
    are counted, and the move is undone. Score is
    ``-hot_count + score_safe_edge``; the first edge wins ties.
    """
    best_edge: int | None = None
    best_score = float("-inf")
    for edge in candidates:
        undo = board.apply_move(edge)
        hot = len(collect_hot(board))
        board.undo_move(undo)
        score = -hot + score_safe_edge(board, edge)
        if score > best_score:
            best_score, best_edge = score, edge
    return best_edge


def cheapest_free_edge(board: BoardLike, free: Sequence[int]) -> int | None:
    """The free edge that hands over the fewest boxes.

    Cost is the number of adjacent boxes at two filled sides, i.e. boxes the
    move would leave capturable. First edge wins ties.
    """
    best_edge: int | None = None
    best_cost = None
    for edge in free:
        cost = sum(1 for b in board.edge_boxes(edge) if count_filled(board, b) == 2)
        if best_cost is None or cost < best_cost:
            best_cost, best_edge = cost, edge
    return best_edge
