"""Hard tier.

Closes boxes, chooses safe edges with a one-ply lookahead, and falls back
to the negamax endgame solver.
"""

from __future__ import annotations

from ..board import BoardLike
from ..models import DifficultyTier
from .base import BaseAI
from .edges import classify
from .heuristics import best_safe_edge
from .negamax_solver import choose_negamax_move


class HardAI(BaseAI):
    """AI with one-ply safe-edge lookahead."""

    tier = DifficultyTier.HARD

    def select_move(self, board: BoardLike) -> int | None:
        snapshot = classify(board)
        if snapshot.is_empty:
            return None

        self.move_count += 1
        if snapshot.closers:
            return snapshot.closers[0]
        if snapshot.safes:
            return best_safe_edge(board, snapshot.safes)
        return choose_negamax_move(board, self.rng, snapshot, self.budget)
