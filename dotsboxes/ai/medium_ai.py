"""Medium tier.

Closes boxes, picks randomly among the structurally best safe edges, and
falls back to the negamax endgame solver.
"""

from __future__ import annotations

from ..board import BoardLike
from ..models import DifficultyTier
from .base import BaseAI
from .edges import classify
from .heuristics import rank_safe_edges
from .negamax_solver import choose_negamax_move


class MediumAI(BaseAI):
    """AI with a randomized top-K safe-edge heuristic."""

    tier = DifficultyTier.MEDIUM

    def select_move(self, board: BoardLike) -> int | None:
        snapshot = classify(board)
        if snapshot.is_empty:
            return None

        self.move_count += 1
        if snapshot.closers:
            return snapshot.closers[0]
        if snapshot.safes:
            top = rank_safe_edges(board, snapshot.safes, limit=self.config.top_k_safe)
            return self.get_random_element(top)
        return choose_negamax_move(board, self.rng, snapshot, self.budget)
