"""Easy tier.

Takes free boxes and otherwise plays a random safe edge, with an occasional
uniformly random blunder.
"""

from __future__ import annotations

from ..board import BoardLike
from ..models import DifficultyTier
from .base import BaseAI
from .edges import classify


class EasyAI(BaseAI):
    """AI that closes boxes and otherwise plays randomly."""

    tier = DifficultyTier.EASY

    def select_move(self, board: BoardLike) -> int | None:
        snapshot = classify(board)
        if snapshot.is_empty:
            return None

        self.move_count += 1
        if self.should_blunder():
            return self.get_random_element(list(snapshot.free))
        if snapshot.closers:
            return snapshot.closers[0]
        if snapshot.safes:
            return self.get_random_element(list(snapshot.safes))
        return self.get_random_element(list(snapshot.free))
