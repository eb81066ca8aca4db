"""Expert tier.

Every decision goes through :class:`ExpertSearch`: closers and safe edges
are compared by applying them to the board and valuing the remainder with
the controlled-value solver. Once no safe edge is left the exact solver
picks which component to open.
"""

from __future__ import annotations

import logging

from ..board import BoardLike
from ..models import DifficultyTier
from .base import BaseAI
from .components import free_edge_regions
from .controlled_value import choose_berlekamp_move
from .edges import classify
from .expert_search import ExpertSearch

logger = logging.getLogger(__name__)


class ExpertAI(BaseAI):
    """AI combining two-ply search with the exact endgame solver."""

    tier = DifficultyTier.EXPERT

    def _search(self, board: BoardLike) -> ExpertSearch:
        return ExpertSearch(
            board,
            max_closer_candidates=self.config.max_closer_candidates,
            max_safe_candidates=self.config.max_safe_candidates,
            max_reply_candidates=self.config.max_reply_candidates,
            max_sacrifice_candidates=self.config.max_sacrifice_candidates,
            sacrifice_safe_threshold=self.config.sacrifice_safe_threshold,
            sacrifice_margin=self.config.sacrifice_margin,
            budget=self.budget,
        )

    def select_move(self, board: BoardLike) -> int | None:
        snapshot = classify(board)
        if snapshot.is_empty:
            return None

        self.move_count += 1
        if snapshot.closers:
            return self._search(board).best_closer(snapshot)
        if snapshot.safes:
            search = self._search(board)
            edge, value = search.best_safe(snapshot)
            sacrifice = search.consider_sacrifice(snapshot, value)
            logger.debug(
                f"expert: {search.positions_evaluated} positions evaluated"
            )
            return sacrifice if sacrifice is not None else edge
        regions = free_edge_regions(board)
        logger.debug(f"expert: no safe edges left, {len(regions)} free-edge regions")
        return choose_berlekamp_move(board, self.rng, snapshot, self.budget)
