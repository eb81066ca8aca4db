"""Shallow minimax over the live board for the expert tier.

Candidate moves are applied with ``board.apply_move`` and rolled back with
the returned undo token, so the search needs exclusive access to the board
for the duration of one call. Positions are scored as the current score
differential plus the controlled-value projection of what is left.
"""

from __future__ import annotations

import logging

from ..board import BoardLike
from .components import collect_cold
from .controlled_value import project_future
from .edges import EdgeSnapshot, classify, count_filled
from .heuristics import rank_safe_edges
from .memo_table import MemoTable
from .search_budget import SearchBudget

logger = logging.getLogger(__name__)


class ExpertSearch:
    """Two-ply search helpers bound to one board and root player.

    Args:
        board: Board to search on; restored after every probe.
        max_closer_candidates: Closers evaluated by :meth:`best_closer`.
        max_safe_candidates: Safe edges evaluated by :meth:`best_safe`.
        max_reply_candidates: Opponent replies considered per safe edge.
        max_sacrifice_candidates: Cold components tried as sacrifices.
        sacrifice_safe_threshold: Sacrifices are only considered when at
            most this many safe edges remain.
        sacrifice_margin: Required improvement over the best safe edge.
        budget: Optional cooperative yield counter.
    """

    def __init__(
        self,
        board: BoardLike,
        *,
        max_closer_candidates: int = 6,
        max_safe_candidates: int = 8,
        max_reply_candidates: int = 6,
        max_sacrifice_candidates: int = 3,
        sacrifice_safe_threshold: int = 2,
        sacrifice_margin: int = 2,
        budget: SearchBudget | None = None,
    ) -> None:
        self.board = board
        self.player = board.current_player
        self.max_closer_candidates = max_closer_candidates
        self.max_safe_candidates = max_safe_candidates
        self.max_reply_candidates = max_reply_candidates
        self.max_sacrifice_candidates = max_sacrifice_candidates
        self.sacrifice_safe_threshold = sacrifice_safe_threshold
        self.sacrifice_margin = sacrifice_margin
        self.budget = budget
        # controlled values depend only on the component multiset
        self._memo = MemoTable()
        self.positions_evaluated = 0

    def evaluate(self) -> int:
        """Projected final differential for the root player."""
        self.positions_evaluated += 1
        scores = self.board.scores
        opponent = 3 - self.player
        future = project_future(self.board, self._memo, self.budget)
        if self.board.current_player != self.player:
            future = -future
        return scores[self.player] - scores[opponent] + future

    def _probe(self, edge: int) -> int:
        undo = self.board.apply_move(edge)
        try:
            return self.evaluate()
        finally:
            self.board.undo_move(undo)

    def _boxes_completed(self, edge: int) -> int:
        return sum(
            1 for b in self.board.edge_boxes(edge) if count_filled(self.board, b) == 3
        )

    def best_closer(self, snapshot: EdgeSnapshot) -> int | None:
        """Best closer among the highest-yield candidates."""
        candidates = sorted(snapshot.closers, key=lambda e: -self._boxes_completed(e))
        best_edge: int | None = None
        best_value = None
        for edge in candidates[: self.max_closer_candidates]:
            value = self._probe(edge)
            if best_value is None or value > best_value:
                best_value, best_edge = value, edge
        logger.debug(f"expert: best closer {best_edge} value={best_value}")
        return best_edge

    def _reply_candidates(self) -> list[int]:
        snapshot = classify(self.board)
        replies = list(snapshot.closers)
        replies += [
            e
            for e in rank_safe_edges(self.board, snapshot.safes)
            if e not in replies
        ]
        return replies[: self.max_reply_candidates]

    def _worst_reply(self) -> int:
        replies = self._reply_candidates()
        if not replies:
            return self.evaluate()
        return min(self._probe(reply) for reply in replies)

    def best_safe(self, snapshot: EdgeSnapshot) -> tuple[int | None, int | None]:
        """Safe edge maximising the root player's value after one reply.

        Returns:
            ``(edge, value)``, or ``(None, None)`` without safe edges.
        """
        best_edge: int | None = None
        best_value: int | None = None
        candidates = rank_safe_edges(
            self.board, snapshot.safes, limit=self.max_safe_candidates
        )
        for edge in candidates:
            undo = self.board.apply_move(edge)
            try:
                value = self._worst_reply()
            finally:
                self.board.undo_move(undo)
            if best_value is None or value > best_value:
                best_value, best_edge = value, edge
        logger.debug(f"expert: best safe {best_edge} value={best_value}")
        return best_edge, best_value

    def consider_sacrifice(
        self,
        snapshot: EdgeSnapshot,
        best_safe_value: int | None,
    ) -> int | None:
        """Open a short cold component now if it beats the best safe edge.

        Only considered when the best safe edge already loses and few safe
        edges remain.
        """
        if best_safe_value is None or best_safe_value >= 0:
            return None
        if len(snapshot.safes) > self.sacrifice_safe_threshold:
            return None

        components = sorted(collect_cold(self.board), key=lambda c: c.length)
        best_edge: int | None = None
        best_value = best_safe_value + self.sacrifice_margin
        for component in components[: self.max_sacrifice_candidates]:
            value = self._probe(component.edge)
            if value > best_value:
                best_value, best_edge = value, component.edge
        if best_edge is not None:
            logger.debug(
                f"expert: sacrificing via edge {best_edge} "
                f"value={best_value} over safe value={best_safe_value}"
            )
        return best_edge
