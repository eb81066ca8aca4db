"""Move-selection engine facade.

``MoveEngine`` is the only surface hosts need: pick a tier with
:meth:`MoveEngine.set_difficulty` and ask for an edge with
:meth:`MoveEngine.choose_move`. A move request always runs to completion on
the caller's thread and leaves the board exactly as it was.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from .ai.base import BaseAI
from .ai.factory import AIFactory, normalize_difficulty
from .ai.search_budget import SearchBudget
from .board import BoardLike
from .metrics import AI_MOVE_LATENCY, AI_MOVES
from .models import AIConfig, DifficultyTier

logger = logging.getLogger(__name__)


class MoveEngine:
    """Chooses moves for one seat at the table.

    Args:
        difficulty: Initial tier name; unknown names use the default tier.
        config: Optional overrides applied to every tier.
        on_yield: Optional callback invoked every ``config.yield_every``
            solver branches so a host frame loop is not starved.
    """

    def __init__(
        self,
        difficulty: Any = None,
        config: AIConfig | None = None,
        on_yield: Callable[[], None] | None = None,
    ) -> None:
        self.config = config if config is not None else AIConfig()
        self.budget = SearchBudget(self.config.yield_every, on_yield)
        if difficulty is None:
            difficulty = self.config.difficulty
        self.ai: BaseAI = AIFactory.create(
            normalize_difficulty(difficulty),
            self.config,
            budget=self.budget,
        )

    @property
    def difficulty(self) -> DifficultyTier:
        return self.ai.tier

    def set_difficulty(self, name: Any) -> DifficultyTier:
        """Switch tier; unrecognised names fall back to the default tier."""
        tier = normalize_difficulty(name)
        if tier != self.ai.tier:
            self.ai = AIFactory.create(tier, self.config, budget=self.budget)
        logger.info(f"Difficulty set to {tier.value} (requested {name!r})")
        return tier

    def choose_move(self, board: BoardLike) -> int | None:
        """Return the edge to play on ``board`` or None when it is full."""
        tier = self.ai.tier.value
        start = time.perf_counter()
        edge = self.ai.select_move(board)
        elapsed = time.perf_counter() - start

        AI_MOVE_LATENCY.labels(tier=tier).observe(elapsed)
        AI_MOVES.labels(tier=tier, outcome="move" if edge is not None else "no_move").inc()
        logger.debug(f"{tier}: edge={edge} in {elapsed * 1000:.1f}ms")
        return edge

    def __repr__(self) -> str:
        return f"MoveEngine({self.ai!r})"
