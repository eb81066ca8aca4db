"""
Base AI class for the Dots and Boxes engine
Abstract base class that every difficulty tier inherits from
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Any
import random

from ..board import BoardLike
from ..models import AIConfig, DifficultyTier
from .search_budget import SearchBudget

_TIER_ORDINALS = {
    DifficultyTier.EASY: 1,
    DifficultyTier.MEDIUM: 2,
    DifficultyTier.HARD: 3,
    DifficultyTier.EXPERT: 4,
}


def derive_seed(config: AIConfig) -> int:
    """
    Derive a deterministic RNG seed when ``config.rng_seed`` is unset.

    Mixes the tier into a 32-bit value so that two engines of different
    tiers do not share a random stream. Callers that want reproducible
    games across runs should pass ``rng_seed`` explicitly.
    """
    base = (_TIER_ORDINALS[config.difficulty] * 1_000_003) ^ 97_911
    return int(base & 0xFFFFFFFF)


class BaseAI(ABC):
    """Abstract base class for all tier implementations"""

    tier: DifficultyTier

    def __init__(self, config: AIConfig, budget: Optional[SearchBudget] = None):
        """
        Initialize AI

        Args:
            config: AI configuration with every tier default resolved
            budget: Optional cooperative yield counter shared by the solvers
        """
        self.config = config
        self.budget = budget
        self.move_count = 0

        # Per-instance RNG used for all stochastic behaviour (blunders,
        # random safe edges, solver tie-breaking).
        if self.config.rng_seed is not None:
            self.rng_seed: int = int(self.config.rng_seed)
        else:
            self.rng_seed = derive_seed(self.config)
        self.rng: random.Random = random.Random(self.rng_seed)

    @abstractmethod
    def select_move(self, board: BoardLike) -> Optional[int]:
        """
        Select an edge to play

        Args:
            board: Current board; left unchanged on return

        Returns:
            Edge id or None if no free edge remains
        """
        pass

    def should_blunder(self) -> bool:
        """
        Determine if the AI should play a uniformly random edge

        Returns:
            True if this move should be a blunder
        """
        if not self.config.blunder_probability:
            return False
        return self.rng.random() < self.config.blunder_probability

    def get_random_element(self, items: List[Any]) -> Optional[Any]:
        """
        Get random element from list using the per-instance RNG.

        Args:
            items: List of items

        Returns:
            Random item or None if list is empty
        """
        if not items:
            return None
        return self.rng.choice(items)

    def __repr__(self) -> str:
        """String representation of AI"""
        return (
            f"{self.__class__.__name__}"
            f"(tier={self.config.difficulty.value}, seed={self.rng_seed})"
        )
