"""AI factory and difficulty profiles for the Dots and Boxes engine.

All tier construction goes through this module so that every tier is built
from the same canonical profile table.

Usage:
    from dotsboxes.ai.factory import AIFactory, normalize_difficulty

    tier = normalize_difficulty("Hard")
    ai = AIFactory.create(tier, AIConfig(rngSeed=7))
    edge = ai.select_move(board)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, TypedDict

from ..models import AIConfig, DifficultyTier

if TYPE_CHECKING:
    from .base import BaseAI
    from .search_budget import SearchBudget

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Type definitions
# -----------------------------------------------------------------------------


class DifficultyProfile(TypedDict):
    """Canonical settings for a single difficulty tier."""
    blunder_probability: float
    top_k_safe: int
    max_closer_candidates: int
    max_safe_candidates: int
    max_reply_candidates: int
    max_sacrifice_candidates: int
    sacrifice_safe_threshold: int
    sacrifice_margin: int
    profile_id: str


# -----------------------------------------------------------------------------
# Canonical difficulty profiles
# -----------------------------------------------------------------------------

# Search caps only matter for the expert tier; the other tiers carry the
# same values so that a profile can be inspected uniformly.
CANONICAL_DIFFICULTY_PROFILES: dict[DifficultyTier, DifficultyProfile] = {
    DifficultyTier.EASY: {
        "blunder_probability": 0.05,
        "top_k_safe": 1,
        "max_closer_candidates": 1,
        "max_safe_candidates": 1,
        "max_reply_candidates": 1,
        "max_sacrifice_candidates": 0,
        "sacrifice_safe_threshold": 0,
        "sacrifice_margin": 0,
        "profile_id": "v1-easy",
    },
    DifficultyTier.MEDIUM: {
        # Randomized choice among the three best-scoring safe edges
        "blunder_probability": 0.0,
        "top_k_safe": 3,
        "max_closer_candidates": 1,
        "max_safe_candidates": 1,
        "max_reply_candidates": 1,
        "max_sacrifice_candidates": 0,
        "sacrifice_safe_threshold": 0,
        "sacrifice_margin": 0,
        "profile_id": "v1-medium",
    },
    DifficultyTier.HARD: {
        "blunder_probability": 0.0,
        "top_k_safe": 1,
        "max_closer_candidates": 1,
        "max_safe_candidates": 1,
        "max_reply_candidates": 1,
        "max_sacrifice_candidates": 0,
        "sacrifice_safe_threshold": 0,
        "sacrifice_margin": 0,
        "profile_id": "v1-hard",
    },
    DifficultyTier.EXPERT: {
        "blunder_probability": 0.0,
        "top_k_safe": 1,
        "max_closer_candidates": 6,
        "max_safe_candidates": 8,
        "max_reply_candidates": 6,
        "max_sacrifice_candidates": 3,
        "sacrifice_safe_threshold": 2,
        "sacrifice_margin": 2,
        "profile_id": "v1-expert",
    },
}

DIFFICULTY_DESCRIPTIONS: dict[DifficultyTier, str] = {
    DifficultyTier.EASY: "Easy - Closes boxes, random safe edges, 5% blunders",
    DifficultyTier.MEDIUM: "Medium - Random top-3 safe edge, negamax endgame",
    DifficultyTier.HARD: "Hard - One-ply safe-edge lookahead, negamax endgame",
    DifficultyTier.EXPERT: "Expert - Two-ply search with exact controlled-value endgame",
}

_FALLBACK_DIFFICULTY = DifficultyTier.EASY


# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def normalize_difficulty(
    name: Any,
    default: DifficultyTier | None = None,
) -> DifficultyTier:
    """Map ``name`` onto a tier, falling back to ``default`` when unknown.

    Accepts tier members and strings in any case with surrounding
    whitespace. Anything else (None, numbers, unknown names) yields
    ``default``, which itself defaults to :data:`DEFAULT_DIFFICULTY`.
    """
    if default is None:
        default = DEFAULT_DIFFICULTY
    if isinstance(name, DifficultyTier):
        return name
    if isinstance(name, str):
        try:
            return DifficultyTier(name.strip().lower())
        except ValueError:
            pass
    logger.debug(f"Unknown difficulty {name!r}; using {default.value}")
    return default


DEFAULT_DIFFICULTY: DifficultyTier = normalize_difficulty(
    os.getenv("DOTSBOXES_DEFAULT_DIFFICULTY", _FALLBACK_DIFFICULTY.value),
    default=_FALLBACK_DIFFICULTY,
)


def get_difficulty_profile(tier: DifficultyTier) -> DifficultyProfile:
    """Return the canonical profile for ``tier``."""
    return CANONICAL_DIFFICULTY_PROFILES[tier]


def get_difficulty_description(tier: DifficultyTier) -> str:
    return DIFFICULTY_DESCRIPTIONS[tier]


def get_all_difficulties() -> list[DifficultyTier]:
    return list(CANONICAL_DIFFICULTY_PROFILES)


def resolve_config(config: AIConfig) -> AIConfig:
    """Fill every unset field of ``config`` from its tier's profile."""
    profile = get_difficulty_profile(config.difficulty)
    updates = {
        field: value
        for field, value in profile.items()
        if field != "profile_id" and getattr(config, field) is None
    }
    return config.model_copy(update=updates)


# -----------------------------------------------------------------------------
# AI Factory
# -----------------------------------------------------------------------------


class AIFactory:
    """Centralized factory for creating tier AIs.

    Tier classes are imported lazily and cached.
    """

    _class_cache: dict[DifficultyTier, type[BaseAI]] = {}

    @classmethod
    def _get_ai_class(cls, tier: DifficultyTier) -> type[BaseAI]:
        """Get the AI class for a given tier, with lazy loading.

        Raises:
            ValueError: If the tier is not supported
        """
        if tier in cls._class_cache:
            return cls._class_cache[tier]

        if tier == DifficultyTier.EASY:
            from .easy_ai import EasyAI
            ai_class = EasyAI
        elif tier == DifficultyTier.MEDIUM:
            from .medium_ai import MediumAI
            ai_class = MediumAI
        elif tier == DifficultyTier.HARD:
            from .hard_ai import HardAI
            ai_class = HardAI
        elif tier == DifficultyTier.EXPERT:
            from .expert_ai import ExpertAI
            ai_class = ExpertAI
        else:
            raise ValueError(f"Unsupported difficulty tier: {tier}")

        cls._class_cache[tier] = ai_class
        return ai_class

    @classmethod
    def create(
        cls,
        tier: DifficultyTier,
        config: AIConfig | None = None,
        *,
        budget: SearchBudget | None = None,
    ) -> BaseAI:
        """Create an AI for ``tier``.

        Args:
            tier: Difficulty tier; overrides ``config.difficulty``
            config: Optional overrides; unset fields come from the profile
            budget: Optional cooperative yield counter for the solvers

        Returns:
            Configured AI instance
        """
        base = config if config is not None else AIConfig()
        resolved = resolve_config(base.model_copy(update={"difficulty": tier}))
        ai = cls._get_ai_class(tier)(resolved, budget)
        logger.debug(f"Created {ai!r} ({get_difficulty_profile(tier)['profile_id']})")
        return ai

    @classmethod
    def create_from_name(
        cls,
        name: Any,
        config: AIConfig | None = None,
        *,
        budget: SearchBudget | None = None,
    ) -> BaseAI:
        """Create an AI from a user-supplied tier name (normalised)."""
        return cls.create(normalize_difficulty(name), config, budget=budget)
