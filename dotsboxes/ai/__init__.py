"""Move-selection AI for Dots and Boxes.

The recommended entry point is the factory:

    from dotsboxes.ai import AIFactory, normalize_difficulty

    ai = AIFactory.create(normalize_difficulty("expert"))
    edge = ai.select_move(board)

Architecture:
- edges.py: free-edge classification (closers / safes)
- components.py: hot and cold chain/loop detection
- heuristics.py: safe-edge scoring and one-ply lookahead
- negamax_solver.py: length-based negamax endgame solver
- controlled_value.py: exact controlled-value (double-dealing) solver
- expert_search.py: two-ply search with sacrifice consideration
- factory.py: difficulty profiles and tier construction
"""

from dotsboxes.ai.base import BaseAI
from dotsboxes.ai.factory import (
    CANONICAL_DIFFICULTY_PROFILES,
    DEFAULT_DIFFICULTY,
    DIFFICULTY_DESCRIPTIONS,
    AIFactory,
    DifficultyProfile,
    get_all_difficulties,
    get_difficulty_description,
    get_difficulty_profile,
    normalize_difficulty,
    resolve_config,
)

# Lazy-load tier implementations
_AI_CLASSES = {
    "EasyAI": "dotsboxes.ai.easy_ai",
    "MediumAI": "dotsboxes.ai.medium_ai",
    "HardAI": "dotsboxes.ai.hard_ai",
    "ExpertAI": "dotsboxes.ai.expert_ai",
}


def __getattr__(name: str):
    """Lazy loading for tier implementation classes."""
    if name in _AI_CLASSES:
        import importlib
        module = importlib.import_module(_AI_CLASSES[name])
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CANONICAL_DIFFICULTY_PROFILES",
    "DEFAULT_DIFFICULTY",
    "DIFFICULTY_DESCRIPTIONS",
    "AIFactory",
    "BaseAI",
    "DifficultyProfile",
    "EasyAI",
    "ExpertAI",
    "HardAI",
    "MediumAI",
    "get_all_difficulties",
    "get_difficulty_description",
    "get_difficulty_profile",
    "normalize_difficulty",
    "resolve_config",
]
