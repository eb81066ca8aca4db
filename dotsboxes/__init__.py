"""Dots and Boxes move-selection engine."""

from dotsboxes.board import BoardLike, DotsBoard, MoveUndo
from dotsboxes.engine import MoveEngine
from dotsboxes.models import AIConfig, DifficultyTier

__version__ = "0.1.0"

__all__ = [
    "AIConfig",
    "BoardLike",
    "DifficultyTier",
    "DotsBoard",
    "MoveEngine",
    "MoveUndo",
]
