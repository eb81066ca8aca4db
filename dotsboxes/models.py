"""
Pydantic Models for the Dots and Boxes engine
Edge geometry, difficulty tiers and AI configuration
"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class Orientation(str, Enum):
    """Edge orientation enumeration"""
    HORIZONTAL = "H"
    VERTICAL = "V"


class DifficultyTier(str, Enum):
    """Difficulty tier enumeration"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class EdgeCoord(BaseModel):
    """Geometric coordinate of an edge.

    Horizontal edges run from dot (row, col) to dot (row, col + 1); vertical
    edges from dot (row, col) to dot (row + 1, col).
    """
    row: int
    col: int
    orientation: Orientation

    class Config:
        frozen = True

    def to_key(self) -> str:
        """Convert coordinate to string key"""
        return f"{self.row},{self.col},{self.orientation.value}"


class AIConfig(BaseModel):
    """AI configuration.

    Unset optional fields are filled from the tier's canonical profile
    (see :mod:`dotsboxes.ai.factory`).
    """
    difficulty: DifficultyTier = DifficultyTier.MEDIUM
    rng_seed: Optional[int] = Field(None, alias="rngSeed")
    blunder_probability: Optional[float] = Field(
        None, ge=0, le=1, alias="blunderProbability"
    )
    top_k_safe: Optional[int] = Field(None, ge=1, alias="topKSafe")
    max_closer_candidates: Optional[int] = Field(
        None, ge=1, alias="maxCloserCandidates"
    )
    max_safe_candidates: Optional[int] = Field(
        None, ge=1, alias="maxSafeCandidates"
    )
    max_reply_candidates: Optional[int] = Field(
        None, ge=1, alias="maxReplyCandidates"
    )
    max_sacrifice_candidates: Optional[int] = Field(
        None, ge=0, alias="maxSacrificeCandidates"
    )
    sacrifice_safe_threshold: Optional[int] = Field(
        None, ge=0, alias="sacrificeSafeThreshold"
    )
    sacrifice_margin: Optional[int] = Field(None, alias="sacrificeMargin")
    # Solver ticks between cooperative yields; 0 disables yielding.
    yield_every: int = Field(0, ge=0, alias="yieldEvery")

    class Config:
        populate_by_name = True


class MatchResult(BaseModel):
    """Outcome of a series of engine-vs-engine games"""
    first_label: str = Field(alias="firstLabel")
    second_label: str = Field(alias="secondLabel")
    first_wins: int = Field(0, alias="firstWins")
    second_wins: int = Field(0, alias="secondWins")
    draws: int = 0
    first_boxes: int = Field(0, alias="firstBoxes")
    second_boxes: int = Field(0, alias="secondBoxes")

    class Config:
        populate_by_name = True

    @property
    def games(self) -> int:
        return self.first_wins + self.second_wins + self.draws
