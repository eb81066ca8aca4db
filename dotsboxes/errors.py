"""
Dots and Boxes Error Hierarchy

Unified exception hierarchy for the engine and its reference board.
All custom exceptions inherit from DotsBoxesError for easy catching and
filtering.

The move-selection engine itself never raises: exhausted inputs fall through
to weaker strategies. These errors are raised by the reference board and the
configuration layer when they are handed inconsistent input.

Usage:
    from dotsboxes.errors import InvalidMoveError

    try:
        board.apply_move(edge)
    except InvalidMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any

__all__ = [
    "ConfigurationError",
    # Base error
    "DotsBoxesError",
    # Board errors
    "InvalidMoveError",
    "InvalidStateError",
]


class DotsBoxesError(Exception):
    """Base exception for all Dots and Boxes errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "DOTSBOXES_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Board Errors
# =============================================================================


class InvalidMoveError(DotsBoxesError):
    """Edge cannot be played.

    Raised when an edge id is out of range or the edge is already filled.
    """
    code: str = "INVALID_MOVE"

    def __init__(
        self,
        message: str,
        edge: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.edge = edge
        if edge is not None:
            self.context["edge"] = edge


class InvalidStateError(DotsBoxesError):
    """Board bookkeeping was used out of order.

    Raised when an undo token is consumed twice or is not the most recent
    move applied to the board.
    """
    code: str = "INVALID_STATE"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DotsBoxesError):
    """Invalid board or engine configuration."""
    code: str = "CONFIGURATION_ERROR"
