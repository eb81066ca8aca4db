"""Reference board for the Dots and Boxes engine.

The move-selection engine treats the board as an external collaborator and
only talks to it through :class:`BoardLike`. :class:`DotsBoard` is the
reference implementation of that contract: static adjacency tables shared per
board size, per-game fill/ownership state, and make/unmake style moves whose
``apply_move`` returns a :class:`MoveUndo` token.

Edge ids are dense: horizontal edges come first (row-major over
``dots`` rows of ``dots - 1`` edges), then vertical edges (row-major over
``dots - 1`` rows of ``dots`` edges). Box ``b`` at (row, col) lists its edges
as ``(top, right, bottom, left)``.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from .errors import ConfigurationError, InvalidMoveError, InvalidStateError
from .models import EdgeCoord, Orientation

__all__ = ["BoardLike", "DotsBoard", "MoveUndo"]


DEFAULT_DOTS = 6


@dataclass
class MoveUndo:
    """Everything a single ``apply_move`` touched.

    Consumed exactly once by :meth:`DotsBoard.undo_move`.
    """
    edge: int
    player: int
    scores: tuple[int, int]
    captured: tuple[int, ...]
    consumed: bool = False

    @property
    def boxes_completed(self) -> int:
        return len(self.captured)


class BoardLike(Protocol):
    """Query/mutation surface the engine consumes."""

    @property
    def num_boxes(self) -> int: ...

    @property
    def num_edges(self) -> int: ...

    @property
    def current_player(self) -> int: ...

    @property
    def scores(self) -> dict[int, int]: ...

    def free_edges(self) -> list[int]: ...

    def edge_boxes(self, edge: int) -> tuple[int, ...]: ...

    def box_edges(self, box: int) -> tuple[int, int, int, int]: ...

    def is_filled(self, edge: int) -> bool: ...

    def is_game_over(self) -> bool: ...

    def apply_move(self, edge: int) -> MoveUndo: ...

    def undo_move(self, undo: MoveUndo) -> None: ...


@dataclass(frozen=True)
class _Geometry:
    coords: tuple[EdgeCoord, ...]
    coord_index: dict[tuple[int, int, Orientation], int]
    box_edges: tuple[tuple[int, int, int, int], ...]
    edge_boxes: tuple[tuple[int, ...], ...]


@lru_cache(maxsize=None)
def _build_geometry(dots: int) -> _Geometry:
    """Build the static adjacency tables for a ``dots`` x ``dots`` grid."""
    coords: list[EdgeCoord] = []
    coord_index: dict[tuple[int, int, Orientation], int] = {}

    for row in range(dots):
        for col in range(dots - 1):
            coord_index[(row, col, Orientation.HORIZONTAL)] = len(coords)
            coords.append(
                EdgeCoord(row=row, col=col, orientation=Orientation.HORIZONTAL)
            )
    for row in range(dots - 1):
        for col in range(dots):
            coord_index[(row, col, Orientation.VERTICAL)] = len(coords)
            coords.append(
                EdgeCoord(row=row, col=col, orientation=Orientation.VERTICAL)
            )

    box_edges: list[tuple[int, int, int, int]] = []
    edge_boxes: list[list[int]] = [[] for _ in coords]
    for row in range(dots - 1):
        for col in range(dots - 1):
            edges = (
                coord_index[(row, col, Orientation.HORIZONTAL)],
                coord_index[(row, col + 1, Orientation.VERTICAL)],
                coord_index[(row + 1, col, Orientation.HORIZONTAL)],
                coord_index[(row, col, Orientation.VERTICAL)],
            )
            box = len(box_edges)
            box_edges.append(edges)
            for edge in edges:
                edge_boxes[edge].append(box)

    return _Geometry(
        coords=tuple(coords),
        coord_index=coord_index,
        box_edges=tuple(box_edges),
        edge_boxes=tuple(tuple(boxes) for boxes in edge_boxes),
    )


class DotsBoard:
    """Mutable two-player Dots and Boxes board.

    Args:
        dots: Number of dots per side (``dots - 1`` boxes per side).
        first_player: Player (1 or 2) who moves first.
    """

    def __init__(self, dots: int = DEFAULT_DOTS, first_player: int = 1) -> None:
        if dots < 2:
            raise ConfigurationError(
                "Board needs at least 2 dots per side",
                context={"dots": dots},
            )
        if first_player not in (1, 2):
            raise ConfigurationError(
                "First player must be 1 or 2",
                context={"first_player": first_player},
            )
        self.dots = dots
        self._geometry = _build_geometry(dots)
        self._filled = [False] * len(self._geometry.coords)
        self._edge_owner = [0] * len(self._geometry.coords)
        self._box_owner = [0] * len(self._geometry.box_edges)
        self._scores = [0, 0]
        self._current_player = first_player
        self._history: list[MoveUndo] = []

    @classmethod
    def with_filled(cls, dots: int, edges: list[int]) -> DotsBoard:
        """Create a board and play ``edges`` in order."""
        board = cls(dots)
        for edge in edges:
            board.apply_move(edge)
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def num_boxes(self) -> int:
        return len(self._geometry.box_edges)

    @property
    def num_edges(self) -> int:
        return len(self._geometry.coords)

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def scores(self) -> dict[int, int]:
        return {1: self._scores[0], 2: self._scores[1]}

    def free_edges(self) -> list[int]:
        return [e for e, filled in enumerate(self._filled) if not filled]

    def edge_boxes(self, edge: int) -> tuple[int, ...]:
        return self._geometry.edge_boxes[edge]

    def box_edges(self, box: int) -> tuple[int, int, int, int]:
        return self._geometry.box_edges[box]

    def is_filled(self, edge: int) -> bool:
        return self._filled[edge]

    def edge_owner(self, edge: int) -> int:
        return self._edge_owner[edge]

    def box_owner(self, box: int) -> int:
        return self._box_owner[box]

    def edge_coord(self, edge: int) -> EdgeCoord:
        return self._geometry.coords[edge]

    def edge_at(self, row: int, col: int, orientation: Orientation | str) -> int:
        """Return the edge id at a geometric coordinate."""
        key = (row, col, Orientation(orientation))
        try:
            return self._geometry.coord_index[key]
        except KeyError:
            raise InvalidMoveError(
                "No edge at coordinate",
                context={"row": row, "col": col, "orientation": str(key[2].value)},
            ) from None

    def box_at(self, row: int, col: int) -> int:
        return row * (self.dots - 1) + col

    def is_game_over(self) -> bool:
        return sum(self._scores) == self.num_boxes

    def winner(self) -> int | None:
        """Return 1 or 2 for the winner, 0 for a draw, None while running."""
        if not self.is_game_over():
            return None
        if self._scores[0] == self._scores[1]:
            return 0
        return 1 if self._scores[0] > self._scores[1] else 2

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, edge: int) -> MoveUndo:
        """Fill ``edge`` for the current player.

        Completed boxes are credited to the mover, who keeps the turn;
        otherwise the turn passes.

        Raises:
            InvalidMoveError: If the edge is out of range or already filled.
        """
        if not 0 <= edge < self.num_edges:
            raise InvalidMoveError("Edge out of range", edge=edge)
        if self._filled[edge]:
            raise InvalidMoveError("Edge already filled", edge=edge)

        player = self._current_player
        undo = MoveUndo(
            edge=edge,
            player=player,
            scores=(self._scores[0], self._scores[1]),
            captured=(),
        )

        self._filled[edge] = True
        self._edge_owner[edge] = player

        captured = []
        for box in self._geometry.edge_boxes[edge]:
            if self._box_owner[box] == 0 and all(
                self._filled[e] for e in self._geometry.box_edges[box]
            ):
                self._box_owner[box] = player
                self._scores[player - 1] += 1
                captured.append(box)

        if not captured:
            self._current_player = 3 - player
        undo.captured = tuple(captured)
        self._history.append(undo)
        return undo

    def undo_move(self, undo: MoveUndo) -> None:
        """Restore exactly the fields touched by ``undo``'s move.

        Raises:
            InvalidStateError: If the token was already consumed or is not
                the most recent move on this board.
        """
        if undo.consumed:
            raise InvalidStateError(
                "Undo token already consumed", context={"edge": undo.edge}
            )
        if not self._history or self._history[-1] is not undo:
            raise InvalidStateError(
                "Undo token is not the most recent move",
                context={"edge": undo.edge},
            )

        self._history.pop()
        undo.consumed = True
        self._filled[undo.edge] = False
        self._edge_owner[undo.edge] = 0
        for box in undo.captured:
            self._box_owner[box] = 0
        self._scores[0], self._scores[1] = undo.scores
        self._current_player = undo.player

    def __repr__(self) -> str:
        return (
            f"DotsBoard(dots={self.dots}, free={len(self.free_edges())}, "
            f"scores={self.scores}, to_move={self._current_player})"
        )
