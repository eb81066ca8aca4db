"""Position builders shared by the engine tests.

Boards are built by playing every edge that should be filled, in ascending
id order, on a fresh :class:`DotsBoard`.
"""

from __future__ import annotations

from dotsboxes.board import DotsBoard


def h(board: DotsBoard, row: int, col: int) -> int:
    return board.edge_at(row, col, "H")


def v(board: DotsBoard, row: int, col: int) -> int:
    return board.edge_at(row, col, "V")


def board_with_free(dots: int, free: list[int]) -> DotsBoard:
    """Board where exactly ``free`` edges are left unfilled."""
    probe = DotsBoard(dots)
    keep = set(free)
    return DotsBoard.with_filled(dots, [e for e in range(probe.num_edges) if e not in keep])


def chain_of_four_board() -> DotsBoard:
    """3x3 boxes: one 4-box chain, every other box already taken.

    The chain runs (0,0) -> (0,1) -> (0,2) -> (1,2) and opens onto the left
    border at V(0,0) and the right border at V(1,3).
    """
    probe = DotsBoard(4)
    free = [
        v(probe, 0, 0),
        v(probe, 0, 1),
        v(probe, 0, 2),
        h(probe, 1, 2),
        v(probe, 1, 3),
    ]
    return board_with_free(4, free)


def two_chains_board() -> DotsBoard:
    """2x2 boxes: every horizontal edge filled.

    Leaves two identical 2-box chains, one per row, with border entries at
    both ends.
    """
    probe = DotsBoard(3)
    return DotsBoard.with_filled(
        3, [h(probe, r, c) for r in range(3) for c in range(2)]
    )


def perimeter_loop_board() -> DotsBoard:
    """2x2 boxes with the outer perimeter filled: one 4-box loop."""
    probe = DotsBoard(3)
    perimeter = [
        h(probe, 0, 0), h(probe, 0, 1),
        h(probe, 2, 0), h(probe, 2, 1),
        v(probe, 0, 0), v(probe, 1, 0),
        v(probe, 0, 2), v(probe, 1, 2),
    ]
    return DotsBoard.with_filled(3, sorted(perimeter))


def last_box_board(dots: int = 4) -> DotsBoard:
    """Every edge filled except the last one, which completes the last box."""
    probe = DotsBoard(dots)
    return board_with_free(dots, [probe.num_edges - 1])


def closers_board() -> DotsBoard:
    """2x2 boxes with two capture options.

    Boxes (0,0) and (0,1) both have three sides and share V(0,1), which
    completes two boxes at once. Box (1,1) has three sides and V(1,1)
    completes it alone.
    """
    probe = DotsBoard(3)
    filled = [
        h(probe, 0, 0), v(probe, 0, 0), h(probe, 1, 0),
        h(probe, 0, 1), v(probe, 0, 2), h(probe, 1, 1),
        v(probe, 1, 2), h(probe, 2, 1),
    ]
    return DotsBoard.with_filled(3, sorted(filled))


def sacrifice_board() -> DotsBoard:
    """3x3 boxes where giving away one box beats the last safe edge.

    Box (0,0) is a lone two-sided box and boxes (0,2), (1,2), (1,1) form a
    three-box chain; both open into the empty box (0,1), whose top edge is
    the only safe move. The bottom row and box (1,0) are already taken, all
    four by player 1, and player 2 is to move.
    """
    board = DotsBoard(4)
    order = [
        h(board, 0, 2),
        h(board, 1, 0), v(board, 1, 1), h(board, 2, 0), v(board, 1, 0),
        v(board, 2, 0), v(board, 2, 1), h(board, 3, 0),
        h(board, 2, 1), v(board, 2, 2), h(board, 3, 1),
        h(board, 2, 2), v(board, 2, 3), h(board, 3, 2),
        v(board, 0, 3), v(board, 0, 0), v(board, 1, 3),
    ]
    for edge in order:
        board.apply_move(edge)
    return board


def open_top_row_board() -> DotsBoard:
    """3x3 boxes with only the top row left to play.

    Box (0,0) has two sides, boxes (0,1) and (0,2) one each. The free edges
    are the three top edges and the three verticals of the row.
    """
    probe = DotsBoard(4)
    free = [
        h(probe, 0, 0), h(probe, 0, 1), h(probe, 0, 2),
        v(probe, 0, 1), v(probe, 0, 2), v(probe, 0, 3),
    ]
    return board_with_free(4, free)


def board_state(board: DotsBoard) -> tuple:
    """Everything a move can touch, for before/after comparisons."""
    return (
        tuple(board.free_edges()),
        tuple(sorted(board.scores.items())),
        board.current_player,
        tuple(board.box_owner(b) for b in range(board.num_boxes)),
    )
