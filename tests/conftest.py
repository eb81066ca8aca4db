"""
Shared pytest fixtures for the engine tests.

Board fixtures are function-scoped: several tests apply and undo moves and
must not observe each other's boards.
"""

import random

import pytest

from dotsboxes.board import DotsBoard
from tests.helpers import (
    chain_of_four_board,
    closers_board,
    last_box_board,
    open_top_row_board,
    perimeter_loop_board,
    sacrifice_board,
    two_chains_board,
)


@pytest.fixture
def empty_board() -> DotsBoard:
    """Fresh 3x3-box board (4x4 dots)."""
    return DotsBoard(4)


@pytest.fixture
def chain_board() -> DotsBoard:
    return chain_of_four_board()


@pytest.fixture
def twin_chains_board() -> DotsBoard:
    return two_chains_board()


@pytest.fixture
def loop_board() -> DotsBoard:
    return perimeter_loop_board()


@pytest.fixture
def final_box_board() -> DotsBoard:
    return last_box_board()


@pytest.fixture
def capture_board() -> DotsBoard:
    return closers_board()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def sacrifice_position() -> DotsBoard:
    return sacrifice_board()


@pytest.fixture
def top_row_board() -> DotsBoard:
    return open_top_row_board()
