"""Engine-vs-engine matches on the reference board.

Usage:
    dotsboxes-match --p1 hard --p2 expert --games 10 --dots 4 --seed 1

Each game alternates the starting seat so both tiers open equally often.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .board import DEFAULT_DOTS, DotsBoard
from .engine import MoveEngine
from .errors import DotsBoxesError, InvalidStateError
from .logging_config import setup_logging
from .models import AIConfig, MatchResult

logger = logging.getLogger(__name__)


def play_game(
    first: MoveEngine,
    second: MoveEngine,
    dots: int = DEFAULT_DOTS,
    first_player: int = 1,
) -> DotsBoard:
    """Play one game; ``first`` sits as player 1, ``second`` as player 2.

    Returns:
        The finished board.

    Raises:
        InvalidStateError: If an engine returns no move on a running game.
    """
    board = DotsBoard(dots, first_player=first_player)
    seats = {1: first, 2: second}
    while not board.is_game_over():
        engine = seats[board.current_player]
        edge = engine.choose_move(board)
        if edge is None:
            raise InvalidStateError(
                "Engine returned no move on a running game",
                context={"player": board.current_player, "engine": repr(engine)},
            )
        board.apply_move(edge)
    return board


def run_match(
    first_tier: str,
    second_tier: str,
    games: int = 10,
    dots: int = DEFAULT_DOTS,
    seed: int | None = None,
) -> MatchResult:
    """Play ``games`` games between two tiers, alternating who starts."""
    first = MoveEngine(first_tier, AIConfig(rngSeed=seed))
    second = MoveEngine(
        second_tier, AIConfig(rngSeed=None if seed is None else seed + 1)
    )
    result = MatchResult(
        firstLabel=first.difficulty.value,
        secondLabel=second.difficulty.value,
    )

    for game in range(games):
        board = play_game(first, second, dots, first_player=1 + game % 2)
        scores = board.scores
        result.first_boxes += scores[1]
        result.second_boxes += scores[2]
        winner = board.winner()
        if winner == 1:
            result.first_wins += 1
        elif winner == 2:
            result.second_wins += 1
        else:
            result.draws += 1
        logger.info(
            f"Game {game + 1}/{games}: {scores[1]}-{scores[2]} "
            f"({result.first_label} vs {result.second_label})"
        )
    return result


def format_result(result: MatchResult) -> str:
    rows = [
        f"{'Tier':<10} | {'Wins':<5} | {'Boxes':<6}",
        "-" * 27,
        f"{result.first_label:<10} | {result.first_wins:<5} | {result.first_boxes:<6}",
        f"{result.second_label:<10} | {result.second_wins:<5} | {result.second_boxes:<6}",
        f"Draws: {result.draws} of {result.games} games",
    ]
    return "\n".join(rows)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Dots and Boxes engine tiers against each other",
    )
    parser.add_argument("--p1", default="hard", help="Tier for the first seat")
    parser.add_argument("--p2", default="expert", help="Tier for the second seat")
    parser.add_argument("--games", type=int, default=10, help="Number of games")
    parser.add_argument(
        "--dots", type=int, default=DEFAULT_DOTS, help="Dots per board side"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging("dotsboxes", level=logging.DEBUG if args.verbose else logging.INFO)

    if args.games < 1:
        print("Error: --games must be at least 1", file=sys.stderr)
        return 1

    try:
        result = run_match(args.p1, args.p2, args.games, args.dots, args.seed)
    except DotsBoxesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
