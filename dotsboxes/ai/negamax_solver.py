"""Length-based negamax endgame solver.

Each chain or loop is reduced to a single value (``4 - length`` for chains,
``-1`` for loops) and the solver searches the order in which the players take
them. Only the multiset of values matters, so positions are memoised by the
descending-sorted value tuple.

This is an approximation; :mod:`dotsboxes.ai.controlled_value` is the exact
solver used by the expert tier.
"""

from __future__ import annotations

import logging
import random

from ..board import BoardLike
from ..metrics import record_solver_positions
from .components import Component, collect_cold, collect_hot
from .edges import EdgeSnapshot, classify
from .heuristics import cheapest_free_edge
from .memo_table import MemoTable
from .search_budget import SearchBudget

logger = logging.getLogger(__name__)


def component_value(component: Component) -> int:
    return -1 if component.is_loop else 4 - component.length


def negamax(
    values: tuple[int, ...],
    memo: MemoTable,
    budget: SearchBudget | None = None,
) -> int:
    """Best score differential for the player to move over ``values``.

    Taking value ``v`` scores ``-negamax(rest) - v``. Search stops at the
    first branch reaching a non-negative score.
    """
    key = tuple(sorted(values, reverse=True))
    if not key:
        return 0
    cached = memo.get(key)
    if cached is not None:
        return cached

    best: int | None = None
    previous: int | None = None
    for i, value in enumerate(key):
        # equal values lead to identical subtrees
        if value == previous:
            continue
        previous = value
        score = -negamax(key[:i] + key[i + 1:], memo, budget) - value
        if budget is not None:
            budget.tick()
        if best is None or score > best:
            best = score
        if best >= 0:
            break

    memo.put(key, best)
    return best


def score_components(
    components: list[Component],
    memo: MemoTable,
    budget: SearchBudget | None = None,
) -> list[int]:
    """Score of taking each component first, for the player to move."""
    values = [component_value(c) for c in components]
    scores = []
    for i, value in enumerate(values):
        rest = tuple(values[:i] + values[i + 1:])
        scores.append(-negamax(rest, memo, budget) - value)
    return scores


def choose_negamax_move(
    board: BoardLike,
    rng: random.Random,
    snapshot: EdgeSnapshot | None = None,
    budget: SearchBudget | None = None,
) -> int | None:
    """Pick an edge of the best component by negamax.

    Hot components are used when present, otherwise cold ones. Without any
    component the cheapest free edge is played; ``None`` when the board is
    full.
    """
    components = collect_hot(board) or collect_cold(board)
    if not components:
        if snapshot is None:
            snapshot = classify(board)
        edge = cheapest_free_edge(board, snapshot.free)
        logger.debug(f"negamax: no components, falling back to edge {edge}")
        return edge

    memo = MemoTable()
    scores = score_components(components, memo, budget)
    record_solver_positions("negamax", memo.misses)

    best = max(scores)
    tied = [c.edge for c, s in zip(components, scores) if s == best]
    edge = rng.choice(tied)
    logger.debug(
        f"negamax: {len(components)} components, best={best}, "
        f"tied={len(tied)}, edge={edge}"
    )
    return edge
