"""Exact controlled-value endgame solver.

Positions are sums of independent chains and loops. Whoever opens a
component hands it to the opponent, who either takes every box and must move
next, or double-deals: declines the last two boxes of a chain (four of a
loop) to keep control. Double-dealing is only offered for chains of length
4 or more and loops of length 6 or more.

State is a :class:`ComponentState` multiset, so symmetric positions share one
memo entry.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, replace

from ..board import BoardLike
from ..metrics import record_solver_positions
from .components import Component, collect_cold, collect_hot
from .edges import EdgeSnapshot
from .memo_table import MemoTable
from .negamax_solver import choose_negamax_move
from .search_budget import SearchBudget

logger = logging.getLogger(__name__)

CHAIN = "chain"
LOOP = "loop"

# kind -> (minimum length for double-dealing, keep-value offset)
_CONTROL_RULES: dict[str, tuple[int, int]] = {
    CHAIN: (4, 4),
    LOOP: (6, 8),
}


@dataclass(frozen=True)
class ComponentState:
    """Multiset of chain and loop lengths.

    ``chains`` and ``loops`` are ``(length, count)`` pairs sorted by length
    with no zero counts, which makes equal multisets compare and hash equal.
    """
    chains: tuple[tuple[int, int], ...] = ()
    loops: tuple[tuple[int, int], ...] = ()

    @classmethod
    def from_components(cls, components: list[Component]) -> ComponentState:
        chains: Counter[int] = Counter()
        loops: Counter[int] = Counter()
        for component in components:
            (loops if component.is_loop else chains)[component.length] += 1
        return cls(
            chains=tuple(sorted(chains.items())),
            loops=tuple(sorted(loops.items())),
        )

    @property
    def is_empty(self) -> bool:
        return not self.chains and not self.loops

    @property
    def total_boxes(self) -> int:
        return sum(length * count for length, count in self.chains + self.loops)

    def count(self, kind: str, length: int) -> int:
        return dict(self._bucket(kind)).get(length, 0)

    def remove_one(self, kind: str, length: int) -> ComponentState:
        """Return a new state with one ``kind`` component of ``length`` removed.

        Raises:
            ValueError: If no such component is present.
        """
        bucket = []
        found = False
        for size, count in self._bucket(kind):
            if size == length:
                found = True
                if count > 1:
                    bucket.append((size, count - 1))
            else:
                bucket.append((size, count))
        if not found:
            raise ValueError(f"No {kind} of length {length} in {self}")
        if kind == CHAIN:
            return replace(self, chains=tuple(bucket))
        return replace(self, loops=tuple(bucket))

    def _bucket(self, kind: str) -> tuple[tuple[int, int], ...]:
        if kind == CHAIN:
            return self.chains
        if kind == LOOP:
            return self.loops
        raise ValueError(f"Unknown component kind: {kind!r}")


def branch_score(
    state: ComponentState,
    kind: str,
    length: int,
    memo: MemoTable,
    budget: SearchBudget | None = None,
) -> int:
    """Value for the player to move of opening one ``kind`` of ``length``."""
    nxt = solve(state.remove_one(kind, length), memo, budget)
    score = -length - nxt
    threshold, offset = _CONTROL_RULES[kind]
    if length >= threshold:
        # the opponent picks whichever reply is worse for the mover
        score = min(score, -(length - offset) + nxt)
    if budget is not None:
        budget.tick()
    return score


def solve(
    state: ComponentState,
    memo: MemoTable,
    budget: SearchBudget | None = None,
) -> int:
    """Best achievable differential for the player to move in ``state``."""
    if state.is_empty:
        return 0
    cached = memo.get(state)
    if cached is not None:
        return cached

    best: int | None = None
    for kind, bucket in ((CHAIN, state.chains), (LOOP, state.loops)):
        for length, _ in bucket:
            score = branch_score(state, kind, length, memo, budget)
            if best is None or score > best:
                best = score

    memo.put(state, best)
    return best


def project_future(
    board: BoardLike,
    memo: MemoTable | None = None,
    budget: SearchBudget | None = None,
) -> int:
    """Projected differential for the player to move on ``board``.

    Boxes in hot components are counted as captured by the mover; the cold
    chains and loops are valued by :func:`solve`.
    """
    hot_boxes = sum(c.length for c in collect_hot(board))
    state = ComponentState.from_components(collect_cold(board))
    return hot_boxes + solve(state, memo if memo is not None else MemoTable(), budget)


def choose_berlekamp_move(
    board: BoardLike,
    rng: random.Random,
    snapshot: EdgeSnapshot | None = None,
    budget: SearchBudget | None = None,
) -> int | None:
    """Open the component with the best controlled value.

    Uses hot components when present, otherwise cold ones, and delegates to
    the negamax solver when the board has neither.
    """
    components = collect_hot(board) or collect_cold(board)
    if not components:
        logger.debug("berlekamp: no components, delegating to negamax")
        return choose_negamax_move(board, rng, snapshot, budget)

    state = ComponentState.from_components(components)
    memo = MemoTable()
    scores = [
        branch_score(state, c.kind, c.length, memo, budget) for c in components
    ]
    record_solver_positions("berlekamp", memo.misses)

    best = max(scores)
    tied = [c.edge for c, s in zip(components, scores) if s == best]
    edge = rng.choice(tied)
    logger.debug(f"berlekamp: state={state}, best={best}, edge={edge}")
    return edge
