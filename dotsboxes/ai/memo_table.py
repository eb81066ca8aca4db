"""Memo table for the endgame solvers.

Keys are structural (a ``ComponentState`` or a sorted tuple of component
values) so that permutations of the same multiset share one entry. A table
lives for a single top-level solver call and is discarded afterwards, which
keeps it small enough to need no eviction.
"""

from __future__ import annotations

from collections.abc import Hashable


class MemoTable:
    """Solver scores keyed by position, with lookup counters.

    ``misses`` is the number of positions the solver had to expand and is
    what the solvers report as ``dotsboxes_solver_positions_total``.
    """

    def __init__(self) -> None:
        self._scores: dict[Hashable, int] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> int | None:
        score = self._scores.get(key)
        if score is None:
            self.misses += 1
        else:
            self.hits += 1
        return score

    def put(self, key: Hashable, score: int) -> None:
        self._scores[key] = score

    def __len__(self) -> int:
        return len(self._scores)
