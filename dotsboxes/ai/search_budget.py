"""Cooperative yield points for the recursive solvers.

Hosts that drive the engine from a frame loop can inject an ``on_yield``
callback that is invoked every ``yield_every`` solver branches. The callback
is a scheduling courtesy only: it receives no search state and cannot alter
results.
"""

from __future__ import annotations

from collections.abc import Callable


class SearchBudget:
    """Counts solver branches and calls ``on_yield`` periodically."""

    def __init__(
        self,
        yield_every: int = 0,
        on_yield: Callable[[], None] | None = None,
    ) -> None:
        self.yield_every = max(0, yield_every)
        self.on_yield = on_yield
        self.nodes = 0
        self.yields = 0

    def tick(self) -> None:
        self.nodes += 1
        if (
            self.on_yield is not None
            and self.yield_every > 0
            and self.nodes % self.yield_every == 0
        ):
            self.yields += 1
            self.on_yield()

    def reset(self) -> None:
        self.nodes = 0
        self.yields = 0
