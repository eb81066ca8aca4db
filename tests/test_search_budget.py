"""Tests for cooperative solver yielding."""

from dotsboxes.ai.search_budget import SearchBudget


class TestSearchBudget:
    def test_counts_ticks_without_callback(self) -> None:
        budget = SearchBudget(yield_every=2)
        for _ in range(5):
            budget.tick()
        assert budget.nodes == 5
        assert budget.yields == 0

    def test_calls_back_every_n_ticks(self) -> None:
        """Should invoke on_yield once per yield_every ticks."""
        calls = []
        budget = SearchBudget(yield_every=3, on_yield=lambda: calls.append(1))
        for _ in range(10):
            budget.tick()
        assert len(calls) == 3
        assert budget.yields == 3

    def test_zero_disables_yielding(self) -> None:
        calls = []
        budget = SearchBudget(yield_every=0, on_yield=lambda: calls.append(1))
        for _ in range(10):
            budget.tick()
        assert calls == []

    def test_negative_interval_is_clamped(self) -> None:
        assert SearchBudget(yield_every=-4).yield_every == 0

    def test_reset(self) -> None:
        budget = SearchBudget(yield_every=1, on_yield=lambda: None)
        budget.tick()
        budget.reset()
        assert (budget.nodes, budget.yields) == (0, 0)
