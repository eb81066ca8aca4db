"""Prometheus metrics for the Dots and Boxes engine.

Counters and histograms are module-level so the engine and solvers can record
lightweight telemetry without managing their own metric instances. Labels
allow filtering by tier and solver in local/dev Prometheus setups.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram


AI_MOVES: Final[Counter] = Counter(
    "dotsboxes_ai_moves_total",
    "Total number of move requests, labeled by tier and outcome.",
    labelnames=("tier", "outcome"),
)

AI_MOVE_LATENCY: Final[Histogram] = Histogram(
    "dotsboxes_ai_move_latency_seconds",
    "Latency of move requests in seconds, labeled by tier.",
    labelnames=("tier",),
    buckets=(
        0.001,
        0.005,
        0.01,
        0.05,
        0.1,
        0.5,
        1.0,
        5.0,
    ),
)

SOLVER_POSITIONS: Final[Counter] = Counter(
    "dotsboxes_solver_positions_total",
    (
        "Distinct component multisets evaluated by the endgame solvers, "
        "labeled by solver."
    ),
    labelnames=("solver",),
)


def record_solver_positions(solver: str, count: int) -> None:
    if count > 0:
        SOLVER_POSITIONS.labels(solver=solver).inc(count)
