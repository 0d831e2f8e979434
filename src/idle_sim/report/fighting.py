"""Fighting aggregator — population → ``FightingStats`` → text report."""

from __future__ import annotations

import numpy as np

from idle_sim.models.results import FightingOutcome, FightingStats, Population
from idle_sim.report.errors import EmptyPopulationError
from idle_sim.report.formatting import format_amount, format_duration_hms

SEPARATOR = "-" * 24


def summarize_fighting(population: Population) -> FightingStats:
    """Mean, median and single-value extremes of time and kills."""
    outcomes: list[FightingOutcome] = list(population)
    if not outcomes:
        raise EmptyPopulationError("fighting")

    times = np.array([o.time_elapsed for o in outcomes], dtype=np.float64)
    killed = np.array([o.enemies_killed for o in outcomes], dtype=np.float64)

    return FightingStats(
        num_trials=len(outcomes),
        mean_time=float(times.mean()),
        median_time=float(np.median(times)),
        min_time=float(times.min()),
        max_time=float(times.max()),
        mean_killed=float(killed.mean()),
        median_killed=float(np.median(killed)),
        min_killed=float(killed.min()),
        max_killed=float(killed.max()),
    )


def render_fighting_report(stats: FightingStats) -> str:
    lines = [
        f"Mean time: {format_duration_hms(stats.mean_time)}",
        f"Median time: {format_duration_hms(stats.median_time)}",
        f"Min time: {format_duration_hms(stats.min_time)}",
        f"Max time: {format_duration_hms(stats.max_time)}",
        SEPARATOR,
        f"Mean killed: {format_amount(stats.mean_killed)}",
        f"Median killed: {format_amount(stats.median_killed)}",
        f"Min killed: {format_amount(stats.min_killed)}",
        f"Max killed: {format_amount(stats.max_killed)}",
    ]
    return "\n".join(lines) + "\n"
