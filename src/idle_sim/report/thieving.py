"""Thieving aggregator — population → ``ThievingStats`` → text report.

The "max" and "min" figures are trimmed means: the mean of the highest /
lowest ``TRIM_COUNT`` sorted values.  This damps single outliers that a raw
min/max would report.  Smaller populations are averaged over every value
they have, so at exactly ``TRIM_COUNT`` trials (or fewer) both trimmed means
equal the plain mean.
"""

from __future__ import annotations

import numpy as np

from idle_sim.models.results import Population, ThievingOutcome, ThievingStats
from idle_sim.report.errors import EmptyPopulationError
from idle_sim.report.formatting import format_amount, format_duration_hms

TRIM_COUNT = 500
SEPARATOR = "-" * 20


def trimmed_means(values: np.ndarray, count: int = TRIM_COUNT) -> tuple[float, float]:
    """Return ``(mean of lowest count, mean of highest count)``.

    The divisor is ``min(len(values), count)``.
    """
    k = min(len(values), count)
    ordered = np.sort(values)
    return float(ordered[:k].mean()), float(ordered[-k:].mean())


def summarize_thieving(population: Population) -> ThievingStats:
    outcomes: list[ThievingOutcome] = list(population)
    if not outcomes:
        raise EmptyPopulationError("thieving")

    n = len(outcomes)
    times = np.array([o.time_elapsed for o in outcomes], dtype=np.float64)
    money = np.array([o.money_earned for o in outcomes], dtype=np.float64)

    min_time, max_time = trimmed_means(times)
    min_money, max_money = trimmed_means(money)

    return ThievingStats(
        num_trials=n,
        trim_count=min(n, TRIM_COUNT),
        mean_time=float(times.mean()),
        max_mean_time=max_time,
        min_mean_time=min_time,
        mean_money=float(money.mean()),
        max_mean_money=max_money,
        min_mean_money=min_money,
        avg_success=sum(o.success_count for o in outcomes) / n,
        avg_failed=sum(o.failed_count for o in outcomes) / n,
        avg_attempts=sum(o.attempt_count for o in outcomes) / n,
    )


def render_thieving_report(stats: ThievingStats) -> str:
    lines = [
        f"Mean time: {format_duration_hms(stats.mean_time)}",
        f"Max mean time: {format_duration_hms(stats.max_mean_time)}",
        f"Min mean time: {format_duration_hms(stats.min_mean_time)}",
        SEPARATOR,
        f"Mean money earned: {format_amount(stats.mean_money)}",
        f"Max money earned: {format_amount(stats.max_mean_money)}",
        f"Min money earned: {format_amount(stats.min_mean_money)}",
        SEPARATOR,
        f"Success thieving: {format_amount(stats.avg_success)}",
        f"Failed thieving: {format_amount(stats.avg_failed)}",
        f"Thieving count: {format_amount(stats.avg_attempts)}",
    ]
    return "\n".join(lines) + "\n"
