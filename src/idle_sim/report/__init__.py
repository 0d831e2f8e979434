"""Reports — aggregate a population into statistics and fixed-layout text."""

from __future__ import annotations

from idle_sim.models.results import FightingStats, Population, ThievingStats
from idle_sim.report.errors import EmptyPopulationError
from idle_sim.report.fighting import (
    render_fighting_report,
    summarize_fighting,
)
from idle_sim.report.formatting import format_amount, format_duration_hms
from idle_sim.report.thieving import (
    TRIM_COUNT,
    render_thieving_report,
    summarize_thieving,
    trimmed_means,
)


def summarize(population: Population) -> FightingStats | ThievingStats:
    """Statistics for a population of either process."""
    if population.process == "fighting":
        return summarize_fighting(population)
    if population.process == "thieving":
        return summarize_thieving(population)
    raise ValueError(f"Unknown process {population.process!r}")


def render(stats: FightingStats | ThievingStats) -> str:
    if isinstance(stats, FightingStats):
        return render_fighting_report(stats)
    return render_thieving_report(stats)


def aggregate(population: Population) -> str:
    """Population → report text. Raises ``EmptyPopulationError`` when empty."""
    return render(summarize(population))


__all__ = [
    "EmptyPopulationError",
    "TRIM_COUNT",
    "aggregate",
    "format_amount",
    "format_duration_hms",
    "render",
    "render_fighting_report",
    "render_thieving_report",
    "summarize",
    "summarize_fighting",
    "summarize_thieving",
    "trimmed_means",
]
