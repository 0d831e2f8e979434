"""Result models — trial outcomes, populations and report statistics."""

from idle_sim.models.results import (
    FightingOutcome,
    FightingStats,
    Outcome,
    Population,
    ProcessName,
    ThievingOutcome,
    ThievingStats,
)

__all__ = [
    "FightingOutcome",
    "FightingStats",
    "Outcome",
    "Population",
    "ProcessName",
    "ThievingOutcome",
    "ThievingStats",
]
