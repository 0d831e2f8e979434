"""Result types — the contract between engines, batch runner and reports.

Trial outcomes are frozen dataclasses: thousands are created per batch and
never mutated.  Aggregate statistics are pydantic models so the API layer can
serialize them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal

from pydantic import BaseModel

ProcessName = Literal["fighting", "thieving"]


# ═══════════════════════════════════════════════════════════════════════════
# Per-trial outcomes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FightingOutcome:
    """Immutable result of one fighting trial."""

    time_elapsed: int
    """Simulated seconds survived, clamped to the horizon."""

    enemies_killed: int


@dataclass(frozen=True)
class ThievingOutcome:
    """Immutable result of one thieving trial."""

    time_elapsed: int
    """Simulated seconds until death or the horizon."""

    money_earned: int
    success_count: int
    failed_count: int
    attempt_count: int
    """Always ``success_count + failed_count``."""


Outcome = FightingOutcome | ThievingOutcome


# ═══════════════════════════════════════════════════════════════════════════
# Population
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Population:
    """Outcomes collected by one batch run.

    ``requested`` is the trial count that was asked for; a cancelled batch
    holds fewer outcomes than that but is still valid for aggregation.
    """

    process: ProcessName
    requested: int
    outcomes: tuple[Outcome, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    @property
    def cancelled(self) -> bool:
        return len(self.outcomes) < self.requested


# ═══════════════════════════════════════════════════════════════════════════
# Aggregate statistics
# ═══════════════════════════════════════════════════════════════════════════

class FightingStats(BaseModel):
    """Numeric content of a fighting report. Times are in seconds."""

    num_trials: int
    mean_time: float
    median_time: float
    min_time: float
    max_time: float
    mean_killed: float
    median_killed: float
    min_killed: float
    max_killed: float


class ThievingStats(BaseModel):
    """Numeric content of a thieving report.

    ``max_*`` / ``min_*`` are trimmed means over the highest / lowest
    ``trim_count`` sorted values, not single extremes.
    """

    num_trials: int
    trim_count: int
    """Number of values each trimmed mean was taken over."""

    mean_time: float
    max_mean_time: float
    min_mean_time: float

    mean_money: float
    max_mean_money: float
    min_mean_money: float

    avg_success: float
    avg_failed: float
    avg_attempts: float
