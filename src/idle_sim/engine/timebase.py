"""Simulated-time constants and exact tick conversion.

Both engines keep time as integer ticks so interval comparisons and
exact-multiple checks never drift.  Durations arrive as ``Decimal`` and are
converted through ``Fraction``; no float ever enters the clock.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from math import lcm

HORIZON_SECONDS = 8 * 60 * 60
"""Length of one session (8 h)."""

RESPAWN_DELAY_SECONDS = 3
"""Fighting: wait after a kill before the next enemy appears."""

STUN_DELAY_SECONDS = 3
"""Thieving: stun after a failed steal."""

THIEVING_TICKS_PER_SECOND = 10
"""Thieving clock advances in 0.1 s steps."""


def as_fraction(value: Decimal | int | str) -> Fraction:
    """Exact rational value of a duration."""
    return Fraction(value)


def tick_resolution(*durations: Decimal | int) -> int:
    """Smallest ticks-per-second that makes every duration a whole tick count."""
    return lcm(1, *(as_fraction(d).denominator for d in durations))


def to_ticks(duration: Decimal | int, ticks_per_second: int) -> int:
    """Convert a duration to ticks; the result must be exact."""
    ticks = as_fraction(duration) * ticks_per_second
    if ticks.denominator != 1:
        raise ValueError(
            f"{duration} s is not a whole number of ticks at {ticks_per_second}/s"
        )
    return ticks.numerator


def firing_period(interval: Decimal | int, ticks_per_second: int) -> int:
    """Tick period on which ``t % interval == 0`` holds for an integer tick clock.

    With ``t`` counted in ticks, ``t / tps`` is a multiple of ``interval``
    exactly when ``t`` is a multiple of the numerator of
    ``interval * tps`` in lowest terms.  For 2.6 s at 10 ticks/s that is 26;
    for 2.65 s it is 53, i.e. the check only fires every 5.3 s.
    """
    return (as_fraction(interval) * ticks_per_second).numerator


def next_multiple(t: int, period: int) -> int:
    """Smallest multiple of ``period`` that is ``>= t``."""
    return -(-t // period) * period


def ticks_to_seconds(ticks: int, ticks_per_second: int, limit_seconds: int = HORIZON_SECONDS) -> int:
    """Whole seconds for a tick count, clamped to ``limit_seconds`` and truncated."""
    return min(ticks // ticks_per_second, limit_seconds)
