"""Tests for engine/timebase.py — exact tick arithmetic."""

from __future__ import annotations

from decimal import Decimal

import pytest

from idle_sim.engine.timebase import (
    HORIZON_SECONDS,
    firing_period,
    next_multiple,
    tick_resolution,
    ticks_to_seconds,
    to_ticks,
)


class TestResolution:

    def test_whole_seconds_resolve_to_one(self):
        assert tick_resolution(Decimal("3"), Decimal("8")) == 1

    def test_tenths(self):
        assert tick_resolution(Decimal("2.4"), Decimal("8")) == 5

    def test_mixed_denominators(self):
        # 2.5 → /2, 0.25 → /4, 1.2 → /5
        assert tick_resolution(Decimal("2.5"), Decimal("0.25"), Decimal("1.2")) == 20

    def test_to_ticks_exact(self):
        assert to_ticks(Decimal("2.4"), 5) == 12
        assert to_ticks(3, 5) == 15

    def test_to_ticks_inexact_raises(self):
        with pytest.raises(ValueError):
            to_ticks(Decimal("2.45"), 10)


class TestFiringPeriod:
    """``t % interval == 0`` translated onto an integer 0.1 s clock."""

    def test_tenth_aligned_interval(self):
        assert firing_period(Decimal("2.6"), 10) == 26

    def test_whole_interval(self):
        assert firing_period(Decimal("8"), 10) == 80

    def test_hundredths_interval_fires_on_common_multiple(self):
        # 2.65 s only divides tenth-second times that are multiples of 5.3 s.
        assert firing_period(Decimal("2.65"), 10) == 53

    def test_no_drift_after_many_steps(self):
        period = firing_period(Decimal("0.3"), 10)
        hits = [t for t in range(0, 10_000) if t % period == 0]
        assert hits[-1] == 9999
        assert len(hits) == 3334


class TestHelpers:

    def test_next_multiple(self):
        assert next_multiple(0, 26) == 0
        assert next_multiple(1, 26) == 26
        assert next_multiple(26, 26) == 26
        assert next_multiple(27, 26) == 52

    def test_ticks_to_seconds_truncates(self):
        assert ticks_to_seconds(39, 10) == 3

    def test_ticks_to_seconds_clamps_to_horizon(self):
        assert ticks_to_seconds((HORIZON_SECONDS + 3) * 10, 10) == HORIZON_SECONDS
