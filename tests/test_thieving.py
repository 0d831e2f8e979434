"""Tests for engine/thieving.py — thieving trial engine.

Covers:
  - Outcome bounds and counter consistency
  - Seed reproducibility
  - Lethal first failure
  - Guaranteed success (gold bounds, exact attempt count)
  - Stun delay and regen timing
  - Idle-step skipping matches a plain 0.1 s stepper
"""

from __future__ import annotations

import math
from decimal import Decimal

import numpy as np

from idle_sim.config import ThievingConfig
from idle_sim.engine.draws import DrawStream
from idle_sim.engine.thieving import run_thieving_trial
from idle_sim.engine.timebase import HORIZON_SECONDS
from idle_sim.models.results import ThievingOutcome


def _step_by_step(config: ThievingConfig, rng: np.random.Generator) -> ThievingOutcome:
    """Reference loop that walks every 0.1 s step with Decimal time."""
    draws = DrawStream(rng)
    health = config.max_health
    gold = success = failed = attempts = 0
    t = Decimal("0")
    horizon = Decimal(HORIZON_SECONDS)
    while health > 0 and t < horizon:
        if t % config.steal_interval == 0:
            attempts += 1
            if draws.uniform() > config.steal_success_chance:
                failed += 1
                health -= draws.integer(config.min_damage, config.max_damage)
                if health <= 0:
                    break
                t += Decimal("3")
            else:
                success += 1
                gold += draws.integer(config.min_gold, config.max_gold)
        if t % config.health_regen_interval == 0:
            health = min(health + config.health_regen_amount, config.max_health)
        t += Decimal("0.1")
    return ThievingOutcome(
        time_elapsed=min(int(t), HORIZON_SECONDS),
        money_earned=gold,
        success_count=success,
        failed_count=failed,
        attempt_count=attempts,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Basics
# ═══════════════════════════════════════════════════════════════════════════

class TestBasics:

    def test_outcomes_within_bounds(self, thieving_config: ThievingConfig):
        for seed in range(30):
            outcome = run_thieving_trial(thieving_config, np.random.default_rng(seed))
            assert 0 <= outcome.time_elapsed <= HORIZON_SECONDS
            assert outcome.money_earned >= 0
            assert outcome.attempt_count == outcome.success_count + outcome.failed_count

    def test_same_seed_same_outcome(self, thieving_config: ThievingConfig):
        a = run_thieving_trial(thieving_config, np.random.default_rng(9))
        b = run_thieving_trial(thieving_config, np.random.default_rng(9))
        assert a == b

    def test_gold_within_success_bounds(self, thieving_config: ThievingConfig):
        outcome = run_thieving_trial(thieving_config, np.random.default_rng(5))
        assert outcome.success_count * 51 <= outcome.money_earned <= outcome.success_count * 1212


# ═══════════════════════════════════════════════════════════════════════════
# Deterministic boundary cases
# ═══════════════════════════════════════════════════════════════════════════

class TestDeterministic:

    def test_lethal_first_failure_stops_at_zero(self, doomed_thief: ThievingConfig, rng):
        outcome = run_thieving_trial(doomed_thief, rng)
        assert outcome == ThievingOutcome(
            time_elapsed=0,
            money_earned=0,
            success_count=0,
            failed_count=1,
            attempt_count=1,
        )

    def test_guaranteed_success_never_fails(self, rng):
        cfg = ThievingConfig(steal_success_chance=1.0)
        outcome = run_thieving_trial(cfg, rng)
        assert outcome.failed_count == 0
        assert outcome.time_elapsed == HORIZON_SECONDS
        # Steals fire on every 2.6 s mark in [0, 28800).
        assert outcome.attempt_count == math.ceil(HORIZON_SECONDS * 10 / 26)
        assert 51 * outcome.attempt_count <= outcome.money_earned <= 1212 * outcome.attempt_count

    def test_fixed_gold_is_exact(self, rng):
        cfg = ThievingConfig(steal_success_chance=1.0, min_gold=100, max_gold=100)
        outcome = run_thieving_trial(cfg, rng)
        assert outcome.money_earned == 100 * outcome.attempt_count

    def test_failed_steal_stuns_three_seconds(self, rng):
        """Harmless failures every 1 s interval: stun pushes each attempt to 4 s."""
        cfg = ThievingConfig(
            steal_success_chance=0.0,
            steal_interval=Decimal("1"),
            min_damage=0,
            max_damage=0,
        )
        outcome = run_thieving_trial(cfg, rng)
        assert outcome.attempt_count == HORIZON_SECONDS // 4
        assert outcome.failed_count == outcome.attempt_count
        assert outcome.time_elapsed == HORIZON_SECONDS

    def test_regen_after_stun_keeps_thief_alive(self, rng):
        """Regen fires at the post-stun time and refills to the cap."""
        cfg = ThievingConfig(
            max_health=100,
            steal_success_chance=0.0,
            steal_interval=Decimal("10"),
            min_damage=60,
            max_damage=60,
            health_regen_interval=Decimal("1"),
            health_regen_amount=100,
        )
        outcome = run_thieving_trial(cfg, rng)
        assert outcome.time_elapsed == HORIZON_SECONDS
        assert outcome.attempt_count == HORIZON_SECONDS // 10

    def test_no_regen_second_failure_is_lethal(self, rng):
        cfg = ThievingConfig(
            max_health=100,
            steal_success_chance=0.0,
            steal_interval=Decimal("10"),
            min_damage=60,
            max_damage=60,
            health_regen_amount=0,
        )
        outcome = run_thieving_trial(cfg, rng)
        assert outcome.time_elapsed == 10
        assert outcome.attempt_count == 2
        assert outcome.failed_count == 2


# ═══════════════════════════════════════════════════════════════════════════
# Equivalence with a plain stepper
# ═══════════════════════════════════════════════════════════════════════════

class TestStepEquivalence:
    """Skipping idle ticks must not change any outcome."""

    def test_matches_stepper_default_config(self, thieving_config: ThievingConfig):
        for seed in range(3):
            fast = run_thieving_trial(thieving_config, np.random.default_rng(seed))
            slow = _step_by_step(thieving_config, np.random.default_rng(seed))
            assert fast == slow

    def test_matches_stepper_hundredths_interval(self):
        cfg = ThievingConfig(
            steal_interval=Decimal("2.65"),
            health_regen_interval=Decimal("7.5"),
            steal_success_chance=0.7,
        )
        fast = run_thieving_trial(cfg, np.random.default_rng(11))
        slow = _step_by_step(cfg, np.random.default_rng(11))
        assert fast == slow
