"""Thieving trial engine.

The clock runs in 0.1 s ticks.  On every tick that is an exact multiple of
the steal interval a steal is attempted; on every tick that is an exact
multiple of the regen interval health regenerates.  A failed steal deals
damage and stuns for 3 s.  Checks happen in that order, so a regen tick can
fire at the post-stun time of the same iteration.

Nothing changes state on ticks where neither interval fires, so the loop
jumps straight to the next tick where one of them can.  The result is
identical to stepping 0.1 s at a time.

Draw order per attempt: success roll, then damage (failure) or gold
(success).
"""

from __future__ import annotations

import numpy as np

from idle_sim.config.thieving import ThievingConfig
from idle_sim.engine.draws import DrawStream
from idle_sim.engine.timebase import (
    HORIZON_SECONDS,
    STUN_DELAY_SECONDS,
    THIEVING_TICKS_PER_SECOND as TPS,
    firing_period,
    next_multiple,
    ticks_to_seconds,
)
from idle_sim.models.results import ThievingOutcome


def run_thieving_trial(config: ThievingConfig, rng: np.random.Generator) -> ThievingOutcome:
    """Run one thieving trial to completion.

    Parameters
    ----------
    config : ThievingConfig
        Validated timing / health / loot parameters.
    rng : numpy.random.Generator
        Generator owned by this trial.

    Returns
    -------
    ThievingOutcome
        Seconds survived (clamped to the horizon, truncated), gold and
        attempt counters.
    """
    draws = DrawStream(rng)

    steal_period = firing_period(config.steal_interval, TPS)
    regen_period = firing_period(config.health_regen_interval, TPS)
    stun_ticks = STUN_DELAY_SECONDS * TPS
    horizon_ticks = HORIZON_SECONDS * TPS

    health = config.max_health
    gold = 0
    success = 0
    failed = 0
    attempts = 0
    t = 0

    while health > 0 and t < horizon_ticks:
        # ── Steal attempt ───────────────────────────────────────────────
        if t % steal_period == 0:
            attempts += 1
            if draws.uniform() > config.steal_success_chance:
                failed += 1
                damage = draws.integer(config.min_damage, config.max_damage)
                health = max(health - damage, 0)
                if health == 0:
                    break
                t += stun_ticks
            else:
                success += 1
                gold += draws.integer(config.min_gold, config.max_gold)

        # ── Regen ───────────────────────────────────────────────────────
        if t % regen_period == 0:
            health = min(health + config.health_regen_amount, config.max_health)

        # ── Advance to the next tick where something can happen ────────
        t += 1
        t = min(next_multiple(t, steal_period), next_multiple(t, regen_period))

    return ThievingOutcome(
        time_elapsed=ticks_to_seconds(t, TPS),
        money_earned=gold,
        success_count=success,
        failed_count=failed,
        attempt_count=attempts,
    )
