"""Fighting trial engine.

One trial is a player trading blows with an endless line of enemies until
the player dies or the 8-hour session ends.  The loop cadence is driven
entirely by the player's attack interval:

  player swing → (kill? respawn wait, next iteration)
  → enemy swing → regen → advance clock → cap health

The enemy answers every player swing exactly once; its own
``enemy_attack_interval`` is not scheduled.  A kill skips the enemy swing,
the regen step and the attack-interval advance for that iteration, so the
only time that passes is the respawn delay.

Draw order per iteration (reproducible for a seeded generator):
  1. player hit roll, 2. player damage (on hit),
  3. enemy hit roll (no kill), 4. enemy damage (on hit).
"""

from __future__ import annotations

import numpy as np

from idle_sim.config.fighting import FightingConfig
from idle_sim.engine.draws import DrawStream
from idle_sim.engine.timebase import (
    HORIZON_SECONDS,
    RESPAWN_DELAY_SECONDS,
    tick_resolution,
    ticks_to_seconds,
    to_ticks,
)
from idle_sim.models.results import FightingOutcome


def run_fighting_trial(config: FightingConfig, rng: np.random.Generator) -> FightingOutcome:
    """Run one fighting trial to completion.

    Parameters
    ----------
    config : FightingConfig
        Validated player / enemy stats.
    rng : numpy.random.Generator
        Generator owned by this trial.

    Returns
    -------
    FightingOutcome
        Seconds survived (clamped to the horizon, truncated) and kill count.
    """
    draws = DrawStream(rng)

    tps = tick_resolution(config.player_attack_interval, config.player_regen_interval)
    attack_ticks = to_ticks(config.player_attack_interval, tps)
    regen_ticks = to_ticks(config.player_regen_interval, tps)
    respawn_ticks = RESPAWN_DELAY_SECONDS * tps
    horizon_ticks = HORIZON_SECONDS * tps

    max_health = config.player_health
    player_health = max_health
    enemy_health = config.enemy_health
    regen_timer = 0
    t = 0
    kills = 0

    while player_health > 0 and t < horizon_ticks:
        # ── Player swing ────────────────────────────────────────────────
        if draws.uniform() <= config.player_hit_chance:
            damage = draws.integer(config.player_damage_min, config.player_damage_max)
            enemy_health = max(enemy_health - damage, 0)
            if enemy_health == 0:
                enemy_health = config.enemy_health
                t += respawn_ticks
                kills += 1
                continue

        # ── Enemy swing ─────────────────────────────────────────────────
        if draws.uniform() <= config.enemy_hit_chance:
            damage = draws.integer(config.enemy_damage_min, config.enemy_damage_max)
            player_health = max(player_health - damage, 0)

        # ── Regen (several ticks per swing when regen is faster) ───────
        regen_timer += attack_ticks
        while player_health > 0 and regen_timer >= regen_ticks:
            player_health += config.player_health_regen
            regen_timer -= regen_ticks

        t += attack_ticks
        player_health = min(player_health, max_health)

    return FightingOutcome(
        time_elapsed=ticks_to_seconds(t, tps),
        enemies_killed=kills,
    )
