"""Shared test fixtures — reference configs and small hand-built populations."""

from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest

from idle_sim.config import FightingConfig, ThievingConfig
from idle_sim.models.results import (
    FightingOutcome,
    Population,
    ThievingOutcome,
)


@pytest.fixture
def fighting_config() -> FightingConfig:
    return FightingConfig(
        player_health=720,
        player_health_regen=8,
        player_regen_interval=Decimal("8"),
        player_damage_min=1,
        player_damage_max=111,
        player_hit_chance=0.76,
        player_attack_interval=Decimal("3.0"),
        enemy_health=300,
        enemy_damage_min=0,
        enemy_damage_max=116,
        enemy_hit_chance=0.35,
        enemy_attack_interval=Decimal("2.4"),
    )


@pytest.fixture
def thieving_config() -> ThievingConfig:
    return ThievingConfig(
        health_regen_interval=Decimal("8"),
        health_regen_amount=8,
        max_health=720,
        steal_interval=Decimal("2.6"),
        steal_success_chance=0.9,
        min_damage=0,
        max_damage=157,
        min_gold=51,
        max_gold=1212,
    )


@pytest.fixture
def one_shot_fighting() -> FightingConfig:
    """Player always hits for exactly the enemy's health; enemy never hits."""
    return FightingConfig(
        player_hit_chance=1.0,
        player_damage_min=300,
        player_damage_max=300,
        enemy_health=300,
        enemy_hit_chance=0.0,
    )


@pytest.fixture
def doomed_thief() -> ThievingConfig:
    """Every steal fails and the first failure is lethal."""
    return ThievingConfig(
        steal_success_chance=0.0,
        min_damage=720,
        max_damage=720,
        max_health=720,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def fighting_population() -> Population:
    outcomes = (
        FightingOutcome(time_elapsed=10, enemies_killed=1),
        FightingOutcome(time_elapsed=40, enemies_killed=4),
        FightingOutcome(time_elapsed=20, enemies_killed=2),
        FightingOutcome(time_elapsed=30, enemies_killed=3),
    )
    return Population(process="fighting", requested=4, outcomes=outcomes)


@pytest.fixture
def thieving_population() -> Population:
    outcomes = (
        ThievingOutcome(time_elapsed=3600, money_earned=1000,
                        success_count=9, failed_count=1, attempt_count=10),
        ThievingOutcome(time_elapsed=7200, money_earned=3000,
                        success_count=18, failed_count=2, attempt_count=20),
    )
    return Population(process="thieving", requested=2, outcomes=outcomes)


class ScriptedGenerator:
    """Stands in for ``numpy.random.Generator`` with a fixed list of uniforms.

    Only ``random(size)`` is implemented, which is all ``DrawStream`` uses.
    Once the script runs out every further draw is ``fill``.
    """

    def __init__(self, values: list[float], fill: float = 0.99) -> None:
        self._values = list(values)
        self._fill = fill

    def random(self, size: int) -> np.ndarray:
        head, self._values = self._values[:size], self._values[size:]
        return np.array(head + [self._fill] * (size - len(head)), dtype=np.float64)


@pytest.fixture
def scripted_rng():
    return ScriptedGenerator
