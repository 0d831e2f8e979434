"""Fighting configuration — player vs. respawning enemy."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FightingConfig(BaseModel):
    """Player and enemy stats for one fighting session.

    Defaults reproduce the reference profile: a 720 HP player swinging every
    3 s against a 300 HP enemy.
    """

    model_config = ConfigDict(frozen=True)

    # --- Player ---
    player_health: int = Field(default=720, ge=0, description="Maximum (and starting) player health")
    player_health_regen: int = Field(default=8, ge=0, description="Health restored per regen tick")
    player_regen_interval: Decimal = Field(
        default=Decimal("8"), gt=0, decimal_places=3,
        description="Seconds between player regen ticks",
    )
    player_damage_min: int = Field(default=1, ge=0, description="Minimum player hit damage")
    player_damage_max: int = Field(default=111, ge=0, description="Maximum player hit damage")
    player_hit_chance: float = Field(default=0.76, ge=0, le=1.0, description="Probability a player swing lands")
    player_attack_interval: Decimal = Field(
        default=Decimal("3.0"), gt=0, decimal_places=3,
        description="Seconds between player swings. Drives the whole combat cadence.",
    )

    # --- Enemy ---
    enemy_health: int = Field(default=300, ge=0, description="Enemy health (restored on respawn)")
    enemy_damage_min: int = Field(default=0, ge=0, description="Minimum enemy hit damage")
    enemy_damage_max: int = Field(default=116, ge=0, description="Maximum enemy hit damage")
    enemy_hit_chance: float = Field(default=0.35, ge=0, le=1.0, description="Probability an enemy swing lands")
    enemy_attack_interval: Decimal = Field(
        default=Decimal("2.4"), gt=0, decimal_places=3,
        description="Seconds between enemy swings. Recorded for completeness; the "
                    "engine answers every player swing with one enemy swing.",
    )

    @model_validator(mode="after")
    def _check_damage_ranges(self) -> "FightingConfig":
        if self.player_damage_min > self.player_damage_max:
            raise ValueError("player_damage_min must not exceed player_damage_max")
        if self.enemy_damage_min > self.enemy_damage_max:
            raise ValueError("enemy_damage_min must not exceed enemy_damage_max")
        return self
