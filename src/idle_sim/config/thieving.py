"""Thieving configuration — steal attempts against a regenerating target."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ThievingConfig(BaseModel):
    """Timing, health and loot parameters for one thieving session."""

    model_config = ConfigDict(frozen=True)

    health_regen_interval: Decimal = Field(
        default=Decimal("8"), gt=0, decimal_places=3,
        description="Seconds between health regen ticks",
    )
    health_regen_amount: int = Field(default=8, ge=0, description="Health restored per regen tick")
    max_health: int = Field(default=720, gt=0, description="Maximum (and starting) health")
    steal_interval: Decimal = Field(
        default=Decimal("2.6"), gt=0, decimal_places=3,
        description="Seconds between steal attempts",
    )
    steal_success_chance: float = Field(default=0.9, ge=0, le=1.0, description="Probability a steal succeeds")
    min_damage: int = Field(default=0, ge=0, description="Minimum damage taken on a failed steal")
    max_damage: int = Field(default=157, ge=0, description="Maximum damage taken on a failed steal")
    min_gold: int = Field(default=51, ge=0, description="Minimum gold from a successful steal")
    max_gold: int = Field(default=1212, ge=0, description="Maximum gold from a successful steal")

    @model_validator(mode="after")
    def _check_ranges(self) -> "ThievingConfig":
        if self.min_damage > self.max_damage:
            raise ValueError("min_damage must not exceed max_damage")
        if self.min_gold > self.max_gold:
            raise ValueError("min_gold must not exceed max_gold")
        return self
