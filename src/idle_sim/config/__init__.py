"""Configuration models — validated, immutable input records."""

from idle_sim.config.fighting import FightingConfig
from idle_sim.config.thieving import ThievingConfig
from idle_sim.config.batch import BatchConfig
from idle_sim.config.storage import (
    dump_config,
    load_config,
    parse_config,
    process_name,
    save_config,
)

__all__ = [
    "FightingConfig",
    "ThievingConfig",
    "BatchConfig",
    "dump_config",
    "load_config",
    "parse_config",
    "process_name",
    "save_config",
]
