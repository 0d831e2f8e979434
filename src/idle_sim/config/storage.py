"""Save and load configuration records as JSON.

The file wraps the model dump with a ``process`` tag so a single loader can
rebuild either config type::

    {"process": "thieving", "config": {"steal_interval": "2.6", ...}}
"""

from __future__ import annotations

import json
from pathlib import Path

from idle_sim.config.fighting import FightingConfig
from idle_sim.config.thieving import ThievingConfig

ProcessConfig = FightingConfig | ThievingConfig

CONFIG_TYPES: dict[str, type[FightingConfig] | type[ThievingConfig]] = {
    "fighting": FightingConfig,
    "thieving": ThievingConfig,
}


def process_name(config: ProcessConfig) -> str:
    """Return the process tag (``"fighting"`` / ``"thieving"``) for a config."""
    for name, cls in CONFIG_TYPES.items():
        if isinstance(config, cls):
            return name
    raise TypeError(f"Unsupported config type: {type(config).__name__}")


def dump_config(config: ProcessConfig) -> str:
    """Serialize a config to tagged JSON text."""
    payload = {
        "process": process_name(config),
        "config": config.model_dump(mode="json"),
    }
    return json.dumps(payload, indent=2)


def parse_config(text: str) -> ProcessConfig:
    """Rebuild a config from tagged JSON text.

    Raises ``ValueError`` on malformed JSON or an unknown process tag and
    ``pydantic.ValidationError`` when field values are out of range.
    """
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValueError("Config file must contain a JSON object")
    process = payload.get("process")
    cls = CONFIG_TYPES.get(process)
    if cls is None:
        raise ValueError(
            f"Unknown process {process!r}; expected one of {sorted(CONFIG_TYPES)}"
        )
    return cls.model_validate(payload.get("config", {}))


def save_config(config: ProcessConfig, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(dump_config(config) + "\n", encoding="utf-8")
    return path


def load_config(path: str | Path) -> ProcessConfig:
    return parse_config(Path(path).read_text(encoding="utf-8"))
