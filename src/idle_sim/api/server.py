"""FastAPI server — HTTP access to the fighting and thieving simulators.

Run with:
    uvicorn idle_sim.api.server:app --reload --port 8000

Or:
    python -m idle_sim.api.server

Endpoints:
    GET  /                     — index
    GET  /health               — liveness probe
    GET  /{process}/defaults   — default config as JSON
    GET  /{process}/schema     — JSON Schema for the config
    POST /{process}/simulate   — run a batch and return stats + text report

``process`` is ``fighting`` or ``thieving``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from idle_sim.config.storage import CONFIG_TYPES, ProcessConfig
from idle_sim.engine.batch import run_batch
from idle_sim.report import EmptyPopulationError, render, summarize

logger = logging.getLogger(__name__)

MAX_TRIALS_PER_REQUEST = 20_000

ProcessPath = Literal["fighting", "thieving"]


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Idle Sim API",
    version="1.0",
    description=(
        "Monte-Carlo estimates of 8-hour fighting and thieving sessions. "
        "Fetch GET /{process}/defaults, change the fields you care about, "
        "and POST them to /{process}/simulate."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /{process}/simulate. Missing config fields use defaults."""
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial config overrides. Example: {'steal_success_chance': 0.95}",
    )
    trials: int = Field(default=5000, ge=1, le=MAX_TRIALS_PER_REQUEST)
    seed: int | None = Field(default=None, ge=0, description="Seed for a reproducible batch")


class SimulateResponse(BaseModel):
    """Response from /{process}/simulate."""
    process: str
    trials_completed: int
    stats: dict[str, Any]
    report: str


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_config(process: str, overrides: dict[str, Any]) -> ProcessConfig:
    """Validate overrides on top of the defaults; invalid input → 422."""
    cls = CONFIG_TYPES[process]
    try:
        return cls.model_validate(overrides)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Idle Sim API",
        "version": "1.0",
        "processes": sorted(CONFIG_TYPES),
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/{process}/defaults")
def get_defaults(process: ProcessPath):
    """Complete default config as JSON. Use as a starting point for modifications."""
    return CONFIG_TYPES[process]().model_dump(mode="json")


@app.get("/{process}/schema")
def get_schema(process: ProcessPath):
    """JSON Schema for the config — field types, defaults and constraints."""
    return CONFIG_TYPES[process].model_json_schema()


@app.post("/{process}/simulate", response_model=SimulateResponse)
def simulate(process: ProcessPath, req: SimulateRequest):
    """Run ``trials`` independent sessions and aggregate them.

    Example request:
    ```json
    {"config": {"player_hit_chance": 0.8}, "trials": 2000, "seed": 7}
    ```
    """
    config = _build_config(process, req.config)
    logger.info("Simulating %d %s trials", req.trials, process)
    population = run_batch(config, req.trials, seed=req.seed)
    try:
        stats = summarize(population)
    except EmptyPopulationError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return SimulateResponse(
        process=process,
        trials_completed=len(population),
        stats=stats.model_dump(),
        report=render(stats),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "idle_sim.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
