"""Engine — per-trial state machines and the batch runner."""

from idle_sim.engine.fighting import run_fighting_trial
from idle_sim.engine.thieving import run_thieving_trial
from idle_sim.engine.batch import (
    CancelToken,
    run_batch,
    run_batch_from,
    run_fighting_batch,
    run_thieving_batch,
    run_trial,
)

__all__ = [
    "run_fighting_trial",
    "run_thieving_trial",
    "CancelToken",
    "run_batch",
    "run_batch_from",
    "run_fighting_batch",
    "run_thieving_batch",
    "run_trial",
]
