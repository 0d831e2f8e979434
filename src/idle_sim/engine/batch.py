"""Batch runner — N independent trials → ``Population``.

Every trial gets its own ``numpy.random.Generator`` spawned from one
``SeedSequence``, so trials share no random state and a seeded batch is
reproducible regardless of how it is scheduled.  Children are spawned one
chunk at a time as trials are scheduled, so a large batch never holds every
seed up front.

Scheduling:
  - ``workers == 1``: trials run one after another in the calling process.
  - ``workers > 1``: trials are grouped into chunks and fanned out to a
    ``ProcessPoolExecutor`` with at most ``workers`` chunks in flight.

Cancellation is cooperative.  The ``CancelToken`` is checked before each
trial (in-process) or each chunk dispatch (pool); once set, nothing new is
scheduled, in-flight chunks finish, and whatever has been collected is
returned as a partial population.
"""

from __future__ import annotations

import concurrent.futures
import logging
import signal
import threading
from typing import Callable, Sequence

import numpy as np

from idle_sim.config.batch import BatchConfig
from idle_sim.config.fighting import FightingConfig
from idle_sim.config.thieving import ThievingConfig
from idle_sim.engine.fighting import run_fighting_trial
from idle_sim.engine.thieving import run_thieving_trial
from idle_sim.models.results import Outcome, Population, ProcessName

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
"""Called as ``progress(completed, total)`` whenever outcomes arrive."""


class CancelToken:
    """Single-writer stop flag shared between an operator and a batch run."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


# ═══════════════════════════════════════════════════════════════════════════
# Engine dispatch
# ═══════════════════════════════════════════════════════════════════════════

def _resolve(config: FightingConfig | ThievingConfig) -> tuple[ProcessName, Callable]:
    if isinstance(config, FightingConfig):
        return "fighting", run_fighting_trial
    if isinstance(config, ThievingConfig):
        return "thieving", run_thieving_trial
    raise TypeError(f"No trial engine for {type(config).__name__}")


def run_trial(
    config: FightingConfig | ThievingConfig,
    rng: np.random.Generator,
) -> Outcome:
    """Run a single trial of whichever process ``config`` describes."""
    _, trial = _resolve(config)
    return trial(config, rng)


def _init_worker() -> None:
    # The coordinating process owns Ctrl-C and turns it into a cancel.
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def _run_chunk(
    config: FightingConfig | ThievingConfig,
    seeds: Sequence[np.random.SeedSequence],
) -> list[Outcome]:
    """Worker-side job: one trial per seed. Module-level so it pickles."""
    _, trial = _resolve(config)
    return [trial(config, np.random.default_rng(s)) for s in seeds]


# ═══════════════════════════════════════════════════════════════════════════
# Public entry points
# ═══════════════════════════════════════════════════════════════════════════

def run_batch(
    config: FightingConfig | ThievingConfig,
    trial_count: int,
    *,
    seed: int | None = None,
    workers: int = 1,
    chunk_size: int = 250,
    cancel: CancelToken | None = None,
    progress: ProgressCallback | None = None,
) -> Population:
    """Run ``trial_count`` independent trials and collect their outcomes.

    Parameters
    ----------
    config : FightingConfig | ThievingConfig
        Selects the trial engine.
    trial_count : int
        Number of trials requested (0 yields an empty population).
    seed : int | None
        Root seed.  None draws fresh OS entropy.
    workers : int
        Number of worker processes; 1 runs in-process.
    chunk_size : int
        Trials per pool job, and per block of spawned seeds.
    cancel : CancelToken | None
        Stops scheduling further trials once set.
    progress : callable | None
        ``progress(completed, total)`` after each outcome / chunk.

    Returns
    -------
    Population
        ``requested == trial_count``; fewer outcomes when cancelled.
    """
    if trial_count < 0:
        raise ValueError("trial_count must be non-negative")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")

    process, trial = _resolve(config)
    root = np.random.SeedSequence(seed)
    logger.debug(
        "Starting %s batch: %d trials, %d worker(s), seed=%s",
        process, trial_count, workers, seed,
    )

    if workers == 1:
        outcomes = _run_inline(config, trial, root, trial_count, chunk_size, cancel, progress)
    else:
        outcomes = _run_pool(config, root, trial_count, workers, chunk_size, cancel, progress)

    if len(outcomes) < trial_count:
        logger.info(
            "%s batch cancelled after %d of %d trials", process, len(outcomes), trial_count,
        )
    return Population(process=process, requested=trial_count, outcomes=tuple(outcomes))


def run_fighting_batch(config: FightingConfig, trial_count: int = 5000, **kwargs) -> Population:
    return run_batch(config, trial_count, **kwargs)


def run_thieving_batch(config: ThievingConfig, trial_count: int = 5000, **kwargs) -> Population:
    return run_batch(config, trial_count, **kwargs)


def run_batch_from(
    config: FightingConfig | ThievingConfig,
    batch: BatchConfig,
    *,
    cancel: CancelToken | None = None,
    progress: ProgressCallback | None = None,
) -> Population:
    """Run a batch described by a ``BatchConfig``."""
    return run_batch(
        config,
        batch.trial_count,
        seed=batch.random_seed,
        workers=batch.workers,
        chunk_size=batch.chunk_size,
        cancel=cancel,
        progress=progress,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Schedulers
# ═══════════════════════════════════════════════════════════════════════════

def _spawn_chunk(root: np.random.SeedSequence, remaining: int, chunk_size: int) -> list[np.random.SeedSequence]:
    # spawn() continues from the children already handed out, so drawing
    # chunk by chunk yields the same seeds as one spawn(trial_count).
    return root.spawn(min(chunk_size, remaining))


def _run_inline(
    config: FightingConfig | ThievingConfig,
    trial: Callable,
    root: np.random.SeedSequence,
    total: int,
    chunk_size: int,
    cancel: CancelToken | None,
    progress: ProgressCallback | None,
) -> list[Outcome]:
    outcomes: list[Outcome] = []
    while len(outcomes) < total:
        for s in _spawn_chunk(root, total - len(outcomes), chunk_size):
            if cancel is not None and cancel.cancelled:
                return outcomes
            outcomes.append(trial(config, np.random.default_rng(s)))
            if progress is not None:
                progress(len(outcomes), total)
    return outcomes


def _run_pool(
    config: FightingConfig | ThievingConfig,
    root: np.random.SeedSequence,
    total: int,
    workers: int,
    chunk_size: int,
    cancel: CancelToken | None,
    progress: ProgressCallback | None,
) -> list[Outcome]:
    # Chunk results are stored by index so the population keeps seed order.
    results: dict[int, list[Outcome]] = {}
    dispatched = 0
    completed = 0

    with concurrent.futures.ProcessPoolExecutor(
        max_workers=workers, initializer=_init_worker,
    ) as executor:
        pending: dict[concurrent.futures.Future, int] = {}
        next_chunk = 0
        try:
            while dispatched < total or pending:
                while (
                    dispatched < total
                    and len(pending) < workers
                    and not (cancel is not None and cancel.cancelled)
                ):
                    seeds = _spawn_chunk(root, total - dispatched, chunk_size)
                    future = executor.submit(_run_chunk, config, seeds)
                    pending[future] = next_chunk
                    logger.debug("Dispatched chunk %d (%d trials)", next_chunk, len(seeds))
                    dispatched += len(seeds)
                    next_chunk += 1

                if not pending:
                    break

                done, _ = concurrent.futures.wait(
                    pending, return_when=concurrent.futures.FIRST_COMPLETED,
                )
                for future in done:
                    index = pending.pop(future)
                    results[index] = future.result()
                    completed += len(results[index])
                    if progress is not None:
                        progress(completed, total)
        except BaseException:
            for future in pending:
                future.cancel()
            raise

    outcomes: list[Outcome] = []
    for index in sorted(results):
        outcomes.extend(results[index])
    return outcomes
