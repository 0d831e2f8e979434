"""Batch-level settings shared by both processes."""

from pydantic import BaseModel, Field


class BatchConfig(BaseModel):
    """How many trials to run and how to schedule them."""

    trial_count: int = Field(
        default=5000, ge=1, le=1_000_000,
        description="Number of independent trials. 5000 is the reference sample size.",
    )
    random_seed: int | None = Field(
        default=None,
        ge=0,
        description="Optional seed for reproducible batches. None = fresh OS entropy.",
    )
    workers: int = Field(
        default=1, ge=1, le=256,
        description="Worker processes. 1 runs trials in the calling process.",
    )
    chunk_size: int = Field(
        default=250, ge=1,
        description="Trials per job handed to a worker process. Ignored when workers=1.",
    )
