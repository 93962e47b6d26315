"""Data models for passing information out of the pipeline."""

from pydantic import BaseModel, Field


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class RunSummary(StageResult):
    """Outcome of a full spell-check run."""

    word_count: int = Field(0, ge=0)
    worker_count: int = Field(1, ge=1)
    correct: int = Field(0, ge=0)
    suggested: int = Field(0, ge=0)
    incorrect: int = Field(0, ge=0)
