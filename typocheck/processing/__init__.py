"""Processing pipeline for typocheck."""

from typocheck.processing.dispatcher import DispatchResult, dispatch, partition, worker_count
from typocheck.processing.pipeline import run_pipeline
from typocheck.processing.worker_context import CheckContext

__all__ = [
    "CheckContext",
    "DispatchResult",
    "dispatch",
    "partition",
    "run_pipeline",
    "worker_count",
]
