"""Fan a candidate list out over a fixed number of workers."""

from dataclasses import dataclass
from multiprocessing import Pool
import time
from typing import Any

from loguru import logger
from tqdm import tqdm

from typocheck.core.matcher import check_words
from typocheck.core.types import Verdict
from typocheck.processing.worker_context import CheckContext, get_worker_context, init_worker
from typocheck.utils.constants import Constants


@dataclass(frozen=True)
class DispatchResult:
    """Verdict buffers from every worker, in slice order."""

    buffers: list[list[Verdict]]
    worker_count: int
    elapsed_time: float

    @property
    def verdicts(self) -> list[Verdict]:
        """All verdicts, each worker's buffer in its own candidate order."""
        return [verdict for buffer in self.buffers for verdict in buffer]


def worker_count(word_count: int) -> int:
    """One worker for small batches, a fixed pool otherwise."""
    if word_count < Constants.PARALLEL_MIN_WORDS:
        return 1
    return Constants.PARALLEL_WORKERS


def partition(word_count: int, workers: int) -> list[tuple[int, int]]:
    """Split ``range(word_count)`` into contiguous ``(start, stop)`` slices.

    Every slice holds ``word_count // workers`` words except the last, which
    also takes the remainder.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    part = word_count // workers
    slices = []
    for i in range(workers):
        start = i * part
        stop = word_count if i == workers - 1 else (i + 1) * part
        slices.append((start, stop))
    return slices


def check_slice_worker(words: list[str]) -> list[Verdict]:
    """Worker function for multiprocessing.

    Args:
        words: Contiguous slice of the candidate list

    Returns:
        One verdict per word, in slice order
    """
    context = get_worker_context()
    return check_words(words, context.index, context.threshold)


def _dispatch_multiprocessing(
    slices: list[list[str]], context: CheckContext, verbose: bool
) -> list[list[Verdict]]:
    """Check each slice in its own worker process."""
    if verbose:
        logger.info(f"  Using {len(slices)} parallel workers")

    with Pool(
        processes=len(slices),
        initializer=init_worker,
        initargs=(context,),
    ) as pool:
        # imap keeps results in slice order
        results = pool.imap(check_slice_worker, slices)

        if verbose:
            results_wrapped_iter: Any = tqdm(
                results,
                total=len(slices),
                desc="Checking words",
                unit="slice",
            )
        else:
            results_wrapped_iter = results

        return list(results_wrapped_iter)


def dispatch(words: list[str], context: CheckContext, verbose: bool = False) -> DispatchResult:
    """Check every candidate word and collect the verdicts per worker.

    Nothing is printed here; callers emit the buffers after all workers
    have finished.

    Args:
        words: Normalized candidate words
        context: Shared read-only context
        verbose: Whether to log progress

    Returns:
        DispatchResult holding one verdict buffer per worker
    """
    start_time = time.time()
    workers = worker_count(len(words))
    slices = [words[start:stop] for start, stop in partition(len(words), workers)]

    if workers == 1:
        buffers = [check_words(slices[0], context.index, context.threshold)]
    else:
        buffers = _dispatch_multiprocessing(slices, context, verbose)

    elapsed_time = time.time() - start_time
    logger.debug(f"Checked {len(words)} words with {workers} worker(s) in {elapsed_time:.3f}s")

    return DispatchResult(buffers=buffers, worker_count=workers, elapsed_time=elapsed_time)
