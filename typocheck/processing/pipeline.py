"""Main spell-check pipeline orchestration."""

import sys
import time
from typing import TextIO

from loguru import logger

from typocheck.core import Config, Correct, Suggestion, Unknown
from typocheck.data import load_candidates, load_dictionary_index
from typocheck.processing.data_models import RunSummary
from typocheck.processing.dispatcher import dispatch
from typocheck.processing.worker_context import CheckContext
from typocheck.reports import format_time, write_summary, write_verdicts


def run_pipeline(
    config: Config, out: TextIO | None = None, start_time: float | None = None
) -> RunSummary:
    """Load inputs, check every candidate and write the results.

    Candidate sources are resolved before the dictionary is read, so a bad
    argument aborts without indexing anything. Verdict lines are written only
    after every worker has finished.

    Args:
        config: Configuration object containing all settings
        out: Stream for verdict and summary lines (default: stdout)
        start_time: Run start as returned by time.time() (default: now)

    Returns:
        RunSummary with counts and total elapsed time
    """
    if start_time is None:
        start_time = time.time()
    if out is None:
        out = sys.stdout
    verbose = config.verbose

    if verbose:
        logger.info("Stage 1: Loading words")
    words = load_candidates(config.words, verbose)
    index = load_dictionary_index(config.dictionary, verbose)

    if verbose:
        logger.info("Stage 2: Checking words")
    context = CheckContext.from_config(index, config)
    result = dispatch(words, context, verbose)

    write_verdicts(result.buffers, out)

    elapsed_time = time.time() - start_time
    write_summary(len(words), elapsed_time, out)
    out.flush()

    verdicts = result.verdicts
    summary = RunSummary(
        elapsed_time=elapsed_time,
        word_count=len(words),
        worker_count=result.worker_count,
        correct=sum(isinstance(v, Correct) for v in verdicts),
        suggested=sum(isinstance(v, Suggestion) for v in verdicts),
        incorrect=sum(isinstance(v, Unknown) for v in verdicts),
    )

    if verbose:
        logger.info(
            f"  {summary.correct} correct, {summary.suggested} with suggestions, "
            f"{summary.incorrect} incorrect"
        )
        logger.info(f"Total time: {format_time(elapsed_time)}")

    return summary
