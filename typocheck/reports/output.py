"""Rendering verdicts and the run summary as output lines."""

from typing import TextIO

from typocheck.core.types import Correct, Suggestion, Unknown, Verdict
from typocheck.utils.constants import Constants


def format_verdict(verdict: Verdict) -> str:
    """Render one verdict as its output line."""
    if isinstance(verdict, Correct):
        return f"CORRECT [{verdict.word}]"
    if isinstance(verdict, Suggestion):
        return f"{verdict.suggestion} suggested for [{verdict.word}]"
    if isinstance(verdict, Unknown):
        return f"INCORRECT [{verdict.word}]"
    raise TypeError(f"Unknown verdict type: {type(verdict).__name__}")


def format_summary(word_count: int, elapsed_seconds: float) -> list[str]:
    """Render the closing summary lines."""
    return [
        Constants.SUMMARY_SEPARATOR,
        f"Completed {word_count} words in {elapsed_seconds:.4f} seconds!",
    ]


def write_verdicts(buffers: list[list[Verdict]], out: TextIO) -> None:
    """Write each worker's buffer in turn, one line per verdict."""
    for buffer in buffers:
        for verdict in buffer:
            out.write(format_verdict(verdict) + "\n")


def write_summary(word_count: int, elapsed_seconds: float, out: TextIO) -> None:
    """Write the closing summary lines."""
    for line in format_summary(word_count, elapsed_seconds):
        out.write(line + "\n")
