"""typocheck - dictionary spell checker with single-edit suggestions.

Checks words against a newline-delimited dictionary and proposes the most
plausible correction for each misspelling.
"""

from typocheck.core import (
    Config,
    Correct,
    Suggestion,
    Unknown,
    Verdict,
    check_word,
    defect_count,
    load_config,
)
from typocheck.data import DictionaryIndex
from typocheck.processing import run_pipeline
from typocheck.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Correct",
    "DictionaryIndex",
    "Suggestion",
    "Unknown",
    "Verdict",
    "check_word",
    "defect_count",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
