"""Core matching logic for typocheck."""

from .config import Config, load_config
from .errors import (
    InvalidHeuristicArgument,
    MissingCandidateSourceFile,
    MissingDictionaryFile,
    NoCandidatesProvided,
    TypocheckError,
)
from .heuristics import has_extra_character, is_missing_character, is_transposition
from .matcher import check_word, check_words
from .scoring import defect_count
from .types import Correct, Suggestion, Unknown, Verdict

__all__ = [
    "Config",
    "Correct",
    "InvalidHeuristicArgument",
    "MissingCandidateSourceFile",
    "MissingDictionaryFile",
    "NoCandidatesProvided",
    "Suggestion",
    "TypocheckError",
    "Unknown",
    "Verdict",
    "check_word",
    "check_words",
    "defect_count",
    "has_extra_character",
    "is_missing_character",
    "is_transposition",
    "load_config",
]
