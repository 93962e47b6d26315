"""Verdict types produced by the matching engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Correct:
    """The candidate is an exact dictionary word."""

    word: str


@dataclass(frozen=True)
class Suggestion:
    """The candidate is misspelled and a correction was found."""

    word: str
    suggestion: str


@dataclass(frozen=True)
class Unknown:
    """The candidate is misspelled and nothing cleared the threshold."""

    word: str


# Type alias for a per-candidate outcome
Verdict = Correct | Suggestion | Unknown
