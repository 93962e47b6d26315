"""Per-word matching: exact lookup, fast heuristics, then similarity fallback."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from typocheck.core.heuristics import has_extra_character, is_missing_character, is_transposition
from typocheck.core.scoring import defect_count
from typocheck.core.types import Correct, Suggestion, Unknown, Verdict
from typocheck.utils.constants import Constants

if TYPE_CHECKING:
    from collections.abc import KeysView

    from typocheck.data.index import DictionaryIndex


def _find_fast_suggestion(word: str, bucket: "KeysView[str]") -> str | None:
    """Return the first bucket word reachable by a single-edit heuristic."""
    for key in bucket:
        if is_transposition(key, word):
            return key
        if has_extra_character(key, word, bucket):
            return key
        # Missing-character test requires the longer dictionary word
        if len(key) > len(word) and is_missing_character(key, word):
            return key
    return None


def _find_closest(word: str, bucket: "KeysView[str]", threshold: int) -> str | None:
    """Return the bucket word with the lowest defect count below `threshold`.

    Ties keep the earliest word.
    """
    best_score = threshold
    best: str | None = None
    for key in bucket:
        score = defect_count(key, word)
        if score < best_score:
            best_score = score
            best = key
    return best


def check_word(
    word: str,
    index: "DictionaryIndex",
    threshold: int = Constants.DEFAULT_THRESHOLD,
) -> Verdict:
    """Check one candidate word against the dictionary.

    Args:
        word: Normalized candidate word
        index: Dictionary index to search
        threshold: Exclusive upper bound on the fallback defect count

    Returns:
        Correct, Suggestion or Unknown verdict for the word
    """
    bucket = index.bucket_for(word)

    if word in bucket:
        return Correct(word)

    suggestion = _find_fast_suggestion(word, bucket)
    if suggestion is None:
        suggestion = _find_closest(word, bucket, threshold)

    if suggestion is None:
        return Unknown(word)
    return Suggestion(word, suggestion)


def check_words(
    words: Iterable[str],
    index: "DictionaryIndex",
    threshold: int = Constants.DEFAULT_THRESHOLD,
) -> list[Verdict]:
    """Check words in order, one verdict per word."""
    return [check_word(word, index, threshold) for word in words]
