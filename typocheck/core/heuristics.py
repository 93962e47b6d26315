"""Single-edit heuristics used before falling back to similarity scoring.

Each test takes the dictionary word first and the candidate second, and is
tried in the order: transposition, extra character, missing character.
"""

from collections.abc import Container

from typocheck.core.errors import InvalidHeuristicArgument


def is_transposition(dict_word: str, word: str) -> bool:
    """Check whether swapping two adjacent letters of `word` yields `dict_word`.

    The leading character is never moved since it selected the bucket, so the
    swaps tried are (1, 2), (2, 3), ... up to the final pair. Words shorter
    than three characters have no such pair.

    Examples:
        is_transposition("desk", "dsek") -> True
        is_transposition("desk", "deks") -> True
        is_transposition("desk", "desk") -> False
    """
    for i in range(len(word) - 2):
        swapped = word[: i + 1] + word[i + 2] + word[i + 1] + word[i + 3 :]
        if swapped == dict_word:
            return True
    return False


def has_extra_character(  # pylint: disable=unused-argument
    dict_word: str, word: str, bucket: Container[str]
) -> bool:
    """Check whether deleting one character of `word` yields a word in `bucket`.

    Membership is tested against the whole bucket being scanned rather than
    against `dict_word`, which is accepted only to keep the heuristic
    signatures uniform.

    Examples (bucket = {"door", "desk"}):
        has_extra_character("door", "dooor", bucket) -> True
        has_extra_character("door", "doort", bucket) -> True
        has_extra_character("door", "dooort", bucket) -> False
    """
    for i in range(len(word)):
        if word[:i] + word[i + 1 :] in bucket:
            return True
    return False


def is_missing_character(dict_word: str, word: str) -> bool:
    """Check whether inserting one letter of `dict_word` into `word` yields it.

    The letter inserted at position ``i`` is ``dict_word[i]``. Only a length
    difference of exactly one can match.

    Raises:
        InvalidHeuristicArgument: If `dict_word` is shorter than `word`

    Examples:
        is_missing_character("desk", "dsk") -> True
        is_missing_character("desk", "de") -> False
    """
    if len(dict_word) < len(word):
        raise InvalidHeuristicArgument(
            f"Dictionary word {dict_word!r} is shorter than {word!r}"
        )

    for i in range(min(len(word) + 1, len(dict_word))):
        if word[:i] + dict_word[i] + word[i:] == dict_word:
            return True
    return False
