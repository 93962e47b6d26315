"""Fallback similarity score between two words."""

from collections import Counter


def defect_count(dict_word: str, word: str) -> int:
    """Count the 'defects' between a dictionary word and a candidate.

    The score adds up:
      - characters unique to one word (taken from whichever word has more
        distinct characters, the candidate on a tie), counted with multiplicity
      - the difference in count for each shared character
      - one per position, up to the shorter length, where the words differ

    Lower is more similar and 0 means identical. The score is not symmetric.

    Examples:
        defect_count("desk", "desk") -> 0
        defect_count("desk", "disk") -> 2
    """
    dict_letters = Counter(dict_word)
    word_letters = Counter(word)

    defects = 0

    if len(dict_letters) > len(word_letters):
        larger, smaller = dict_letters, word_letters
    else:
        larger, smaller = word_letters, dict_letters
    for char, count in larger.items():
        if char not in smaller:
            defects += count

    for char, count in dict_letters.items():
        if char in word_letters:
            defects += abs(count - word_letters[char])

    # Reward words whose characters line up position by position
    for dict_char, word_char in zip(dict_word, word):
        if dict_char != word_char:
            defects += 1

    return defects
