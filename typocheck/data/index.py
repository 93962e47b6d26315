"""Dictionary index bucketed by leading character."""

from collections.abc import Iterable, KeysView

from typocheck.utils.constants import Constants
from typocheck.utils.helpers import normalize_word


def bucket_key(word: str) -> str:
    """Return the bucket key for a word.

    The key is the word's first character when it is a lowercase ASCII letter,
    otherwise the catch-all key. Used both when indexing and when looking up,
    so a word is always searched in the bucket it would have been filed in.
    """
    if word and word[0] in Constants.BUCKET_LETTERS:
        return word[0]
    return Constants.CATCH_ALL_BUCKET


class DictionaryIndex:
    """Dictionary words split into buckets by leading character.

    Misspellings rarely get the first letter wrong, so each candidate only
    needs to be compared against words sharing its first letter. Buckets keep
    dictionary order (first occurrence of a duplicate wins) so scans are
    reproducible. The index is built once and never mutated afterwards.
    """

    def __init__(self) -> None:
        # Ordered sets: dict keys with no values
        self._buckets: dict[str, dict[str, None]] = {
            key: {} for key in Constants.CATCH_ALL_BUCKET + Constants.BUCKET_LETTERS
        }

    @classmethod
    def build(cls, lines: Iterable[str]) -> "DictionaryIndex":
        """Build an index from raw dictionary lines.

        Args:
            lines: Raw lines, possibly with line terminators and uppercase

        Returns:
            New DictionaryIndex
        """
        index = cls()
        for line in lines:
            word = normalize_word(line)
            index._buckets[bucket_key(word)][word] = None
        return index

    def bucket_for(self, word: str) -> KeysView[str]:
        """Return a read-only view of the bucket to search for `word`.

        Depends only on the word's first character, not on whether the word
        is itself in the dictionary.
        """
        bucket = self._buckets.get(word[:1])
        if bucket is None:
            bucket = self._buckets[Constants.CATCH_ALL_BUCKET]
        return bucket.keys()

    def bucket_sizes(self) -> dict[str, int]:
        """Number of words per bucket key."""
        return {key: len(bucket) for key, bucket in self._buckets.items()}

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word in self.bucket_for(word)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())
