"""Data loading and indexing for typocheck."""

from typocheck.data.dictionary import (
    is_candidate_file,
    load_candidates,
    load_dictionary_index,
)
from typocheck.data.index import DictionaryIndex, bucket_key

__all__ = [
    "DictionaryIndex",
    "bucket_key",
    "is_candidate_file",
    "load_candidates",
    "load_dictionary_index",
]
