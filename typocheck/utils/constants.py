"""Shared constants for typocheck."""


class Constants:
    """Fixed values used across the checker."""

    # Bucket key for words whose first character is not an ASCII letter
    CATCH_ALL_BUCKET = "0"
    BUCKET_LETTERS = "abcdefghijklmnopqrstuvwxyz"

    # Fallback similarity threshold (exclusive upper bound)
    DEFAULT_THRESHOLD = 7

    # Worker fan-out
    PARALLEL_MIN_WORDS = 10
    PARALLEL_WORKERS = 4

    DEFAULT_DICTIONARY = "words.txt"

    # Tokens matching this are read as candidate files
    CANDIDATE_FILE_PATTERN = r"\w+\.\w+"

    SUMMARY_SEPARATOR = "-----"
    USAGE_PROMPT = "Please input a newline delimited file to test against."
    MISSING_CANDIDATE_FILE_MESSAGE = "Words to check file not found!"
