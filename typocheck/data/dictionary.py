"""Dictionary and candidate word loading."""

import re

from loguru import logger

from typocheck.core.errors import (
    MissingCandidateSourceFile,
    MissingDictionaryFile,
    NoCandidatesProvided,
)
from typocheck.data.index import DictionaryIndex
from typocheck.utils import Constants, expand_file_path, normalize_word

_CANDIDATE_FILE_RE = re.compile(Constants.CANDIDATE_FILE_PATTERN)


def _read_lines(filepath: str) -> list[str]:
    """Read raw lines from a UTF-8 file, logging unreadable files."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.readlines()
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def load_dictionary_index(filepath: str, verbose: bool = False) -> DictionaryIndex:
    """Load the dictionary file and index it by leading character.

    Raises:
        MissingDictionaryFile: If the file does not exist
    """
    filepath = expand_file_path(filepath) or filepath

    if verbose:
        logger.info(f"  Loading dictionary from {filepath}...")

    try:
        lines = _read_lines(filepath)
    except FileNotFoundError as e:
        raise MissingDictionaryFile(filepath) from e

    index = DictionaryIndex.build(lines)

    if verbose:
        logger.info(f"  Indexed {len(index)} dictionary words")
    logger.debug(f"Bucket sizes: {index.bucket_sizes()}")

    return index


def is_candidate_file(token: str) -> bool:
    """Whether a command-line token names a candidate file ("name.ext")."""
    return _CANDIDATE_FILE_RE.search(token) is not None


def load_candidates(tokens: list[str], verbose: bool = False) -> list[str]:
    """Expand candidate tokens into the ordered list of words to check.

    Tokens shaped like "name.ext" are read as files, one word per line.
    Anything else is taken as a literal word.

    Raises:
        NoCandidatesProvided: If `tokens` is empty
        MissingCandidateSourceFile: If a candidate file does not exist
    """
    if not tokens:
        raise NoCandidatesProvided(Constants.USAGE_PROMPT)

    words: list[str] = []
    file_count = 0

    for token in tokens:
        if not is_candidate_file(token):
            words.append(normalize_word(token))
            continue

        filepath = expand_file_path(token) or token
        try:
            lines = _read_lines(filepath)
        except FileNotFoundError as e:
            raise MissingCandidateSourceFile(filepath) from e
        words.extend(normalize_word(line) for line in lines)
        file_count += 1

    if verbose:
        logger.info(f"  Loaded {len(words)} words to check ({file_count} from files)")

    return words
