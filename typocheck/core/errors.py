"""Exception types raised by typocheck."""

from typocheck.utils.constants import Constants


class TypocheckError(Exception):
    """Base class for all typocheck errors."""


class MissingDictionaryFile(TypocheckError, FileNotFoundError):
    """The dictionary file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Dictionary file '{path}' not found!")
        self.path = path


class MissingCandidateSourceFile(TypocheckError, FileNotFoundError):
    """A file named as a candidate source does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(Constants.MISSING_CANDIDATE_FILE_MESSAGE)
        self.path = path


class NoCandidatesProvided(TypocheckError):
    """No candidate words or files were given."""


class InvalidHeuristicArgument(TypocheckError, ValueError):
    """A heuristic was called with arguments that break its precondition.

    Raised by the missing-character test when the dictionary word is shorter
    than the candidate. Callers guard with a length check, so seeing this is
    a bug.
    """
