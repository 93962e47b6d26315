"""Shared utility functions for typocheck."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def normalize_word(line: str) -> str:
    """Lowercase a raw line and strip its trailing line terminator."""
    return line.rstrip("\r\n").lower()
