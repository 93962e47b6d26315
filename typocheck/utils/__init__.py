"""Utility functions for typocheck."""

from typocheck.utils.constants import Constants
from typocheck.utils.helpers import expand_file_path, normalize_word
from typocheck.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "normalize_word",
    "setup_logger",
]
