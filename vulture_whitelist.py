"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic, pytest) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.parse_word_list  # noqa: F821  # unused method (typocheck/core/config.py:27)

# pytest autouse fixture
reset_logger  # noqa: F821  # unused function (tests/conftest.py:10)
