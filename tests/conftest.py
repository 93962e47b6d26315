"""Shared pytest fixtures."""

import sys

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore a plain stderr sink after tests that reconfigure logging."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
