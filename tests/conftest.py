"""Shared pytest fixtures and configuration for the intspect test suite.

Guidelines
----------
* Core tests must be pure: no side effects.
* CLI tests call ``main(argv)`` and pass ``--no-color`` so captured
  output is plain text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("intspect")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
