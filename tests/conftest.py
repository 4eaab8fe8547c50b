"""Shared pytest fixtures and configuration for the shellfeat test suite.

Guidelines
----------
* Core tests are pure function calls — no I/O, no mocking.
* CLI tests drive :func:`shellfeat.cli.app.main` with explicit argv.
* Tests must not depend on environment variables or OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from shellfeat.cli.console import get_console


@pytest.fixture(autouse=True)
def _fresh_console() -> Iterator[None]:
    """Start each test without a console cached by an earlier one."""
    get_console.cache_clear()
    yield
    get_console.cache_clear()


@pytest.fixture(autouse=True)
def _reset_shellfeat_logger() -> Iterator[None]:
    """Undo handlers attached by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("shellfeat")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
