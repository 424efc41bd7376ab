"""Shared pytest fixtures and configuration for the bohr-energy test suite.

Guidelines
----------
* No real terminal interaction — answers are fed through ``io.StringIO``.
* Core tests must be pure — no side effects.
* Logging configuration changed by a test is restored afterwards.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator

import pytest


@pytest.fixture
def answers() -> Callable[..., io.StringIO]:
    """Build an input stream holding one answer per line."""

    def _make(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _make


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    # Only drop handlers installed by ``setup_logging``; pytest manages its own.
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
