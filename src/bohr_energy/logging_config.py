"""Logging configuration for bohr-energy.

Log records go to stderr so they never interleave with the prompts and
results written to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT: str = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER_NAME: str = "bohr_energy"


def setup_logging(
    level: str = "WARNING",
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Logging level name: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``
        or ``CRITICAL`` (case-insensitive).
    format_string:
        Custom format string.  ``None`` selects :data:`DEFAULT_FORMAT`.
    stream:
        Destination stream.  ``None`` selects ``sys.stderr``.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        stream=stream or sys.stderr,
        datefmt=DEFAULT_DATE_FORMAT,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``bohr_energy`` hierarchy.

    *name* is typically ``__name__``; module paths already rooted at
    the package are used as-is.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
