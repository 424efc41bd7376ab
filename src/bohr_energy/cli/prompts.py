"""Line-based console input with validation and re-prompting.

This module is responsible for:

* Reading a bounded integer from one line of free-form text.
* Matching one line of text against two alias sets (case-insensitive).
* The two alias-set specializations: energy unit and yes/no.

Every reader loops until the line is acceptable.  Invalid lines print a
rejection message and are retried without limit; a closed input stream
raises :class:`~bohr_energy.exceptions.InputExhaustedError`.
"""

from __future__ import annotations

import enum
import re
import string
import sys
from collections.abc import Sequence
from typing import TextIO

from bohr_energy.cli.console import console
from bohr_energy.core.constants import INT_MAX, INT_MIN
from bohr_energy.core.models import EnergyUnit
from bohr_energy.exceptions import InputExhaustedError
from bohr_energy.logging_config import get_logger

logger = get_logger(__name__)

INVALID_INPUT_MESSAGE: str = "Sorry, the value you inputted was not valid."

_ASCII_WHITESPACE = " \t\n\v\f\r"
_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)(.*)", re.DOTALL)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Choice(enum.Enum):
    """Which of the two alias sets a line matched."""

    FIRST = enum.auto()
    SECOND = enum.auto()


# ---------------------------------------------------------------------------
# Alias sets
# ---------------------------------------------------------------------------

ELECTRON_VOLT_ALIASES: tuple[str, ...] = (
    "e",
    "ev",
    "electron volt",
    "electronvolt",
    "electron-volt",
    "electron volts",
    "electronvolts",
    "electron-volts",
)
JOULE_ALIASES: tuple[str, ...] = ("j", "joule", "joules")
ENERGY_UNIT_MESSAGE: str = "Electron-volts or joules? ['e', 'J']:"

AFFIRMATIVE_ALIASES: tuple[str, ...] = ("yes", "y", "true", "1")
NEGATIVE_ALIASES: tuple[str, ...] = ("no", "n", "false", "0")
CONFIRMATION_MESSAGE: str = "Yay, or nay? [y/n]:"


# ---------------------------------------------------------------------------
# Pure line matchers
# ---------------------------------------------------------------------------

def parse_bounded_integer(line: str, minimum: int, maximum: int) -> int | None:
    """Parse an integer from the start of *line*.

    Returns ``None`` unless the leading integer lies in
    ``[minimum, maximum]`` and only ASCII whitespace surrounds it.
    """
    match = _INTEGER_PREFIX.match(line)
    if match is None:
        return None
    digits, remainder = match.groups()
    if remainder.strip(_ASCII_WHITESPACE):
        return None
    value = int(digits)
    if not minimum <= value <= maximum:
        return None
    return value


def _ascii_casefold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def match_choice(
    line: str,
    first: Sequence[str],
    second: Sequence[str],
) -> Choice | None:
    """Match the whole of *line* against *first*, then *second*.

    Comparison folds ASCII letters only; no whitespace is trimmed.
    """
    folded = _ascii_casefold(line)
    if any(_ascii_casefold(alias) == folded for alias in first):
        return Choice.FIRST
    if any(_ascii_casefold(alias) == folded for alias in second):
        return Choice.SECOND
    return None


# ---------------------------------------------------------------------------
# Stream readers
# ---------------------------------------------------------------------------

def _read_line(stream: TextIO | None) -> str:
    """Read one line without its terminator, or raise at end of input."""
    source = stream if stream is not None else sys.stdin
    line = source.readline()
    if not line:
        raise InputExhaustedError(
            "Input ended before a valid value was entered.",
            hint="Answer each prompt on its own line.",
        )
    return line.rstrip("\r\n")


def read_bounded_integer(
    minimum: int = INT_MIN,
    maximum: int = INT_MAX,
    *,
    stream: TextIO | None = None,
) -> int:
    """Read lines until one holds an integer within ``[minimum, maximum]``.

    Raises
    ------
    InputExhaustedError
        If the stream closes first.
    """
    while True:
        line = _read_line(stream)
        value = parse_bounded_integer(line, minimum, maximum)
        if value is not None:
            return value
        logger.debug("Rejected integer input %r (range %d..%d)", line, minimum, maximum)
        console.print(INVALID_INPUT_MESSAGE, style="yellow")
        console.print(f"Input an integer between {minimum} and {maximum}:")


def read_choice(
    message: str,
    first: Sequence[str],
    second: Sequence[str],
    *,
    stream: TextIO | None = None,
) -> Choice:
    """Read lines until one matches an alias in *first* or *second*.

    *message* is repeated after every rejected line.

    Raises
    ------
    InputExhaustedError
        If the stream closes first.
    """
    while True:
        line = _read_line(stream)
        choice = match_choice(line, first, second)
        if choice is not None:
            return choice
        logger.debug("Rejected choice input %r", line)
        console.print(INVALID_INPUT_MESSAGE, style="yellow")
        console.print(message)


# ---------------------------------------------------------------------------
# Specializations
# ---------------------------------------------------------------------------

def read_energy_unit(*, stream: TextIO | None = None) -> EnergyUnit:
    """Ask for electron-volts or joules."""
    choice = read_choice(
        ENERGY_UNIT_MESSAGE,
        ELECTRON_VOLT_ALIASES,
        JOULE_ALIASES,
        stream=stream,
    )
    if choice is Choice.FIRST:
        return EnergyUnit.ELECTRON_VOLT
    return EnergyUnit.JOULE


def read_confirmation(*, stream: TextIO | None = None) -> bool:
    """Ask a yes/no question; ``True`` means yes."""
    choice = read_choice(
        CONFIRMATION_MESSAGE,
        AFFIRMATIVE_ALIASES,
        NEGATIVE_ALIASES,
        stream=stream,
    )
    return choice is Choice.FIRST
