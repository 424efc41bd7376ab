"""Process-wide physical constants and integer bounds.

Values are fixed at import time and never mutated.
"""

from __future__ import annotations

from typing import Final

RYDBERG_EV: Final[float] = 13.60569300984
"""Rydberg energy in electron-volts."""

EV_TO_JOULE: Final[float] = 1.6e-19
"""Electron-volt to joule conversion factor."""

INT_MIN: Final[int] = -(2**31)
INT_MAX: Final[int] = 2**31 - 1
"""Default bounds for console integer input (32-bit signed range)."""
