"""Domain models for bohr-energy.

All models are **frozen** dataclasses or enums — immutable value
objects carrying zero I/O.  None of them outlives a single iteration of
the interaction loop.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Energy unit
# ---------------------------------------------------------------------------

class EnergyUnit(enum.Enum):
    """Unit in which a transition energy is expressed.

    The member value is the symbol appended to formatted results.
    """

    ELECTRON_VOLT = "eV"
    JOULE = "J"

    @property
    def symbol(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TransitionRequest:
    """One fully collected set of user inputs."""

    atomic_number: int
    """Proton count ``Z`` of the hydrogen-like atom."""

    initial_level: int
    """Principal quantum number the electron starts from."""

    final_level: int
    """Principal quantum number the electron ends on."""

    unit: EnergyUnit
    """Unit the result should be reported in."""


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EnergyResult:
    """A computed energy magnitude paired with its unit."""

    value: float
    unit: EnergyUnit

    def formatted(self) -> str:
        """Render with 3 significant digits, e.g. ``"10.2eV"``."""
        return f"{self.value:.3g}{self.unit.symbol}"
