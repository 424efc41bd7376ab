"""Core layer — physical constants, domain models and the energy model.

Rules
-----
* No ``print()`` calls.
* No console, filesystem or network I/O.
* No imports from ``cli``.
"""

from bohr_energy.core.energy import bohr_energy, compute_transition, validate_transition
from bohr_energy.core.models import EnergyResult, EnergyUnit, TransitionRequest

__all__: list[str] = [
    "EnergyResult",
    "EnergyUnit",
    "TransitionRequest",
    "bohr_energy",
    "compute_transition",
    "validate_transition",
]
