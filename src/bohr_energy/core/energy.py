"""Bohr-model transition energy.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

from bohr_energy.core.constants import EV_TO_JOULE, RYDBERG_EV
from bohr_energy.core.models import EnergyResult, EnergyUnit, TransitionRequest
from bohr_energy.exceptions import InvalidTransitionError


def bohr_energy(
    atomic_number: int,
    initial_level: int,
    final_level: int,
    unit: EnergyUnit,
) -> float:
    """Return the energy released by an ``initial -> final`` transition.

    ``E = R * Z**2 * (1/n_final**2 - 1/n_initial**2)`` with ``R`` the
    Rydberg energy in eV, converted to joules when *unit* asks for it.

    No validation is performed; callers must reject
    ``initial_level < final_level`` and non-positive levels beforehand.
    """
    energy = (
        RYDBERG_EV
        * float(atomic_number) ** 2
        * (1.0 / float(final_level) ** 2 - 1.0 / float(initial_level) ** 2)
    )
    if unit is EnergyUnit.JOULE:
        energy *= EV_TO_JOULE
    return energy


def validate_transition(initial_level: int, final_level: int) -> None:
    """Reject transitions whose initial level lies below the final level.

    Equal levels are accepted and produce zero energy.

    Raises
    ------
    InvalidTransitionError
        When ``initial_level < final_level``.
    """
    if initial_level < final_level:
        raise InvalidTransitionError(initial_level, final_level)


def compute_transition(request: TransitionRequest) -> EnergyResult:
    """Compute the :class:`EnergyResult` for a collected request."""
    value = bohr_energy(
        request.atomic_number,
        request.initial_level,
        request.final_level,
        request.unit,
    )
    return EnergyResult(value=value, unit=request.unit)
