"""Interactive calculator session.

One iteration walks through these states::

    collecting inputs -> validating -> computing -> reporting -> asking to continue

A rejected transition (initial level below final level) goes straight
back to collecting inputs without asking for a unit.  Declining to
continue ends the session with :data:`exit_codes.SUCCESS`.
"""

from __future__ import annotations

from typing import TextIO

from bohr_energy.cli import exit_codes
from bohr_energy.cli.console import console
from bohr_energy.cli.prompts import read_bounded_integer, read_confirmation, read_energy_unit
from bohr_energy.core.energy import compute_transition, validate_transition
from bohr_energy.core.models import EnergyResult, TransitionRequest
from bohr_energy.exceptions import InvalidTransitionError
from bohr_energy.logging_config import get_logger

logger = get_logger(__name__)

WELCOME_MESSAGE: str = "Welcome to the electron transition energy calculator!"


def _ask_positive_integer(question: str, stream: TextIO | None) -> int:
    console.print(f"\n{question}")
    return read_bounded_integer(1, stream=stream)


def _collect_request(stream: TextIO | None) -> TransitionRequest | None:
    """Gather one request, or ``None`` when the levels are rejected."""
    atomic_number = _ask_positive_integer(
        "Please specify a value for the atomic number of the system "
        "under consideration.",
        stream,
    )
    initial_level = _ask_positive_integer(
        "Please specify a value for the initial principal quantum number "
        "of the electron under consideration.",
        stream,
    )
    final_level = _ask_positive_integer(
        "Please specify a value for the final principal quantum number "
        "of the electron under consideration.",
        stream,
    )

    try:
        validate_transition(initial_level, final_level)
    except InvalidTransitionError as exc:
        logger.debug("Restarting input collection: %s", exc.hint)
        console.print(f"\n{exc}", style="bold red")
        console.print("Let's start again!")
        return None

    console.print("\nDo you want the results in electron-volts or joules?")
    unit = read_energy_unit(stream=stream)

    return TransitionRequest(
        atomic_number=atomic_number,
        initial_level=initial_level,
        final_level=final_level,
        unit=unit,
    )


def _report(request: TransitionRequest, result: EnergyResult) -> None:
    console.print(
        f"\nFor a ({request.atomic_number}, {request.initial_level}, "
        f"{request.final_level}) transition the energy was calculated to be: "
    )
    console.print(f"    E = {result.formatted()}", style="bold green")


def run_session(stream: TextIO | None = None) -> int:
    """Run the calculator dialogue until the user declines to continue.

    Parameters
    ----------
    stream:
        Line source for answers.  ``None`` reads from ``sys.stdin``.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.

    Raises
    ------
    InputExhaustedError
        If the input stream closes mid-dialogue.
    """
    console.print(WELCOME_MESSAGE, style="bold")

    while True:
        request = _collect_request(stream)
        if request is None:
            continue

        result = compute_transition(request)
        logger.info(
            "Z=%d n_i=%d n_f=%d -> %r %s",
            request.atomic_number,
            request.initial_level,
            request.final_level,
            result.value,
            result.unit.symbol,
        )
        _report(request, result)

        console.print("\nDo you wish to continue? [y/n]:")
        if not read_confirmation(stream=stream):
            return exit_codes.SUCCESS
