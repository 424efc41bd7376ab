"""Custom exception hierarchy for bohr-energy.

Every error condition that crosses a layer boundary inherits from
:class:`BohrEnergyError` so that the CLI error boundary can render a
clean message without leaking a stack trace.

Hierarchy
---------
BohrEnergyError
├── InputExhaustedError
├── InvalidTransitionError
└── MissingDependencyError
"""

from __future__ import annotations


class BohrEnergyError(Exception):
    """Base exception for all bohr-energy errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Console input ---------------------------------------------------------

class InputExhaustedError(BohrEnergyError):
    """Raised when standard input closes before a valid value was read."""


# --- Physics validation ----------------------------------------------------

class InvalidTransitionError(BohrEnergyError):
    """Raised when the initial level lies below the final level.

    The interaction loop recovers from this by restarting input
    collection; it only reaches the error boundary when the core API is
    used directly.
    """

    def __init__(self, initial_level: int, final_level: int) -> None:
        super().__init__(
            "The initial principal quantum number must be greater than "
            "the final principal quantum number!",
            hint=f"Got initial={initial_level}, final={final_level}.",
        )
        self.initial_level: int = initial_level
        self.final_level: int = final_level


# --- Environment -----------------------------------------------------------

class MissingDependencyError(BohrEnergyError):
    """Raised when an optional runtime dependency is not importable."""
