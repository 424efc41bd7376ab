"""CLI application entry point for bohr-energy.

This module is the **sole error boundary** for the entire application.
It catches :class:`~bohr_energy.exceptions.BohrEnergyError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No physics lives here — the dialogue is delegated to
  :mod:`bohr_energy.cli.session` and the arithmetic to ``core``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from bohr_energy.cli import exit_codes
from bohr_energy.cli.console import err_console
from bohr_energy.exceptions import BohrEnergyError
from bohr_energy.logging_config import setup_logging
from bohr_energy.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    All calculator inputs are read interactively; the flags only cover
    ``--version`` and log verbosity.
    """
    parser = argparse.ArgumentParser(
        prog="bohr-energy",
        description="Interactive Bohr-model electron transition energy calculator.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log rejected inputs and computed results to stderr.",
    )
    return parser


def _tolerate_undecodable_stdin() -> None:
    """Decode stdin with ``errors="replace"`` so stray bytes become rejectable text."""
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the bohr-energy CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    from bohr_energy.cli.session import run_session

    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")
    _tolerate_undecodable_stdin()

    return run_session()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BohrEnergyError as exc:
        err_console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            err_console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
