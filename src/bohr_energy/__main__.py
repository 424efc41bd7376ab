"""Allow ``python -m bohr_energy`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m bohr_energy`` behaves identically to the
``bohr-energy`` console script.
"""

from __future__ import annotations

from bohr_energy.cli.app import cli

if __name__ == "__main__":
    cli()
