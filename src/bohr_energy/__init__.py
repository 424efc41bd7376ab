"""bohr-energy — interactive Bohr-model transition energy calculator.

Reads an atomic number and two principal quantum numbers from the
console and reports the transition energy in electron-volts or joules.
"""

from bohr_energy.version import __version__

__all__: list[str] = ["__version__"]
