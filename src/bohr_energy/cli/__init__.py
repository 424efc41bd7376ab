"""CLI layer — argument parsing, console dialogue, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` never imports from ``cli``.
"""
