"""mathkit - Small, self-contained mathematical utilities.

This package provides one-variable descriptive statistics, complex number
arithmetic, coordinate distances and linear equation solving.
"""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "equation",
    "errors",
    "expr",
    "reporting",
    "statistics",
    "utils",
]
