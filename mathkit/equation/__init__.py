"""Equation solvers."""

from .linear import LinearEquation

__all__ = ["LinearEquation"]
