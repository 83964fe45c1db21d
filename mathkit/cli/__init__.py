"""Command-line interface for mathkit."""

from .main import cli

__all__ = ["cli"]
