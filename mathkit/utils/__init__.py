"""Shared helpers for mathkit."""

from .numbers import format_number

__all__ = ["format_number"]
