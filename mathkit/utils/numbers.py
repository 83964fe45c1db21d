"""Number rendering shared by the expression and equation modules."""

from __future__ import annotations

import math

DEFAULT_DISPLAY_DIGITS = 3


def format_number(value: float, digits: int = DEFAULT_DISPLAY_DIGITS) -> str:
    """Render a number with at most ``digits`` decimal places.

    Trailing zeros and a dangling decimal point are stripped, and negative
    zero is rendered as ``0``. Non-finite values fall back to ``str()``.

    Args:
        value: Number to render.
        digits: Maximum number of decimal places.

    Returns:
        Compact string form of the number.

    """
    if not math.isfinite(value):
        return str(value)

    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
