"""Linear equations in one unknown."""

from __future__ import annotations

from dataclasses import dataclass

from mathkit.errors import LeadingCoefficientZeroError
from mathkit.utils.numbers import DEFAULT_DISPLAY_DIGITS, format_number


@dataclass(frozen=True)
class LinearEquation:
    """The equation ``a*x + b = c``.

    Attributes:
        a: Coefficient of x, must be non-zero.
        b: Constant term on the left-hand side.
        c: Right-hand side.

    """

    a: float
    b: float = 0.0
    c: float = 0.0

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.a == 0:
            raise LeadingCoefficientZeroError(
                f"Coefficient of x must be non-zero in {self.a}x+{self.b}={self.c}"
            )

    @property
    def solution(self) -> float:
        """Value of x that satisfies the equation."""
        return (self.c - self.b) / self.a

    def _left_hand_side(self, digits: int) -> str:
        a_text = format_number(self.a, digits)
        if a_text == "1":
            text = "x"
        elif a_text == "-1":
            text = "-x"
        elif a_text == "0":
            # non-zero but below display precision
            text = f"{self.a!r}x"
        else:
            text = f"{a_text}x"

        b_text = format_number(self.b, digits)
        if b_text.startswith("-"):
            text += b_text
        elif b_text != "0":
            text += f"+{b_text}"
        return text

    def to_string(self, digits: int = DEFAULT_DISPLAY_DIGITS) -> str:
        """Render the equation and its solution, e.g. ``2x+2=9\\tx=3.5``."""
        equation = f"{self._left_hand_side(digits)}={format_number(self.c, digits)}"
        return f"{equation}\tx={format_number(self.solution, digits)}"

    def __str__(self) -> str:
        return self.to_string()
