"""Complex number arithmetic.

ComplexNumber is an immutable value. Every arithmetic method accepts either
another ComplexNumber or a real number and returns a new instance; the
Python operators delegate to those methods.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from mathkit.errors import DivideByZeroError, NotRealError
from mathkit.utils.numbers import DEFAULT_DISPLAY_DIGITS, format_number

DEFAULT_EQUALITY_TOLERANCE = 0.001


@dataclass(frozen=True)
class ComplexNumber:
    """A complex number ``real + imaginary * i``.

    Attributes:
        real: Real part.
        imaginary: Imaginary part.

    """

    real: float
    imaginary: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    @classmethod
    def from_complex(cls, value: complex) -> ComplexNumber:
        """Build from a built-in complex value."""
        return cls(value.real, value.imag)

    @staticmethod
    def _coerce(value: ComplexNumber | float) -> ComplexNumber | None:
        if isinstance(value, ComplexNumber):
            return value
        if isinstance(value, Real):
            return ComplexNumber(float(value), 0.0)
        return None

    def _require(self, value: ComplexNumber | float) -> ComplexNumber:
        other = self._coerce(value)
        if other is None:
            raise TypeError(f"Unsupported operand for ComplexNumber: {type(value).__name__}")
        return other

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, value: ComplexNumber | float) -> ComplexNumber:
        """Return the sum of this number and ``value``."""
        other = self._require(value)
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, value: ComplexNumber | float) -> ComplexNumber:
        """Return this number minus ``value``."""
        other = self._require(value)
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, value: ComplexNumber | float) -> ComplexNumber:
        """Return the product of this number and ``value``."""
        other = self._require(value)
        return ComplexNumber(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def divide(self, value: ComplexNumber | float) -> ComplexNumber:
        """Return this number divided by ``value``.

        Args:
            value: Divisor, complex or real.

        Returns:
            The quotient.

        Raises:
            DivideByZeroError: If the divisor is zero.

        """
        other = self._require(value)
        if other.real == 0 and other.imaginary == 0:
            raise DivideByZeroError("Complex number cannot divide zero.")

        if other.imaginary == 0:
            return ComplexNumber(self.real / other.real, self.imaginary / other.real)

        denominator = other.real * other.real + other.imaginary * other.imaginary
        return ComplexNumber(
            (self.real * other.real + self.imaginary * other.imaginary) / denominator,
            (self.imaginary * other.real - self.real * other.imaginary) / denominator,
        )

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.real, -self.imaginary)

    def modulus(self) -> float:
        return math.hypot(self.real, self.imaginary)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    @property
    def is_real(self) -> bool:
        """Whether the number has no imaginary part."""
        return self.imaginary == 0

    def to_float(self) -> float:
        """Return the real part of a number with no imaginary part.

        Raises:
            NotRealError: If the imaginary part is non-zero.

        """
        if self.is_real:
            return self.real
        raise NotRealError(f"{self} has an imaginary part and cannot be converted to a real")

    def is_close(
        self, value: ComplexNumber | float, tolerance: float = DEFAULT_EQUALITY_TOLERANCE
    ) -> bool:
        """Compare both components within an absolute tolerance."""
        other = self._require(value)
        return (
            abs(self.real - other.real) < tolerance
            and abs(self.imaginary - other.imaginary) < tolerance
        )

    def to_string(self, digits: int = DEFAULT_DISPLAY_DIGITS) -> str:
        """Render as ``a+bi`` with unit and zero parts simplified.

        Args:
            digits: Maximum decimal places for each part.

        Returns:
            Human-readable form, e.g. ``3``, ``-i``, ``2.5i`` or ``1-2i``.

        """
        # zero, unit and sign checks use the rounded text, not the raw parts
        real_text = format_number(self.real, digits)
        im_text = format_number(self.imaginary, digits)
        if im_text == "0":
            return real_text

        if im_text == "1":
            imag_text = "i"
        elif im_text == "-1":
            imag_text = "-i"
        else:
            imag_text = f"{im_text}i"

        if real_text == "0":
            return imag_text
        sign = "" if imag_text.startswith("-") else "+"
        return f"{real_text}{sign}{imag_text}"

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, value: object) -> ComplexNumber:
        other = self._coerce(value)  # type: ignore[arg-type]
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, value: object) -> ComplexNumber:
        return self.__add__(value)

    def __sub__(self, value: object) -> ComplexNumber:
        other = self._coerce(value)  # type: ignore[arg-type]
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, value: object) -> ComplexNumber:
        other = self._coerce(value)  # type: ignore[arg-type]
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, value: object) -> ComplexNumber:
        other = self._coerce(value)  # type: ignore[arg-type]
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, value: object) -> ComplexNumber:
        return self.__mul__(value)

    def __truediv__(self, value: object) -> ComplexNumber:
        other = self._coerce(value)  # type: ignore[arg-type]
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, value: object) -> ComplexNumber:
        other = self._coerce(value)  # type: ignore[arg-type]
        return NotImplemented if other is None else other.divide(self)

    def __neg__(self) -> ComplexNumber:
        return ComplexNumber(-self.real, -self.imaginary)

    def __abs__(self) -> float:
        return self.modulus()

    def __float__(self) -> float:
        return self.to_float()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        return self.to_string()
