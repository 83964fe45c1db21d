"""Value types for complex numbers and coordinates."""

from .complex_number import DEFAULT_EQUALITY_TOLERANCE, ComplexNumber
from .coordinate import Coordinate, distance_between

__all__ = [
    "DEFAULT_EQUALITY_TOLERANCE",
    "ComplexNumber",
    "Coordinate",
    "distance_between",
]
