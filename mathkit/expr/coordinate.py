"""Points in the plane or in space and the distances between them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mathkit.errors import DimensionMismatchError
from mathkit.utils.numbers import DEFAULT_DISPLAY_DIGITS, format_number


@dataclass(frozen=True)
class Coordinate:
    """A 2D point, or a 3D point when ``z`` is given.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component, None for a 2D point.

    """

    x: float
    y: float
    z: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        if self.z is not None:
            object.__setattr__(self, "z", float(self.z))

    @property
    def dimensions(self) -> int:
        return 2 if self.z is None else 3

    @property
    def components(self) -> tuple[float, ...]:
        if self.z is None:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    @classmethod
    def origin(cls, dimensions: int = 2) -> Coordinate:
        """Return the origin of a 2D or 3D space."""
        if dimensions == 2:
            return cls(0.0, 0.0)
        if dimensions == 3:
            return cls(0.0, 0.0, 0.0)
        raise ValueError(f"Coordinates have 2 or 3 dimensions, got {dimensions}")

    def distance(self, other: Coordinate | None = None) -> float:
        """Euclidean distance to ``other``, or to the origin when omitted.

        Raises:
            DimensionMismatchError: If ``other`` has a different dimension.

        """
        if other is None:
            other = Coordinate.origin(self.dimensions)
        return distance_between(self, other)

    def to_string(self, digits: int = DEFAULT_DISPLAY_DIGITS) -> str:
        parts = ",".join(format_number(c, digits) for c in self.components)
        return f"({parts})"

    def __str__(self) -> str:
        return self.to_string()


def distance_between(a: Coordinate, b: Coordinate) -> float:
    """Calculate the Euclidean distance between two points.

    Args:
        a: First point.
        b: Second point.

    Returns:
        Straight-line distance.

    Raises:
        DimensionMismatchError: If one point is 2D and the other 3D.

    """
    if a.dimensions != b.dimensions:
        raise DimensionMismatchError(
            f"Cannot measure distance between {a.dimensions}D point {a} "
            f"and {b.dimensions}D point {b}"
        )
    return math.dist(a.components, b.components)
