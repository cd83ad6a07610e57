"""Point and vector types for 3D geometry.

Points and vectors share the same (x, y, z, w) representation but are kept
as distinct types so that the arithmetic closure rules hold by construction:

    Point  + Vector -> Point
    Vector + Vector -> Vector
    Point  - Point  -> Vector
    Point  - Vector -> Point
    Vector - Vector -> Vector

Combinations without a geometric meaning (Point + Point, Vector - Point)
return NotImplemented, so Python raises TypeError for them.

Example:
    >>> from raytracer.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, -1.0)
    >>> p + v * 2.0
    Point(x=1.0, y=2.0, z=1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from raytracer.core.errors import DegenerateGeometry

# Tolerance used for approximate comparisons throughout the geometry core
EPSILON = 1e-4


def float_eq(a: float, b: float) -> bool:
    """Return True if a and b differ by less than EPSILON."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False, slots=True)
class Point:
    """A position in 3D space (w = 1).

    Attributes:
        x: The x coordinate.
        y: The y coordinate.
        z: The z coordinate.
    """

    x: float
    y: float
    z: float

    w: ClassVar[float] = 1.0

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    # Equality is approximate (EPSILON), which a hash cannot honor
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return float_eq(self.x, other.x) and float_eq(self.y, other.y) and float_eq(self.z, other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass(frozen=True, eq=False, slots=True)
class Vector:
    """A direction/displacement in 3D space (w = 0).

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    w: ClassVar[float] = 0.0

    def __add__(self, other: object) -> Vector | Point:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, (int, float)):
            return Vector(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, (int, float)):
            return Vector(self.x / scalar, self.y / scalar, self.z / scalar)
        return NotImplemented

    # Equality is approximate (EPSILON), which a hash cannot honor
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return float_eq(self.x, other.x) and float_eq(self.y, other.y) and float_eq(self.z, other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def dot(self, other: Vector) -> float:
        """Compute the dot product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector:
        """Return a unit vector in the same direction.

        Raises:
            DegenerateGeometry: If the vector has zero length.
        """
        length = self.magnitude()
        if length == 0.0:
            raise DegenerateGeometry("Cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected vector: v - 2 * dot(v, n) * n.
        """
        return self - normal * (2.0 * self.dot(normal))


ORIGIN = Point(0.0, 0.0, 0.0)
