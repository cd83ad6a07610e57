"""Procedural color patterns.

A pattern maps a point in pattern space to a color. Patterns have their own
transform, applied on top of the shape's: a world point is first mapped into
the shape's object space (through any parent groups), then into pattern space.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from raytracer.core.color import Color
from raytracer.core.matrix import IDENTITY, Matrix
from raytracer.core.tuples import Point

if TYPE_CHECKING:
    from raytracer.geometry.shape import Shape


class Pattern(ABC):
    """Base class for two-color patterns.

    Attributes:
        a: The first color.
        b: The second color.
    """

    def __init__(self, a: Color, b: Color, transform: Matrix | None = None) -> None:
        self.a = a
        self.b = b
        self.transform = transform if transform is not None else IDENTITY

    @property
    def transform(self) -> Matrix:
        """The pattern-to-object transform."""
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._inverse = value.inverse()
        self._transform = value

    @abstractmethod
    def pattern_at(self, point: Point) -> Color:
        """Return the color at a point given in pattern space."""

    def pattern_at_shape(self, shape: Shape | None, world_point: Point) -> Color:
        """Return the pattern color at a world-space point on shape.

        Args:
            shape: The shape carrying the pattern. If None, the point is
                treated as already being in object space.
            world_point: The point in world space.
        """
        object_point = shape.world_to_object(world_point) if shape is not None else world_point
        return self.pattern_at(self._inverse @ object_point)


class StripePattern(Pattern):
    """Alternating stripes along x: a for even floor(x), b for odd."""

    def pattern_at(self, point: Point) -> Color:
        return self.a if math.floor(point.x) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Linear blend from a to b across each unit of x."""

    def pattern_at(self, point: Point) -> Color:
        fraction = point.x - math.floor(point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    """Concentric rings in the xz plane."""

    def pattern_at(self, point: Point) -> Color:
        return self.a if math.floor(math.hypot(point.x, point.z)) % 2 == 0 else self.b


class CheckersPattern(Pattern):
    """3D checkerboard of unit cubes."""

    def pattern_at(self, point: Point) -> Color:
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return self.a if total % 2 == 0 else self.b
