"""Light sources."""

from dataclasses import dataclass

from raytracer.core.color import Color
from raytracer.core.tuples import Point


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting from a single point.

    Attributes:
        position: Location of the light in world space.
        intensity: Color and brightness of the light.
    """

    position: Point
    intensity: Color
