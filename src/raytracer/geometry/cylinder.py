"""Cylinder primitive of radius 1 around the object-space y axis.

The cylinder is infinite by default. ``minimum`` and ``maximum`` truncate it
(both bounds are exclusive for the lateral surface) and ``closed`` adds the
two end caps.
"""

from __future__ import annotations

import math

from raytracer.core.intersection import Intersection
from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Point, Vector
from raytracer.geometry.quadratic import solve_quadratic
from raytracer.geometry.shape import Shape
from raytracer.materials.material import Material


class Cylinder(Shape):
    """A (possibly truncated and capped) cylinder of radius 1 along y.

    Attributes:
        minimum: Lower y bound (exclusive). Defaults to -inf.
        maximum: Upper y bound (exclusive). Defaults to +inf.
        closed: Whether the ends are capped.
    """

    def __init__(
        self,
        transform: Matrix | None = None,
        material: Material | None = None,
        *,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
    ) -> None:
        if minimum >= maximum:
            raise ValueError(
                f"{type(self).__name__} minimum ({minimum}) must be below maximum ({maximum})"
            )
        super().__init__(transform, material)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def _cap_radius_squared(self, y: float) -> float:
        """Squared radius of the cap at height y."""
        return 1.0

    def _within_cap(self, ray: Ray, t: float, y: float) -> bool:
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        return x * x + z * z <= self._cap_radius_squared(y)

    def _intersect_caps(self, ray: Ray) -> list[Intersection]:
        # Caps only matter on closed shapes, and only a ray with a y
        # component can reach them
        if not self.closed or abs(ray.direction.y) < EPSILON * ray.direction.magnitude():
            return []

        xs = []
        for y in (self.minimum, self.maximum):
            if not math.isfinite(y):
                continue
            t = (y - ray.origin.y) / ray.direction.y
            if self._within_cap(ray, t, y):
                xs.append(Intersection(t, self))
        return xs

    def _lateral_roots(self, ray: Ray) -> list[float]:
        """Ray parameters where the ray crosses the infinite lateral surface."""
        d, o = ray.direction, ray.origin
        a = d.x * d.x + d.z * d.z
        # Relative to |d|^2, which shrinks as the cylinder is scaled up
        if abs(a) < EPSILON * d.dot(d):
            # Parallel to the y axis
            return []
        h = o.x * d.x + o.z * d.z
        c = o.x * o.x + o.z * o.z - 1.0
        roots = solve_quadratic(a, h, c)
        return list(roots) if roots is not None else []

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xs = []
        for t in self._lateral_roots(ray):
            y = ray.origin.y + t * ray.direction.y
            if self.minimum < y < self.maximum:
                xs.append(Intersection(t, self))
        xs.extend(self._intersect_caps(ray))
        return xs

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        dist = point.x * point.x + point.z * point.z

        if dist < self._cap_radius_squared(self.maximum) and point.y >= self.maximum - EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if dist < self._cap_radius_squared(self.minimum) and point.y <= self.minimum + EPSILON:
            return Vector(0.0, -1.0, 0.0)
        return Vector(point.x, 0.0, point.z)
