"""Double-napped cone primitive around the object-space y axis.

The cone's radius at height y is |y|, so the two nappes meet at the origin.
Like the cylinder it can be truncated with ``minimum``/``maximum`` and capped
with ``closed``; the cap at height y has radius |y|.
"""

from __future__ import annotations

import math

from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Point, Vector
from raytracer.geometry.cylinder import Cylinder
from raytracer.geometry.quadratic import solve_quadratic


class Cone(Cylinder):
    """A (possibly truncated and capped) double cone x^2 + z^2 = y^2."""

    def _cap_radius_squared(self, y: float) -> float:
        return y * y

    def _lateral_roots(self, ray: Ray) -> list[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x - d.y * d.y + d.z * d.z
        h = o.x * d.x - o.y * d.y + o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z

        length_squared = d.dot(d)
        if abs(a) < EPSILON * length_squared:
            # Ray parallel to one of the nappes: the quadratic degenerates to
            # 2*h*t + c = 0 and crosses the surface at most once
            if abs(h) < EPSILON * math.sqrt(length_squared):
                return []
            return [-c / (2.0 * h)]

        roots = solve_quadratic(a, h, c)
        return list(roots) if roots is not None else []

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        dist = point.x * point.x + point.z * point.z

        if dist < self._cap_radius_squared(self.maximum) and point.y >= self.maximum - EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if dist < self._cap_radius_squared(self.minimum) and point.y <= self.minimum + EPSILON:
            return Vector(0.0, -1.0, 0.0)

        y = math.sqrt(dist)
        if point.y > 0.0:
            y = -y
        return Vector(point.x, y, point.z)
