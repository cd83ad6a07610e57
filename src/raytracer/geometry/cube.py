"""Axis-aligned cube primitive spanning [-1, 1] on every axis.

Intersection uses the slab method: each axis contributes the interval of t
for which the ray is between that axis' two faces, and the ray is inside the
cube where all three intervals overlap.
"""

from __future__ import annotations

import math

from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Point, Vector
from raytracer.geometry.shape import Shape


def _check_axis(origin: float, direction: float, threshold: float) -> tuple[float, float]:
    """Return the (tmin, tmax) interval for one pair of slabs.

    Args:
        origin: The ray origin's coordinate on this axis.
        direction: The ray direction's component on this axis.
        threshold: Components at or below this magnitude count as parallel.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) > threshold:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        # Parallel to the slabs: either always between them or never
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """A cube with faces at +/-1 on each object-space axis."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        # Object-space directions shrink with the cube's scale, so parallel
        # is judged relative to the direction's length
        threshold = EPSILON * ray.direction.magnitude()
        xtmin, xtmax = _check_axis(ray.origin.x, ray.direction.x, threshold)
        ytmin, ytmax = _check_axis(ray.origin.y, ray.direction.y, threshold)
        ztmin, ztmax = _check_axis(ray.origin.z, ray.direction.z, threshold)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax or not (math.isfinite(tmin) and math.isfinite(tmax)):
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        """Normal of the face whose axis has the largest absolute coordinate."""
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return Vector(point.x, 0.0, 0.0)
        if maxc == ay:
            return Vector(0.0, point.y, 0.0)
        return Vector(0.0, 0.0, point.z)
