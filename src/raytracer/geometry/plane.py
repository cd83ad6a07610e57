"""Infinite xz plane primitive (y = 0 in object space)."""

from __future__ import annotations

from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Point, Vector
from raytracer.geometry.shape import Shape

_UP = Vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The plane y = 0, extending infinitely in x and z."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect an object-space ray with the plane.

        A ray parallel to the plane (including one lying inside it) never
        intersects it.
        """
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        return _UP
