"""Unit sphere primitive.

In object space the sphere is centered at the origin with radius 1; larger,
displaced or squashed spheres come from the shape transform. Intersection
solves |origin + t * direction|^2 = 1 with the robust quadratic solver, so a
tangent ray yields two equal roots rather than one.

Example:
    >>> from raytracer.core import Point, Ray, Vector
    >>> from raytracer.geometry.sphere import Sphere
    >>> [i.t for i in Sphere().intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))]
    [4.0, 6.0]
"""

from __future__ import annotations

from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import ORIGIN, Point, Vector
from raytracer.geometry.quadratic import solve_quadratic
from raytracer.geometry.shape import Shape


class Sphere(Shape):
    """A sphere of radius 1 centered at the object-space origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect an object-space ray with the unit sphere.

        The quadratic is written in half-b form:
            a = dot(direction, direction)
            h = dot(direction, origin - center)
            c = dot(origin - center, origin - center) - 1

        Returns:
            Both roots in ascending order (equal for a tangent ray), or an
            empty list when the discriminant is negative.
        """
        oc = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        h = ray.direction.dot(oc)
        c = oc.dot(oc) - 1.0

        roots = solve_quadratic(a, h, c)
        if roots is None:
            return []
        t0, t1 = roots
        return [Intersection(t0, self), Intersection(t1, self)]

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        return point - ORIGIN


def glass_sphere() -> Sphere:
    """Create a sphere with a fully transparent, glass-like material."""
    sphere = Sphere()
    sphere.material.transparency = 1.0
    sphere.material.refractive_index = 1.5
    return sphere
