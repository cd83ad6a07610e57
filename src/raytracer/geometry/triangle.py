"""Triangle primitives.

Triangles are specified directly by their vertices in object space.
Intersection uses the Moller-Trumbore algorithm, which also yields the
barycentric (u, v) coordinates of the hit; SmoothTriangle uses them to
interpolate per-vertex normals.
"""

from __future__ import annotations

from raytracer.core.intersection import Intersection
from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Point, Vector
from raytracer.geometry.shape import Shape
from raytracer.materials.material import Material


class Triangle(Shape):
    """A flat triangle with vertices p1, p2, p3.

    Attributes:
        p1, p2, p3: The vertices.
        e1: Edge vector p2 - p1.
        e2: Edge vector p3 - p1.
        normal: The (constant) unit face normal.
    """

    def __init__(
        self,
        p1: Point,
        p2: Point,
        p3: Point,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        super().__init__(transform, material)
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        self._edge_scale = self.e1.magnitude() * self.e2.magnitude()
        # Raises DegenerateGeometry for collinear vertices
        self.normal = self.e2.cross(self.e1).normalize()

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dir_cross_e2 = ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross_e2)
        # det scales with both edge lengths and the direction length
        if abs(det) < EPSILON * self._edge_scale * ray.direction.magnitude():
            # Ray is parallel to the triangle's plane
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0.0 or u > 1.0:
            return []

        origin_cross_e1 = p1_to_origin.cross(self.e1)
        v = f * ray.direction.dot(origin_cross_e1)
        if v < 0.0 or u + v > 1.0:
            return []

        t = f * self.e2.dot(origin_cross_e1)
        return [Intersection(t, self, u, v)]

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        return self.normal


class SmoothTriangle(Triangle):
    """A triangle whose normal is interpolated from per-vertex normals."""

    def __init__(
        self,
        p1: Point,
        p2: Point,
        p3: Point,
        n1: Vector,
        n2: Vector,
        n3: Vector,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        super().__init__(p1, p2, p3, transform, material)
        self.n1 = n1
        self.n2 = n2
        self.n3 = n3

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        """Blend the vertex normals with the hit's barycentric coordinates.

        Raises:
            ValueError: If no hit with u/v coordinates is supplied.
        """
        if hit is None or hit.u is None or hit.v is None:
            raise ValueError("SmoothTriangle normals require the intersection that produced the point")
        return self.n2 * hit.u + self.n3 * hit.v + self.n1 * (1.0 - hit.u - hit.v)
