"""Constructive solid geometry: boolean combinations of two shapes.

A CSG node combines a ``left`` and a ``right`` shape with union, intersection
or difference. To intersect a ray with the combination, the children's
intersections are merged, sorted by t and walked once while tracking whether
the ray is currently inside each child. Every surface crossing toggles the
insideness of its side; whether the crossing lies on the boundary of the
combined solid depends only on the operation, which side was hit, and the
two insideness flags:

    operation      keep the crossing when
    UNION          (left hit and not inside right) or (right hit and not inside left)
    INTERSECTION   (left hit and inside right) or (right hit and inside left)
    DIFFERENCE     (left hit and not inside right) or (right hit and inside left)

Intersections at t <= 0 take part in the walk like any other, because the
ray may start inside one of the children.

Example:
    >>> from raytracer.core import Point, Ray, Vector, translation
    >>> from raytracer.geometry import CSG, CsgOperation, Sphere
    >>> c = CSG(CsgOperation.UNION, Sphere(), Sphere(transform=translation(0, 0, 0.5)))
    >>> [i.t for i in c.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))]
    [4.0, 6.5]
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from enum import IntEnum

from raytracer.core.intersection import Intersection, sort_intersections
from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import Point, Vector
from raytracer.geometry.shape import Shape
from raytracer.materials.material import Material


class CsgOperation(IntEnum):
    """Boolean operation combining the two children of a CSG node."""

    UNION = 0
    INTERSECTION = 1
    DIFFERENCE = 2


def intersection_allowed(
    operation: CsgOperation,
    hit_is_left: bool,
    inside_left: bool,
    inside_right: bool,
) -> bool:
    """Decide whether a crossing lies on the boundary of the combined solid.

    Args:
        operation: The CSG operation.
        hit_is_left: True if the crossing is on the left child's surface.
        inside_left: Whether the ray is inside the left child just before
            this crossing.
        inside_right: Whether the ray is inside the right child just before
            this crossing.

    Returns:
        True if the intersection should be kept.
    """
    if operation is CsgOperation.UNION:
        return (hit_is_left and not inside_right) or (not hit_is_left and not inside_left)
    if operation is CsgOperation.INTERSECTION:
        return (hit_is_left and inside_right) or (not hit_is_left and inside_left)
    if operation is CsgOperation.DIFFERENCE:
        return (hit_is_left and not inside_right) or (not hit_is_left and inside_left)
    raise ValueError(f"Unknown CSG operation: {operation!r}")


class CSG(Shape):
    """Boolean combination of two shapes.

    Attributes:
        operation: The boolean operation.
        left: The left operand (the minuend for DIFFERENCE).
        right: The right operand.
    """

    def __init__(
        self,
        operation: CsgOperation,
        left: Shape,
        right: Shape,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        """Create a CSG node, taking ownership of both children.

        Raises:
            ValueError: If either child already has a parent, or both
                operands are the same shape.
        """
        if left is right:
            raise ValueError("CSG operands must be distinct shapes")
        for child in (left, right):
            if child.parent is not None:
                raise ValueError(f"{child!r} already has a parent ({child.parent!r})")
        super().__init__(transform, material)
        self.operation = CsgOperation(operation)
        self.left = left
        self.right = right
        left.parent = self
        right.parent = self

    def contains(self, shape_id: uuid.UUID) -> bool:
        return any(
            child.id == shape_id or child.contains(shape_id) for child in (self.left, self.right)
        )

    def _is_left_hit(self, intersection: Intersection) -> bool:
        shape_id = intersection.shape.id
        return self.left.id == shape_id or self.left.contains(shape_id)

    def filter_intersections(self, xs: Iterable[Intersection]) -> list[Intersection]:
        """Keep only the crossings that bound the combined solid.

        Args:
            xs: Intersections from both children, sorted ascending by t.

        Returns:
            A new list holding the kept intersections, in the same order.
        """
        inside_left = False
        inside_right = False
        result: list[Intersection] = []

        for i in xs:
            hit_is_left = self._is_left_hit(i)
            if intersection_allowed(self.operation, hit_is_left, inside_left, inside_right):
                result.append(i)

            if hit_is_left:
                inside_left = not inside_left
            else:
                inside_right = not inside_right

        return result

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        # No early return when one side misses: the other side's crossings
        # still have to be filtered
        xs = sort_intersections([*self.left.intersect(ray), *self.right.intersect(ray)])
        return self.filter_intersections(xs)

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        raise RuntimeError("CSG nodes have no surface; normals come from their leaf shapes")
