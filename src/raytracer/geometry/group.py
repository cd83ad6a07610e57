"""Group of shapes sharing a common transform."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from raytracer.core.intersection import Intersection
from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import Point, Vector
from raytracer.geometry.shape import Shape
from raytracer.materials.material import Material


class Group(Shape):
    """A container whose transform applies to every child.

    The group owns its children; each child keeps a weak back-reference to
    the group so normals and patterns can compose the full transform chain.
    """

    def __init__(
        self,
        children: Iterable[Shape] = (),
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        super().__init__(transform, material)
        self._children: list[Shape] = []
        for child in children:
            self.add_child(child)

    @property
    def children(self) -> tuple[Shape, ...]:
        """The group's children, in insertion order."""
        return tuple(self._children)

    def add_child(self, shape: Shape) -> None:
        """Add a shape to the group and make the group its parent.

        Raises:
            ValueError: If the shape already belongs to another group or CSG node.
        """
        if shape.parent is not None:
            raise ValueError(f"{shape!r} already has a parent ({shape.parent!r})")
        shape.parent = self
        self._children.append(shape)

    def contains(self, shape_id: uuid.UUID) -> bool:
        return any(child.id == shape_id or child.contains(shape_id) for child in self._children)

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Concatenate every child's intersections.

        Children apply their own transforms relative to the group, so the
        results are already correct; they are returned unsorted.
        """
        xs: list[Intersection] = []
        for child in self._children:
            xs.extend(child.intersect(ray))
        return xs

    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        raise RuntimeError("Groups have no surface; normals come from their leaf shapes")
