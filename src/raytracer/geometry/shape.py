"""Abstract shape with the shared world/object space machinery.

Every primitive is modelled in its own object space: centered at the origin,
unit sized and axis aligned. A Shape carries the world transform that places
it in the scene and caches that transform's inverse and inverse-transpose,
which are recomputed whenever the transform is assigned.

The two public queries follow the same pattern for every variant:

    intersect(ray):
        ray is mapped into object space with the cached inverse, then handed
        to the variant's local_intersect. Because the direction is scaled
        together with the object, the t values need no correction.

    normal_at(point):
        point is mapped into object space (through every parent), the
        variant's local_normal_at runs, and the result is mapped back with the
        inverse-transpose (not the transform itself, which would skew normals
        under non-uniform scaling) and re-normalized.

Children of groups and CSG nodes keep a weak reference to their parent. It is
used only for composing transforms and never keeps the parent alive.

Example:
    >>> from raytracer.geometry import Sphere
    >>> from raytracer.core import Point, Ray, Vector, scaling
    >>> s = Sphere(transform=scaling(2, 2, 2))
    >>> [i.t for i in s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))]
    [3.0, 7.0]
"""

from __future__ import annotations

import uuid
import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from raytracer.core.matrix import IDENTITY, Matrix
from raytracer.materials.material import Material

if TYPE_CHECKING:
    from raytracer.core.intersection import Intersection
    from raytracer.core.ray import Ray
    from raytracer.core.tuples import Point, Vector


class Shape(ABC):
    """Base class for all shapes.

    Attributes:
        id: Identity key used for equality and containment checks.
        material: Surface material used when shading hits on this shape.
    """

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        """Initialize a shape.

        Args:
            transform: Object-to-world transform. Defaults to the identity.
            material: Surface material. Defaults to Material().

        Raises:
            SingularMatrix: If the transform cannot be inverted.
        """
        self.id: uuid.UUID = uuid.uuid4()
        self.material = material if material is not None else Material()
        self._parent: weakref.ReferenceType[Shape] | None = None
        self.transform = transform if transform is not None else IDENTITY

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={str(self.id)[:8]})"

    # =========================================================================
    # Transform and parent bookkeeping
    # =========================================================================

    @property
    def transform(self) -> Matrix:
        """The object-to-world transform."""
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        """Cached inverse of the transform (world-to-object)."""
        return self._inverse

    @property
    def parent(self) -> Shape | None:
        """The group or CSG node that owns this shape, if any."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, value: Shape | None) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    def contains(self, shape_id: uuid.UUID) -> bool:
        """Return True if a shape with shape_id is reachable below this node.

        Leaf shapes contain nothing; groups and CSG nodes override this.
        """
        return False

    # =========================================================================
    # Space conversion
    # =========================================================================

    def world_to_object(self, point: Point) -> Point:
        """Map a world-space point into this shape's object space."""
        parent = self.parent
        if parent is not None:
            point = parent.world_to_object(point)
        return self._inverse @ point

    def normal_to_world(self, normal: Vector) -> Vector:
        """Map an object-space normal into world space, normalized."""
        normal = (self._inverse_transpose @ normal).normalize()
        parent = self.parent
        if parent is not None:
            normal = parent.normal_to_world(normal)
        return normal

    # =========================================================================
    # Public queries
    # =========================================================================

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray (in the parent's space) with this shape.

        Args:
            ray: The ray, expressed in the coordinate space this shape's
                transform maps into (world space for top-level shapes).

        Returns:
            A new, unsorted list of intersections; empty on a miss.
        """
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        """Compute the world-space surface normal at a world-space point.

        Args:
            point: A point on the surface, in world space.
            hit: The intersection that produced the point. Only smooth
                triangles need it, to interpolate vertex normals.

        Returns:
            The unit normal in world space.
        """
        local_point = self.world_to_object(point)
        local_normal = self.local_normal_at(local_point, hit)
        return self.normal_to_world(local_normal)

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray already mapped into object space."""

    @abstractmethod
    def local_normal_at(self, point: Point, hit: Intersection | None = None) -> Vector:
        """Compute the (unnormalized) object-space normal at an object-space point."""
