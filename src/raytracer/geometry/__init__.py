"""Geometry module for shape primitives and boolean combinations.

This module provides the shape abstraction and its intersection algorithms:

Components:
    shape: Abstract Shape with transform caching and world/object conversion
    sphere: Unit sphere
    plane: Infinite xz plane
    cube: Axis-aligned cube (slab method)
    cylinder: Truncatable, cappable cylinder
    cone: Truncatable, cappable double cone
    triangle: Flat and smooth triangles (Moller-Trumbore)
    group: Container applying a shared transform to its children
    csg: Constructive solid geometry (union, intersection, difference)
    quadratic: Robust quadratic solver shared by the curved primitives

Every shape follows the same pattern:
    xs = shape.intersect(ray)          # list[Intersection], unsorted
    n = shape.normal_at(point, hit)    # unit world-space normal
"""

from .cone import Cone
from .csg import CSG, CsgOperation, intersection_allowed
from .cube import Cube
from .cylinder import Cylinder
from .group import Group
from .plane import Plane
from .quadratic import solve_quadratic
from .shape import Shape
from .sphere import Sphere, glass_sphere
from .triangle import SmoothTriangle, Triangle

__all__ = [
    "Shape",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Cone",
    "Triangle",
    "SmoothTriangle",
    "Group",
    "CSG",
    "CsgOperation",
    "intersection_allowed",
    "solve_quadratic",
]
