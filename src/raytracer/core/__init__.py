"""Core geometry module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Point and Vector types with their arithmetic closure rules
    color: Unclamped RGB color
    matrix: 4x4 matrix with cofactor-based determinant and inverse
    transform: Translation, scaling, rotation, shearing and view transforms
    ray: Ray data structure with position and transform
    intersection: Intersection records and hit selection
    errors: SingularMatrix and DegenerateGeometry exceptions

Everything in the core is a pure value type; nothing here holds scene state.
"""

from .color import BLACK, WHITE, Color
from .errors import DegenerateGeometry, RaytracerError, SingularMatrix
from .intersection import Intersection, hit, intersections, sort_intersections
from .matrix import DETERMINANT_EPSILON, IDENTITY, Matrix
from .ray import Ray
from .transform import (
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import EPSILON, ORIGIN, Point, Vector, float_eq

__all__ = [
    # Tuples and color
    "Point",
    "Vector",
    "ORIGIN",
    "EPSILON",
    "float_eq",
    "Color",
    "BLACK",
    "WHITE",
    # Matrices and transforms
    "Matrix",
    "IDENTITY",
    "DETERMINANT_EPSILON",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "chain",
    "view_transform",
    # Rays and intersections
    "Ray",
    "Intersection",
    "intersections",
    "sort_intersections",
    "hit",
    # Errors
    "RaytracerError",
    "SingularMatrix",
    "DegenerateGeometry",
]
