"""Builders for the standard 4x4 affine transforms.

Each builder returns a fresh Matrix. Transforms compose right-to-left under
``@``; ``chain`` lets callers list them in the order they are applied instead:

    >>> from math import pi
    >>> from raytracer.core.transform import chain, rotation_x, scaling, translation
    >>> from raytracer.core.tuples import Point
    >>> m = chain(rotation_x(pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
    >>> m @ Point(1, 0, 1)
    Point(x=15.0, y=0.0, z=7.0)
"""

from __future__ import annotations

import math

from raytracer.core.matrix import IDENTITY, Matrix
from raytracer.core.tuples import Point, Vector


def translation(x: float, y: float, z: float) -> Matrix:
    """Translation by (x, y, z). Has no effect on vectors."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scaling by (x, y, z). Negative factors reflect across an axis."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotation around the x axis (left-handed)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Rotation around the y axis (left-handed)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Rotation around the z axis (left-handed)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear transform; ``xy`` moves x in proportion to y, and so on."""
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def chain(*transforms: Matrix) -> Matrix:
    """Compose transforms in application order.

    ``chain(a, b, c)`` equals ``c @ b @ a``: a is applied first.
    With no arguments the identity is returned.
    """
    result = IDENTITY
    for m in transforms:
        result = m @ result
    return result


def view_transform(from_point: Point, to: Point, up: Vector) -> Matrix:
    """Orient the world relative to an eye position.

    Args:
        from_point: Position of the eye.
        to: Point the eye looks at.
        up: Approximate up direction; need not be exactly perpendicular.

    Returns:
        A matrix that moves the world so the eye sits at the origin looking
        down -z.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
