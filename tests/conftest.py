"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules:
- A fresh default world (two concentric spheres, one light) per test
- A shape that records the object-space ray it was intersected with
- A pattern that returns the pattern-space point as a color
"""

import pytest

from raytracer.core import BLACK, WHITE, Color, Vector
from raytracer.geometry import Shape
from raytracer.materials import Pattern


class RecordingShape(Shape):
    """Shape that stores the last object-space ray and returns no hits."""

    def __init__(self, transform=None, material=None):
        super().__init__(transform, material)
        self.saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, point, hit=None):
        return Vector(point.x, point.y, point.z)


class PointPattern(Pattern):
    """Pattern whose color is the pattern-space point itself."""

    def __init__(self, transform=None):
        super().__init__(WHITE, BLACK, transform)

    def pattern_at(self, point):
        return Color(point.x, point.y, point.z)


@pytest.fixture
def world():
    """Provide a new default world for each test.

    Tests mutate materials and lights freely, so the world is never shared.
    """
    from raytracer.scene import default_world

    return default_world()


@pytest.fixture
def recording_shape():
    """Provide a RecordingShape with the identity transform."""
    return RecordingShape()


@pytest.fixture
def point_pattern():
    """Provide a PointPattern with the identity transform."""
    return PointPattern()
