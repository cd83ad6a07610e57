"""Unit tests for transformation builders.

Tests cover:
- Translation, scaling, rotation and shearing of points and vectors
- Composition order of chain()
- view_transform
"""

import math

import pytest

HALF_SQRT2 = math.sqrt(2) / 2


class TestTranslationAndScaling:
    """Tests for translation and scaling."""

    def test_translate_point(self):
        """Test translating a point and inverting the translation."""
        from raytracer.core import Point, translation

        t = translation(5, -3, 2)
        assert t @ Point(-3, 4, 5) == Point(2, 1, 7)
        assert t.inverse() @ Point(-3, 4, 5) == Point(-8, 7, 3)

    def test_translation_ignores_vectors(self):
        """Test that translation does not move vectors."""
        from raytracer.core import Vector, translation

        assert translation(5, -3, 2) @ Vector(-3, 4, 5) == Vector(-3, 4, 5)

    def test_scale_point_and_vector(self):
        """Test scaling points and vectors."""
        from raytracer.core import Point, Vector, scaling

        s = scaling(2, 3, 4)
        assert s @ Point(-4, 6, 8) == Point(-8, 18, 32)
        assert s @ Vector(-4, 6, 8) == Vector(-8, 18, 32)
        assert s.inverse() @ Vector(-4, 6, 8) == Vector(-2, 2, 2)

    def test_reflection_is_negative_scaling(self):
        """Test reflecting a point across the x axis."""
        from raytracer.core import Point, scaling

        assert scaling(-1, 1, 1) @ Point(2, 3, 4) == Point(-2, 3, 4)


class TestRotationAndShearing:
    """Tests for rotations about each axis and shearing."""

    def test_rotation_x(self):
        """Test rotating a point around the x axis."""
        from raytracer.core import Point, rotation_x

        p = Point(0, 1, 0)
        assert rotation_x(math.pi / 4) @ p == Point(0, HALF_SQRT2, HALF_SQRT2)
        assert rotation_x(math.pi / 2) @ p == Point(0, 0, 1)
        assert rotation_x(math.pi / 4).inverse() @ p == Point(0, HALF_SQRT2, -HALF_SQRT2)

    def test_rotation_y(self):
        """Test rotating a point around the y axis."""
        from raytracer.core import Point, rotation_y

        p = Point(0, 0, 1)
        assert rotation_y(math.pi / 4) @ p == Point(HALF_SQRT2, 0, HALF_SQRT2)
        assert rotation_y(math.pi / 2) @ p == Point(1, 0, 0)

    def test_rotation_z(self):
        """Test rotating a point around the z axis."""
        from raytracer.core import Point, rotation_z

        p = Point(0, 1, 0)
        assert rotation_z(math.pi / 4) @ p == Point(-HALF_SQRT2, HALF_SQRT2, 0)
        assert rotation_z(math.pi / 2) @ p == Point(-1, 0, 0)

    @pytest.mark.parametrize(
        "params,expected",
        [
            ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
        ],
    )
    def test_shearing(self, params, expected):
        """Test each shearing component in isolation."""
        from raytracer.core import Point, shearing

        assert shearing(*params) @ Point(2, 3, 4) == Point(*expected)


class TestChain:
    """Tests for composing transforms."""

    def test_individual_transforms_in_sequence(self):
        """Test applying rotation, scaling and translation one at a time."""
        from raytracer.core import Point, rotation_x, scaling, translation

        p = Point(1, 0, 1)
        p2 = rotation_x(math.pi / 2) @ p
        assert p2 == Point(1, -1, 0)
        p3 = scaling(5, 5, 5) @ p2
        assert p3 == Point(5, -5, 0)
        assert translation(10, 5, 7) @ p3 == Point(15, 0, 7)

    def test_chain_applies_first_argument_first(self):
        """Test that chain(A, B, C) equals C @ B @ A."""
        from raytracer.core import Point, chain, rotation_x, scaling, translation

        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        assert chain(a, b, c) == c @ b @ a
        assert chain(a, b, c) @ Point(1, 0, 1) == Point(15, 0, 7)

    def test_empty_chain_is_identity(self):
        """Test that chaining nothing gives the identity."""
        from raytracer.core import IDENTITY, chain

        assert chain() == IDENTITY


class TestViewTransform:
    """Tests for view_transform."""

    def test_default_orientation(self):
        """Test that looking down -z from the origin is the identity."""
        from raytracer.core import IDENTITY, Point, Vector, view_transform

        assert view_transform(Point(0, 0, 0), Point(0, 0, -1), Vector(0, 1, 0)) == IDENTITY

    def test_looking_in_positive_z(self):
        """Test that looking down +z mirrors x and z."""
        from raytracer.core import Point, Vector, scaling, view_transform

        t = view_transform(Point(0, 0, 0), Point(0, 0, 1), Vector(0, 1, 0))
        assert t == scaling(-1, 1, -1)

    def test_moves_the_world(self):
        """Test that the view transform moves the world, not the eye."""
        from raytracer.core import Point, Vector, translation, view_transform

        t = view_transform(Point(0, 0, 8), Point(0, 0, 0), Vector(0, 1, 0))
        assert t == translation(0, 0, -8)

    def test_arbitrary_view(self):
        """Test an arbitrary eye position and up vector."""
        from raytracer.core import Matrix, Point, Vector, view_transform

        t = view_transform(Point(1, 3, 2), Point(4, -2, 8), Vector(1, 1, 0))
        assert t == Matrix(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
