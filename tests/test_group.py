"""Unit tests for groups.

Tests cover:
- Adding children and parent links
- Intersections forwarded to children, unsorted
- Group transforms applied to children
- Containment queries
"""

import pytest


class TestGroupMembership:
    """Tests for building groups."""

    def test_empty_group(self):
        """Test that a new group has no children and the identity transform."""
        from raytracer.core import IDENTITY
        from raytracer.geometry import Group

        g = Group()
        assert g.children == ()
        assert g.transform == IDENTITY

    def test_add_child(self):
        """Test that adding a child sets its parent."""
        from raytracer.geometry import Group, Sphere

        g, s = Group(), Sphere()
        g.add_child(s)
        assert g.children == (s,)
        assert s.parent is g

    def test_child_cannot_have_two_parents(self):
        """Test that re-parenting a shape raises ValueError."""
        from raytracer.geometry import Group, Sphere

        s = Sphere()
        first = Group([s])
        with pytest.raises(ValueError):
            Group([s])
        assert s.parent is first

    def test_contains(self):
        """Test containment through nested groups."""
        from raytracer.geometry import Group, Sphere

        inner_child = Sphere()
        inner = Group([inner_child])
        outer = Group([inner])
        assert outer.contains(inner.id)
        assert outer.contains(inner_child.id)
        assert not outer.contains(Sphere().id)
        assert not inner_child.contains(inner_child.id)

    def test_group_has_no_normal(self):
        """Test that asking a group for a normal raises RuntimeError."""
        from raytracer.core import Point
        from raytracer.geometry import Group

        with pytest.raises(RuntimeError):
            Group().local_normal_at(Point(0, 0, 0))


class TestGroupIntersection:
    """Tests for group intersection."""

    def test_empty_group_misses(self):
        """Test that an empty group has no intersections."""
        from raytracer.core import Point, Ray, Vector
        from raytracer.geometry import Group

        assert Group().local_intersect(Ray(Point(0, 0, 0), Vector(0, 0, 1))) == []

    def test_forwards_to_children(self):
        """Test that children's intersections are returned, unsorted."""
        from raytracer.core import Point, Ray, Vector, sort_intersections, translation
        from raytracer.geometry import Group, Sphere

        s1 = Sphere()
        s2 = Sphere(transform=translation(0, 0, -3))
        s3 = Sphere(transform=translation(5, 0, 0))
        g = Group([s1, s2, s3])

        xs = g.local_intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert len(xs) == 4
        # Concatenated in child order
        assert [i.shape for i in xs] == [s1, s1, s2, s2]

        ordered = sort_intersections(xs)
        assert [i.shape for i in ordered] == [s2, s2, s1, s1]

    def test_group_transform_applies_to_children(self):
        """Test that a scaled group scales its children."""
        from raytracer.core import Point, Ray, Vector, scaling, translation
        from raytracer.geometry import Group, Sphere

        s = Sphere(transform=translation(5, 0, 0))
        g = Group([s], transform=scaling(2, 2, 2))
        xs = g.intersect(Ray(Point(10, 0, -10), Vector(0, 0, 1)))
        assert len(xs) == 2
        assert all(i.shape is s for i in xs)
