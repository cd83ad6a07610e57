"""Unit tests for the axis-aligned cube (slab method)."""

import pytest


class TestCubeIntersection:
    """Tests for ray-cube intersection."""

    @pytest.mark.parametrize(
        "origin,direction,t1,t2",
        [
            ((5, 0.5, 0), (-1, 0, 0), 4, 6),
            ((-5, 0.5, 0), (1, 0, 0), 4, 6),
            ((0.5, 5, 0), (0, -1, 0), 4, 6),
            ((0.5, -5, 0), (0, 1, 0), 4, 6),
            ((0.5, 0, 5), (0, 0, -1), 4, 6),
            ((0.5, 0, -5), (0, 0, 1), 4, 6),
            ((0, 0.5, 0), (0, 0, 1), -1, 1),
        ],
    )
    def test_ray_hits_each_face(self, origin, direction, t1, t2):
        """Test hitting each face, and starting inside."""
        from raytracer.core import Point, Ray, Vector
        from raytracer.geometry import Cube

        xs = Cube().local_intersect(Ray(Point(*origin), Vector(*direction)))
        assert [i.t for i in xs] == pytest.approx([t1, t2])

    @pytest.mark.parametrize(
        "origin,direction",
        [
            ((-2, 0, 0), (0.2673, 0.5345, 0.8018)),
            ((0, -2, 0), (0.8018, 0.2673, 0.5345)),
            ((0, 0, -2), (0.5345, 0.8018, 0.2673)),
            ((2, 0, 2), (0, 0, -1)),
            ((0, 2, 2), (0, -1, 0)),
            ((2, 2, 0), (-1, 0, 0)),
        ],
    )
    def test_ray_misses(self, origin, direction):
        """Test rays passing the cube, including axis-parallel ones."""
        from raytracer.core import Point, Ray, Vector
        from raytracer.geometry import Cube

        assert Cube().local_intersect(Ray(Point(*origin), Vector(*direction))) == []


class TestCubeNormals:
    """Tests for cube normals."""

    @pytest.mark.parametrize(
        "point,normal",
        [
            ((1, 0.5, -0.8), (1, 0, 0)),
            ((-1, -0.2, 0.9), (-1, 0, 0)),
            ((-0.4, 1, -0.1), (0, 1, 0)),
            ((0.3, -1, -0.7), (0, -1, 0)),
            ((-0.6, 0.3, 1), (0, 0, 1)),
            ((0.4, 0.4, -1), (0, 0, -1)),
            ((1, 1, 1), (1, 0, 0)),
            ((-1, -1, -1), (-1, 0, 0)),
        ],
    )
    def test_normal_on_surface(self, point, normal):
        """Test the face normal, with corners resolved toward x."""
        from raytracer.core import Point, Vector
        from raytracer.geometry import Cube

        assert Cube().local_normal_at(Point(*point)) == Vector(*normal)


class TestLargeCube:
    """Tests for cubes scaled far beyond unit size."""

    def test_ray_parallel_to_faces_of_large_cube_misses(self):
        """Test a ray above a wide, flat cube whose object-space direction is tiny."""
        from raytracer.core import Point, Ray, Vector, scaling
        from raytracer.geometry import Cube

        floor = Cube(transform=scaling(20000, 1, 20000))
        assert floor.intersect(Ray(Point(0, 5, 0), Vector(1, 0, 0))) == []

    def test_ray_through_large_cube_hits(self):
        """Test a horizontal ray crossing a wide cube."""
        from raytracer.core import Point, Ray, Vector, scaling
        from raytracer.geometry import Cube

        floor = Cube(transform=scaling(20000, 1, 20000))
        xs = floor.intersect(Ray(Point(-30000, 0.5, 0), Vector(1, 0, 0)))
        assert [i.t for i in xs] == pytest.approx([10000, 50000])

    def test_world_color_for_missed_large_cube_is_black(self):
        """Test that shading a ray which passes a large cube yields black."""
        from raytracer.core import BLACK, Color, Point, Ray, Vector, scaling
        from raytracer.geometry import Cube
        from raytracer.scene import PointLight, World

        light = PointLight(Point(-10, 10, -10), Color(1, 1, 1))
        world = World([Cube(transform=scaling(20000, 1, 20000))], [light])
        assert world.color_at(Ray(Point(0, 5, 0), Vector(1, 0, 0))) == BLACK

    def test_zero_direction_misses(self):
        """Test that a ray with no direction produces no intersections."""
        from raytracer.core import Point, Ray, Vector
        from raytracer.geometry import Cube

        assert Cube().local_intersect(Ray(Point(0, 0, 0), Vector(0, 0, 0))) == []
