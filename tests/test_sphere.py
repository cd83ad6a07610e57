"""Unit tests for sphere intersection and normals.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere
- Ray starting inside sphere
- Ray tangent to sphere
- Sphere behind the ray
- Transformed spheres
- Robust quadratic solver edge cases
"""

import math

import pytest


class TestQuadraticSolver:
    """Tests for solve_quadratic."""

    def test_two_roots_sorted(self):
        """Test that roots come back in ascending order."""
        from raytracer.geometry import solve_quadratic

        # t^2 - 10t + 24 = 0 -> t = 4, 6
        assert solve_quadratic(1.0, -5.0, 24.0) == pytest.approx((4.0, 6.0))

    def test_negative_discriminant(self):
        """Test that no real roots gives None."""
        from raytracer.geometry import solve_quadratic

        assert solve_quadratic(1.0, 0.0, 1.0) is None

    def test_double_root(self):
        """Test that a zero discriminant gives two equal roots."""
        from raytracer.geometry import solve_quadratic

        assert solve_quadratic(1.0, -5.0, 25.0) == pytest.approx((5.0, 5.0))

    def test_zero_h_and_c(self):
        """Test the fallback when h and the discriminant both vanish."""
        from raytracer.geometry import solve_quadratic

        assert solve_quadratic(1.0, 0.0, 0.0) == pytest.approx((0.0, 0.0))

    def test_cancellation_is_avoided(self):
        """Test precision of the small root when h is large."""
        from raytracer.geometry import solve_quadratic

        # t^2 - 2e8 t + 1 = 0 has a small root near 5e-9
        t0, t1 = solve_quadratic(1.0, -1e8, 1.0)
        assert t0 == pytest.approx(5e-9, rel=1e-6)
        assert t1 == pytest.approx(2e8, rel=1e-6)


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def _ts(self, sphere, origin, direction):
        from raytracer.core import Point, Ray, Vector

        return [i.t for i in sphere.intersect(Ray(Point(*origin), Vector(*direction)))]

    def test_two_points(self):
        """Test a ray through the center."""
        from raytracer.geometry import Sphere

        assert self._ts(Sphere(), (0, 0, -5), (0, 0, 1)) == pytest.approx([4.0, 6.0])

    def test_tangent(self):
        """Test that a tangent ray reports two equal intersections."""
        from raytracer.geometry import Sphere

        assert self._ts(Sphere(), (0, 1, -5), (0, 0, 1)) == pytest.approx([5.0, 5.0])

    def test_miss(self):
        """Test a ray passing above the sphere."""
        from raytracer.geometry import Sphere

        assert self._ts(Sphere(), (0, 2, -5), (0, 0, 1)) == []

    def test_origin_inside(self):
        """Test a ray starting at the center."""
        from raytracer.geometry import Sphere

        assert self._ts(Sphere(), (0, 0, 0), (0, 0, 1)) == pytest.approx([-1.0, 1.0])

    def test_sphere_behind_ray(self):
        """Test that a sphere behind the ray still reports both crossings."""
        from raytracer.geometry import Sphere

        assert self._ts(Sphere(), (0, 0, 5), (0, 0, 1)) == pytest.approx([-6.0, -4.0])

    def test_intersections_reference_sphere(self):
        """Test that each intersection points back at the sphere."""
        from raytracer.core import Point, Ray, Vector
        from raytracer.geometry import Sphere

        s = Sphere()
        xs = s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert all(i.shape is s for i in xs)

    def test_scaled_sphere(self):
        """Test a ray against a scaled sphere."""
        from raytracer.core import scaling
        from raytracer.geometry import Sphere

        s = Sphere(transform=scaling(2, 2, 2))
        assert self._ts(s, (0, 0, -5), (0, 0, 1)) == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        """Test a ray missing a translated sphere."""
        from raytracer.core import translation
        from raytracer.geometry import Sphere

        s = Sphere(transform=translation(5, 0, 0))
        assert self._ts(s, (0, 0, -5), (0, 0, 1)) == []


class TestSphereNormals:
    """Tests for sphere normals."""

    @pytest.mark.parametrize(
        "point,expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_axis_points(self, point, expected):
        """Test normals on the axes."""
        from raytracer.core import Point, Vector
        from raytracer.geometry import Sphere

        assert Sphere().normal_at(Point(*point)) == Vector(*expected)

    def test_nonaxial_point(self):
        """Test a normal off the axes, which is also normalized."""
        from raytracer.core import Point, Vector
        from raytracer.geometry import Sphere

        r = math.sqrt(3) / 3
        n = Sphere().normal_at(Point(r, r, r))
        assert n == Vector(r, r, r)
        assert n == n.normalize()

    def test_transformed_sphere(self):
        """Test the normal on a scaled and rotated sphere."""
        from raytracer.core import Point, Vector, chain, rotation_z, scaling
        from raytracer.geometry import Sphere

        s = Sphere(transform=chain(rotation_z(math.pi / 5), scaling(1, 0.5, 1)))
        h = math.sqrt(2) / 2
        assert s.normal_at(Point(0, h, -h)) == Vector(0, 0.97014, -0.24254)

    def test_sheared_and_scaled_sphere_uses_inverse_transpose(self):
        """Test a sheared, squashed sphere against the closed-form normal.

        With M = scaling(1, 0.5, 1) @ shearing(xy=1), the object point
        (h, h, 0) maps to (2h, h/2, 0) and (M^-1)^T (h, h, 0) = (h, 0, 0),
        so the world normal is +x. Transforming the normal by M instead
        would tilt it toward +y.
        """
        from raytracer.core import Point, Vector, chain, scaling, shearing
        from raytracer.geometry import Sphere

        m = chain(shearing(1, 0, 0, 0, 0, 0), scaling(1, 0.5, 1))
        s = Sphere(transform=m)
        h = math.sqrt(2) / 2
        n = s.normal_at(Point(2 * h, h / 2, 0))
        assert n == Vector(1, 0, 0)
        assert n != (m @ Vector(h, h, 0)).normalize()


class TestGlassSphere:
    """Tests for the glass_sphere helper."""

    def test_glass_material(self):
        """Test that glass spheres are transparent with index 1.5."""
        from raytracer.core import IDENTITY
        from raytracer.geometry import glass_sphere

        s = glass_sphere()
        assert s.transform == IDENTITY
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5

    def test_glass_spheres_do_not_share_materials(self):
        """Test that each call gets its own material."""
        from raytracer.geometry import glass_sphere

        a, b = glass_sphere(), glass_sphere()
        a.material.refractive_index = 2.0
        assert b.material.refractive_index == 1.5
