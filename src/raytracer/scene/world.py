"""The world: a collection of shapes and lights, and the recursive shader.

Shading a pixel follows the same path for every ray:

    color_at(ray)
        -> intersect the world, pick the hit
        -> prepare_computations(hit, ray, xs)
        -> shade_hit(comps)
            = sum of lighting() over all lights (shadow-tested)
            + reflected_color(comps)   (recursive, along reflectv)
            + refracted_color(comps)   (recursive, Snell's law)

Recursion is bounded by ``remaining``; once it reaches zero, reflection and
refraction contribute black. Total internal reflection also contributes
black from the refraction term.

Example:
    >>> from raytracer.core import Point, Ray, Vector
    >>> from raytracer.scene import default_world
    >>> w = default_world()
    >>> w.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    Color(red=0.38066..., green=0.47583..., blue=0.2855...)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from raytracer.core.color import BLACK, Color
from raytracer.core.intersection import Intersection, hit, sort_intersections
from raytracer.core.ray import Ray
from raytracer.core.transform import scaling
from raytracer.core.tuples import Point
from raytracer.geometry.shape import Shape
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import Material, lighting
from raytracer.scene.computations import Computations, prepare_computations, schlick
from raytracer.scene.light import PointLight

logger = logging.getLogger(__name__)

# Maximum number of reflection/refraction bounces per primary ray
MAX_RECURSION_DEPTH = 5


class World:
    """Shapes and lights making up a scene.

    Attributes:
        objects: Top-level shapes. Children of groups and CSG nodes are
            reached through their parents and are not listed here.
        lights: Light sources; shading sums the contribution of each.
    """

    def __init__(
        self,
        objects: Iterable[Shape] | None = None,
        lights: Iterable[PointLight] | None = None,
    ) -> None:
        self.objects: list[Shape] = list(objects) if objects is not None else []
        self.lights: list[PointLight] = list(lights) if lights is not None else []
        logger.debug("World created with %d objects and %d lights", len(self.objects), len(self.lights))

    def __contains__(self, shape: Shape) -> bool:
        return shape in self.objects

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with every object.

        Returns:
            All intersections, sorted ascending by t.
        """
        return sort_intersections(i for shape in self.objects for i in shape.intersect(ray))

    def is_shadowed(self, point: Point, light: PointLight) -> bool:
        """Return True if something lies between point and the light."""
        v = light.position - point
        distance = v.magnitude()
        h = hit(self.intersect(Ray(point, v.normalize())))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Compute the color at a prepared hit.

        Args:
            comps: Precomputed hit state.
            remaining: Recursion budget for reflection and refraction.

        Returns:
            Surface color plus reflected and refracted contributions. For
            materials that are both reflective and transparent, the two are
            weighted by the Schlick reflectance.
        """
        material = comps.shape.material
        surface = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            surface = surface + lighting(
                material,
                comps.shape,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                shadowed,
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)

        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Return the color seen along a ray; black on a miss."""
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(h, ray, xs), remaining)

    def reflected_color(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Color arriving along the reflection ray, scaled by reflectivity."""
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Color arriving along the refraction ray, scaled by transparency.

        Returns black for opaque materials, when the recursion budget is
        spent, or under total internal reflection.
        """
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        # Snell's law: n1 sin(theta_i) = n2 sin(theta_t)
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency


def default_world() -> World:
    """Build the reference scene: two concentric spheres and one white light.

    The outer sphere is a unit sphere with color (0.8, 1.0, 0.6), diffuse
    0.7 and specular 0.2; the inner sphere is scaled by 0.5 with the default
    material. The light sits at (-10, 10, -10).
    """
    light = PointLight(Point(-10, 10, -10), Color(1, 1, 1))
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    return World([outer, inner], [light])
