"""Precomputed shading state for a single hit.

prepare_computations gathers everything shading needs from an intersection:
the world-space point and normal, the eye vector, whether the ray started
inside the shape, nudged points for shadow and refraction rays, and the
refractive indices on either side of the surface.

The refractive indices come from walking the full (sorted) intersection list
while keeping a list of the shapes the ray is currently inside. At the hit,
n1 belongs to the innermost shape before the crossing and n2 to the innermost
shape after it; outside every shape the index is 1.0.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytracer.core.intersection import Intersection
from raytracer.core.ray import Ray
from raytracer.core.tuples import EPSILON, Point, Vector

if TYPE_CHECKING:
    from raytracer.geometry.shape import Shape

VACUUM_INDEX = 1.0


@dataclass(frozen=True)
class Computations:
    """Shading state derived from a hit.

    Attributes:
        t: Ray parameter of the hit.
        shape: The shape that was hit.
        point: Hit point in world space.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal, flipped to face the eye.
        inside: True if the ray origin was inside the shape.
        over_point: point nudged along the normal, origin for shadow and
            reflection rays.
        under_point: point nudged against the normal, origin for refraction
            rays.
        reflectv: The incoming ray direction reflected about the normal.
        n1: Refractive index on the incoming side.
        n2: Refractive index on the outgoing side.
    """

    t: float
    shape: Shape
    point: Point
    eyev: Vector
    normalv: Vector
    inside: bool
    over_point: Point
    under_point: Point
    reflectv: Vector
    n1: float
    n2: float


def _refractive_indices(hit: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    containers: list[Shape] = []
    n1 = n2 = VACUUM_INDEX

    for i in xs:
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        if i.shape in containers:
            containers.remove(i.shape)
        else:
            containers.append(i.shape)

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break

    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    xs: Sequence[Intersection] | None = None,
) -> Computations:
    """Precompute the shading state for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        xs: All intersections along the ray, sorted by t. Needed to find the
            refractive indices; defaults to just the hit.

    Returns:
        The populated Computations.
    """
    if xs is None:
        xs = [hit]

    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = hit.shape.normal_at(point, hit)

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = _refractive_indices(hit, xs)

    return Computations(
        t=hit.t,
        shape=hit.shape,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Approximate the Fresnel reflectance at a hit.

    Returns:
        The fraction of light reflected, in [0, 1]. Total internal reflection
        gives 1.0.
    """
    cos = comps.eyev.dot(comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
