"""Scene module: lights, the world, and shading.

Components:
    light: PointLight
    computations: Per-hit shading state and the Schlick approximation
    world: World container with the recursive shade/reflect/refract loop

Example:
    >>> from raytracer.core import Point, Ray, Vector
    >>> from raytracer.scene import default_world
    >>> default_world().color_at(Ray(Point(0, 0, -5), Vector(0, 1, 0)))
    Color(red=0.0, green=0.0, blue=0.0)
"""

from .computations import Computations, prepare_computations, schlick
from .light import PointLight
from .world import MAX_RECURSION_DEPTH, World, default_world

__all__ = [
    "PointLight",
    "Computations",
    "prepare_computations",
    "schlick",
    "World",
    "default_world",
    "MAX_RECURSION_DEPTH",
]
