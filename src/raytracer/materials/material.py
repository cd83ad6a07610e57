"""Phong material and local illumination.

The Phong reflection model adds three contributions per light:

    ambient:  constant background light, independent of geometry
    diffuse:  light scattered by a matte surface, proportional to the cosine
              between the light direction and the surface normal
    specular: a highlight from reflecting the light itself, proportional to
              cos(reflection, eye)^shininess

Points in shadow receive only the ambient term.

Example:
    >>> from raytracer.core import Color, Point, Vector
    >>> from raytracer.materials.material import Material, lighting
    >>> from raytracer.scene.light import PointLight
    >>> m = Material()
    >>> light = PointLight(Point(0, 0, -10), Color(1, 1, 1))
    >>> lighting(m, None, light, Point(0, 0, 0), Vector(0, 0, -1), Vector(0, 0, -1))
    Color(red=1.9, green=1.9, blue=1.9)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raytracer.core.color import BLACK, WHITE, Color
from raytracer.core.tuples import Point, Vector

if TYPE_CHECKING:
    from raytracer.geometry.shape import Shape
    from raytracer.materials.patterns import Pattern
    from raytracer.scene.light import PointLight


@dataclass
class Material:
    """Surface properties for the Phong model plus reflection/refraction.

    Attributes:
        color: Base surface color (overridden by pattern when set).
        ambient: Ambient coefficient, typically in [0, 1].
        diffuse: Diffuse coefficient, typically in [0, 1].
        specular: Specular coefficient, typically in [0, 1].
        shininess: Specular exponent; larger values give tighter highlights.
        reflective: Fraction of reflected light (0 = matte, 1 = mirror).
        transparency: Fraction of transmitted light (0 = opaque).
        refractive_index: Index of refraction. Common values:
            - Vacuum/Air: 1.0
            - Water: 1.333
            - Glass: 1.5
            - Diamond: 2.417
        pattern: Optional procedural pattern replacing color.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess", "reflective", "transparency"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {value}")
        if self.refractive_index < 1.0:
            raise ValueError(f"Refractive index must be >= 1.0, got {self.refractive_index}")


def lighting(
    material: Material,
    shape: Shape | None,
    light: PointLight,
    point: Point,
    eyev: Vector,
    normalv: Vector,
    in_shadow: bool = False,
) -> Color:
    """Shade a point with the Phong reflection model for a single light.

    Args:
        material: The surface material.
        shape: The shape being shaded; needed only to evaluate a pattern
            in object space.
        light: The light source.
        point: The point being shaded, in world space.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.
        in_shadow: If True, only the ambient term is returned.

    Returns:
        The combined ambient + diffuse + specular color.
    """
    if material.pattern is not None:
        color = material.pattern.pattern_at_shape(shape, point)
    else:
        color = material.color

    # Combine the surface color with the light's color/intensity
    effective_color = color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()

    # Cosine of the angle between light and normal; negative means the light
    # is on the other side of the surface
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    # Cosine of the angle between reflection and eye; negative means the
    # light reflects away from the eye
    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
