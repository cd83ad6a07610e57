"""Materials module for surface appearance.

Components:
    material: Phong material parameters and the lighting() function
    patterns: Procedural patterns (stripe, gradient, ring, checkers)

A Material describes how a surface responds to light:
    - ambient/diffuse/specular/shininess for local (Phong) illumination
    - reflective for mirror-like recursion
    - transparency/refractive_index for refraction (Snell's law)
"""

from .material import Material, lighting
from .patterns import (
    CheckersPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "lighting",
    # Patterns
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckersPattern",
]
