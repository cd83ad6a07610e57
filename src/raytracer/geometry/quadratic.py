"""Numerically robust quadratic solver shared by the curved primitives.

Spheres, cylinders and cones all reduce to solving

    a*t^2 + 2*h*t + c = 0

for the ray parameter t. The textbook formula loses precision when h^2 is
close to a*c (catastrophic cancellation), so this uses the reformulation from
Ray Tracing Gems (Chapter 7):

    q  = -(h + sign(h) * sqrt(h^2 - a*c))
    t0 = q / a
    t1 = c / q
"""

from __future__ import annotations

import math


def solve_quadratic(a: float, h: float, c: float) -> tuple[float, float] | None:
    """Solve a*t^2 + 2*h*t + c = 0 using a numerically stable method.

    Args:
        a: Quadratic coefficient. Must be non-zero; callers handle the
            degenerate linear case themselves.
        h: Half of the linear coefficient.
        c: Constant term.

    Returns:
        Tuple of (t0, t1) with t0 <= t1, or None if the discriminant is
        negative. A tangent ray yields two equal roots.
    """
    discriminant = h * h - a * c
    if discriminant < 0.0:
        return None

    sqrt_d = math.sqrt(discriminant)
    # Robust quadratic formula: use sign of h to avoid catastrophic cancellation
    q = -(h + math.copysign(sqrt_d, h))

    if abs(q) < 1e-12:
        # Both h and the discriminant vanish; fall back to the standard formula
        t0 = (-h - sqrt_d) / a
        t1 = (-h + sqrt_d) / a
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        t0, t1 = t1, t0
    return t0, t1
