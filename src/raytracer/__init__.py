"""Whitted-style ray tracer with constructive solid geometry.

This package casts rays from a virtual camera into a world of shapes and
resolves per-pixel color through ray-surface intersection, Phong shading,
and recursive reflection/refraction.

Subpackages:
    core: Points, vectors, colors, 4x4 matrices, rays and intersections
    geometry: Shape primitives, groups and CSG with their intersection rules
    materials: Phong materials and procedural patterns
    scene: Lights, precomputed hit state and the world shading routines
    camera: Pinhole camera with ray generation and rendering
    preview: Canvas pixel grid, display pipeline and image export
"""

__version__ = "0.1.0"
