#!/usr/bin/env python3
"""Render a small CSG scene.

This script builds a "die" (a cube intersected with a sphere, with three
cylinders carved out of it) standing on a checkered, slightly reflective
floor next to a glass sphere, then renders it with the pinhole camera.

Usage:
    python -m examples.render_csg_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 320)
    --height HEIGHT     Image height in pixels (default: 180)
    --output OUTPUT     Output file path, .png or .ppm (default: csg_scene.png)
    --quiet             Suppress progress output

Example:
    python -m examples.render_csg_scene --width 160 --height 90 --output die.ppm
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path

from raytracer.camera import PinholeCamera
from raytracer.core import (
    Color,
    Point,
    RaytracerError,
    Vector,
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from raytracer.geometry import CSG, CsgOperation, Cube, Cylinder, Plane, Sphere, glass_sphere
from raytracer.materials import CheckersPattern, Material
from raytracer.preview import save_png, save_ppm
from raytracer.scene import PointLight, World


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a constructive solid geometry scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=320, help="Image width in pixels (default: 320)")
    parser.add_argument("--height", type=int, default=180, help="Image height in pixels (default: 180)")
    parser.add_argument(
        "--output",
        type=str,
        default="csg_scene.png",
        help="Output file path, .png or .ppm (default: csg_scene.png)",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args()


def make_die() -> CSG:
    """Build a rounded cube with a cylindrical hole along each axis."""
    body_material = Material(color=Color(0.9, 0.2, 0.1), specular=0.6, shininess=50, reflective=0.1)
    body = CSG(
        CsgOperation.INTERSECTION,
        Cube(material=body_material),
        Sphere(transform=scaling(1.35, 1.35, 1.35), material=body_material),
    )

    def hole(rotation):
        return Cylinder(
            transform=chain(scaling(0.5, 1, 0.5), rotation),
            material=Material(color=Color(0.95, 0.95, 0.9)),
            minimum=-2,
            maximum=2,
            closed=True,
        )

    holes = CSG(
        CsgOperation.UNION,
        hole(rotation_x(0)),
        CSG(CsgOperation.UNION, hole(rotation_x(math.pi / 2)), hole(rotation_z(math.pi / 2))),
    )
    return CSG(
        CsgOperation.DIFFERENCE,
        body,
        holes,
        transform=chain(rotation_y(math.pi / 6), translation(-0.8, 1, 0.5)),
    )


def build_world() -> World:
    """Assemble the floor, the die, a glass sphere and two lights."""
    floor = Plane(
        material=Material(
            pattern=CheckersPattern(Color(0.35, 0.35, 0.4), Color(0.8, 0.8, 0.75)),
            specular=0.0,
            reflective=0.15,
        )
    )

    glass = glass_sphere()
    glass.transform = chain(scaling(0.75, 0.75, 0.75), translation(1.6, 0.75, -0.6))
    glass.material.color = Color(0.1, 0.1, 0.12)
    glass.material.diffuse = 0.1
    glass.material.reflective = 0.9

    lights = [
        PointLight(Point(-6, 8, -8), Color(0.8, 0.8, 0.8)),
        PointLight(Point(6, 6, -6), Color(0.3, 0.3, 0.35)),
    ]
    return World([floor, make_die(), glass], lights)


def render_csg_scene(
    width: int = 320,
    height: int = 180,
    output_path: str = "csg_scene.png",
    quiet: bool = False,
) -> Path:
    """Render the scene and save it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path; the suffix picks PPM or PNG.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    if not quiet:
        print(f"Building CSG scene ({width}x{height})...")
    world = build_world()

    camera = PinholeCamera(width, height, math.pi / 3)
    camera.transform = view_transform(Point(0, 3.5, -7), Point(0, 0.8, 0), Vector(0, 1, 0))

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({rows_done / total_rows * 100:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, callback=progress_callback)
    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    try:
        render_csg_scene(
            width=args.width,
            height=args.height,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except (RaytracerError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
