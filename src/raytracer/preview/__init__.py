"""Preview module for output and visualization.

Components:
    canvas: NumPy-backed pixel grid written by the camera
    display: Tone mapping, gamma and a Matplotlib preview window
    export: PPM and PNG export

Example:
    >>> from raytracer.preview import save_png, save_ppm
    >>> canvas = camera.render(world)
    >>> save_ppm(canvas, "scene.ppm")
    >>> save_png(canvas, "scene.png", gamma=2.2)
"""

from raytracer.preview.canvas import Canvas
from raytracer.preview.display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_exposure,
    tone_map_reinhard,
)
from raytracer.preview.export import canvas_to_ppm, image_to_uint8, save_png, save_ppm

__all__ = [
    "Canvas",
    # Display functions
    "show_preview",
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "ToneMapMethod",
    # Export functions
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "image_to_uint8",
]
