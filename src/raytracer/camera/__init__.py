"""Camera module for primary ray generation.

Components:
    pinhole: Perspective pinhole camera and the row-by-row render loop

Pixel coordinates:
    px in [0, hsize): left to right
    py in [0, vsize): top to bottom

Rays pass through pixel centers; there is no jitter or supersampling.
"""

from .pinhole import PinholeCamera, ProgressCallback

__all__ = [
    "PinholeCamera",
    "ProgressCallback",
]
