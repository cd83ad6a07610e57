"""Pixel canvas backed by a NumPy array.

Pixels are stored as float64 linear RGB in an array of shape
(height, width, 3), indexed [y, x]. Values are unclamped; export clamps.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from raytracer.core.color import Color


class Canvas:
    """A rectangular grid of colors, initially black.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a black canvas.

        Raises:
            ValueError: If width or height is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the color of pixel (x, y).

        Raises:
            IndexError: If the pixel is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = color.as_tuple()

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the color of pixel (x, y).

        Raises:
            IndexError: If the pixel is outside the canvas.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixels as an array of shape (height, width, 3)."""
        return self._pixels.copy()
