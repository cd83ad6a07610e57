"""Pinhole camera mapping a pixel grid onto rays.

The camera looks down -z from the origin of its own space, with a canvas one
unit in front of it. The canvas spans the field of view along its longer
side; the shorter side follows from the aspect ratio:

    half_view = tan(field_of_view / 2)
    aspect    = hsize / vsize
    landscape (aspect >= 1): half_width = half_view, half_height = half_view / aspect
    portrait  (aspect < 1):  half_width = half_view * aspect, half_height = half_view

Rays pass through pixel centers. The camera's transform is a view transform
(see raytracer.core.transform.view_transform); its cached inverse carries the
canvas points and the eye from camera space into world space.

Example:
    >>> import math
    >>> from raytracer.camera import PinholeCamera
    >>> from raytracer.core import Point, Vector, view_transform
    >>> from raytracer.scene import default_world
    >>> camera = PinholeCamera(11, 11, math.pi / 2)
    >>> camera.transform = view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0))
    >>> canvas = camera.render(default_world())
    >>> canvas.pixel_at(5, 5)
    Color(red=0.38066..., green=0.47583..., blue=0.2855...)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from raytracer.core.matrix import IDENTITY, Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import ORIGIN, Point
from raytracer.preview.canvas import Canvas

if TYPE_CHECKING:
    from raytracer.scene.world import World

logger = logging.getLogger(__name__)

# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class PinholeCamera:
    """A perspective camera with no depth of field.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle (radians) covered by the longer canvas side.
        half_width: Half the canvas width in camera space.
        half_height: Half the canvas height in camera space.
        pixel_size: Size of one pixel in camera space.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        """Create a camera.

        Args:
            hsize: Canvas width in pixels.
            vsize: Canvas height in pixels.
            field_of_view: Field of view in radians, in (0, pi).
            transform: View transform. Defaults to the identity.

        Raises:
            ValueError: If a size is not positive or the field of view is
                outside (0, pi).
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else IDENTITY

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    @property
    def transform(self) -> Matrix:
        """The world-to-camera view transform."""
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._inverse = value.inverse()
        self._transform = value

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the world-space ray through the center of a pixel.

        Args:
            px: Column, 0 at the left edge.
            py: Row, 0 at the top edge.

        Returns:
            A ray from the eye with a normalized direction.
        """
        # Offset from the canvas edge to the pixel center
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse @ Point(world_x, world_y, -1.0)
        origin = self._inverse @ ORIGIN
        return Ray(origin, (pixel - origin).normalize())

    def render(self, world: World, callback: ProgressCallback | None = None) -> Canvas:
        """Render the world into a new canvas, one row at a time.

        Args:
            world: The scene to render.
            callback: Optional progress callback, invoked after each row
                with (rows_done, total_rows).

        Returns:
            The rendered canvas.
        """
        image = Canvas(self.hsize, self.vsize)
        logger.debug("Rendering %dx%d image", self.hsize, self.vsize)

        for y in range(self.vsize):
            for x in range(self.hsize):
                image.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))

            if callback is not None:
                callback(y + 1, self.vsize)
            logger.debug("Rendered row %d/%d", y + 1, self.vsize)

        return image
