"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text P3, 0-255 per channel)
    - PNG (8-bit via Pillow)

PPM output follows the plain format exactly: a "P3" header, the width and
height, the maximum value 255, then the pixel components row by row. Each
component is scaled by 255, rounded and clamped to [0, 255]. No line is
longer than 70 characters and the file ends with a newline.

Example:
    >>> from raytracer.preview.canvas import Canvas
    >>> from raytracer.preview.export import canvas_to_ppm
    >>> print(canvas_to_ppm(Canvas(2, 1)), end="")
    P3
    2 1
    255
    0 0 0 0 0 0
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raytracer.preview.display import ToneMapMethod, process_image_for_display

if TYPE_CHECKING:
    from raytracer.preview.canvas import Canvas

PPM_MAX_VALUE = 255
PPM_LINE_LENGTH = 70


def _to_byte_range(image: npt.NDArray[np.float64]) -> npt.NDArray[np.int64]:
    # Round half up; np.rint would round 127.5 down to the even 127
    scaled = np.floor(image * PPM_MAX_VALUE + 0.5)
    return np.clip(scaled, 0, PPM_MAX_VALUE).astype(np.int64)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as a plain PPM (P3) string.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The PPM text, ending with a newline.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_VALUE)]
    values = _to_byte_range(canvas.to_numpy())

    for row in values:
        line = ""
        for value in row.ravel():
            token = str(value)
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_LINE_LENGTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def image_to_uint8(
    image: npt.NDArray[np.float64],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to uint8 for display or export.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value; 1.0 leaves values linear.
        exposure: Exposure for the "exposure" tone mapping.

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    processed = process_image_for_display(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    return _to_byte_range(processed).astype(np.uint8)


def save_png(
    canvas: Canvas,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Save a canvas as an 8-bit RGB PNG.

    Args:
        canvas: The canvas to save.
        filepath: Output path (should end in .png).
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value; 1.0 leaves values linear.
        exposure: Exposure for the "exposure" tone mapping.
    """
    image_uint8 = image_to_uint8(canvas.to_numpy(), tone_map=tone_map, gamma=gamma, exposure=exposure)
    PILImage.fromarray(image_uint8).save(filepath)
