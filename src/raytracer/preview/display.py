"""Display pipeline and Matplotlib preview for rendered canvases.

Rendered colors are linear and unbounded. Before display or 8-bit export they
go through the same pipeline:

    1. Optional tone mapping ("reinhard" or "exposure") for bright scenes
    2. Clamp to [0, 1]
    3. Optional gamma encoding

With the defaults (no tone mapping, gamma 1.0) the pipeline is a plain clamp,
matching the values written to PPM files.

Example:
    >>> from raytracer.preview.display import show_preview
    >>> show_preview(canvas, tone_map="reinhard", gamma=2.2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from raytracer.preview.canvas import Canvas


ToneMapMethod = Literal["none", "reinhard", "exposure"]


def tone_map_reinhard(image: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Compress HDR values into [0, 1) with c / (1 + c)."""
    image = np.maximum(image, 0.0)
    return image / (1.0 + image)


def tone_map_exposure(image: npt.NDArray[np.float64], exposure: float = 1.0) -> npt.NDArray[np.float64]:
    """Compress HDR values into [0, 1) with 1 - exp(-c * exposure)."""
    image = np.maximum(image, 0.0)
    return 1.0 - np.exp(-image * exposure)


def apply_gamma(image: npt.NDArray[np.float64], gamma: float = 2.2) -> npt.NDArray[np.float64]:
    """Clamp to [0, 1] and gamma-encode with out = in^(1/gamma)."""
    image = np.clip(image, 0.0, 1.0)
    if gamma == 1.0:
        return image
    return np.power(image, 1.0 / gamma)


def process_image_for_display(
    image: npt.NDArray[np.float64],
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Run the display pipeline on a linear (H, W, 3) image.

    Args:
        image: Linear image array.
        tone_map: Tone mapping method ("none", "reinhard", or "exposure").
        gamma: Gamma value; 1.0 leaves values linear.
        exposure: Exposure for the "exposure" tone mapping.

    Returns:
        A new array with values in [0, 1].

    Raises:
        ValueError: If tone_map is not a known method or gamma is not
            positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")

    if tone_map == "reinhard":
        image = tone_map_reinhard(image)
    elif tone_map == "exposure":
        image = tone_map_exposure(image, exposure)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map!r}")

    return apply_gamma(image, gamma)


def show_preview(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
    title: str | None = None,
    block: bool = True,
) -> None:
    """Show a canvas in a Matplotlib window.

    Args:
        canvas: The rendered canvas.
        tone_map: Tone mapping method.
        gamma: Gamma value for display.
        exposure: Exposure for the "exposure" tone mapping.
        title: Optional window title.
        block: Whether plt.show() blocks until the window closes.
    """
    import matplotlib.pyplot as plt

    image = process_image_for_display(
        canvas.to_numpy(), tone_map=tone_map, gamma=gamma, exposure=exposure
    )

    fig, ax = plt.subplots(1, 1)
    ax.imshow(image)
    ax.set_axis_off()
    ax.set_title(title or f"{canvas.width}x{canvas.height}")
    fig.tight_layout()
    plt.show(block=block)
