"""RGB color type used for shading.

Channels are unclamped floats during computation; clamping to a displayable
range only happens at export time (see raytracer.preview.export).
"""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.core.tuples import float_eq


@dataclass(frozen=True, eq=False, slots=True)
class Color:
    """A linear RGB color.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    def __add__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)
        return NotImplemented

    def __sub__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)
        return NotImplemented

    def __mul__(self, other: object) -> Color:
        # Color * Color is the Hadamard (channel-wise) product
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Color:
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    # Equality is approximate (EPSILON), which a hash cannot honor
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            float_eq(self.red, other.red)
            and float_eq(self.green, other.green)
            and float_eq(self.blue, other.blue)
        )

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the channels as a (red, green, blue) tuple."""
        return (self.red, self.green, self.blue)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
