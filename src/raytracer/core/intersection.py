"""Ray-shape intersection records and hit selection.

An Intersection pairs a ray parameter t with the shape that was struck.
Intersection lists are plain Python lists; ``intersections`` returns them
sorted by t and ``hit`` picks the nearest one in front of the ray origin.

Intersections with t <= 0 lie behind the ray origin. They are never the hit,
but they stay in the list because CSG filtering and refraction bookkeeping
depend on them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

from raytracer.core.errors import DegenerateGeometry

if TYPE_CHECKING:
    from raytracer.geometry.shape import Shape


@dataclass(frozen=True, slots=True)
class Intersection:
    """A single ray-surface intersection.

    Attributes:
        t: Ray parameter at which the intersection occurs.
        shape: The (leaf) shape that was intersected.
        u: Barycentric u coordinate, set only for triangle hits.
        v: Barycentric v coordinate, set only for triangle hits.
    """

    t: float
    shape: Shape
    u: float | None = None
    v: float | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.t):
            raise DegenerateGeometry(f"Intersection produced a non-finite t ({self.t!r})")

    def __lt__(self, other: Intersection) -> bool:
        return self.t < other.t


_by_t = attrgetter("t")


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a new list sorted ascending by t."""
    return sorted(xs, key=_by_t)


def sort_intersections(xs: Iterable[Intersection]) -> list[Intersection]:
    """Return a new list with the given intersections sorted ascending by t."""
    return sorted(xs, key=_by_t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Return the visible intersection: the one with the smallest t > 0.

    The input does not need to be sorted.

    Args:
        xs: Intersections to choose from.

    Returns:
        The nearest intersection in front of the ray origin, or None if every
        intersection lies at or behind the origin.
    """
    return min((i for i in xs if i.t > 0.0), key=_by_t, default=None)
