from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


ORIGIN = Point(0.0, 0.0)


def circle_contains(center: Point, radius: float, point: Point) -> bool:
    """Strict containment: a point at exactly ``radius`` is outside."""

    return point.distance_to(center) < radius


def rect_contains(center: Point, width: float, height: float, point: Point) -> bool:
    """Strict containment on all four edges of an axis-aligned rectangle."""

    half_w = width / 2.0
    half_h = height / 2.0
    return (center.x - half_w < point.x < center.x + half_w) and (
        center.y - half_h < point.y < center.y + half_h
    )
