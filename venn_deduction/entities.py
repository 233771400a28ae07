from __future__ import annotations

from dataclasses import dataclass

from .attributes import Target, Verdict
from .geometry import Point, circle_contains, rect_contains


@dataclass(slots=True)
class AnswerSlot:
    """Rectangular alternate acceptance zone bound to one region."""

    center: Point
    width: float
    height: float
    target: Target
    hover: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("answer slot width and height must be > 0")

    def contains(self, point: Point) -> bool:
        return rect_contains(self.center, self.width, self.height, point)


@dataclass(slots=True)
class Region:
    """One circular set of the diagram with its hidden target."""

    center: Point
    radius: float
    target: Target
    highlighted: bool = False
    slot: AnswerSlot | None = None

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError("region radius must be > 0")

    def contains(self, point: Point) -> bool:
        return circle_contains(self.center, self.radius, point)


@dataclass(slots=True)
class Token:
    """Draggable guess showing its own target."""

    center: Point
    radius: float
    target: Target
    dragged: bool = False
    verdict: Verdict = Verdict.UNSET

    def contains(self, point: Point) -> bool:
        return circle_contains(self.center, self.radius, point)
