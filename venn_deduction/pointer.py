from __future__ import annotations

from dataclasses import dataclass

from .geometry import ORIGIN, Point


@dataclass(frozen=True, slots=True)
class PointerSnapshot:
    """Per-tick normalized pointer state.

    The host coalesces raw device events into this; the engine never sees them.
    """

    position: Point = ORIGIN
    pressed: bool = False

    @classmethod
    def at(cls, x: float, y: float, *, pressed: bool = False) -> "PointerSnapshot":
        return cls(position=Point(float(x), float(y)), pressed=pressed)
