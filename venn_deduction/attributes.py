from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Shape(StrEnum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class Color(StrEnum):
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"


class Size(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Verdict(StrEnum):
    """Outcome of a token's most recent release."""

    UNSET = "unset"
    MATCH = "match"
    MISMATCH = "mismatch"

    @classmethod
    def from_bool(cls, matched: bool) -> "Verdict":
        return cls.MATCH if matched else cls.MISMATCH


@dataclass(frozen=True, slots=True)
class Target:
    shape: Shape
    color: Color
    size: Size

    def label(self) -> str:
        return f"{self.size.value} {self.color.value} {self.shape.value}"
