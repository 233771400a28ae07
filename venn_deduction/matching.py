from __future__ import annotations

from typing import Protocol

from .attributes import Target


class HasTarget(Protocol):
    @property
    def target(self) -> Target: ...


def accepts(hidden: Target, candidate: Target) -> bool:
    """Shape-or-color rule. Size never takes part in the comparison."""

    return hidden.shape == candidate.shape or hidden.color == candidate.color


def region_matches(zone: HasTarget, target: Target) -> bool:
    """Does a region (or answer slot) accept ``target``?"""

    return accepts(zone.target, target)
