from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .attributes import Target, Verdict
from .entities import AnswerSlot, Region, Token
from .geometry import Point
from .matching import region_matches


class ReleaseZone(StrEnum):
    BOTH_REGIONS = "both_regions"
    LEFT_REGION = "left_region"
    RIGHT_REGION = "right_region"
    ANSWER_SLOT = "answer_slot"
    NOWHERE = "nowhere"


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    zone: ReleaseZone
    verdict: Verdict
    snap_to: Point | None = None
    slot_index: int | None = None  # index into the slots passed to evaluate_release


def evaluate_release(
    *,
    position: Point,
    target: Target,
    left: Region,
    right: Region,
    slots: Sequence[AnswerSlot] = (),
) -> ReleaseOutcome:
    """Classify a drop position and decide the verdict.

    Region membership takes precedence over answer slots. A drop inside both
    slots (or none) outside the regions renders no decision.
    """

    in_left = left.contains(position)
    in_right = right.contains(position)

    if in_left and in_right:
        matched = region_matches(left, target) and region_matches(right, target)
        return ReleaseOutcome(zone=ReleaseZone.BOTH_REGIONS, verdict=Verdict.from_bool(matched))
    if in_left:
        return ReleaseOutcome(
            zone=ReleaseZone.LEFT_REGION,
            verdict=Verdict.from_bool(region_matches(left, target)),
        )
    if in_right:
        return ReleaseOutcome(
            zone=ReleaseZone.RIGHT_REGION,
            verdict=Verdict.from_bool(region_matches(right, target)),
        )

    hits = [i for i, slot in enumerate(slots) if slot.contains(position)]
    if len(hits) == 1:
        slot = slots[hits[0]]
        return ReleaseOutcome(
            zone=ReleaseZone.ANSWER_SLOT,
            verdict=Verdict.from_bool(region_matches(slot, target)),
            snap_to=slot.center,
            slot_index=hits[0],
        )

    return ReleaseOutcome(zone=ReleaseZone.NOWHERE, verdict=Verdict.UNSET)


def apply_release(token: Token, outcome: ReleaseOutcome) -> None:
    token.verdict = outcome.verdict
    if outcome.snap_to is not None:
        token.center = outcome.snap_to
