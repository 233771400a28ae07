from __future__ import annotations

import logging
from dataclasses import dataclass

from .attributes import Verdict
from .drag import DragController, DragState, token_at
from .entities import AnswerSlot, Region, Token
from .evaluator import ReleaseZone, apply_release, evaluate_release
from .pointer import PointerSnapshot
from .puzzle import Puzzle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReleaseEvent:
    tick: int
    token_index: int
    zone: ReleaseZone
    verdict: Verdict


@dataclass(frozen=True, slots=True)
class SceneSummary:
    releases: int
    matches: int
    mismatches: int
    undecided: int


@dataclass(frozen=True, slots=True)
class SceneSnapshot:
    """View for the draw layer. Entities are shared, not copied."""

    tick: int
    regions: tuple[Region, ...]
    slots: tuple[AnswerSlot, ...]
    tokens: tuple[Token, ...]
    drag_state: DragState


class Scene:
    """Owns the board and runs one interaction step per tick.

    Each tick: region highlights are recomputed from the pointer, the drag
    controller advances, and on a release the drop is evaluated.
    """

    def __init__(self, puzzle: Puzzle) -> None:
        self._drag = DragController(on_release=self._evaluate_release)
        self._tick = 0
        self._events: list[ReleaseEvent] = []
        self._load(puzzle)

    @property
    def left(self) -> Region:
        return self._left

    @property
    def right(self) -> Region:
        return self._right

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def drag_state(self) -> DragState:
        return self._drag.state

    @property
    def active_index(self) -> int | None:
        return self._drag.active_index

    def regions(self) -> tuple[Region, Region]:
        return (self._left, self._right)

    def slots(self) -> tuple[AnswerSlot, ...]:
        return tuple(r.slot for r in self.regions() if r.slot is not None)

    def tick(self, pointer: PointerSnapshot) -> int | None:
        """Run one tick. Returns the index of the token released this tick, if any."""

        for region in self.regions():
            region.highlighted = region.contains(pointer.position)
        released = self._drag.step(self._tokens, self.slots(), pointer)
        self._tick += 1
        return released

    def reset(self, puzzle: Puzzle) -> None:
        """Replace the board with a new puzzle. Any drag in progress is dropped."""

        index = self._drag.active_index
        if index is not None:
            token_at(self._tokens, index).dragged = False
        for slot in self.slots():
            slot.hover = False
        self._drag.reset()
        self._events.clear()
        self._load(puzzle)
        logger.info("Scene reset (seed=%s)", puzzle.seed)

    def events(self) -> list[ReleaseEvent]:
        return list(self._events)

    def summary(self) -> SceneSummary:
        matches = sum(1 for e in self._events if e.verdict is Verdict.MATCH)
        mismatches = sum(1 for e in self._events if e.verdict is Verdict.MISMATCH)
        return SceneSummary(
            releases=len(self._events),
            matches=matches,
            mismatches=mismatches,
            undecided=len(self._events) - matches - mismatches,
        )

    def snapshot(self) -> SceneSnapshot:
        return SceneSnapshot(
            tick=self._tick,
            regions=self.regions(),
            slots=self.slots(),
            tokens=tuple(self._tokens),
            drag_state=self._drag.state,
        )

    def _load(self, puzzle: Puzzle) -> None:
        self._left = puzzle.left
        self._right = puzzle.right
        self._tokens = puzzle.tokens
        self._seed = puzzle.seed

    def _evaluate_release(self, index: int) -> None:
        token = token_at(self._tokens, index)
        outcome = evaluate_release(
            position=token.center,
            target=token.target,
            left=self._left,
            right=self._right,
            slots=self.slots(),
        )
        apply_release(token, outcome)
        self._events.append(
            ReleaseEvent(tick=self._tick, token_index=index, zone=outcome.zone, verdict=outcome.verdict)
        )
        logger.debug("Token %d released: zone=%s verdict=%s", index, outcome.zone, outcome.verdict)
