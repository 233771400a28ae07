from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .attributes import Verdict
from .entities import AnswerSlot, Token
from .errors import InvariantError
from .geometry import Point
from .pointer import PointerSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Dragging:
    index: int


DragState = Idle | Dragging

IDLE = Idle()


def hit_test(tokens: Sequence[Token], point: Point) -> int | None:
    """Index of the topmost token under ``point``.

    Later tokens are drawn on top, so the tray is scanned last-created first.
    """

    for index in range(len(tokens) - 1, -1, -1):
        if tokens[index].contains(point):
            return index
    return None


def token_at(tokens: Sequence[Token], index: int) -> Token:
    if not (0 <= index < len(tokens)):
        raise InvariantError(f"drag index {index} outside tray of {len(tokens)} tokens")
    return tokens[index]


class DragController:
    """Idle / Dragging(index) state machine driven by per-tick pointer state.

    Holding the button is level-triggered: every tick it is down, the dragged
    token follows the pointer. ``on_release`` runs once with the token index
    when the button comes up, before the drag flags are cleared.
    """

    def __init__(self, *, on_release: Callable[[int], None] | None = None) -> None:
        self._state: DragState = IDLE
        self._on_release = on_release

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def active_index(self) -> int | None:
        if isinstance(self._state, Dragging):
            return self._state.index
        return None

    def reset(self) -> None:
        self._state = IDLE

    def step(
        self,
        tokens: Sequence[Token],
        slots: Sequence[AnswerSlot],
        pointer: PointerSnapshot,
    ) -> int | None:
        """Advance one tick. Returns the index released on this tick, if any."""

        state = self._state
        if pointer.pressed:
            if isinstance(state, Idle):
                self._pick_up(tokens, pointer.position)
            else:
                self._follow(tokens, slots, state.index, pointer.position)
            return None

        if isinstance(state, Idle):
            return None
        self._release(tokens, slots, state.index)
        return state.index

    def _pick_up(self, tokens: Sequence[Token], position: Point) -> None:
        index = hit_test(tokens, position)
        if index is None:
            return
        token = token_at(tokens, index)
        token.verdict = Verdict.UNSET
        token.dragged = True
        token.center = position
        self._state = Dragging(index)
        logger.debug("Drag started on token %d (%s)", index, token.target.label())

    def _follow(
        self,
        tokens: Sequence[Token],
        slots: Sequence[AnswerSlot],
        index: int,
        position: Point,
    ) -> None:
        token_at(tokens, index).center = position
        for slot in slots:
            slot.hover = slot.contains(position)

    def _release(self, tokens: Sequence[Token], slots: Sequence[AnswerSlot], index: int) -> None:
        token = token_at(tokens, index)
        if self._on_release is not None:
            self._on_release(index)
        token.dragged = False
        for slot in slots:
            slot.hover = False
        self._state = IDLE
