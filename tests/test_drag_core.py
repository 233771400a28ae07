from __future__ import annotations

import pytest

from venn_deduction.attributes import Color, Shape, Size, Target, Verdict
from venn_deduction.drag import IDLE, DragController, Dragging, hit_test
from venn_deduction.entities import AnswerSlot, Token
from venn_deduction.errors import InvariantError
from venn_deduction.geometry import Point
from venn_deduction.pointer import PointerSnapshot


def _token(x: float, y: float, shape: Shape = Shape.CIRCLE) -> Token:
    return Token(center=Point(x, y), radius=30.0, target=Target(shape, Color.GREEN, Size.SMALL))


def _slot(x: float, y: float) -> AnswerSlot:
    return AnswerSlot(
        center=Point(x, y),
        width=100.0,
        height=50.0,
        target=Target(Shape.SQUARE, Color.BLUE, Size.SMALL),
    )


def _dragged_count(tokens: list[Token]) -> int:
    return sum(1 for t in tokens if t.dragged)


def test_press_on_empty_space_stays_idle() -> None:
    tokens = [_token(20.0, 60.0)]
    drag = DragController()
    assert drag.step(tokens, (), PointerSnapshot.at(300.0, 300.0, pressed=True)) is None
    assert drag.state == IDLE
    assert drag.active_index is None
    assert _dragged_count(tokens) == 0


def test_press_on_token_starts_drag_and_resets_verdict() -> None:
    tokens = [_token(20.0, 60.0), _token(20.0, 120.0)]
    tokens[1].verdict = Verdict.MISMATCH
    drag = DragController()

    drag.step(tokens, (), PointerSnapshot.at(35.0, 130.0, pressed=True))

    assert drag.state == Dragging(1)
    assert tokens[1].dragged is True
    assert tokens[1].verdict is Verdict.UNSET
    assert tokens[1].center == Point(35.0, 130.0)
    assert tokens[0].dragged is False


def test_hit_test_prefers_last_created_token() -> None:
    tokens = [_token(100.0, 100.0), _token(110.0, 100.0), _token(500.0, 500.0)]
    assert hit_test(tokens, Point(105.0, 100.0)) == 1
    assert hit_test(tokens, Point(75.0, 100.0)) == 0
    assert hit_test(tokens, Point(300.0, 300.0)) is None
    # Exactly on the rim of token 2 counts as a miss.
    assert hit_test(tokens, Point(530.0, 500.0)) is None


def test_held_button_moves_token_every_tick() -> None:
    tokens = [_token(20.0, 60.0)]
    drag = DragController()
    drag.step(tokens, (), PointerSnapshot.at(20.0, 60.0, pressed=True))

    for x in (50.0, 80.0, 80.0, 120.0):
        drag.step(tokens, (), PointerSnapshot.at(x, 200.0, pressed=True))
        assert tokens[0].center == Point(x, 200.0)
        assert drag.state == Dragging(0)


def test_moving_pointer_elsewhere_while_dragging_does_not_switch_token() -> None:
    tokens = [_token(20.0, 60.0), _token(20.0, 120.0)]
    drag = DragController()
    drag.step(tokens, (), PointerSnapshot.at(20.0, 60.0, pressed=True))
    drag.step(tokens, (), PointerSnapshot.at(20.0, 120.0, pressed=True))

    assert drag.state == Dragging(0)
    assert tokens[0].center == Point(20.0, 120.0)
    assert tokens[1].dragged is False
    assert _dragged_count(tokens) == 1


def test_slot_hover_tracks_pointer_during_drag_and_clears_on_release() -> None:
    tokens = [_token(20.0, 60.0)]
    slots = [_slot(300.0, 500.0), _slot(600.0, 500.0)]
    drag = DragController()

    drag.step(tokens, slots, PointerSnapshot.at(20.0, 60.0, pressed=True))
    drag.step(tokens, slots, PointerSnapshot.at(300.0, 500.0, pressed=True))
    assert [s.hover for s in slots] == [True, False]

    drag.step(tokens, slots, PointerSnapshot.at(600.0, 510.0, pressed=True))
    assert [s.hover for s in slots] == [False, True]

    drag.step(tokens, slots, PointerSnapshot.at(600.0, 510.0, pressed=False))
    assert [s.hover for s in slots] == [False, False]


def test_slot_hover_stays_off_without_a_drag() -> None:
    tokens = [_token(20.0, 60.0)]
    slots = [_slot(300.0, 500.0)]
    drag = DragController()
    drag.step(tokens, slots, PointerSnapshot.at(300.0, 500.0, pressed=True))
    assert slots[0].hover is False


def test_release_runs_callback_once_before_clearing_drag() -> None:
    tokens = [_token(20.0, 60.0)]
    seen: list[tuple[int, bool]] = []
    drag = DragController(on_release=lambda i: seen.append((i, tokens[i].dragged)))

    drag.step(tokens, (), PointerSnapshot.at(20.0, 60.0, pressed=True))
    drag.step(tokens, (), PointerSnapshot.at(200.0, 200.0, pressed=True))
    released = drag.step(tokens, (), PointerSnapshot.at(200.0, 200.0, pressed=False))

    assert released == 0
    assert seen == [(0, True)]
    assert tokens[0].dragged is False
    assert drag.state == IDLE

    # Further idle ticks never re-fire the callback.
    assert drag.step(tokens, (), PointerSnapshot.at(200.0, 200.0, pressed=False)) is None
    assert seen == [(0, True)]


def test_release_leaves_token_at_last_held_position() -> None:
    tokens = [_token(20.0, 60.0)]
    drag = DragController()
    drag.step(tokens, (), PointerSnapshot.at(20.0, 60.0, pressed=True))
    drag.step(tokens, (), PointerSnapshot.at(200.0, 200.0, pressed=True))
    drag.step(tokens, (), PointerSnapshot.at(250.0, 250.0, pressed=False))
    assert tokens[0].center == Point(200.0, 200.0)


def test_stale_drag_index_fails_fast() -> None:
    tokens = [_token(20.0, 60.0), _token(20.0, 120.0)]
    drag = DragController()
    drag.step(tokens, (), PointerSnapshot.at(20.0, 120.0, pressed=True))
    assert drag.state == Dragging(1)

    with pytest.raises(InvariantError):
        drag.step(tokens[:1], (), PointerSnapshot.at(50.0, 50.0, pressed=True))


def test_reset_returns_to_idle() -> None:
    tokens = [_token(20.0, 60.0)]
    drag = DragController()
    drag.step(tokens, (), PointerSnapshot.at(20.0, 60.0, pressed=True))
    drag.reset()
    assert drag.state == IDLE
    assert drag.active_index is None
