"""Scene drawing against an abstract draw sink.

The engine has no opinion on where pixels land: ``draw_scene`` only issues
primitive calls. ``app.PygameDrawSink`` is the production sink; tests use a
recording sink.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .attributes import Color, Shape, Size, Verdict
from .entities import AnswerSlot, Region, Token
from .geometry import Point
from .scene import SceneSnapshot

Rgba = tuple[float, float, float, float]  # channels in [0.0, 1.0]

BLACK: Rgba = (0.0, 0.0, 0.0, 1.0)
WHITE: Rgba = (1.0, 1.0, 1.0, 1.0)

REGION_LEFT: Rgba = (0.0, 0.0, 1.0, 0.1)
REGION_RIGHT: Rgba = (1.0, 1.0, 0.0, 0.1)
REGION_HIGHLIGHT_ALPHA = 0.3

SLOT_IDLE: Rgba = (0.85, 0.85, 0.85, 0.6)
SLOT_HOVER: Rgba = (0.6, 0.6, 0.6, 0.8)

VERDICT_FILL: dict[Verdict, Rgba] = {
    Verdict.UNSET: (1.0, 0.7, 0.0, 1.0),
    Verdict.MATCH: (0.0, 1.0, 0.0, 1.0),
    Verdict.MISMATCH: (1.0, 0.0, 0.0, 1.0),
}
DRAGGED_ALPHA_DROP = 0.3

GLYPH_FILL: dict[Color, Rgba] = {
    Color.GREEN: (0.0, 0.6, 0.0, 1.0),
    Color.BLUE: (0.0, 0.0, 1.0, 1.0),
    Color.PURPLE: (1.0, 0.0, 1.0, 1.0),
}

GLYPH_HALF_EXTENT: dict[Size, float] = {
    Size.SMALL: 10.0,
    Size.MEDIUM: 14.0,
    Size.LARGE: 18.0,
}

OUTLINE_WIDTH = 1


class DrawSink(Protocol):
    def fill_circle(self, center: Point, radius: float, color: Rgba) -> None: ...
    def stroke_circle(self, center: Point, radius: float, color: Rgba, width: int) -> None: ...
    def fill_rect(self, center: Point, width: float, height: float, color: Rgba) -> None: ...
    def stroke_rect(self, center: Point, width: float, height: float, color: Rgba, line_width: int) -> None: ...
    def fill_polygon(self, points: Sequence[Point], color: Rgba) -> None: ...
    def stroke_polyline(self, points: Sequence[Point], color: Rgba, width: int) -> None: ...


def with_alpha(color: Rgba, alpha: float) -> Rgba:
    return (color[0], color[1], color[2], max(0.0, min(1.0, alpha)))


def draw_scene(snapshot: SceneSnapshot, sink: DrawSink) -> None:
    """Issue draw calls for every visible entity, back to front."""

    left, right = snapshot.regions
    draw_region(left, REGION_LEFT, sink)
    draw_region(right, REGION_RIGHT, sink)
    for slot in snapshot.slots:
        draw_slot(slot, sink)
    for token in snapshot.tokens:
        draw_token(token, sink)


def draw_region(region: Region, base: Rgba, sink: DrawSink) -> None:
    fill = with_alpha(base, REGION_HIGHLIGHT_ALPHA) if region.highlighted else base
    sink.fill_circle(region.center, region.radius, fill)
    sink.stroke_circle(region.center, region.radius, BLACK, OUTLINE_WIDTH)


def draw_slot(slot: AnswerSlot, sink: DrawSink) -> None:
    sink.fill_rect(slot.center, slot.width, slot.height, SLOT_HOVER if slot.hover else SLOT_IDLE)
    sink.stroke_rect(slot.center, slot.width, slot.height, BLACK, OUTLINE_WIDTH)


def draw_token(token: Token, sink: DrawSink) -> None:
    fill = VERDICT_FILL[token.verdict]
    if token.dragged:
        fill = with_alpha(fill, fill[3] - DRAGGED_ALPHA_DROP)
    sink.fill_circle(token.center, token.radius, fill)
    sink.stroke_circle(token.center, token.radius, BLACK, OUTLINE_WIDTH)
    draw_glyph(token, sink)


def draw_glyph(token: Token, sink: DrawSink) -> None:
    c = token.center
    h = GLYPH_HALF_EXTENT[token.target.size]
    color = GLYPH_FILL[token.target.color]
    shape = token.target.shape

    if shape is Shape.CIRCLE:
        sink.fill_circle(c, h, color)
        sink.stroke_circle(c, h, BLACK, OUTLINE_WIDTH)
    elif shape is Shape.SQUARE:
        sink.fill_rect(c, h * 2.0, h * 2.0, color)
        sink.stroke_rect(c, h * 2.0, h * 2.0, BLACK, OUTLINE_WIDTH)
    else:
        points = triangle_points(c, h)
        sink.fill_polygon(points[:-1], color)
        sink.stroke_polyline(points, BLACK, OUTLINE_WIDTH)


def triangle_points(center: Point, half: float) -> tuple[Point, ...]:
    """Closed outline (first point repeated) of an upward triangle."""

    apex = Point(center.x, center.y - half)
    return (
        apex,
        Point(center.x - half, center.y + half),
        Point(center.x + half, center.y + half),
        apex,
    )
