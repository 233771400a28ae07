"""Pygame host for Venn Deduction.

Owns the window, turns raw pygame events into one pointer snapshot per tick,
and implements the draw sink. Deterministic board/drag/verdict logic lives in
the core modules (scene, drag, evaluator, puzzle).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

import pygame

from .config import WindowConfig, new_seed
from .geometry import ORIGIN, Point
from .pointer import PointerSnapshot
from .puzzle import Puzzle, PuzzleConfig, PuzzleGenerator, SeededRng
from .render import WHITE, Rgba, draw_scene
from .scene import Scene

logger = logging.getLogger(__name__)

HUD_COLOR = (60, 60, 70)


def _to_rgba(color: Rgba) -> tuple[int, int, int, int]:
    r, g, b, a = (int(round(max(0.0, min(1.0, c)) * 255)) for c in color)
    return (r, g, b, a)


class PointerTracker:
    """Coalesces raw mouse events into a per-tick pointer snapshot.

    Leaving the window does not release a drag; only a button-up does.
    """

    def __init__(self) -> None:
        self._position = ORIGIN
        self._pressed = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            self._position = Point(float(event.pos[0]), float(event.pos[1]))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._position = Point(float(event.pos[0]), float(event.pos[1]))
            self._pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._position = Point(float(event.pos[0]), float(event.pos[1]))
            self._pressed = False

    def snapshot(self) -> PointerSnapshot:
        return PointerSnapshot(position=self._position, pressed=self._pressed)


class PygameDrawSink:
    """Draw sink over a pygame surface. Fills are alpha-blended per primitive."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    def fill_circle(self, center: Point, radius: float, color: Rgba) -> None:
        r = int(math.ceil(radius))
        bounds = pygame.Rect(int(center.x) - r - 1, int(center.y) - r - 1, 2 * r + 3, 2 * r + 3)
        self._blend(
            bounds,
            lambda layer: pygame.draw.circle(
                layer, _to_rgba(color), (center.x - bounds.x, center.y - bounds.y), radius
            ),
        )

    def stroke_circle(self, center: Point, radius: float, color: Rgba, width: int) -> None:
        pygame.draw.circle(self._surface, _to_rgba(color), (center.x, center.y), radius, width)

    def fill_rect(self, center: Point, width: float, height: float, color: Rgba) -> None:
        bounds = self._rect(center, width, height)
        self._blend(bounds, lambda layer: layer.fill(_to_rgba(color)))

    def stroke_rect(self, center: Point, width: float, height: float, color: Rgba, line_width: int) -> None:
        pygame.draw.rect(self._surface, _to_rgba(color), self._rect(center, width, height), line_width)

    def fill_polygon(self, points: Sequence[Point], color: Rgba) -> None:
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        left, top = int(math.floor(min(xs))), int(math.floor(min(ys)))
        bounds = pygame.Rect(left, top, int(math.ceil(max(xs))) - left + 1, int(math.ceil(max(ys))) - top + 1)
        local = [(p.x - left, p.y - top) for p in points]
        self._blend(bounds, lambda layer: pygame.draw.polygon(layer, _to_rgba(color), local))

    def stroke_polyline(self, points: Sequence[Point], color: Rgba, width: int) -> None:
        pygame.draw.lines(self._surface, _to_rgba(color), False, [(p.x, p.y) for p in points], width)

    @staticmethod
    def _rect(center: Point, width: float, height: float) -> pygame.Rect:
        return pygame.Rect(
            int(round(center.x - width / 2.0)),
            int(round(center.y - height / 2.0)),
            int(round(width)),
            int(round(height)),
        )

    def _blend(self, bounds: pygame.Rect, paint: Callable[[pygame.Surface], object]) -> None:
        if bounds.width <= 0 or bounds.height <= 0:
            return
        layer = pygame.Surface(bounds.size, pygame.SRCALPHA)
        paint(layer)
        self._surface.blit(layer, bounds.topleft)


class VennScreen:
    def __init__(
        self,
        *,
        font: pygame.font.Font,
        window: WindowConfig,
        puzzle_config: PuzzleConfig,
        seed: int,
        on_quit: Callable[[], None],
    ) -> None:
        self._font = font
        self._window = window
        self._puzzle_config = puzzle_config
        self._on_quit = on_quit
        self._pointer = PointerTracker()
        self._scene = Scene(self._generate(seed))

    @property
    def scene(self) -> Scene:
        return self._scene

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._on_quit()
            elif event.key == pygame.K_r:
                self._scene.reset(self._generate(new_seed()))
            return
        self._pointer.handle_event(event)

    def update(self) -> None:
        self._scene.tick(self._pointer.snapshot())

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(_to_rgba(WHITE))
        draw_scene(self._scene.snapshot(), PygameDrawSink(surface))

        s = self._scene.summary()
        hud = self._font.render(
            f"Seed {self._scene.seed}   Match {s.matches}  Miss {s.mismatches}   R: new puzzle   Esc: quit",
            True,
            HUD_COLOR,
        )
        surface.blit(hud, (self._window.width - hud.get_width() - 12, 8))

    def _generate(self, seed: int) -> Puzzle:
        generator = PuzzleGenerator(
            SeededRng(seed),
            config=self._puzzle_config,
            width=self._window.width,
            height=self._window.height,
        )
        return generator.next_puzzle()


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    seed: int | None = None,
    window: WindowConfig | None = None,
    puzzle_config: PuzzleConfig | None = None,
) -> int:
    win = window or WindowConfig()
    cfg = puzzle_config or PuzzleConfig()
    board_seed = new_seed() if seed is None else int(seed)

    pygame.init()
    pygame.display.set_caption(win.title)
    flags = 0
    if win.resizable:
        flags |= pygame.RESIZABLE
    if win.fullscreen:
        flags |= pygame.FULLSCREEN
    surface = pygame.display.set_mode(win.size, flags)

    font = pygame.font.Font(None, 22)
    clock = pygame.time.Clock()

    running = True

    def quit_app() -> None:
        nonlocal running
        running = False

    screen = VennScreen(font=font, window=win, puzzle_config=cfg, seed=board_seed, on_quit=quit_app)
    logger.info(
        "Starting %s (seed=%d, %dx%d @ %d tps)",
        win.title,
        board_seed,
        win.width,
        win.height,
        win.ticks_per_second,
    )

    frame = 0
    try:
        while running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_app()
                    continue
                screen.handle_event(event)

            screen.update()
            screen.render(surface)

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(win.ticks_per_second)
    finally:
        pygame.quit()

    logger.info("Stopped after %d frames (%d releases)", frame, screen.scene.summary().releases)
    return 0
