from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from .attributes import Color, Shape, Size, Target
from .entities import AnswerSlot, Region, Token
from .geometry import Point

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Injected randomness. ``randint`` bounds are inclusive."""

    def randint(self, a: int, b: int) -> int:
        ...


class SeededRng:
    """Simple seeded RNG wrapper to keep deterministic streams explicit."""

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)


@dataclass(frozen=True, slots=True)
class PuzzleConfig:
    # Defaults reproduce the 800x600 board of the desktop game.
    margin: float = 10.0
    region_radius: float = 200.0
    token_radius: float = 30.0
    tray_x: float = 20.0
    row_height: float = 60.0
    tray_size: Size = Size.SMALL
    answer_slots: bool = True
    slot_width: float = 140.0
    slot_height: float = 60.0
    # When set, the last variant of each attribute is never drawn.
    exclude_last_variant: bool = False

    def __post_init__(self) -> None:
        if self.margin < 0:
            raise ValueError("margin must be >= 0")
        if self.region_radius <= 0:
            raise ValueError("region_radius must be > 0")
        if self.token_radius <= 0:
            raise ValueError("token_radius must be > 0")
        if self.row_height <= 0:
            raise ValueError("row_height must be > 0")
        if self.slot_width <= 0 or self.slot_height <= 0:
            raise ValueError("slot_width and slot_height must be > 0")


@dataclass(slots=True)
class Puzzle:
    left: Region
    right: Region
    tokens: list[Token]
    seed: int | None = None

    def regions(self) -> tuple[Region, Region]:
        return (self.left, self.right)


class PuzzleGenerator:
    """Builds the token tray and draws hidden targets from an injected RNG.

    Draw order is fixed so a seed always yields the same board: left region,
    right region, then left slot and right slot (when enabled). Each target
    draws shape, color, size in that order.
    """

    def __init__(
        self,
        rng: RandomSource,
        *,
        config: PuzzleConfig | None = None,
        width: float = 800.0,
        height: float = 600.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board width and height must be > 0")
        self._rng = rng
        self._cfg = config or PuzzleConfig()
        self._width = float(width)
        self._height = float(height)
        if self._cfg.exclude_last_variant:
            logger.warning("Legacy sampling enabled: the last variant of each attribute is never drawn")

    @property
    def config(self) -> PuzzleConfig:
        return self._cfg

    def build_tray(self) -> list[Token]:
        cfg = self._cfg
        tokens: list[Token] = []
        for shape in Shape:
            for color in Color:
                index = len(tokens)
                tokens.append(
                    Token(
                        center=Point(cfg.tray_x, (index + 1) * cfg.row_height),
                        radius=cfg.token_radius,
                        target=Target(shape=shape, color=color, size=cfg.tray_size),
                    )
                )
        return tokens

    def sample_target(self) -> Target:
        return Target(
            shape=self._pick(tuple(Shape)),
            color=self._pick(tuple(Color)),
            size=self._pick(tuple(Size)),
        )

    def next_puzzle(self) -> Puzzle:
        cfg = self._cfg
        usable_w = self._width - cfg.margin * 2.0
        usable_h = self._height - cfg.margin * 2.0
        center_y = cfg.margin + usable_h / 2.0

        left = Region(
            center=Point(cfg.margin + usable_w / 3.0, center_y),
            radius=cfg.region_radius,
            target=self.sample_target(),
        )
        right = Region(
            center=Point(self._width - cfg.margin - usable_w / 3.0, center_y),
            radius=cfg.region_radius,
            target=self.sample_target(),
        )
        if cfg.answer_slots:
            for region in (left, right):
                region.slot = AnswerSlot(
                    center=Point(region.center.x, self._height - cfg.margin - cfg.slot_height / 2.0),
                    width=cfg.slot_width,
                    height=cfg.slot_height,
                    target=self.sample_target(),
                )

        seed = getattr(self._rng, "seed", None)
        logger.info("Generated puzzle (seed=%s, answer_slots=%s)", seed, cfg.answer_slots)
        logger.debug("Hidden targets: left=%s right=%s", left.target, right.target)
        return Puzzle(left=left, right=right, tokens=self.build_tray(), seed=seed)

    def _pick(self, values: Sequence[T]) -> T:
        hi = len(values) - 1
        if self._cfg.exclude_last_variant:
            hi -= 1
        return values[self._rng.randint(0, hi)]


def generate_puzzle(
    *,
    seed: int,
    config: PuzzleConfig | None = None,
    width: float = 800.0,
    height: float = 600.0,
) -> Puzzle:
    return PuzzleGenerator(SeededRng(seed), config=config, width=width, height=height).next_puzzle()
