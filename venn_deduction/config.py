from __future__ import annotations

import logging
import os
import random
from collections.abc import Mapping
from dataclasses import dataclass

SEED_ENV = "VENN_SEED"
ANSWER_SLOTS_ENV = "VENN_ANSWER_SLOTS"
LOG_LEVEL_ENV = "VENN_LOG_LEVEL"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True, slots=True)
class WindowConfig:
    """Static host settings, read once at startup."""

    title: str = "Venn Deduction"
    width: int = 800
    height: int = 600
    resizable: bool = False
    fullscreen: bool = False
    ticks_per_second: int = 60

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("window width and height must be > 0")
        if self.ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be > 0")

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


def new_seed() -> int:
    return random.SystemRandom().randint(1, 2**31 - 1)


def env_seed(environ: Mapping[str, str] | None = None) -> int | None:
    env = os.environ if environ is None else environ
    raw = env.get(SEED_ENV, "").strip()
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from None


def env_answer_slots(environ: Mapping[str, str] | None = None, *, default: bool = True) -> bool:
    env = os.environ if environ is None else environ
    raw = env.get(ANSWER_SLOTS_ENV, "").strip().lower()
    if raw == "":
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"{ANSWER_SLOTS_ENV} must be one of {_TRUTHY + _FALSY}, got {raw!r}")


def parse_log_level(level: str, *, source: str = "log level") -> int:
    levels = logging.getLevelNamesMapping()
    name = level.strip().upper()
    if name not in levels:
        raise ValueError(f"{source} must be one of {sorted(levels)}, got {level!r}")
    return levels[name]


def env_log_level(environ: Mapping[str, str] | None = None, *, default: str = "INFO") -> str:
    env = os.environ if environ is None else environ
    raw = env.get(LOG_LEVEL_ENV, "").strip()
    if raw == "":
        return default
    parse_log_level(raw, source=LOG_LEVEL_ENV)
    return raw


def configure_logging(level: str) -> None:
    log_level = parse_log_level(level)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )
