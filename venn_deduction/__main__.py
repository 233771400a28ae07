from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Ensure the repository root (parent of this package) is on ``sys.path``.

    Lets ``python venn_deduction/__main__.py`` work as well as
    ``python -m venn_deduction``.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # Works when executed as a module: python -m venn_deduction
    from .app import run  # type: ignore[attr-defined]
    from .config import configure_logging, env_answer_slots, env_log_level, env_seed
    from .puzzle import PuzzleConfig
except ImportError:
    # Works when executed as a script (VS Code "Run Python File", absolute path, etc.)
    _ensure_repo_root_on_path()
    from venn_deduction.app import run  # type: ignore[attr-defined]
    from venn_deduction.config import configure_logging, env_answer_slots, env_log_level, env_seed
    from venn_deduction.puzzle import PuzzleConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Venn Deduction: find the hidden rule of each circle")
    parser.add_argument("--seed", type=int, default=None, help="Board seed (default: $VENN_SEED or random)")
    parser.add_argument("--no-slots", action="store_true", help="Play without the answer slots")
    parser.add_argument(
        "--legacy-skew",
        action="store_true",
        help="Never draw the last variant of an attribute when sampling hidden targets",
    )
    parser.add_argument("--max-frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $VENN_LOG_LEVEL or INFO)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running the puzzle from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level or env_log_level())
    except ValueError as exc:
        parser.error(str(exc))

    seed = args.seed if args.seed is not None else env_seed()
    slots = False if args.no_slots else env_answer_slots()
    config = PuzzleConfig(answer_slots=slots, exclude_last_variant=args.legacy_skew)
    return run(max_frames=args.max_frames, seed=seed, puzzle_config=config)


if __name__ == "__main__":
    raise SystemExit(main())
