from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .config import Settings
from .game import main as run_game


def _window_size(value: str) -> tuple[int, int]:
    try:
        w, h = (int(part) for part in value.lower().split("x", 1))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"window size must be positive, got {value!r}")
    return (w, h)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="neonsnake", description="Play Neon Snake.")
    parser.add_argument("--grid-size", type=int, default=config.GRID_SIZE, help="Cells per side of the square grid.")
    parser.add_argument(
        "--window-size",
        type=_window_size,
        default=(config.WIDTH, config.HEIGHT),
        help="Initial window size as WIDTHxHEIGHT.",
    )
    parser.add_argument(
        "--best-score-file",
        type=Path,
        default=config.BEST_SCORE_FILE,
        help="Where the best score is kept.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, ns.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings(grid_size=ns.grid_size)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return run_game(
        settings=settings,
        window_size=ns.window_size,
        best_score_file=ns.best_score_file,
        seed=ns.seed,
    )


if __name__ == "__main__":
    raise SystemExit(main())
