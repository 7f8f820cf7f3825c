"""
どこで: `api.cli`
何を: コマンドライン入口（argparse）。引数をランナー `run_app` へ渡す。
なぜ: `python -m api` / `fallingshapes` コマンドから同じ経路で起動できるようにするため。
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from common.logging import setup_default_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fallingshapes",
        description="Falling shapes: click shapes to remove them, click empty space to spawn.",
    )
    p.add_argument("--width", type=int, default=None, help="canvas width in px (default: 800)")
    p.add_argument("--height", type=int, default=None, help="canvas height in px (default: 600)")
    p.add_argument("--fps", type=int, default=None, help="update rate (default: 60)")
    p.add_argument(
        "--gravity", type=float, default=None, help="initial gravity, 0.1-2.0 (default: 0.1)"
    )
    p.add_argument(
        "--rate",
        dest="shapes_per_second",
        type=float,
        default=None,
        help="initial spawn rate in shapes/s, 0.5-5 (default: 0.5)",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed (default: FS_SEED)")
    p.add_argument("--no-hud", dest="show_hud", action="store_false", default=None)
    p.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING (default: FS_LOG_LEVEL)")
    p.add_argument(
        "--init-only",
        action="store_true",
        help="resolve configuration and exit without opening a window",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    from .app import run_app

    try:
        run_app(
            width=args.width,
            height=args.height,
            gravity=args.gravity,
            shapes_per_second=args.shapes_per_second,
            fps=args.fps,
            seed=args.seed,
            show_hud=args.show_hud,
            init_only=args.init_only,
        )
    except ValueError as e:
        logger.error("invalid configuration: %s", e)
        return 2
    return 0


__all__ = ["build_parser", "main"]
