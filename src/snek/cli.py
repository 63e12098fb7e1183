"""Command-line launcher for snek."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from snek.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snek",
        description="Snake on a wrapping grid. Arrow keys steer, Q quits, R restarts.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument(
        "--width", type=int, default=None,
        help="Grid columns. Width and height of 1 leave no room for an apple.",
    )
    parser.add_argument("--height", type=int, default=None, help="Grid rows.")
    parser.add_argument(
        "--polling-ms", type=int, default=None,
        help="Milliseconds between simulation steps.",
    )
    parser.add_argument("--cell-px", type=int, default=None)
    parser.add_argument("--fps", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _build_config(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> GameConfig:
    overrides: dict = {}
    flag_map = {
        "width": "grid_width",
        "height": "grid_height",
        "cell_px": "cell_px",
        "fps": "fps",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if args.polling_ms is not None:
        overrides["polling_rate"] = args.polling_ms / 1000

    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        config = replace(config, **overrides)
    except (ValueError, TypeError, OSError) as exc:
        parser.error(str(exc))

    if config.grid.area == 1:
        logger.warning(
            "A 1x1 grid has no free cell for the apple; the game will hang.",
        )
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snek`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = _build_config(args, parser)

    from snek.loop import GameLoop
    from snek.pygame_platform import PygamePlatform

    return GameLoop(PygamePlatform(config), config).run()


if __name__ == "__main__":
    sys.exit(main())
