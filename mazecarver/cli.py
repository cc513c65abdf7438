"""
Command line entry point for Maze Carver.

Carves a maze in the terminal, redrawing the picture after every carved
passage, then prints the finished maze.

Usage:
    mazecarver --width 20 --height 10 --seed 7
    mazecarver --no-animate
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, TextIO

from mazecarver.config import get_settings
from mazecarver.core.grid import InvalidConfiguration
from mazecarver.services.animation_service import animate, create_job, paint_all

logger = logging.getLogger("maze_carver")

# Move the cursor home and clear the screen
CLEAR_SCREEN = "\x1b[H\x1b[2J"


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="mazecarver",
        description="Carve a random maze with depth-first backtracking.",
    )
    parser.add_argument("--width", type=int, default=settings.default_width,
                        help=f"grid columns (default: {settings.default_width})")
    parser.add_argument("--height", type=int, default=settings.default_height,
                        help=f"grid rows (default: {settings.default_height})")
    parser.add_argument("--seed", type=int, default=settings.random_seed,
                        help="seed for a reproducible maze")
    parser.add_argument("--delay", type=float, default=settings.step_delay_seconds,
                        help="seconds between animation frames")
    parser.add_argument("--no-animate", action="store_true",
                        help="only print the finished maze")
    return parser


async def _play(job, delay: float, out: TextIO) -> str:
    """Animate a job on `out` and return the last frame."""
    frame = ""
    async for frame in animate(job.generator, job.painter, delay):
        out.write(CLEAR_SCREEN + frame + "\n")
        out.flush()
    return frame


def main(argv: Optional[list[str]] = None, out: TextIO = sys.stdout) -> int:
    """Run the CLI. Returns the process exit status."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    args = build_parser().parse_args(argv)
    if args.delay < 0:
        print("error: --delay must not be negative", file=sys.stderr)
        return 2

    try:
        job = create_job(args.width, args.height, args.seed)
    except InvalidConfiguration as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Carving {args.width}x{args.height} maze (seed={job.seed})")

    if args.no_animate:
        out.write(paint_all(job) + "\n")
        return 0

    try:
        asyncio.run(_play(job, args.delay, out))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0
