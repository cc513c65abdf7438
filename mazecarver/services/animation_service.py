"""Animation service - paces maze generation and paints each carved cell."""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from mazecarver.config import Settings, get_settings
from mazecarver.core.grid import Grid
from mazecarver.core.maze_generator import MazeGenerator
from mazecarver.core.painter import Painter

logger = logging.getLogger(__name__)


@dataclass
class CarveJob:
    """A grid, its generator and the painter drawing it."""
    grid: Grid
    generator: MazeGenerator
    painter: Painter
    seed: Optional[int] = None


def create_job(
    width: int,
    height: int,
    seed: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> CarveJob:
    """
    Build everything needed to carve and draw one maze.

    Args:
        width: Grid columns.
        height: Grid rows.
        seed: Seed for the random source. Falls back to the configured
            random_seed; None means nondeterministic.
        settings: Settings to take glyphs and the fallback seed from.
            Defaults to get_settings().

    Raises:
        InvalidConfiguration: If the dimensions are not positive integers.
    """
    if settings is None:
        settings = get_settings()
    if seed is None:
        seed = settings.random_seed

    grid = Grid(width, height)
    generator = MazeGenerator(grid, random.Random(seed))
    painter = Painter(wall_char=settings.wall_char, open_char=settings.open_char)
    return CarveJob(grid=grid, generator=generator, painter=painter, seed=seed)


async def animate(
    generator: MazeGenerator,
    painter: Painter,
    delay: float = 0.0,
) -> AsyncIterator[str]:
    """
    Drive a generator step by step, yielding a rendered frame per step.

    The first frame shows the blank grid with only the root cell open.
    Each following frame adds one carved passage. Steps are spaced by
    `delay` seconds; the consumer may stop iterating at any point.
    """
    grid = generator.grid
    logger.info(f"Animating {grid.width}x{grid.height} maze (delay={delay:.3f}s)")

    painter.draw_maze(grid)
    painter.draw_cell(generator.root)
    yield painter.render()

    steps = 0
    for cell in generator:
        if delay > 0:
            await asyncio.sleep(delay)
        painter.draw_cell(cell)
        steps += 1
        yield painter.render()

    logger.info(f"Animation finished after {steps} steps")


def paint_all(job: CarveJob) -> str:
    """Carve whatever is left of a job's maze without pacing and return the picture."""
    job.painter.draw_maze(job.grid)
    job.painter.draw_cell(job.generator.root)
    for cell in job.grid:
        if cell.is_connected:
            job.painter.draw_cell(cell)
    for cell in job.generator:
        job.painter.draw_cell(cell)
    return job.painter.render()


def render_maze(
    width: int,
    height: int,
    seed: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Carve a full maze and return the final picture."""
    return paint_all(create_job(width, height, seed, settings))
