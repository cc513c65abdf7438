"""Maze routes for rendering and animating carved mazes."""

import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse, StreamingResponse

from mazecarver.api.deps import AppSettings, Dimensions
from mazecarver.schemas.maze import MazePosition, MazeSummary
from mazecarver.services.animation_service import animate, create_job, render_maze

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maze", tags=["Mazes"])

# Separates frames in the animation stream
FRAME_SEPARATOR = "\f\n"


@router.get("/render", response_class=PlainTextResponse)
def get_rendered_maze(
    dimensions: Dimensions,
    settings: AppSettings,
    seed: Optional[int] = Query(None, description="Seed for reproducible mazes"),
) -> str:
    """Carve a maze and return the finished picture as text."""
    width, height = dimensions
    return render_maze(width, height, seed, settings) + "\n"


@router.get("/summary", response_model=MazeSummary)
def get_maze_summary(
    dimensions: Dimensions,
    settings: AppSettings,
    seed: Optional[int] = Query(None, description="Seed for reproducible mazes"),
) -> MazeSummary:
    """Carve a maze and return its shape metadata.

    Grid data is not included - use GET /v1/maze/render for the picture.
    """
    width, height = dimensions
    job = create_job(width, height, seed, settings)
    passages = len(job.generator.run())
    root = job.generator.root.position

    return MazeSummary(
        width=job.grid.width,
        height=job.grid.height,
        cell_count=len(job.grid),
        passage_count=passages,
        root=MazePosition(x=root.x, y=root.y),
        seed=job.seed,
    )


@router.get("/animate")
async def stream_maze_animation(
    dimensions: Dimensions,
    settings: AppSettings,
    seed: Optional[int] = Query(None, description="Seed for reproducible mazes"),
    delay: Optional[float] = Query(
        None,
        ge=0,
        le=5,
        description="Seconds between frames (defaults to STEP_DELAY_SECONDS)",
    ),
) -> StreamingResponse:
    """Stream one text frame per carved passage.

    Frames are separated by a form feed line. Every frame repeats the
    whole canvas, so the maze size is capped by MAX_ANIMATE_CELLS.
    """
    width, height = dimensions
    if width * height > settings.max_animate_cells:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Animated maze {width}x{height} exceeds the limit of "
                f"{settings.max_animate_cells} cells"
            ),
        )

    job = create_job(width, height, seed, settings)
    step_delay = settings.step_delay_seconds if delay is None else delay

    async def frames() -> AsyncIterator[str]:
        async for frame in animate(job.generator, job.painter, step_delay):
            yield frame + "\n" + FRAME_SEPARATOR

    logger.info(f"Streaming {width}x{height} maze animation (seed={job.seed})")
    return StreamingResponse(frames(), media_type="text/plain")
