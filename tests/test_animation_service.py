"""Tests for the animation service."""

from unittest.mock import AsyncMock, patch

import pytest

from mazecarver.config import Settings
from mazecarver.core.grid import InvalidConfiguration
from mazecarver.services.animation_service import (
    animate,
    create_job,
    paint_all,
    render_maze,
)


@pytest.mark.asyncio
async def test_animate_yields_one_frame_per_step():
    """Test that the first frame shows the root and each step adds a passage."""
    job = create_job(5, 4, seed=3)
    frames = [frame async for frame in animate(job.generator, job.painter, 0)]

    # Root frame plus one frame per carved cell
    assert len(frames) == 20
    assert frames[0].count(".") == 1
    for previous, current in zip(frames, frames[1:]):
        assert current.count(".") == previous.count(".") + 2
    assert job.generator.is_done


@pytest.mark.asyncio
async def test_animate_last_frame_matches_render():
    """Test that animating and rendering the same seed give the same maze."""
    job = create_job(8, 6, seed=11)
    frames = [frame async for frame in animate(job.generator, job.painter, 0)]
    assert frames[-1] == render_maze(8, 6, seed=11)


@pytest.mark.asyncio
async def test_animate_sleeps_between_steps():
    """Test pacing uses the configured delay once per carved cell."""
    job = create_job(3, 3, seed=1)
    with patch(
        "mazecarver.services.animation_service.asyncio.sleep",
        new_callable=AsyncMock,
    ) as mock_sleep:
        frames = [frame async for frame in animate(job.generator, job.painter, 0.25)]

    assert len(frames) == 9
    assert mock_sleep.await_count == 8
    mock_sleep.assert_awaited_with(0.25)


@pytest.mark.asyncio
async def test_animate_stops_when_consumer_stops():
    """Test that a consumer can abandon the animation part way."""
    job = create_job(6, 6, seed=2)
    frames = []
    async for frame in animate(job.generator, job.painter, 0):
        frames.append(frame)
        if len(frames) == 3:
            break

    assert len(frames) == 3
    assert not job.generator.is_done
    assert job.generator.visited_count == 3


@pytest.mark.asyncio
async def test_animate_single_cell():
    """Test a 1x1 maze produces only the root frame."""
    job = create_job(1, 1)
    frames = [frame async for frame in animate(job.generator, job.painter, 0)]
    assert frames == ["XXX\nX.X\nXXX"]


def test_create_job_invalid_size():
    """Test that bad dimensions surface as InvalidConfiguration."""
    with pytest.raises(InvalidConfiguration):
        create_job(0, 4)


def test_create_job_uses_given_settings():
    """Test glyphs and the fallback seed come from the settings passed in."""
    settings = Settings(_env_file=None, wall_char="#", open_char=" ", random_seed=6)
    job = create_job(3, 3, settings=settings)
    assert job.seed == 6
    assert job.painter.wall_char == "#"
    assert render_maze(3, 3, settings=settings) == render_maze(3, 3, seed=6, settings=settings)


def test_create_job_keeps_seed():
    """Test the seed is recorded on the job."""
    assert create_job(2, 2, seed=9).seed == 9


def test_paint_all_finishes_partial_job():
    """Test painting a job whose generator was already advanced."""
    job = create_job(6, 5, seed=4)
    for _ in range(7):
        job.generator.advance()

    assert paint_all(job) == render_maze(6, 5, seed=4)


def test_render_maze_is_reproducible():
    """Test that a seed fixes the picture."""
    assert render_maze(10, 7, seed=5) == render_maze(10, 7, seed=5)
