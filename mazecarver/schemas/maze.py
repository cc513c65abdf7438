"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int


class MazeSummary(BaseModel):
    """Schema for a carved maze summary (no grid data)."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    cell_count: int
    passage_count: int
    root: MazePosition
    seed: Optional[int] = None
