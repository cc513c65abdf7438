"""API dependencies for dependency injection."""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Query, status

from mazecarver.config import Settings, get_settings

# Type alias for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_dimensions(
    settings: AppSettings,
    width: Optional[int] = Query(None, ge=1, description="Grid columns"),
    height: Optional[int] = Query(None, ge=1, description="Grid rows"),
) -> tuple[int, int]:
    """Resolve requested maze size against configured defaults and limits."""
    width = width if width is not None else settings.default_width
    height = height if height is not None else settings.default_height

    if width > settings.max_width or height > settings.max_height:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Maze size {width}x{height} exceeds the maximum "
                f"{settings.max_width}x{settings.max_height}"
            ),
        )
    return width, height


Dimensions = Annotated[tuple[int, int], Depends(get_dimensions)]
