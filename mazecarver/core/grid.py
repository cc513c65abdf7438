"""
Maze Carver Grid Model

Rectangular grid of cells used by the maze generator:
- Vector value type for positions and offsets
- Cell with a direction pointing back at the cell it was carved from
- Grid with row-major storage and bounds-checked lookup

Coordinates:
    x grows to the east, y grows to the south.
    Cell (x, y) is stored at index y * width + x.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol


class InvalidConfiguration(ValueError):
    """Exception raised when a grid cannot be built from the given dimensions."""

    pass


class RandomSource(Protocol):
    """Anything that can pick a uniform integer in [0, n)."""

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Vector:
    """2D integer position or offset."""
    x: int = 0
    y: int = 0

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    @property
    def is_zero(self) -> bool:
        """True for the (0, 0) vector."""
        return self.x == 0 and self.y == 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


ZERO = Vector(0, 0)


@dataclass(eq=False)
class Cell:
    """
    A single grid cell.

    `direction` stays at zero until the cell is carved into the maze, then
    points from this cell toward the cell it was reached from.
    """
    index: int
    position: Vector
    direction: Vector = field(default=ZERO)

    @property
    def is_connected(self) -> bool:
        """Whether the cell has been carved from a parent."""
        return not self.direction.is_zero

    @property
    def parent_position(self) -> Vector:
        """Position at the other end of this cell's passage."""
        return self.position + self.direction

    def point_to(self, other: "Cell") -> None:
        """Connect this cell to `other`."""
        self.direction = other.position - self.position


class Grid:
    """
    Rectangular grid owning every cell of the maze.

    Example usage:
        grid = Grid(32, 24)
        cell = grid.get_cell(Vector(3, 4))
        start = grid.random_cell(random.Random(7))
    """

    def __init__(self, width: int, height: int):
        """
        Build a width x height grid.

        Args:
            width: Number of columns, must be positive.
            height: Number of rows, must be positive.

        Raises:
            InvalidConfiguration: If either dimension is not a positive integer.
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"Grid {name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidConfiguration(f"Grid {name} must be positive, got {value}")

        self.width: int = width
        self.height: int = height
        self.cells: list[Cell] = [
            Cell(index=i, position=Vector(i % width, i // width))
            for i in range(width * height)
        ]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def contains(self, position: Vector) -> bool:
        """Check whether a position lies inside the grid."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def get_cell(self, position: Vector) -> Optional[Cell]:
        """Get the cell at position, or None when it is outside the grid."""
        if not self.contains(position):
            return None
        return self.cells[position.y * self.width + position.x]

    def cell_at(self, index: int) -> Cell:
        """Get a cell by its row-major index."""
        return self.cells[index]

    def neighbours(self, cell: Cell) -> list[Cell]:
        """
        Get the in-grid neighbours of a cell.

        Order is east, west, south, north.
        """
        pos = cell.position
        candidates = [
            self.get_cell(Vector(pos.x + 1, pos.y)),
            self.get_cell(Vector(pos.x - 1, pos.y)),
            self.get_cell(Vector(pos.x, pos.y + 1)),
            self.get_cell(Vector(pos.x, pos.y - 1)),
        ]
        return [c for c in candidates if c is not None]

    def random_cell(self, rng: RandomSource) -> Cell:
        """Pick a cell uniformly at random."""
        index = rng.randrange(len(self.cells))
        y = index // self.width
        x = index - y * self.width
        cell = self.get_cell(Vector(x, y))
        if cell is None:
            raise RuntimeError(f"Random source returned out of range index: {index}")
        return cell
