"""
Text painter for carved mazes.

Canvas Format:
    X = Wall
    . = Carved passage

Cell (x, y) occupies canvas square (2x + 1, 2y + 1); the squares between
two cells open up when one is carved from the other. The outer border is
always wall.
"""

from mazecarver.core.grid import Cell, Grid


class Painter:
    """Draws a grid and its carved passages onto a text canvas."""

    def __init__(self, wall_char: str = "X", open_char: str = "."):
        if len(wall_char) != 1 or len(open_char) != 1:
            raise ValueError("Painter glyphs must be single characters")
        if wall_char == open_char:
            raise ValueError("Wall and open glyphs must differ")

        self.wall_char = wall_char
        self.open_char = open_char
        self.canvas: list[list[str]] = []

    @property
    def width(self) -> int:
        return len(self.canvas[0]) if self.canvas else 0

    @property
    def height(self) -> int:
        return len(self.canvas)

    def draw_maze(self, grid: Grid) -> None:
        """Reset the canvas to solid wall sized for the grid."""
        self.canvas = [
            [self.wall_char] * (2 * grid.width + 1)
            for _ in range(2 * grid.height + 1)
        ]

    def draw_cell(self, cell: Cell) -> None:
        """Open the passage between a cell and the cell it was carved from."""
        if not self.canvas:
            raise RuntimeError("draw_maze must be called before draw_cell")

        x1 = 2 * cell.position.x + 1
        y1 = 2 * cell.position.y + 1
        x2 = 2 * (cell.position.x + cell.direction.x) + 1
        y2 = 2 * (cell.position.y + cell.direction.y) + 1

        for y in range(min(y1, y2), max(y1, y2) + 1):
            for x in range(min(x1, x2), max(x1, x2) + 1):
                self.canvas[y][x] = self.open_char

    def is_open(self, x: int, y: int) -> bool:
        """Check a canvas square. Out of bounds counts as wall."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            return False
        return self.canvas[y][x] == self.open_char

    def render(self) -> str:
        """Render the canvas as newline separated rows."""
        return "\n".join("".join(row) for row in self.canvas)
