"""
Maze Carver Generator

Randomized depth-first traversal ("recursive backtracker") that carves a
perfect maze over a Grid, one passage per step.

Each call to advance() either carves one new cell and returns it, or
reports that the whole grid is connected. Dead ends are resolved inside a
single call by backtracking along the stack, so the caller only ever sees
carved cells.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from mazecarver.core.grid import Cell, Grid, RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Produced:
    """Step result holding the newly carved cell."""
    cell: Cell


@dataclass(frozen=True)
class Done:
    """Step result signalling that every cell has been carved."""
    pass


DONE = Done()

StepResult = Union[Produced, Done]


class MazeGenerator:
    """
    Stateful randomized DFS over a grid.

    The start cell is chosen at random, marked visited up front and kept
    as the root of the spanning tree: it is never produced and its
    direction stays zero. Every other cell is produced exactly once with
    its direction pointing at its parent.

    Example usage:
        grid = Grid(32, 24)
        generator = MazeGenerator(grid, random.Random(42))

        # Pull steps explicitly
        step = generator.advance()
        while isinstance(step, Produced):
            painter.draw_cell(step.cell)
            step = generator.advance()

        # Or iterate
        for cell in MazeGenerator(Grid(8, 8)):
            painter.draw_cell(cell)
    """

    def __init__(self, grid: Grid, rng: Optional[RandomSource] = None):
        """
        Bind a generator to a grid.

        Args:
            grid: Grid to carve. Cell directions are mutated in place.
            rng: Random source with randrange(n). Defaults to random.Random().
        """
        self.grid = grid
        self.rng: RandomSource = rng if rng is not None else random.Random()

        self.root: Cell = grid.random_cell(self.rng)
        self.current: Cell = self.root

        self._visited: list[bool] = [False] * len(grid)
        self._visited_count: int = 0
        self._stack: list[int] = []

        self._mark_visited(self.root)

    @property
    def visited_count(self) -> int:
        """Number of cells connected so far, the root included."""
        return self._visited_count

    @property
    def stack_depth(self) -> int:
        """Current length of the backtrack stack."""
        return len(self._stack)

    @property
    def is_done(self) -> bool:
        """Whether every cell of the grid has been visited."""
        return self._visited_count == len(self.grid)

    def is_visited(self, cell: Cell) -> bool:
        """Check whether a cell has been connected into the maze."""
        return self._visited[cell.index]

    def _mark_visited(self, cell: Cell) -> None:
        self._visited[cell.index] = True
        self._visited_count += 1

    def _candidates(self, cell: Cell) -> list[Cell]:
        """Unvisited in-grid neighbours of a cell."""
        return [n for n in self.grid.neighbours(cell) if not self._visited[n.index]]

    def advance(self) -> StepResult:
        """
        Carve the next cell.

        Returns:
            Produced with the carved cell, or DONE once the grid is complete.
            Calling again after DONE keeps returning DONE.
        """
        while not self.is_done:
            candidates = self._candidates(self.current)

            if not candidates:
                # Dead end: resume from the most recent cell on the path.
                self.current = self.grid.cell_at(self._stack.pop())
                continue

            neighbour = candidates[self.rng.randrange(len(candidates))]
            neighbour.point_to(self.current)
            self._mark_visited(neighbour)
            self._stack.append(self.current.index)
            self.current = neighbour

            if self.is_done:
                logger.debug(
                    f"Carved {self.grid.width}x{self.grid.height} maze "
                    f"from root {self.root.position.to_dict()}"
                )
            return Produced(neighbour)

        return DONE

    def __iter__(self) -> Iterator[Cell]:
        return self

    def __next__(self) -> Cell:
        step = self.advance()
        if isinstance(step, Produced):
            return step.cell
        raise StopIteration

    def run(self) -> list[Cell]:
        """Carve the rest of the maze and return the produced cells in order."""
        return list(self)
