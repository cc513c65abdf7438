# Core module
from .grid import Cell, Grid, InvalidConfiguration, RandomSource, Vector
from .maze_generator import DONE, Done, MazeGenerator, Produced, StepResult
from .painter import Painter

__all__ = [
    "Cell",
    "Grid",
    "InvalidConfiguration",
    "RandomSource",
    "Vector",
    "DONE",
    "Done",
    "MazeGenerator",
    "Produced",
    "StepResult",
    "Painter",
]
