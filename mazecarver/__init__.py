"""Maze Carver - randomized depth-first maze generation."""

__version__ = "1.0.0"
