from typing import Optional

import numpy as np

from config import MazeConfig
from maze import CellState, Maze


def render_level(maze: Maze, states: np.ndarray, level: int, config: Optional[MazeConfig] = None) -> str:
    """One level as text: path cells drawn with the path marker, others as loaded."""
    config = config or maze.config
    rows = []
    for r in range(maze.rows):
        row = []
        for c in range(maze.columns):
            if states[level, r, c] == CellState.PATH:
                row.append(config.path_marker)
            else:
                row.append(str(maze.grid[level, r, c]))
        rows.append(" ".join(row))
    return "\n".join(rows)


def render(maze: Maze, states: np.ndarray, config: Optional[MazeConfig] = None) -> str:
    return "\n\n".join(render_level(maze, states, l, config) for l in range(maze.levels))
