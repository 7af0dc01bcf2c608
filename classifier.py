import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from maze import CellState, Maze, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """
    Result of one scan over a maze.
      states:     CellState per cell, same shape as the grid
      candidates: non-wall lateral boundary cells in scan order
    Treat both as read-only; the searcher copies states for every attempt.
    """
    maze: Maze
    states: np.ndarray
    candidates: Tuple[Position, ...]

    def fresh_states(self) -> np.ndarray:
        return self.states.copy()


def _has_open_neighbor(maze: Maze, p: Position) -> bool:
    return any(maze.is_open(n) for n in maze.neighbors(p))


def classify(maze: Maze) -> Classification:
    states = np.empty(maze.shape, dtype=np.int8)
    candidates = []

    for p in maze.positions():
        wall = maze.is_wall(p)

        if not wall and maze.is_boundary(p):
            candidates.append(p)

        if wall:
            states[p] = CellState.WALL
        elif _has_open_neighbor(maze, p):
            states[p] = CellState.PATH_MAY_BE_AVAILABLE
        else:
            states[p] = CellState.PATH_NOT_AVAILABLE

    states.setflags(write=False)
    logger.debug("classified %s maze: %d boundary candidates", "x".join(map(str, maze.shape)), len(candidates))
    return Classification(maze=maze, states=states, candidates=tuple(candidates))
