from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from config import DEFAULT_CONFIG, MazeConfig

Vec3 = Tuple[int, int, int]


class CellState(IntEnum):
    WALL = 0
    PATH_NOT_AVAILABLE = 1
    PATH_MAY_BE_AVAILABLE = 2
    PATH = 3


class Position(NamedTuple):
    level: int
    row: int
    column: int

    def step(self, delta: Vec3) -> "Position":
        dl, dr, dc = delta
        return Position(self.level + dl, self.row + dr, self.column + dc)


# Walk priority: the first in-bounds direction with a matching tag wins.
DIRS: List[Vec3] = [
    (0, 0, -1),  # left
    (0, 0, 1),   # right
    (0, 1, 0),   # front
    (0, -1, 0),  # back
    (1, 0, 0),   # above
    (-1, 0, 0),  # below
]


class MazeFormatError(ValueError):
    """Raised when maze input is not a non-empty rectangular 3D grid."""


class Maze:
    """
    Read-only 3D character grid indexed as grid[level, row, column].

    Any symbol other than config.wall is passable; config.open_space is the
    marker the classifier treats as open.
    """

    def __init__(self, grid: np.ndarray, config: MazeConfig = DEFAULT_CONFIG):
        grid = np.array(grid)
        if grid.ndim != 3 or 0 in grid.shape:
            raise MazeFormatError(f"maze must be a non-empty 3D grid, got shape {grid.shape}")
        # numpy stores unicode as 4 bytes per character
        if grid.dtype.kind != "U" or grid.dtype.itemsize != 4:
            raise MazeFormatError(f"maze cells must be single characters, got dtype {grid.dtype}")
        grid.setflags(write=False)
        self.grid = grid
        self.config = config

    @classmethod
    def from_levels(cls, levels: Sequence[Sequence[str]], config: MazeConfig = DEFAULT_CONFIG) -> "Maze":
        """Build from a list of levels, each a list of equal-length row strings."""
        if not levels or not all(levels):
            raise MazeFormatError("maze needs at least one level with at least one row")
        rows = len(levels[0])
        columns = len(levels[0][0])
        for li, level in enumerate(levels):
            if isinstance(level, str):
                raise MazeFormatError(f"level {li} must be a list of row strings, got a single string")
            if len(level) != rows:
                raise MazeFormatError(f"level {li} has {len(level)} rows, expected {rows}")
            for ri, row in enumerate(level):
                if len(row) != columns:
                    raise MazeFormatError(
                        f"level {li} row {ri} has {len(row)} columns, expected {columns}"
                    )
        if columns == 0:
            raise MazeFormatError("maze rows must not be empty")
        return cls(np.array([[list(row) for row in level] for level in levels]), config)

    @property
    def shape(self) -> Vec3:
        return self.grid.shape

    @property
    def levels(self) -> int:
        return self.grid.shape[0]

    @property
    def rows(self) -> int:
        return self.grid.shape[1]

    @property
    def columns(self) -> int:
        return self.grid.shape[2]

    def in_bounds(self, p: Vec3) -> bool:
        l, r, c = p
        return 0 <= l < self.levels and 0 <= r < self.rows and 0 <= c < self.columns

    def symbol(self, p: Vec3) -> str:
        return str(self.grid[p])

    def is_wall(self, p: Vec3) -> bool:
        return bool(self.grid[p] == self.config.wall)

    def is_open(self, p: Vec3) -> bool:
        return bool(self.grid[p] == self.config.open_space)

    def is_boundary(self, p: Vec3) -> bool:
        # Only the lateral faces count; the top and bottom levels do not.
        _, r, c = p
        return r == 0 or c == 0 or r == self.rows - 1 or c == self.columns - 1

    def positions(self) -> Iterator[Position]:
        """All cells in scan order: level, then row, then column."""
        for l in range(self.levels):
            for r in range(self.rows):
                for c in range(self.columns):
                    yield Position(l, r, c)

    def neighbors(self, p: Position) -> Iterator[Position]:
        """In-bounds face neighbours in walk priority order."""
        for delta in DIRS:
            n = p.step(delta)
            if self.in_bounds(n):
                yield n


def next_position(states: np.ndarray, p: Position, tag: CellState) -> Optional[Position]:
    """First neighbour of p (in DIRS order) whose state equals tag, or None."""
    levels, rows, columns = states.shape
    for dl, dr, dc in DIRS:
        l, r, c = p.level + dl, p.row + dr, p.column + dc
        if 0 <= l < levels and 0 <= r < rows and 0 <= c < columns and states[l, r, c] == tag:
            return Position(l, r, c)
    return None
