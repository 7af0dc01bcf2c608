import random
from typing import List, Optional, Tuple

import numpy as np

from config import DEFAULT_CONFIG, MazeConfig
from maze import Maze, Position, Vec3

# Cells live on even levels and odd rows/columns; everything else starts as
# wall. We carve a "perfect maze" using randomized DFS, two steps at a time,
# opening the cell in between. Levels connect through the odd level between.


def _neighbors_2step(l: int, r: int, c: int, levels: int, rows: int, columns: int) -> List[Vec3]:
    out = []
    for dl, dr, dc in [(0, 0, -2), (0, 0, 2), (0, 2, 0), (0, -2, 0), (2, 0, 0), (-2, 0, 0)]:
        nl, nr, nc = l + dl, r + dr, c + dc
        if 0 <= nl < levels and 1 <= nr < rows - 1 and 1 <= nc < columns - 1:
            out.append((nl, nr, nc))
    return out


def _odd(n: int, minimum: int) -> int:
    n = max(n, minimum)
    return n if n % 2 == 1 else n + 1


def generate_maze(
    levels: int,
    rows: int,
    columns: int,
    seed: Optional[int] = None,
    config: MazeConfig = DEFAULT_CONFIG,
) -> Tuple[Maze, Position, Position]:
    """
    Returns:
      maze:  Maze of shape (levels, rows, columns)
      entry: opening on the left wall of level 0
      exit:  opening on the right wall of the top carved level
    Notes:
      Sizes are bumped to odd values (rows/columns at least 3), so 4x8x8
      becomes 5x9x9. Exactly two lateral boundary cells are open.
    """
    rng = random.Random(seed)

    levels = _odd(levels, 1)
    rows = _odd(rows, 3)
    columns = _odd(columns, 3)

    grid = np.full((levels, rows, columns), config.wall, dtype="<U1")

    start = (0, 1, 1)
    stack = [start]
    grid[start] = config.open_space
    visited = {start}

    while stack:
        cl, cr, cc = stack[-1]
        nbrs = _neighbors_2step(cl, cr, cc, levels, rows, columns)
        rng.shuffle(nbrs)

        moved = False
        for nl, nr, nc in nbrs:
            if (nl, nr, nc) in visited:
                continue
            # carve wall between
            grid[(cl + nl) // 2, (cr + nr) // 2, (cc + nc) // 2] = config.open_space
            grid[nl, nr, nc] = config.open_space
            visited.add((nl, nr, nc))
            stack.append((nl, nr, nc))
            moved = True
            break

        if not moved:
            stack.pop()

    entry = Position(0, 1, 0)
    exit_ = Position(levels - 1, rows - 2, columns - 1)
    grid[entry] = config.open_space
    grid[exit_] = config.open_space

    return Maze(grid, config), entry, exit_
