import logging
from pathlib import Path
from typing import List, Union

from config import DEFAULT_CONFIG, MazeConfig
from maze import Maze, MazeFormatError

logger = logging.getLogger(__name__)

# Text format:
#   one line per row, one character per cell
#   a line reading config.level_separator starts the next level
#
#   #.###
#   #...#
#   next level
#   #####
#   #..##


def parse_maze(text: str, config: MazeConfig = DEFAULT_CONFIG) -> Maze:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MazeFormatError("maze input is empty")

    levels: List[List[str]] = [[]]
    for lineno, line in enumerate(lines, start=1):
        if line.strip() == config.level_separator:
            if not levels[-1]:
                raise MazeFormatError(f"line {lineno}: empty level before separator")
            levels.append([])
            continue
        if not line:
            raise MazeFormatError(f"line {lineno}: blank row inside a level")
        levels[-1].append(line)

    if not levels[-1]:
        raise MazeFormatError("maze input ends with an empty level")

    maze = Maze.from_levels(levels, config)
    logger.debug("parsed maze with %d levels, %d rows, %d columns", *maze.shape)
    return maze


def load_maze(path: Union[str, Path], config: MazeConfig = DEFAULT_CONFIG) -> Maze:
    text = Path(path).read_text(encoding="utf-8")
    return parse_maze(text, config)
