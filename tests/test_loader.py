import pytest

from config import MazeConfig
from loader import load_maze, parse_maze
from maze import MazeFormatError

TWO_LEVELS = """\
#.###
#...#
next level
#####
#..##
"""


def test_parse_levels():
    maze = parse_maze(TWO_LEVELS)
    assert maze.shape == (2, 2, 5)
    assert maze.symbol((0, 0, 1)) == "."
    assert maze.symbol((1, 1, 3)) == "#"


def test_separator_tolerates_surrounding_whitespace_and_trailing_blank_lines():
    text = "..\n  next level  \n##\n\n\n"
    maze = parse_maze(text)
    assert maze.shape == (2, 1, 2)


def test_windows_line_endings():
    maze = parse_maze("#.#\r\n...\r\nnext level\r\n###\r\n#.#\r\n")
    assert maze.shape == (2, 2, 3)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n\n",
        "next level\n###\n",
        "###\nnext level\n",
        "###\nnext level\nnext level\n###\n",
        "###\n##\n",
        "###\n###\nnext level\n###\n",
        "###\n\n###\n",
    ],
)
def test_rejects_malformed(text):
    with pytest.raises(MazeFormatError):
        parse_maze(text)


def test_custom_symbols(tmp_path):
    config = MazeConfig(wall="X", open_space="o", level_separator="---")
    path = tmp_path / "maze.txt"
    path.write_text("XoX\n---\nXXX\n", encoding="utf-8")
    maze = load_maze(path, config)
    assert maze.shape == (2, 1, 3)
    assert maze.is_open((0, 0, 1))
    assert maze.is_wall((1, 0, 0))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_maze(tmp_path / "nope.txt")
