import numpy as np
import pytest

from maze import CellState, Maze, MazeFormatError, Position, next_position


def test_position_is_structural_and_hashable():
    a = Position(1, 2, 3)
    assert a == Position(1, 2, 3)
    assert a == (1, 2, 3)
    assert len({a, Position(1, 2, 3)}) == 1
    assert a.step((0, 0, -1)) == Position(1, 2, 2)


def test_from_levels_shape_and_symbols():
    maze = Maze.from_levels([["#.#", "..."], ["###", "#x#"]])
    assert maze.shape == (2, 2, 3)
    assert maze.levels == 2 and maze.rows == 2 and maze.columns == 3
    assert maze.is_wall((0, 0, 0))
    assert maze.is_open((0, 0, 1))
    assert not maze.is_wall((1, 1, 1)) and not maze.is_open((1, 1, 1))
    assert maze.symbol((1, 1, 1)) == "x"


@pytest.mark.parametrize(
    "levels",
    [
        [],
        [[]],
        [["###", "##"]],
        [["###", "###"], ["###"]],
        [[""]],
    ],
)
def test_from_levels_rejects_malformed(levels):
    with pytest.raises(MazeFormatError):
        Maze.from_levels(levels)


def test_maze_rejects_non_3d_and_multichar_cells():
    with pytest.raises(MazeFormatError):
        Maze(np.array([["#", "."]]))
    with pytest.raises(MazeFormatError):
        Maze(np.array([[["##", "."]]]))


def test_grid_is_read_only():
    maze = Maze.from_levels([["..."]])
    with pytest.raises(ValueError):
        maze.grid[0, 0, 0] = "#"


def test_boundary_ignores_top_and_bottom_levels():
    maze = Maze.from_levels([["###", "#.#", "###"]] * 3)
    assert not maze.is_boundary((0, 1, 1))
    assert not maze.is_boundary((2, 1, 1))
    assert maze.is_boundary((1, 0, 1))
    assert maze.is_boundary((1, 1, 2))


def test_positions_scan_order():
    maze = Maze.from_levels([["..", ".."], ["..", ".."]])
    positions = list(maze.positions())
    assert positions[:3] == [(0, 0, 0), (0, 0, 1), (0, 1, 0)]
    assert positions[-1] == (1, 1, 1)
    assert len(positions) == 8


def test_neighbors_follow_walk_priority():
    maze = Maze.from_levels([["..."] * 3] * 3)
    center = Position(1, 1, 1)
    assert list(maze.neighbors(center)) == [
        (1, 1, 0),  # left
        (1, 1, 2),  # right
        (1, 2, 1),  # front
        (1, 0, 1),  # back
        (2, 1, 1),  # above
        (0, 1, 1),  # below
    ]
    assert list(maze.neighbors(Position(0, 0, 0))) == [(0, 0, 1), (0, 1, 0), (1, 0, 0)]


def test_next_position_picks_first_matching_direction():
    states = np.full((3, 3, 3), CellState.WALL, dtype=np.int8)
    center = Position(1, 1, 1)
    states[0, 1, 1] = CellState.PATH_MAY_BE_AVAILABLE  # below
    states[1, 0, 1] = CellState.PATH_MAY_BE_AVAILABLE  # back
    assert next_position(states, center, CellState.PATH_MAY_BE_AVAILABLE) == (1, 0, 1)

    states[1, 1, 2] = CellState.PATH_MAY_BE_AVAILABLE  # right
    assert next_position(states, center, CellState.PATH_MAY_BE_AVAILABLE) == (1, 1, 2)
    assert next_position(states, center, CellState.PATH) is None


def test_from_levels_rejects_bare_string_level():
    # a plain string would otherwise turn each character into a row
    with pytest.raises(MazeFormatError):
        Maze.from_levels(["#####", "....."])
    with pytest.raises(MazeFormatError):
        Maze.from_levels([["#.#"], "#.#"])
