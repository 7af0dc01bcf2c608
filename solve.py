import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

import numpy as np

from config import MazeConfig
from loader import load_maze
from maze import MazeFormatError
from maze_gen import generate_maze
from render import render
from searcher import solve

logger = logging.getLogger(__name__)


def _parse_size(text: str) -> Tuple[int, int, int]:
    try:
        levels, rows, columns = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LEVELSxROWSxCOLUMNS, got {text!r}") from None
    if min(levels, rows, columns) < 1:
        raise argparse.ArgumentTypeError("maze dimensions must be positive")
    return levels, rows, columns


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="maze3d-solve",
        description="Find a path through a multi-level maze from one boundary opening to another.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="maze text file; levels separated by a 'next level' line")
    source.add_argument(
        "--generate",
        type=_parse_size,
        metavar="LxRxC",
        help="generate random mazes of this size instead of reading a file",
    )
    parser.add_argument("--count", type=int, default=1, help="number of mazes to generate (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="seed for the first generated maze")
    parser.add_argument("--wall", default=None, help="wall symbol (default: env MAZE3D_WALL or '#')")
    parser.add_argument("--open", dest="open_space", default=None, help="open space symbol (default: '.')")
    parser.add_argument("--path-marker", default=None, help="symbol used to draw the path (default: '~')")
    parser.add_argument("--no-render", action="store_true", help="only print the outcome")
    parser.add_argument(
        "--log-level",
        default=os.getenv("MAZE3D_LOG_LEVEL", "WARNING"),
        help="logging level (default: env MAZE3D_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)
    if args.file is not None and (args.count != 1 or args.seed is not None):
        parser.error("--count and --seed only apply with --generate")
    return args


def build_config(args: argparse.Namespace) -> MazeConfig:
    config = MazeConfig.from_env()
    overrides = {
        "wall": args.wall,
        "open_space": args.open_space,
        "path_marker": args.path_marker,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def solve_file(path: str, config: MazeConfig, show: bool = True) -> int:
    maze = load_maze(path, config)
    result = solve(maze)
    if show:
        print(render(maze, result.states, config))
        print()
    print("Path found!" if result.found else "No path found!")
    return 0


def run_generated(size: Tuple[int, int, int], n: int, seed: Optional[int], config: MazeConfig, show: bool = False) -> int:
    lengths = []
    attempts = []
    solved = 0
    for i in range(n):
        maze_seed = None if seed is None else seed + i
        maze, _, _ = generate_maze(*size, seed=maze_seed, config=config)
        result = solve(maze)
        attempts.append(result.attempts)
        if result.found:
            solved += 1
            lengths.append(len(result.path))
        if show:
            print(render(maze, result.states, config))
            print()
        print(
            f"maze {i+1}/{n} shape={'x'.join(map(str, maze.shape))} "
            f"found={result.found} path_len={len(result.path) if result.found else 0} attempts={result.attempts}"
        )

    mean_len = np.mean(lengths) if lengths else 0.0
    print(f"solved: {solved}/{n} | mean path length: {mean_len:.2f} | mean attempts: {np.mean(attempts):.2f}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.generate is not None:
        if args.count < 1:
            print("error: --count must be at least 1", file=sys.stderr)
            return 2
        return run_generated(args.generate, args.count, args.seed, config, show=not args.no_render and args.count == 1)

    try:
        return solve_file(args.file, config, show=not args.no_render)
    except FileNotFoundError:
        print(f"error: file not found: {args.file}", file=sys.stderr)
        return 2
    except MazeFormatError as exc:
        logger.debug("rejected maze file %s", args.file, exc_info=True)
        print(f"error: {args.file}: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
