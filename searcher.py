import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from classifier import Classification, classify
from maze import CellState, Maze, Position, next_position

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    found: bool
    states: np.ndarray
    entry: Optional[Position] = None
    exit: Optional[Position] = None
    attempts: int = 0

    @property
    def path(self) -> Tuple[Position, ...]:
        """Cells tagged PATH, in scan order."""
        return tuple(Position(*map(int, idx)) for idx in np.argwhere(self.states == CellState.PATH))


def walk(states: np.ndarray, start: Position, candidates: frozenset) -> Optional[Position]:
    """
    Depth-first walk with backtracking from start, mutating states in place.

    The state array doubles as the search stack: PATH cells are the current
    trail, and a dead end is tagged PATH_NOT_AVAILABLE before stepping back to
    a neighbouring PATH cell. Returns the boundary cell reached, or None.
    """
    states[start] = CellState.PATH
    current = start

    while True:
        nxt = next_position(states, current, CellState.PATH_MAY_BE_AVAILABLE)
        logger.debug("next possible position from %s: %s", current, nxt)

        if nxt is None:
            states[current] = CellState.PATH_NOT_AVAILABLE
            back = next_position(states, current, CellState.PATH)
            if back is None:
                return None
            current = back
            continue

        states[nxt] = CellState.PATH
        if nxt in candidates and nxt != start:
            return nxt
        current = nxt


def find_path(classification: Classification) -> SearchResult:
    """Try each boundary candidate in order until one walk reaches another."""
    candidates = frozenset(classification.candidates)
    result = SearchResult(found=False, states=classification.fresh_states())

    for start in classification.candidates:
        # every attempt starts from the classification-derived tags
        states = classification.fresh_states()
        result.attempts += 1
        logger.debug("attempt %d: entering at %s", result.attempts, start)

        reached = walk(states, start, candidates)
        result.states = states
        if reached is not None:
            result.found = True
            result.entry = start
            result.exit = reached
            logger.info("path found from %s to %s after %d attempt(s)", start, reached, result.attempts)
            return result

        logger.debug("attempt %d: no path from %s", result.attempts, start)

    logger.info("no path found after %d attempt(s)", result.attempts)
    return result


def solve(maze: Maze) -> SearchResult:
    return find_path(classify(maze))
