"""
Heuristic estimates for the 8-puzzle.

Both heuristics count the blank like any other tile, so an estimate is 0 only
when the board already matches the goal.
"""

from enum import Enum
from functools import lru_cache
from typing import Tuple, Union

from ..puzzle.board import BOARD_SIZE, Board


class Heuristic(Enum):
    """Selectable heuristics. Values are the names accepted by ``solve``."""

    MANHATTAN = "Manhattan"
    HAMMING = "Hamming"

    @classmethod
    def from_name(cls, name: Union[str, "Heuristic"]) -> "Heuristic":
        if isinstance(name, Heuristic):
            return name
        for heuristic in cls:
            if heuristic.value.lower() == str(name).strip().lower():
                return heuristic
        valid = [h.value for h in cls]
        raise ValueError(f"heuristic must be one of: {valid}, got {name!r}")


@lru_cache(maxsize=32)
def _positions(board: Board) -> Tuple[Tuple[int, int], ...]:
    """(row, col) of every tile value, indexed by value."""
    positions = [(0, 0)] * len(board)
    for index, value in enumerate(board):
        positions[value] = divmod(index, BOARD_SIZE)
    return tuple(positions)


def manhattan_distance(board: Board, goal: Board) -> int:
    """Sum over tiles of |row offset| + |column offset| from their goal cell."""
    goal_positions = _positions(goal)
    total = 0
    for index, value in enumerate(board):
        row, col = divmod(index, BOARD_SIZE)
        goal_row, goal_col = goal_positions[value]
        total += abs(row - goal_row) + abs(col - goal_col)
    return total


def hamming_distance(board: Board, goal: Board) -> int:
    """Number of cells whose value differs from the goal."""
    return sum(1 for value, target in zip(board, goal) if value != target)


def evaluate(heuristic: Heuristic, board: Board, goal: Board) -> int:
    if heuristic is Heuristic.MANHATTAN:
        return manhattan_distance(board, goal)
    return hamming_distance(board, goal)
