from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
BLANK = 0

Board = Tuple[int, ...]  # 9 cells, row-major; 0 = blank


class InvalidBoardError(ValueError):
    """Raised when a board is not a permutation of 0..8."""


class Move(Enum):
    """Direction the blank slides in. Values are the reported move labels."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, column) offset of the blank."""
        return MOVE_DELTAS[self]


MOVE_DELTAS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}


def to_board(cells: Iterable[int]) -> Board:
    return tuple(int(c) for c in cells)


def validate_board(board: Sequence[int]) -> Board:
    """Check that a board holds each of 0..8 exactly once.

    Args:
        board: Candidate board, any sequence of ints

    Returns:
        The board as a tuple

    Raises:
        InvalidBoardError: If the board is malformed
    """
    cells = to_board(board)
    if len(cells) != NUM_CELLS:
        raise InvalidBoardError(
            f"Board must have {NUM_CELLS} cells, got {len(cells)}"
        )
    if sorted(cells) != list(range(NUM_CELLS)):
        raise InvalidBoardError(
            f"Board must be a permutation of 0..{NUM_CELLS - 1}, got {list(cells)}"
        )
    return cells


def parse_board(text: str) -> Board:
    """Parse "1,2,3,4,5,6,7,8,0" (or "123456780") into a validated board."""
    text = text.strip()
    if "," in text:
        parts = [p for p in text.split(",") if p.strip()]
    else:
        parts = list(text.replace(" ", ""))
    try:
        cells = [int(p) for p in parts]
    except ValueError:
        raise InvalidBoardError(f"Board contains non-integer cells: {text!r}")
    return validate_board(cells)


def index_to_position(index: int) -> Tuple[int, int]:
    return divmod(index, BOARD_SIZE)


def find_blank(board: Board) -> int:
    """Index of the blank cell.

    Raises:
        ValueError: If the board has no blank
    """
    try:
        return board.index(BLANK)
    except ValueError:
        raise ValueError(f"Cannot find the blank in board {list(board)}")


def move_target(blank_index: int, move: Move) -> Optional[int]:
    """Index the blank would swap with, or None if the move leaves the grid."""
    row, col = index_to_position(blank_index)
    d_row, d_col = move.delta
    new_row, new_col = row + d_row, col + d_col
    if not (0 <= new_row < BOARD_SIZE and 0 <= new_col < BOARD_SIZE):
        return None
    return new_row * BOARD_SIZE + new_col



def swap_cells(board: Board, i: int, j: int) -> Board:
    cells = list(board)
    cells[i], cells[j] = cells[j], cells[i]
    return tuple(cells)


def apply_move(board: Board, move: Move) -> Board:
    """Slide the blank one step.

    Raises:
        ValueError: If the move is illegal for this board
    """
    blank = find_blank(board)
    target = move_target(blank, move)
    if target is None:
        raise ValueError(f"Move {move.value} is illegal with blank at {blank}")
    return swap_cells(board, blank, target)


def apply_moves(board: Board, moves: Iterable[Move]) -> Board:
    for move in moves:
        board = apply_move(board, move)
    return board


def as_grid(board: Board) -> np.ndarray:
    return np.asarray(board, dtype=int).reshape(BOARD_SIZE, BOARD_SIZE)


def format_board(board: Board) -> List[str]:
    """Render a board as the lines of a boxed 3x3 table."""
    border = "-" * (4 * BOARD_SIZE + 1)
    lines = [border]
    for row in as_grid(board):
        lines.append("| " + " | ".join(str(v) for v in row) + " |")
    lines.append(border)
    return lines


def format_side_by_side(
    left: Board, right: Board, titles: Tuple[str, str] = ("Initial State:", "Goal State:")
) -> str:
    """Render two boards next to each other, as the CLI prints them."""
    left_lines = [titles[0]] + format_board(left)
    right_lines = [titles[1]] + format_board(right)
    width = max(len(line) for line in left_lines) + 13
    return "\n".join(
        f"{l:<{width}}{r}".rstrip() for l, r in zip(left_lines, right_lines)
    )
