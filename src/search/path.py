"""
Solution path reconstruction.
"""

from typing import List

from ..puzzle.board import Move
from ..puzzle.state import PuzzleState


def trace_moves(state: PuzzleState) -> List[str]:
    """Report the solution for a terminal state as move labels.

    Walks from the state's parent up to the root, collecting each ancestor's
    move, and returns them in root-to-goal order. The root carries no move and
    is left out. The terminal state's own move is not part of the report.

    Args:
        state: Terminal state of a search

    Returns:
        Move labels ("Up", "Down", "Left", "Right"), root first
    """
    labels = [node.move_kind.value for node in state.ancestors() if node.move_kind]
    labels.reverse()
    return labels


def trace_path(state: PuzzleState) -> List[Move]:
    """Every move from the root to ``state``, inclusive of ``state``'s own."""
    moves = [state.move_kind] if state.move_kind else []
    moves.extend(node.move_kind for node in state.ancestors() if node.move_kind)
    moves.reverse()
    return moves
