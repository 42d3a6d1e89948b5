"""
8-puzzle board model.

Board helpers, move labels and the immutable search state.
"""

from .board import Board, InvalidBoardError, Move
from .state import PuzzleState

__all__ = ["Board", "InvalidBoardError", "Move", "PuzzleState"]
