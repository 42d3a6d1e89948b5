import numpy as np
import pytest

from src.puzzle.board import (InvalidBoardError, Move, apply_move, apply_moves,
                              as_grid, find_blank, format_board,
                              format_side_by_side, move_target,
                              parse_board, validate_board)

GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)


class TestMove:
    def test_labels(self):
        assert [m.value for m in Move] == ["Up", "Down", "Left", "Right"]

    def test_deltas(self):
        assert Move.UP.delta == (-1, 0)
        assert Move.DOWN.delta == (1, 0)
        assert Move.LEFT.delta == (0, -1)
        assert Move.RIGHT.delta == (0, 1)


class TestValidation:
    def test_valid_board(self):
        assert validate_board([1, 2, 3, 4, 5, 6, 7, 8, 0]) == GOAL

    def test_wrong_length(self):
        with pytest.raises(InvalidBoardError):
            validate_board([1, 2, 3, 4, 5, 6, 7, 0])

    def test_duplicate_values(self):
        with pytest.raises(InvalidBoardError):
            validate_board([1, 1, 3, 4, 5, 6, 7, 8, 0])

    def test_out_of_range(self):
        with pytest.raises(InvalidBoardError):
            validate_board([1, 2, 3, 4, 5, 6, 7, 9, 0])

    def test_invalid_board_is_value_error(self):
        with pytest.raises(ValueError):
            validate_board([])

    def test_parse_comma_separated(self):
        assert parse_board("1, 2, 3, 4, 5, 6, 7, 8, 0") == GOAL

    def test_parse_compact(self):
        assert parse_board("123456780") == GOAL

    def test_parse_rejects_garbage(self):
        with pytest.raises(InvalidBoardError):
            parse_board("1,2,x,4,5,6,7,8,0")
        with pytest.raises(InvalidBoardError):
            parse_board("12345678")


class TestMoves:
    def test_find_blank(self):
        assert find_blank(GOAL) == 8
        assert find_blank((0, 1, 2, 3, 4, 5, 6, 7, 8)) == 0

    def test_find_blank_missing(self):
        with pytest.raises(ValueError):
            find_blank((1, 2, 3, 4, 5, 6, 7, 8, 9))

    def test_move_target_edges(self):
        # Corners allow exactly two moves
        assert move_target(0, Move.UP) is None
        assert move_target(0, Move.LEFT) is None
        assert move_target(0, Move.DOWN) == 3
        assert move_target(0, Move.RIGHT) == 1
        assert move_target(8, Move.DOWN) is None
        assert move_target(8, Move.RIGHT) is None
        # Row arithmetic, not index ranges: 2 -> 3 is not a legal Right move
        assert move_target(2, Move.RIGHT) is None
        assert move_target(3, Move.LEFT) is None

    def test_move_target_count(self):
        """Corners allow two moves, edges three, the centre four."""
        counts = {0: 2, 1: 3, 2: 2, 3: 3, 4: 4, 5: 3, 6: 2, 7: 3, 8: 2}
        for blank, expected in counts.items():
            targets = [move_target(blank, move) for move in Move]
            assert sum(t is not None for t in targets) == expected

    def test_apply_move(self):
        board = (0, 1, 3, 4, 2, 5, 7, 8, 6)
        assert apply_move(board, Move.RIGHT) == (1, 0, 3, 4, 2, 5, 7, 8, 6)
        assert apply_move(board, Move.DOWN) == (4, 1, 3, 0, 2, 5, 7, 8, 6)

    def test_apply_illegal_move(self):
        with pytest.raises(ValueError):
            apply_move(GOAL, Move.DOWN)

    def test_apply_moves(self):
        board = (0, 1, 3, 4, 2, 5, 7, 8, 6)
        moves = [Move.RIGHT, Move.DOWN, Move.RIGHT, Move.DOWN]
        assert apply_moves(board, moves) == GOAL


class TestRendering:
    def test_as_grid(self):
        grid = as_grid(GOAL)
        assert grid.shape == (3, 3)
        assert np.array_equal(grid[2], [7, 8, 0])

    def test_format_board(self):
        lines = format_board(GOAL)
        assert lines == [
            "-------------",
            "| 1 | 2 | 3 |",
            "| 4 | 5 | 6 |",
            "| 7 | 8 | 0 |",
            "-------------",
        ]

    def test_side_by_side(self):
        text = format_side_by_side((0, 1, 3, 4, 2, 5, 7, 8, 6), GOAL)
        lines = text.splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("Initial State:")
        assert lines[0].endswith("Goal State:")
        assert lines[2].startswith("| 0 | 1 | 3 |")
        assert lines[2].endswith("| 1 | 2 | 3 |")
