"""
Best-first search over 8-puzzle boards.
"""

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Union

from ..puzzle.board import (Board, Move, find_blank, move_target, swap_cells,
                            to_board, validate_board)
from ..puzzle.state import PuzzleState
from ..util.logger import logger
from .config import SolverConfig
from .frontier import Frontier
from .heuristics import Heuristic, evaluate
from .path import trace_moves

HeuristicName = Union[str, Heuristic]


class FrontierExhaustedError(RuntimeError):
    """No unvisited candidate remains; the goal is unreachable."""

    def __init__(self, expanded_count: int, generated_count: int):
        super().__init__(
            f"Reached a dead end after expanding {expanded_count} nodes "
            f"({generated_count} generated)"
        )
        self.expanded_count = expanded_count
        self.generated_count = generated_count


@dataclass
class SolveResult:
    """Result of a successful solve."""

    moves: List[str]
    expanded_count: int
    generated_count: int
    heuristic: str
    path_cost: int
    time_taken_ms: float


class SearchProblem:
    """One solve session: frontier, visited boards and node counters.

    Sessions are single-use. Build a new instance for every solve so that no
    visited set is shared between runs.
    """

    def __init__(
        self,
        initial_board: Sequence[int],
        goal_board: Sequence[int],
        config: Optional[SolverConfig] = None,
    ):
        """Initialize a session.

        Args:
            initial_board: Starting arrangement, row-major, 0 for the blank
            goal_board: Target arrangement
            config: Solver configuration (defaults to SolverConfig())

        Raises:
            InvalidBoardError: If a board is not a permutation of 0..8 and
                config.validate_boards is set
        """
        self.config = config or SolverConfig()
        if self.config.validate_boards:
            initial_board = validate_board(initial_board)
            goal_board = validate_board(goal_board)

        self.current = PuzzleState.root(to_board(initial_board))
        self.goal_board: Board = to_board(goal_board)
        self.visited: Set[Board] = set()
        self.frontier: Frontier[PuzzleState] = Frontier()
        self.expanded_count = 0
        self.generated_count = 0
        self.heuristic = Heuristic.from_name(self.config.heuristic)
        self.logger = logger.bind(component="search")
        self._finished = False

    def expand(self) -> List[PuzzleState]:
        """Generate the unvisited successors of the current state.

        Returns:
            Scored child states, in Up, Down, Left, Right order
        """
        state = self.current
        blank = find_blank(state.board)
        self.expanded_count += 1

        successors = []
        for move in Move:
            target = move_target(blank, move)
            if target is None:
                continue
            board = swap_cells(state.board, blank, target)
            if board in self.visited:
                continue
            estimate = evaluate(self.heuristic, board, self.goal_board)
            successors.append(state.child(board, move, estimate))
            self.generated_count += 1

        return successors

    def solve(self, heuristic: Optional[HeuristicName] = None) -> SolveResult:
        """Search until a state with a zero heuristic estimate is adopted.

        Args:
            heuristic: "Manhattan" or "Hamming" (or a Heuristic); defaults to
                the configured heuristic

        Returns:
            SolveResult with the reported move labels and node counters

        Raises:
            FrontierExhaustedError: If the frontier runs dry
            RuntimeError: If this session has already been solved
        """
        if self._finished:
            raise RuntimeError("SearchProblem is single-use; create a new one")
        self._finished = True

        self.heuristic = Heuristic.from_name(heuristic or self.config.heuristic)
        log = self.logger.bind(session=self.heuristic.value)
        log.info(f"Solving using {self.heuristic.value} distance...")
        start_time = time.time()

        if self.current.board == self.goal_board:
            log.info("Initial board already matches the goal")
            return self._result([], start_time)

        while True:
            self.frontier.merge(Frontier(self.expand()))

            next_state = self._pop_unvisited()
            if next_state is None:
                log.warning(
                    f"Frontier exhausted after {self.expanded_count} expansions, "
                    f"{self.generated_count} generated"
                )
                raise FrontierExhaustedError(self.expanded_count, self.generated_count)

            self.visited.add(next_state.board)
            self.current = next_state
            if next_state.heuristic_estimate == 0:
                break

            if self.expanded_count % self.config.progress_interval == 0:
                log.debug(
                    f"expanded={self.expanded_count} generated={self.generated_count} "
                    f"frontier={len(self.frontier)} f={next_state.total_cost}"
                )

        result = self._result(trace_moves(self.current), start_time)
        log.info(
            f"Expanded {result.expanded_count} nodes, generated "
            f"{result.generated_count} in {result.time_taken_ms:.1f}ms"
        )
        return result

    def _pop_unvisited(self) -> Optional[PuzzleState]:
        # Duplicate entries for a board adopted earlier are stale.
        while self.frontier:
            state = self.frontier.pop()
            if state.board not in self.visited:
                return state
        return None

    def _result(self, moves: List[str], start_time: float) -> SolveResult:
        return SolveResult(
            moves=moves,
            expanded_count=self.expanded_count,
            generated_count=self.generated_count,
            heuristic=self.heuristic.value,
            path_cost=self.current.path_cost,
            time_taken_ms=(time.time() - start_time) * 1000,
        )


def solve_puzzle(
    initial_board: Sequence[int],
    goal_board: Sequence[int],
    heuristic: HeuristicName = "Manhattan",
    config: Optional[SolverConfig] = None,
) -> SolveResult:
    """Solve on a fresh session."""
    return SearchProblem(initial_board, goal_board, config).solve(heuristic)
