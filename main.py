#!/usr/bin/env python3
"""
8-Puzzle Solver

Best-first search for the sliding 8-puzzle, guided by Manhattan or Hamming
distance. Runs the bundled demo problems or a board pair given on the
command line.
"""

import argparse
import sys
from typing import List, Optional

from src.puzzle.board import Board, InvalidBoardError, format_side_by_side, parse_board
from src.search.heuristics import Heuristic
from src.search.problem import FrontierExhaustedError, SearchProblem
from src.util.logger import logger, set_level

DEMO_PROBLEMS = [
    ((1, 2, 3, 7, 4, 5, 6, 8, 0), (1, 2, 3, 8, 6, 4, 7, 5, 0)),
    ((2, 8, 1, 3, 4, 6, 7, 5, 0), (3, 2, 1, 8, 0, 4, 7, 5, 6)),
    ((0, 1, 3, 4, 2, 5, 7, 8, 6), (1, 2, 3, 4, 5, 6, 7, 8, 0)),
    ((0, 3, 1, 4, 2, 5, 7, 8, 6), (1, 2, 3, 4, 5, 6, 7, 8, 0)),  # unsolvable
]

log = logger.bind(component="cli")


def run_problem(initial: Board, goal: Board, heuristics: List[Heuristic]) -> bool:
    """Solve one board pair with each heuristic, on a fresh session each time.

    Returns:
        True if every solve reached the goal
    """
    ok = True
    for heuristic in heuristics:
        print(format_side_by_side(initial, goal))
        print(f"Solving using {heuristic.value} distance...")
        try:
            result = SearchProblem(initial, goal).solve(heuristic)
        except FrontierExhaustedError as e:
            print(f"No solution: {e}")
            ok = False
        else:
            print(f"Expanded {result.expanded_count} nodes.")
            print(f"Generated {result.generated_count} nodes.")
            print(f"Solution is {result.moves}")
        print()
    return ok


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="8-Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                  # Run the demo problems
  python main.py --initial 013425786 --goal 123456780
  python main.py --initial 1,2,3,7,4,5,6,8,0 --goal 1,2,3,8,6,4,7,5,0 --heuristic Hamming
        """,
    )

    parser.add_argument(
        "--initial", type=str, default=None, help="Initial board, row-major, 0 = blank"
    )
    parser.add_argument(
        "--goal", type=str, default="1,2,3,4,5,6,7,8,0", help="Goal board"
    )
    parser.add_argument(
        "--heuristic",
        choices=["Manhattan", "Hamming", "both"],
        default="both",
        help="Heuristic to solve with",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show search progress logs"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    if args.heuristic == "both":
        heuristics = [Heuristic.MANHATTAN, Heuristic.HAMMING]
    else:
        heuristics = [Heuristic.from_name(args.heuristic)]

    if args.initial is None:
        problems = DEMO_PROBLEMS
    else:
        try:
            problems = [(parse_board(args.initial), parse_board(args.goal))]
        except InvalidBoardError as e:
            log.error(str(e))
            return 2

    ok = True
    for number, (initial, goal) in enumerate(problems, start=1):
        if len(problems) > 1:
            print(f"\nProblem {number}")
        ok = run_problem(initial, goal, heuristics) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
