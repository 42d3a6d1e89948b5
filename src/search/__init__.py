"""
Best-first solver for the 8-puzzle.

Expands boards in order of path cost plus a Manhattan or Hamming estimate.
"""

from .config import SolverConfig
from .frontier import Frontier
from .heuristics import Heuristic, evaluate, hamming_distance, manhattan_distance
from .path import trace_moves, trace_path
from .problem import FrontierExhaustedError, SearchProblem, SolveResult, solve_puzzle

__all__ = [
    "SearchProblem",
    "SolveResult",
    "FrontierExhaustedError",
    "SolverConfig",
    "Frontier",
    "Heuristic",
    "evaluate",
    "manhattan_distance",
    "hamming_distance",
    "trace_moves",
    "trace_path",
    "solve_puzzle",
]
