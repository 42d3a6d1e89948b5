from dataclasses import dataclass, field
from typing import Iterator, Optional

from .board import Board, Move


@dataclass(frozen=True, eq=False)
class PuzzleState:
    """One search node: a board plus its search bookkeeping.

    States are never mutated once built. Children hold a reference to their
    parent, so the ancestry of any state stays alive for as long as the state
    itself does.

    Ordering is inverted with respect to ``total_cost`` so that a max-heap
    pops the cheapest state first: ``a > b`` means ``a`` is cheaper. Two
    states with the same ``total_cost`` are neither greater nor smaller.
    ``==`` is identity; compare ``board`` for board equality.
    """

    board: Board
    path_cost: int = 0
    heuristic_estimate: Optional[int] = None  # None until scored (root only)
    move_kind: Optional[Move] = None
    parent: Optional["PuzzleState"] = field(default=None, repr=False)
    total_cost: int = field(init=False)

    def __post_init__(self):
        h = self.heuristic_estimate if self.heuristic_estimate is not None else 0
        object.__setattr__(self, "total_cost", self.path_cost + h)

    @classmethod
    def root(cls, board: Board) -> "PuzzleState":
        return cls(board=tuple(board))

    def child(self, board: Board, move: Move, heuristic_estimate: int) -> "PuzzleState":
        return PuzzleState(
            board=board,
            path_cost=self.path_cost + 1,
            heuristic_estimate=heuristic_estimate,
            move_kind=move,
            parent=self,
        )

    @property
    def is_scored(self) -> bool:
        return self.heuristic_estimate is not None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def ancestors(self) -> Iterator["PuzzleState"]:
        """Yield parent, grandparent, ... up to and including the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def __lt__(self, other: "PuzzleState") -> bool:
        return self.total_cost > other.total_cost

    def __le__(self, other: "PuzzleState") -> bool:
        return self.total_cost >= other.total_cost

    def __gt__(self, other: "PuzzleState") -> bool:
        return self.total_cost < other.total_cost

    def __ge__(self, other: "PuzzleState") -> bool:
        return self.total_cost <= other.total_cost
