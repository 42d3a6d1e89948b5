"""
Configuration for the puzzle solver.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .heuristics import Heuristic


@dataclass
class SolverConfig:
    """Configuration for a search session."""

    heuristic: str = "Manhattan"  # used when solve() is called without one
    validate_boards: bool = True  # reject malformed boards at construction
    progress_interval: int = 10_000  # expansions between progress log lines

    def __post_init__(self):
        """Validate configuration."""
        # normalises case and rejects unknown names
        self.heuristic = Heuristic.from_name(self.heuristic).value
        if self.progress_interval <= 0:
            raise ValueError("progress_interval must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        return cls(
            heuristic=data.get("heuristic", "Manhattan"),
            validate_boards=data.get("validate_boards", True),
            progress_interval=data.get("progress_interval", 10_000),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
