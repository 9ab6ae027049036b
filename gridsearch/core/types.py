# gridsearch/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

Cell = Tuple[int, int]  # (col, row)


class SquareKind(Enum):
    UNVISITED = "unvisited"
    OBSTACLE = "obstacle"
    EXPLORED = "explored"
    SOLUTION_PATH = "solution"
    START = "start"
    END = "end"


class GridSearchError(Exception):
    pass


class OutOfBounds(GridSearchError, IndexError):
    """Coordinate outside [0, width) x [0, height)."""
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) outside {width}x{height} board")
        self.x = x
        self.y = y


class InvalidConfiguration(GridSearchError, ValueError):
    pass


@dataclass
class TraversalResult:
    solved: bool
    path: List[Cell] = field(default_factory=list)       # start -> end, empty when unsolved
    explored: List[Cell] = field(default_factory=list)   # order cells were marked EXPLORED
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> str:
        return "done" if self.solved else "no_path"


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    explored: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
