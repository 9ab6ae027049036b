# gridsearch/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search (explicit stack), one pop per step().

States: idle -> running -> solved | exhausted.

Expansions are pushed in reverse of the move generator's East/West/North/South
order so East is popped first. A cell is deduplicated when popped, not when
pushed; End is recognised on pop and never enters the visited set.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from gridsearch.core.board import Board
from gridsearch.core.moves import expand
from gridsearch.core.nodes import NodeArena, PendingMove
from gridsearch.core.types import Cell, SquareKind, StepResult, TraversalResult

logger = logging.getLogger(__name__)

TERMINAL_STATES = ("solved", "exhausted")


@dataclass
class DepthFirstSearch:
    name: str = "DFS"

    board: Optional[Board] = None
    stack: List[PendingMove] = field(default_factory=list)
    visited: Set[Cell] = field(default_factory=set)
    arena: NodeArena = field(default_factory=NodeArena)
    explored: List[Cell] = field(default_factory=list)
    path: List[Cell] = field(default_factory=list)
    popped_count: int = 0
    state: str = "idle"

    def init(self, board: Board) -> None:
        self.board = board
        self.reset()

    def reset(self) -> None:
        self.stack.clear()
        self.visited.clear()
        self.arena.clear()
        self.explored.clear()
        self.path = []
        self.popped_count = 0
        self.state = "idle"

    def _start(self) -> None:
        root = self.arena.root(self.board.start)
        self.stack.extend(reversed(expand(self.board, self.arena, root)))
        self.state = "running"
        logger.debug("dfs: start %s end %s on %dx%d board",
                     self.board.start, self.board.end, self.board.width, self.board.height)

    def _mark_solution(self, node: int) -> None:
        self.path = self.arena.path_to(node)
        # endpoints keep their START / END markers
        for x, y in self.path[1:-1]:
            self.board.set_classification(x, y, SquareKind.SOLUTION_PATH)

    def step(self) -> StepResult:
        if self.board is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.state == "solved":
            return StepResult(status="done", path=self.path,
                              metrics=self._metrics())
        if self.state == "exhausted":
            return StepResult(status="no_path", metrics=self._metrics())

        if self.state == "idle":
            self._start()

        if not self.stack:
            self.state = "exhausted"
            logger.info("dfs: no path from %s to %s after exploring %d cells",
                        self.board.start, self.board.end, len(self.explored))
            return StepResult(status="no_path", metrics=self._metrics())

        move = self.stack.pop()
        self.popped_count += 1
        node = self.arena.add(move.x, move.y, move.origin)
        cur = (move.x, move.y)

        if self.board.classify(move.x, move.y) == SquareKind.END:
            self.state = "solved"
            self._mark_solution(node)
            logger.info("dfs: reached %s, path length %d, explored %d cells",
                        cur, len(self.path), len(self.explored))
            return StepResult(status="done", current=cur, path=self.path,
                              metrics=self._metrics())

        if cur in self.visited:
            return StepResult(status="running", current=cur, metrics=self._metrics())

        self.visited.add(cur)
        self.board.set_classification(move.x, move.y, SquareKind.EXPLORED)
        self.explored.append(cur)
        moves = expand(self.board, self.arena, node)
        self.stack.extend(reversed(moves))
        logger.debug("dfs: explored %s, pushed %d moves", cur, len(moves))
        return StepResult(status="running", explored=[cur], current=cur,
                          metrics=self._metrics())

    def run(self) -> TraversalResult:
        """Step until solved or exhausted; returns the whole outcome."""
        if self.board is None:
            raise RuntimeError("DepthFirstSearch.run() before init()")
        while self.state not in TERMINAL_STATES:
            self.step()
        solved = self.state == "solved"
        return TraversalResult(solved=solved,
                               path=list(self.path) if solved else [],
                               explored=list(self.explored),
                               metrics=self._metrics())

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stack_size": len(self.stack),
            "explored_count": len(self.explored),
            "path_len": len(self.path),
        }


def run_traversal(board: Board) -> TraversalResult:
    """Search `board` from start to end, marking it in place."""
    algo = DepthFirstSearch()
    algo.init(board)
    return algo.run()
