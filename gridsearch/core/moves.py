# gridsearch/core/moves.py
#!/usr/bin/env python3
from typing import List

from gridsearch.core.board import Board
from gridsearch.core.nodes import NodeArena, PendingMove

# East, West, North, South as (dx, dy). The order fixes which of several
# equally valid paths the search discovers first.
DIRECTIONS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def expand(board: Board, arena: NodeArena, node: int) -> List[PendingMove]:
    """Traversable orthogonal neighbours of `node`, in East/West/North/South order."""
    x, y = arena.cell(node)
    candidates = [PendingMove(x + dx, y + dy, node) for dx, dy in DIRECTIONS]
    return [m for m in candidates if board.is_traversable(m.x, m.y)]
