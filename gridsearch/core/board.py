# gridsearch/core/board.py
#!/usr/bin/env python3
"""
Board: fixed-size grid of SquareKind cells.

Cells are stored [row][col]; every public method takes (x, y) = (col, row).
Start and End are stamped at construction and on reset(). The traversal
engine writes EXPLORED / SOLUTION_PATH into the board in place.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from gridsearch.core.types import Cell, SquareKind, OutOfBounds, InvalidConfiguration

# one character per kind for render()
_GLYPHS = {
    SquareKind.UNVISITED:     ".",
    SquareKind.OBSTACLE:      "#",
    SquareKind.EXPLORED:      "o",
    SquareKind.SOLUTION_PATH: "*",
    SquareKind.START:         "S",
    SquareKind.END:           "E",
}


@dataclass
class Board:
    width: int
    height: int
    start: Cell
    end: Cell
    cells: List[List[SquareKind]] = field(default_factory=list)   # [row][col]

    def __post_init__(self) -> None:
        if not self.cells:
            self.reset(self.width, self.height, self.start, self.end)
            return
        _validate(self.width, self.height, self.start, self.end)
        self.start, self.end = tuple(self.start), tuple(self.end)
        if len(self.cells) != self.height or not all(len(r) == self.width for r in self.cells):
            raise InvalidConfiguration(f"cells do not form a {self.width}x{self.height} grid")

    # ---------- queries ----------
    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def classify(self, x: int, y: int) -> SquareKind:
        if not self.in_bounds((x, y)):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.cells[y][x]

    def is_traversable(self, x: int, y: int) -> bool:
        # Start is never re-entered; revisits of explored cells are
        # filtered by the engine's visited set, not here.
        if not self.in_bounds((x, y)):
            return False
        return self.cells[y][x] not in (SquareKind.OBSTACLE, SquareKind.START)

    def cells_of(self, kind: SquareKind) -> Iterator[Cell]:
        for y, row in enumerate(self.cells):
            for x, k in enumerate(row):
                if k == kind:
                    yield (x, y)

    def obstacles(self) -> List[Cell]:
        return list(self.cells_of(SquareKind.OBSTACLE))

    # ---------- mutation ----------
    def set_classification(self, x: int, y: int, kind: SquareKind) -> None:
        if not self.in_bounds((x, y)):
            raise OutOfBounds(x, y, self.width, self.height)
        self.cells[y][x] = kind

    def reset(self, width: int, height: int, start: Cell, end: Cell) -> None:
        """Reinitialise every cell to UNVISITED and stamp Start / End.

        Raises InvalidConfiguration for non-positive dimensions, endpoints
        outside the grid, or Start == End.
        """
        _validate(width, height, start, end)
        self.width, self.height = width, height
        self.start, self.end = tuple(start), tuple(end)
        self.cells = [[SquareKind.UNVISITED] * width for _ in range(height)]
        sx, sy = self.start
        ex, ey = self.end
        self.cells[sy][sx] = SquareKind.START
        self.cells[ey][ex] = SquareKind.END

    def clear_search(self) -> None:
        """Drop EXPLORED / SOLUTION_PATH markings, keeping obstacles."""
        for row in self.cells:
            for x, k in enumerate(row):
                if k in (SquareKind.EXPLORED, SquareKind.SOLUTION_PATH):
                    row[x] = SquareKind.UNVISITED

    def copy(self) -> "Board":
        return Board(self.width, self.height, self.start, self.end,
                     [list(row) for row in self.cells])

    def render(self) -> str:
        return "\n".join("".join(_GLYPHS[k] for k in row) for row in self.cells)

    def __str__(self) -> str:
        return self.render()


def _validate(width: int, height: int, start: Cell, end: Cell) -> None:
    if width <= 0 or height <= 0:
        raise InvalidConfiguration(f"Board dimensions must be positive: {width}x{height}")
    for label, c in (("start", start), ("end", end)):
        if not isinstance(c, (tuple, list)) or len(c) != 2:
            raise InvalidConfiguration(f"{label} must be an (x, y) pair, got {c!r}")
        x, y = c
        if not (0 <= x < width and 0 <= y < height):
            raise InvalidConfiguration(f"{label} {(x, y)} outside {width}x{height} board")
    if tuple(start) == tuple(end):
        raise InvalidConfiguration(f"start and end coincide at {tuple(start)}")


def new_board(width: int, height: int, start: Cell, end: Cell) -> Board:
    return Board(width, height, start, end)
