import pytest

from gridsearch.core.board import new_board
from gridsearch.core.types import SquareKind


def place(board, cells, kind=SquareKind.OBSTACLE):
    for x, y in cells:
        board.set_classification(x, y, kind)
    return board


@pytest.fixture
def open_3x3():
    return new_board(3, 3, (0, 0), (2, 2))


@pytest.fixture
def make_board():
    """Returns a function building a board with obstacles already painted."""
    def _make(width, height, start, end, obstacles=()):
        return place(new_board(width, height, start, end), obstacles)
    return _make
