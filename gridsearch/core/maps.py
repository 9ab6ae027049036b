# gridsearch/core/maps.py
#!/usr/bin/env python3
"""
Board configuration: built-in defaults and the JSON map format.

    {"width": 10, "height": 9, "start": [1, 5], "goal": [8, 5],
     "cells": [[0, 0, 1, ...], ...]}          # [row][col], 1 = obstacle

"cells" is optional; when absent the board starts with no obstacles.
"""

import json
from pathlib import Path
from typing import Union

from gridsearch.core.board import Board, new_board
from gridsearch.core.types import SquareKind, InvalidConfiguration

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 9
DEFAULT_START = (1, 5)
DEFAULT_END = (8, 5)

OBSTACLE_VALUE = 1


def default_board() -> Board:
    return new_board(DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_START, DEFAULT_END)


def board_from_dict(data: dict) -> Board:
    try:
        width  = int(data["width"])
        height = int(data["height"])
        start  = tuple(int(v) for v in data["start"])
        goal   = tuple(int(v) for v in data["goal"])
    except (KeyError, TypeError, ValueError) as ex:
        raise InvalidConfiguration(f"malformed map header: {ex}") from ex
    if len(start) != 2 or len(goal) != 2:
        raise InvalidConfiguration("start and goal must be [x, y] pairs")

    board = new_board(width, height, start, goal)

    cells = data.get("cells")
    if cells is None:
        return board
    try:
        shape_ok = len(cells) == height and all(len(r) == width for r in cells)
    except TypeError as ex:
        raise InvalidConfiguration(f"cells must be rows of values: {ex}") from ex
    if not shape_ok:
        raise InvalidConfiguration("cells size mismatch")
    for y, row in enumerate(cells):
        for x, v in enumerate(row):
            if v == OBSTACLE_VALUE and (x, y) not in (board.start, board.end):
                board.set_classification(x, y, SquareKind.OBSTACLE)
    return board


def load_map(path: Union[str, Path]) -> Board:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as ex:
            raise InvalidConfiguration(f"{path}: {ex}") from ex
    return board_from_dict(data)


def board_to_dict(board: Board) -> dict:
    return {
        "width": board.width,
        "height": board.height,
        "start": list(board.start),
        "goal": list(board.end),
        "cells": [[OBSTACLE_VALUE if k == SquareKind.OBSTACLE else 0 for k in row]
                  for row in board.cells],
    }
