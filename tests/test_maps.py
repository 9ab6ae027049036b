import json
from pathlib import Path

import pytest

from gridsearch.core.dfs import run_traversal
from gridsearch.core.maps import (
    load_map, board_from_dict, board_to_dict, default_board,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_START, DEFAULT_END,
)
from gridsearch.core.types import SquareKind, InvalidConfiguration

MAPS = Path(__file__).resolve().parents[1] / "maps"


def test_default_board_matches_constants():
    b = default_board()
    assert (b.width, b.height) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert b.classify(*DEFAULT_START) == SquareKind.START
    assert b.classify(*DEFAULT_END) == SquareKind.END
    assert b.obstacles() == []


def test_cells_become_obstacles():
    b = board_from_dict({
        "width": 3, "height": 2, "start": [0, 0], "goal": [2, 1],
        "cells": [[0, 1, 0],
                  [0, 1, 0]],
    })
    assert b.obstacles() == [(1, 0), (1, 1)]


def test_obstacle_under_endpoint_is_ignored():
    b = board_from_dict({
        "width": 2, "height": 1, "start": [0, 0], "goal": [1, 0],
        "cells": [[1, 1]],
    })
    assert b.render() == "SE"


@pytest.mark.parametrize("data", [
    {"width": 3, "height": 3, "start": [0, 0]},
    {"width": "x", "height": 3, "start": [0, 0], "goal": [1, 1]},
    {"width": 3, "height": 3, "start": [0, 0, 0], "goal": [1, 1]},
    {"width": 3, "height": 3, "start": [1, 1], "goal": [1, 1]},
    {"width": 2, "height": 2, "start": [0, 0], "goal": [1, 1], "cells": [[0, 0]]},
    {"width": 2, "height": 2, "start": [0, 0], "goal": [1, 1], "cells": [1, 2]},
    {"width": 2, "height": 2, "start": [0, 0], "goal": [1, 1], "cells": 5},
    [1, 2, 3],
])
def test_bad_maps_rejected(data):
    with pytest.raises(InvalidConfiguration):
        board_from_dict(data)


def test_load_map_rejects_invalid_json(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text("{not json")
    with pytest.raises(InvalidConfiguration):
        load_map(p)


def test_dict_round_trip_keeps_obstacles(tmp_path):
    b = load_map(MAPS / "02_wall.json")
    p = tmp_path / "copy.json"
    p.write_text(json.dumps(board_to_dict(b)))
    assert load_map(p) == b


@pytest.mark.parametrize("name,solved", [
    ("01_open_field.json", True),
    ("02_wall.json", True),
    ("03_sealed.json", False),
])
def test_bundled_maps(name, solved):
    board = load_map(MAPS / name)
    assert run_traversal(board).solved is solved


def test_load_map_rejects_non_utf8(tmp_path):
    p = tmp_path / "binary.json"
    p.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(InvalidConfiguration):
        load_map(p)
