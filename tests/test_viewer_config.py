from pathlib import Path

import pygame

from gridsearch.app import viewer


def test_no_map_selected(monkeypatch):
    monkeypatch.delenv("GRIDSEARCH_MAP", raising=False)
    monkeypatch.setattr(viewer.sys, "argv", ["viewer"])
    assert viewer.resolve_map_path() is None


def test_env_selects_map(monkeypatch):
    monkeypatch.setenv("GRIDSEARCH_MAP", "maps/02_wall.json")
    monkeypatch.setattr(viewer.sys, "argv", ["viewer"])
    assert viewer.resolve_map_path() == Path("maps/02_wall.json")


def test_cli_overrides_env(monkeypatch):
    monkeypatch.setenv("GRIDSEARCH_MAP", "maps/02_wall.json")
    monkeypatch.setattr(viewer.sys, "argv", ["viewer", "--map=maps/03_sealed.json"])
    assert viewer.resolve_map_path() == Path("maps/03_sealed.json")


def test_bundled_map_files_exist():
    assert all(p.exists() for p in viewer.MAP_FILES.values())


def test_panel_button_fires_only_inside_its_rect():
    clicks = []
    btn = viewer.PanelButton("Start", pygame.Rect(10, 10, 100, 30), lambda: clicks.append(1))
    assert btn.click((5, 5)) is False
    assert btn.click((50, 20)) is True
    assert clicks == [1]
