"""Shared fixtures for zomboid-scripts tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from zomboidscripts.config import ConfigStore
from zomboidscripts.events import Event, EventBus
from zomboidscripts.store import ScriptDataStore


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def events(bus: EventBus) -> list[Event]:
    """Every event published on ``bus``, in order."""
    recorded: list[Event] = []
    bus.subscribe_all(recorded.append)
    return recorded


@pytest.fixture
def config(tmp_path: Path, bus: EventBus) -> ConfigStore:
    return ConfigStore(tmp_path / "settings" / "config.json", bus=bus)


@pytest.fixture
def store(bus: EventBus) -> ScriptDataStore:
    return ScriptDataStore(bus=bus)


@pytest.fixture
def game_root(tmp_path: Path) -> Path:
    """A fake Project Zomboid root with a few script files."""
    root = tmp_path / "ProjectZomboid"
    scripts = root / "media" / "scripts"
    (scripts / "vehicles").mkdir(parents=True)
    (scripts / "items.txt").write_text("module Base\n{\n    item Axe\n    {\n    }\n}\n")
    (scripts / "recipes.txt").write_text("module Base\n{\n    recipe Make Plank\n}\n")
    (scripts / "vehicles" / "vehicle_van.txt").write_text("module Base\n{\n    vehicle Van\n}\n")
    (root / "media" / "lua").mkdir()
    (root / "media" / "lua" / "main.lua").write_text("print('hello')\n")
    return root
