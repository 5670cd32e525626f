"""Tests for ScriptWorkbench: the UI-facing inputs and their events."""

from __future__ import annotations

from pathlib import Path

import pytest

from zomboidscripts.config import ConfigStore
from zomboidscripts.discovery import PathDiscovery, Platform, PlatformProfile
from zomboidscripts.events import (
    DataReady,
    EventBus,
    FolderNotFound,
    LoadCompleted,
    LoadFailed,
    LoadStarted,
)
from zomboidscripts.exceptions import ValidationError
from zomboidscripts.loader import ScriptLoader
from zomboidscripts.store import ScriptDataStore, save_cache
from zomboidscripts.workbench import ScriptWorkbench


@pytest.fixture
def bench(
    config: ConfigStore, store: ScriptDataStore, bus: EventBus, tmp_path: Path,
) -> ScriptWorkbench:
    discovery = PathDiscovery(
        config,
        platform=Platform.LINUX,
        profile=PlatformProfile(platform=Platform.LINUX, alternate_roots=["~/Games/PZ"]),
        home=tmp_path / "home",
        executable=tmp_path / "bin" / "tool",
    )
    return ScriptWorkbench(config, store, bus, discovery, ScriptLoader(store, bus))


def _install_alternate(tmp_path: Path) -> Path:
    root = tmp_path / "home" / "Games" / "PZ"
    (root / "media" / "scripts").mkdir(parents=True)
    (root / "media" / "scripts" / "items.txt").write_text("item Axe")
    (root / "media" / "lua").mkdir()
    (root / "media" / "lua" / "main.lua").write_text("print(1)")
    return root


class TestAutoLoad:
    def test_not_found_publishes_folder_not_found(
        self, bench: ScriptWorkbench, events: list,
    ) -> None:
        assert bench.start_auto_load() is None
        assert FolderNotFound() in events
        assert not any(isinstance(e, LoadStarted) for e in events)

    def test_loads_discovered_install(
        self, bench: ScriptWorkbench, tmp_path: Path, events: list,
    ) -> None:
        root = _install_alternate(tmp_path)
        job = bench.start_auto_load()
        assert job is not None
        job.run()
        assert bench.store.paths == [str(root / "media" / "scripts" / "items.txt")]
        assert events[-2:] == [LoadCompleted(1), DataReady(1)]

    def test_uses_tracked_subfolders(
        self, bench: ScriptWorkbench, config: ConfigStore, tmp_path: Path,
    ) -> None:
        _install_alternate(tmp_path)
        bench.start_auto_load().run()
        config.add_subfolder("lua")
        bench.start_auto_load().run()
        assert sorted(f.name for f in bench.store) == ["items.txt", "main.lua"]

    def test_falls_back_to_scripts_dir_when_subfolders_missing(
        self, bench: ScriptWorkbench, config: ConfigStore, tmp_path: Path,
    ) -> None:
        root = _install_alternate(tmp_path)
        config.set_root(str(root))
        config.add_subfolder("maps")
        bench.start_auto_load().run()
        assert [f.name for f in bench.store] == ["items.txt"]


class TestExplicitLoads:
    def test_load_from_path(self, bench: ScriptWorkbench, game_root: Path) -> None:
        job = bench.load_from_path(game_root / "media" / "scripts")
        assert job.run() == 3

    def test_empty_folder_returns_none(
        self, bench: ScriptWorkbench, tmp_path: Path, events: list,
    ) -> None:
        (tmp_path / "empty").mkdir()
        assert bench.load_from_path(tmp_path / "empty") is None
        assert isinstance(events[-1], LoadFailed)

    def test_busy_returns_none(self, bench: ScriptWorkbench, game_root: Path) -> None:
        job = bench.load_from_path(game_root / "media" / "scripts")
        next(job)
        assert bench.load_from_path(game_root / "media" / "lua") is None
        assert bench.start_auto_load() is None
        bench.clear_all()
        assert bench.store.file_count == 1

    def test_multiple_paths(self, bench: ScriptWorkbench, game_root: Path) -> None:
        job = bench.load_from_multiple_paths(
            [game_root / "media" / "scripts", game_root / "media" / "lua"],
        )
        assert job.run() == 4

    def test_reload_uses_configuration(
        self, bench: ScriptWorkbench, config: ConfigStore, game_root: Path,
    ) -> None:
        bench.set_root(game_root)
        bench.add_subfolder("lua")
        bench.reload().run()
        assert [f.name for f in bench.store] == ["main.lua"]


class TestConfigurationInputs:
    def test_set_root_and_subfolders(self, bench: ScriptWorkbench, config: ConfigStore) -> None:
        bench.set_root("/games/pz")
        assert bench.add_subfolder("scripts") is True
        assert bench.add_subfolder("scripts") is False
        assert bench.remove_subfolder("scripts") is True
        assert config.root_path == "/games/pz"

    def test_invalid_subfolder_rejected(self, bench: ScriptWorkbench) -> None:
        with pytest.raises(ValidationError):
            bench.add_subfolder("//")

    def test_clear_all(self, bench: ScriptWorkbench, game_root: Path) -> None:
        bench.load_from_path(game_root / "media" / "scripts").run()
        bench.clear_all()
        assert bench.store.file_count == 0


class TestCache:
    def test_load_cache_publishes_data_ready(
        self, bench: ScriptWorkbench, tmp_path: Path, events: list,
    ) -> None:
        other = ScriptDataStore()
        other.add_file("/pz/a.txt", "a")
        cache = save_cache(other, tmp_path / "c.json")
        assert bench.load_cache(cache) == 1
        assert events[-1] == DataReady(1)

    def test_bad_cache_returns_none(self, bench: ScriptWorkbench, tmp_path: Path) -> None:
        assert bench.load_cache(tmp_path / "missing.json") is None


def test_create_builds_defaults(tmp_path: Path) -> None:
    bench = ScriptWorkbench.create(tmp_path / "config.json", home=tmp_path)
    assert bench.config.path == tmp_path / "config.json"
    assert bench.store.file_count == 0
    assert bench.discovery.home == tmp_path
