"""Tests for ConfigStore persistence, mutation and live subfolder filtering."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from zomboidscripts.config import ConfigLoadStatus, ConfigStore, sanitize_subfolder
from zomboidscripts.events import ConfigUpdated
from zomboidscripts.exceptions import ConfigError, ValidationError


# ---------------------------------------------------------------------------
# load() / save()
# ---------------------------------------------------------------------------


class TestLoadAndSave:
    """Reading and writing the JSON config file."""

    def test_missing_file_keeps_defaults(self, config: ConfigStore) -> None:
        assert config.load() is ConfigLoadStatus.NOT_FOUND
        assert config.root_path == ""
        assert config.subfolders == []
        assert config.last_error is None

    def test_malformed_json_keeps_defaults(self, config: ConfigStore) -> None:
        config.path.parent.mkdir(parents=True)
        config.path.write_text("{not json", encoding="utf-8")
        assert config.load() is ConfigLoadStatus.PARSE_ERROR
        assert isinstance(config.last_error, ConfigError)
        assert config.root_path == ""

    def test_non_object_document_is_parse_error(self, config: ConfigStore) -> None:
        config.path.parent.mkdir(parents=True)
        config.path.write_text("[1, 2, 3]", encoding="utf-8")
        assert config.load() is ConfigLoadStatus.PARSE_ERROR
        assert config.subfolders == []

    def test_missing_keys_default_to_empty(self, config: ConfigStore) -> None:
        config.path.parent.mkdir(parents=True)
        config.path.write_text(json.dumps({"project_zomboid_root": "/games/pz"}))
        assert config.load() is ConfigLoadStatus.LOADED
        assert config.root_path == "/games/pz"
        assert config.subfolders == []

    def test_loaded_subfolders_are_sanitized_and_unique(self, config: ConfigStore) -> None:
        config.path.parent.mkdir(parents=True)
        config.path.write_text(json.dumps({
            "media_subfolders": ["scripts", "/scripts/", "lua", 42, "", "\\"],
        }))
        config.load()
        assert config.subfolders == ["scripts", "lua"]

    def test_save_writes_expected_keys(self, config: ConfigStore) -> None:
        config.set_root("/games/pz")
        config.add_subfolder("scripts")
        data = json.loads(config.path.read_text(encoding="utf-8"))
        assert data["project_zomboid_root"] == "/games/pz"
        assert data["media_subfolders"] == ["scripts"]
        assert data["last_load_timestamp"]

    def test_save_is_pretty_printed(self, config: ConfigStore) -> None:
        config.save()
        assert "\n  " in config.path.read_text(encoding="utf-8")

    def test_round_trip_through_new_instance(self, config: ConfigStore) -> None:
        config.set_root("/games/pz")
        config.add_subfolder("scripts")
        config.add_subfolder("lua")
        reloaded = ConfigStore(config.path)
        assert reloaded.load() is ConfigLoadStatus.LOADED
        assert reloaded.root_path == "/games/pz"
        assert reloaded.subfolders == ["scripts", "lua"]
        assert reloaded.last_updated == config.last_updated

    def test_save_leaves_no_temp_file(self, config: ConfigStore) -> None:
        config.save()
        leftovers = [p.name for p in config.path.parent.iterdir()]
        assert leftovers == ["config.json"]

    def test_failed_write_keeps_previous_file(
        self, config: ConfigStore, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        config.set_root("/games/pz")
        before = config.path.read_text(encoding="utf-8")

        def broken_replace(src: object, dst: object) -> None:
            raise OSError("disk full")

        monkeypatch.setattr("zomboidscripts.config.store.os.replace", broken_replace)
        with pytest.raises(OSError):
            config.set_root("/elsewhere")
        assert config.path.read_text(encoding="utf-8") == before
        assert not config.path.with_name("config.json.tmp").exists()


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


class TestMutations:
    """set_root / add / remove / reset and their notifications."""

    def test_add_subfolder_is_idempotent(self, config: ConfigStore) -> None:
        assert config.add_subfolder("scripts") is True
        assert config.add_subfolder("scripts") is False
        assert config.subfolders == ["scripts"]

    def test_add_strips_separators(self, config: ConfigStore) -> None:
        assert config.add_subfolder("/scripts/") is True
        assert config.add_subfolder("scripts") is False
        assert config.subfolders == ["scripts"]

    def test_add_rejects_empty_name(self, config: ConfigStore) -> None:
        with pytest.raises(ValidationError):
            config.add_subfolder(" / \\ ")
        assert config.subfolders == []
        assert not config.path.exists()

    def test_insertion_order_kept(self, config: ConfigStore) -> None:
        for name in ("scripts", "lua", "maps"):
            config.add_subfolder(name)
        assert config.subfolders == ["scripts", "lua", "maps"]

    def test_remove_subfolder(self, config: ConfigStore) -> None:
        config.add_subfolder("scripts")
        assert config.remove_subfolder("scripts") is True
        assert config.remove_subfolder("scripts") is False
        assert config.subfolders == []

    def test_reset_clears_everything(self, config: ConfigStore) -> None:
        config.set_root("/games/pz")
        config.add_subfolder("scripts")
        config.reset()
        assert config.root_path == ""
        assert config.subfolders == []
        assert ConfigStore(config.path).load() is ConfigLoadStatus.LOADED

    def test_every_mutation_publishes(self, config: ConfigStore, events: list) -> None:
        config.set_root("/games/pz")
        config.add_subfolder("scripts")
        config.add_subfolder("scripts")
        config.remove_subfolder("scripts")
        updates = [e for e in events if isinstance(e, ConfigUpdated)]
        assert len(updates) == 3
        assert updates[1] == ConfigUpdated("/games/pz", ("scripts",))
        assert updates[2].subfolders == ()

    def test_subfolders_property_is_a_copy(self, config: ConfigStore) -> None:
        config.add_subfolder("scripts")
        config.subfolders.append("evil")
        assert config.subfolders == ["scripts"]


# ---------------------------------------------------------------------------
# Filesystem-backed queries
# ---------------------------------------------------------------------------


class TestQueries:
    """has_valid_root() and subfolder_paths() reflect the live filesystem."""

    def test_no_root_is_invalid(self, config: ConfigStore) -> None:
        assert config.has_valid_root() is False
        assert config.subfolder_paths() == []

    def test_root_without_media_is_invalid(self, config: ConfigStore, tmp_path: Path) -> None:
        config.set_root(str(tmp_path))
        assert config.has_valid_root() is False

    def test_valid_root(self, config: ConfigStore, game_root: Path) -> None:
        config.set_root(str(game_root))
        assert config.has_valid_root() is True

    def test_subfolder_paths_filters_missing(self, config: ConfigStore, game_root: Path) -> None:
        config.set_root(str(game_root))
        config.add_subfolder("scripts")
        config.add_subfolder("missing")
        config.add_subfolder("lua")
        assert config.subfolder_paths() == [
            game_root / "media" / "scripts",
            game_root / "media" / "lua",
        ]

    def test_subfolder_paths_is_not_cached(self, config: ConfigStore, game_root: Path) -> None:
        config.set_root(str(game_root))
        config.add_subfolder("maps")
        assert config.subfolder_paths() == []
        (game_root / "media" / "maps").mkdir()
        assert config.subfolder_paths() == [game_root / "media" / "maps"]


class TestSanitize:
    @pytest.mark.parametrize("raw,expected", [
        ("scripts", "scripts"),
        ("  lua ", "lua"),
        ("a/b\\c", "abc"),
        ("/scripts/", "scripts"),
    ])
    def test_sanitize(self, raw: str, expected: str) -> None:
        assert sanitize_subfolder(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "/", "\\\\", " / "])
    def test_sanitize_rejects(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            sanitize_subfolder(raw)
