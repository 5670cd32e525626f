"""Persisted configuration: the game root and the tracked media subfolders.

The configuration is a single JSON object::

    {
      "project_zomboid_root": "/home/me/.local/share/Steam/steamapps/common/ProjectZomboid",
      "media_subfolders": ["scripts", "lua"],
      "last_load_timestamp": "2026-10-19T12:00:00+00:00"
    }

Every mutating call persists synchronously and publishes a
``ConfigUpdated`` event. Writes go to a sibling temporary file that is
then renamed over the target, so a crash mid-write leaves the previous
valid file in place.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from zomboidscripts import MEDIA_DIR_NAME
from zomboidscripts.events import ConfigUpdated, EventBus
from zomboidscripts.exceptions import ConfigError, ValidationError

logger = logging.getLogger(__name__)

APP_NAME = "zomboid-scripts"
CONFIG_ENV_VAR = "ZOMBOID_SCRIPTS_CONFIG"

KEY_ROOT = "project_zomboid_root"
KEY_SUBFOLDERS = "media_subfolders"
KEY_TIMESTAMP = "last_load_timestamp"


class ConfigLoadStatus(Enum):
    """Outcome of ``ConfigStore.load``."""

    LOADED = "loaded"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


def default_config_path() -> Path:
    """Resolve the config file location.

    ``$ZOMBOID_SCRIPTS_CONFIG`` wins when set; otherwise the per-user
    config directory for this platform is used.
    """
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path(user_config_dir(APP_NAME)) / "config.json"


def sanitize_subfolder(name: str) -> str:
    """Strip path separators and surrounding whitespace from a subfolder name.

    Raises:
        ValidationError: If nothing is left after stripping.
    """
    cleaned = str(name).replace("/", "").replace("\\", "").strip()
    if not cleaned:
        raise ValidationError(f"Invalid subfolder name: {name!r}")
    return cleaned


class ConfigStore:
    """Root path plus an ordered, duplicate-free list of media subfolders."""

    def __init__(self, path: Path | None = None, bus: EventBus | None = None) -> None:
        self.path = Path(path) if path is not None else default_config_path()
        self._bus = bus
        self.root_path: str = ""
        self._subfolders: list[str] = []
        self.last_updated: str = ""
        self.last_error: ConfigError | None = None

    # -- Persistence ----------------------------------------------------------

    def load(self) -> ConfigLoadStatus:
        """Read the persisted record into memory.

        A missing file leaves the defaults untouched. Malformed content
        is logged, recorded on ``last_error`` and also leaves the
        defaults untouched; it never raises.
        """
        self.last_error = None
        if not self.path.is_file():
            logger.info("No config file at %s, using defaults", self.path)
            return ConfigLoadStatus.NOT_FOUND

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ConfigError(f"{self.path}: expected a JSON object")
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            self.last_error = ConfigError(f"{self.path}: {exc}")
        except ConfigError as exc:
            self.last_error = exc

        if self.last_error is not None:
            logger.warning("Ignoring malformed config: %s", self.last_error)
            return ConfigLoadStatus.PARSE_ERROR

        self._apply(raw)
        return ConfigLoadStatus.LOADED

    def _apply(self, raw: dict[str, Any]) -> None:
        root = raw.get(KEY_ROOT, "")
        self.root_path = root if isinstance(root, str) else ""

        subfolders: list[str] = []
        entries = raw.get(KEY_SUBFOLDERS, [])
        for entry in entries if isinstance(entries, list) else []:
            if not isinstance(entry, str):
                continue
            try:
                name = sanitize_subfolder(entry)
            except ValidationError:
                continue
            if name not in subfolders:
                subfolders.append(name)
        self._subfolders = subfolders

        stamp = raw.get(KEY_TIMESTAMP, "")
        self.last_updated = stamp if isinstance(stamp, str) else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            KEY_ROOT: self.root_path,
            KEY_SUBFOLDERS: list(self._subfolders),
            KEY_TIMESTAMP: self.last_updated,
        }

    def save(self) -> None:
        """Write the record atomically, stamping ``last_load_timestamp``."""
        self.last_updated = datetime.now(timezone.utc).isoformat()
        text = json.dumps(self.to_dict(), indent=2)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(text + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved config to %s", self.path)

    def _changed(self) -> None:
        self.save()
        if self._bus is not None:
            self._bus.publish(ConfigUpdated(self.root_path, tuple(self._subfolders)))

    # -- Mutations ------------------------------------------------------------

    def set_root(self, path: str | Path) -> None:
        self.root_path = str(path)
        self._changed()

    def add_subfolder(self, name: str) -> bool:
        """Track ``name``. Returns False if it is already tracked."""
        cleaned = sanitize_subfolder(name)
        if cleaned in self._subfolders:
            return False
        self._subfolders.append(cleaned)
        self._changed()
        return True

    def remove_subfolder(self, name: str) -> bool:
        """Stop tracking ``name``. Returns False if it was not tracked."""
        cleaned = sanitize_subfolder(name)
        if cleaned not in self._subfolders:
            return False
        self._subfolders.remove(cleaned)
        self._changed()
        return True

    def reset(self) -> None:
        """Forget the root and all subfolders."""
        self.root_path = ""
        self._subfolders = []
        self._changed()

    # -- Queries --------------------------------------------------------------

    @property
    def subfolders(self) -> list[str]:
        return list(self._subfolders)

    def media_dir(self) -> Path | None:
        """Return ``<root>/media`` or None if no root is configured."""
        if not self.root_path:
            return None
        return Path(self.root_path) / MEDIA_DIR_NAME

    def has_valid_root(self) -> bool:
        media = self.media_dir()
        if media is None:
            return False
        try:
            return media.is_dir()
        except OSError:
            return False

    def subfolder_paths(self) -> list[Path]:
        """Return ``<root>/media/<name>`` for each tracked name that exists now."""
        media = self.media_dir()
        if media is None:
            return []
        paths: list[Path] = []
        for name in self._subfolders:
            candidate = media / name
            try:
                if candidate.is_dir():
                    paths.append(candidate)
            except OSError:
                continue
        return paths
