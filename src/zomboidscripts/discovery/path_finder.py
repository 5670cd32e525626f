"""Locate the Project Zomboid scripts directory without asking the user.

Discovery Algorithm:
    Strategies run strictly in this order; the first hit wins and later
    strategies are never consulted.

    1. ``saved_config``: the configured root, if ``<root>/media`` exists
       and ``<root>/media/scripts`` is a directory.
    2. ``executable_relative``: ``<exe dir>/../media/scripts``, for a
       tool unpacked into a folder inside the game root.
    3. ``steam_library``: fixed Steam roots for the platform, then every
       drive letter combined with common folder names (Windows), then
       the library paths listed in each ``libraryfolders.vdf``.
       Existence-filtered and de-duplicated (first occurrence kept)
       before each ``<library>/steamapps/common/ProjectZomboid`` is
       tested.
    4. ``alternate_install``: non-Steam roots (GOG, plain game folders).
    5. ``deep_scan``: Windows only; a small grid of drives and folders.

    Strategies 3-5 remember what they find: the root is written to the
    ``ConfigStore`` and ``scripts`` is added as a tracked subfolder.
"""

from __future__ import annotations

import logging
import string
import sys
from pathlib import Path
from typing import Callable

from zomboidscripts import MEDIA_DIR_NAME, SCRIPTS_DIR_NAME
from zomboidscripts.config import ConfigStore
from zomboidscripts.discovery.manifest import read_library_paths
from zomboidscripts.discovery.models import DiscoveryResult
from zomboidscripts.discovery.platforms import (
    PLATFORM_PROFILES,
    STEAM_GAME_SUBPATH,
    Platform,
    PlatformProfile,
    current_platform,
)

logger = logging.getLogger(__name__)

SCRIPTS_SUBPATH = f"{MEDIA_DIR_NAME}/{SCRIPTS_DIR_NAME}"
EXECUTABLE_OFFSET = f"../{SCRIPTS_SUBPATH}"


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except (PermissionError, OSError):
        return False


def _dedupe(paths: list[Path]) -> list[Path]:
    return list(dict.fromkeys(paths))


def _default_executable() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable)
    return Path(sys.argv[0] if sys.argv and sys.argv[0] else sys.executable)


class PathDiscovery:
    """Resolves the scripts directory of a Project Zomboid install.

    Usage::

        discovery = PathDiscovery(config)
        result = discovery.discover()
        if result.found:
            print(f"Scripts at {result.path} (via {result.strategy})")

    Args:
        config: Store consulted first and updated on auto-discovery.
        platform: Override the running platform (for testing).
        profile: Override the platform's candidate table (for testing).
        home: Override the home directory used to expand ``~`` entries.
        executable: Override the program location for strategy 2.
    """

    def __init__(
        self,
        config: ConfigStore,
        platform: Platform | None = None,
        profile: PlatformProfile | None = None,
        home: Path | None = None,
        executable: Path | None = None,
    ) -> None:
        self.config = config
        self.platform = platform if platform is not None else current_platform()
        self.profile = profile if profile is not None else PLATFORM_PROFILES[self.platform]
        self.home = home if home is not None else Path.home()
        self.executable = executable if executable is not None else _default_executable()

    def _strategies(self) -> list[tuple[str, Callable[[], Path | None], bool]]:
        """(name, probe, remember) in the order they must be tried."""
        return [
            ("saved_config", self._from_saved_config, False),
            ("executable_relative", self._from_executable, False),
            ("steam_library", self._from_steam_libraries, True),
            ("alternate_install", self._from_alternate_roots, True),
            ("deep_scan", self._from_deep_scan, True),
        ]

    def discover(self) -> DiscoveryResult:
        """Run every strategy in order and return the first hit."""
        for name, probe, remember in self._strategies():
            found = probe()
            if found is None:
                logger.debug("Discovery strategy %s found nothing", name)
                continue
            logger.info("Found scripts directory via %s: %s", name, found)
            if remember:
                self._remember(found)
            return DiscoveryResult(path=found, strategy=name)

        logger.warning("No Project Zomboid installation found")
        return DiscoveryResult.not_found()

    def _remember(self, scripts_dir: Path) -> None:
        root = scripts_dir.parent.parent
        self.config.set_root(str(root))
        self.config.add_subfolder(SCRIPTS_DIR_NAME)

    # -- Strategy 1 and 2 -----------------------------------------------------

    def _from_saved_config(self) -> Path | None:
        if not self.config.has_valid_root():
            return None
        scripts = Path(self.config.root_path) / SCRIPTS_SUBPATH
        return scripts if _is_dir(scripts) else None

    def _from_executable(self) -> Path | None:
        base = self.executable.resolve().parent
        scripts = (base / EXECUTABLE_OFFSET).resolve()
        return scripts if _is_dir(scripts) else None

    # -- Strategy 3 -----------------------------------------------------------

    def _drive_roots(self) -> list[Path]:
        """Uppercase drive letters that exist on this machine (Windows only)."""
        if self.platform is not Platform.WINDOWS:
            return []
        return [
            Path(f"{letter}:/") for letter in string.ascii_uppercase
            if _is_dir(Path(f"{letter}:/"))
        ]

    def steam_library_candidates(self) -> list[Path]:
        """Existing Steam libraries, in probe order, without duplicates."""
        candidates: list[Path] = []
        for entry in self.profile.steam_roots:
            root = self.profile.expand(entry, self.home)
            if _is_dir(root):
                candidates.append(root)

        for drive in self._drive_roots():
            for folder in self.profile.drive_folders:
                candidate = drive / folder
                if _is_dir(candidate):
                    candidates.append(candidate)

        for manifest in self.profile.manifest_paths(self.home):
            candidates.extend(read_library_paths(manifest))

        return _dedupe(candidates)

    def _from_steam_libraries(self) -> Path | None:
        for library in self.steam_library_candidates():
            scripts = library / self.profile.game_subpath / SCRIPTS_SUBPATH
            if _is_dir(scripts):
                return scripts
        return None

    # -- Strategy 4 and 5 -----------------------------------------------------

    def _from_alternate_roots(self) -> Path | None:
        for entry in self.profile.alternate_roots:
            scripts = self.profile.expand(entry, self.home) / SCRIPTS_SUBPATH
            if _is_dir(scripts):
                return scripts
        return None

    def _from_deep_scan(self) -> Path | None:
        if self.platform is not Platform.WINDOWS:
            return None
        for drive in self.profile.deep_scan_drives:
            for folder in self.profile.deep_scan_folders:
                scripts = Path(drive) / folder / STEAM_GAME_SUBPATH / SCRIPTS_SUBPATH
                if _is_dir(scripts):
                    return scripts
        return None
