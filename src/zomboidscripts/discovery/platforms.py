"""Static table of where Project Zomboid tends to be installed, per platform.

Each ``PlatformProfile`` lists the places ``PathDiscovery`` probes on one
operating system: Steam client roots, the Steam library manifests found
under them, folder names worth trying on every drive letter, alternate
(non-Steam) install roots, and the small fixed grid used by the last
resort deep scan. The lists are intentionally generous -- probing a
non-existent directory is one syscall, and each list is tried in order,
which decides which install wins when several exist.

Platform Notes:
    Windows installs live under drive letters; only Windows gets the
    drive enumeration and the deep scan.
    macOS ships the game inside an app bundle, so the game files sit
    under ``Project Zomboid.app/Contents/Java`` inside the Steam folder.
    Linux has native, Flatpak and Snap Steam clients.
    Entries starting with ``~`` are expanded against the home directory
    given to discovery (``Path.home()`` by default).
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from zomboidscripts import GAME_DIR_NAME


class Platform(Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


def current_platform() -> Platform:
    """Return the platform this interpreter is running on."""
    system = _platform.system().lower()
    if system == "darwin":
        return Platform.MACOS
    return Platform.WINDOWS if system == "windows" else Platform.LINUX


# Relative location of Steam's library list below a Steam client root.
MANIFEST_RELATIVE_PATHS: list[str] = [
    "steamapps/libraryfolders.vdf",
    "config/libraryfolders.vdf",
]

STEAM_GAME_SUBPATH = f"steamapps/common/{GAME_DIR_NAME}"


@dataclass(frozen=True)
class PlatformProfile:
    """Candidate install locations for one platform.

    Attributes:
        platform: The platform this profile applies to.
        steam_roots: Steam client / library roots, tried first.
        drive_folders: Folder names appended to every drive letter (Windows).
        alternate_roots: Game roots from other distribution channels.
        game_subpath: Game root relative to a Steam library.
        deep_scan_drives: Drive roots visited by the deep scan.
        deep_scan_folders: Folder names tried on each deep-scan drive.
    """

    platform: Platform
    steam_roots: list[str] = field(default_factory=list)
    drive_folders: list[str] = field(default_factory=list)
    alternate_roots: list[str] = field(default_factory=list)
    game_subpath: str = STEAM_GAME_SUBPATH
    deep_scan_drives: list[str] = field(default_factory=list)
    deep_scan_folders: list[str] = field(default_factory=list)

    def expand(self, entry: str, home: Path) -> Path:
        """Turn a table entry into a concrete path under ``home``."""
        if entry == "~" or entry.startswith("~/"):
            return home / entry[2:]
        return Path(entry)

    def manifest_paths(self, home: Path) -> list[Path]:
        """Every manifest location below every Steam root, in table order."""
        return [
            self.expand(root, home) / rel
            for root in self.steam_roots
            for rel in MANIFEST_RELATIVE_PATHS
        ]


def _build_profiles() -> dict[Platform, PlatformProfile]:
    return {
        Platform.WINDOWS: PlatformProfile(
            platform=Platform.WINDOWS,
            steam_roots=[
                "C:/Program Files (x86)/Steam",
                "C:/Program Files/Steam",
            ],
            drive_folders=[
                "SteamLibrary",
                "Steam",
                "Program Files (x86)/Steam",
                "Program Files/Steam",
                "Games/Steam",
                "Games/SteamLibrary",
            ],
            alternate_roots=[
                "C:/GOG Games/Project Zomboid",
                "C:/Games/ProjectZomboid",
                "C:/Games/Project Zomboid",
                "C:/Program Files/ProjectZomboid",
                "C:/Program Files (x86)/ProjectZomboid",
            ],
            deep_scan_drives=["C:/", "D:/", "E:/", "F:/"],
            deep_scan_folders=[
                "SteamLibrary",
                "Steam",
                "Games",
                "Games/Steam",
                "Program Files (x86)/Steam",
            ],
        ),
        Platform.MACOS: PlatformProfile(
            platform=Platform.MACOS,
            steam_roots=[
                "~/Library/Application Support/Steam",
            ],
            alternate_roots=[
                "/Applications/Project Zomboid.app/Contents/Java",
                "~/Applications/Project Zomboid.app/Contents/Java",
            ],
            game_subpath=f"{STEAM_GAME_SUBPATH}/Project Zomboid.app/Contents/Java",
        ),
        Platform.LINUX: PlatformProfile(
            platform=Platform.LINUX,
            steam_roots=[
                "~/.steam/steam",
                "~/.local/share/Steam",
                "~/.steam/root",
                "~/.var/app/com.valvesoftware.Steam/.local/share/Steam",
                "~/snap/steam/common/.local/share/Steam",
            ],
            alternate_roots=[
                "~/Games/ProjectZomboid",
                "~/GOG Games/Project Zomboid",
                "/opt/ProjectZomboid",
                "/usr/local/games/ProjectZomboid",
                "/usr/games/ProjectZomboid",
            ],
        ),
    }


# Module-level constant: one profile per supported platform.
PLATFORM_PROFILES: dict[Platform, PlatformProfile] = _build_profiles()
