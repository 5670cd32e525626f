"""Shared test helpers for building fake game installs and Steam libraries.

Each helper creates a minimal but realistic directory structure under a
temporary directory. Used by the discovery tests.
"""

from __future__ import annotations

from pathlib import Path

from zomboidscripts.config import ConfigStore
from zomboidscripts.discovery import PathDiscovery, Platform, PlatformProfile


def create_game_root(root: Path) -> Path:
    """Create ``root/media/scripts`` with one script file; return the scripts dir."""
    scripts = root / "media" / "scripts"
    scripts.mkdir(parents=True, exist_ok=True)
    (scripts / "items.txt").write_text("module Base\n{\n}\n")
    return scripts


def create_steam_library(library: Path) -> Path:
    """Create a Steam library containing Project Zomboid; return its scripts dir."""
    return create_game_root(library / "steamapps" / "common" / "ProjectZomboid")


def write_library_manifest(steam_root: Path, libraries: list[str]) -> Path:
    """Write ``steamapps/libraryfolders.vdf`` listing ``libraries``."""
    manifest = steam_root / "steamapps" / "libraryfolders.vdf"
    manifest.parent.mkdir(parents=True, exist_ok=True)
    body = ['"libraryfolders"', "{"]
    for index, library in enumerate(libraries):
        escaped = library.replace("/", "\\\\") if ":" in library else library
        body += [
            f'\t"{index}"',
            "\t{",
            f'\t\t"path"\t\t"{escaped}"',
            '\t\t"label"\t\t""',
            "\t}",
        ]
    body.append("}")
    manifest.write_text("\n".join(body) + "\n")
    return manifest


def make_discovery(
    config: ConfigStore,
    tmp_path: Path,
    platform: Platform = Platform.LINUX,
    **profile_fields: object,
) -> PathDiscovery:
    """A PathDiscovery confined to ``tmp_path``: empty profile unless overridden."""
    profile = PlatformProfile(platform=platform, **profile_fields)
    return PathDiscovery(
        config,
        platform=platform,
        profile=profile,
        home=tmp_path / "home",
        executable=tmp_path / "tools" / "bin" / "zomboid-scripts",
    )
