"""Automatic discovery of a Project Zomboid installation.

Provides ordered, platform-aware probing for the game's
``media/scripts`` directory: saved configuration, executable-relative
location, Steam libraries (including ``libraryfolders.vdf``), alternate
install roots, and a bounded deep scan on Windows.

Public API::

    from zomboidscripts.discovery import PathDiscovery

    result = PathDiscovery(config).discover()
    if not result.found:
        ask_user_for_folder()
"""

from __future__ import annotations

from zomboidscripts.discovery.manifest import parse_library_paths, read_library_paths
from zomboidscripts.discovery.models import DiscoveryResult
from zomboidscripts.discovery.path_finder import PathDiscovery
from zomboidscripts.discovery.platforms import (
    PLATFORM_PROFILES,
    Platform,
    PlatformProfile,
    current_platform,
)

__all__ = [
    "DiscoveryResult",
    "PLATFORM_PROFILES",
    "PathDiscovery",
    "Platform",
    "PlatformProfile",
    "current_platform",
    "parse_library_paths",
    "read_library_paths",
]
