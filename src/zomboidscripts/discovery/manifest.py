"""Steam ``libraryfolders.vdf`` reader.

Only the library paths are needed, so the KeyValues file is not parsed
as a tree; every ``"path"  "<value>"`` pair is pulled out with a regex.
Windows manifests escape backslashes (``D:\\\\SteamLibrary``); those are
normalized to forward slashes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_PATH_ENTRY = re.compile(r'"path"\s+"([^"]+)"', re.IGNORECASE)


def normalize_manifest_path(value: str) -> str:
    """Convert escaped Windows separators to forward slashes."""
    return value.replace("\\\\", "/").replace("\\", "/")


def parse_library_paths(text: str) -> list[str]:
    """Extract library paths from manifest text, in file order."""
    return [normalize_manifest_path(m.group(1)) for m in _PATH_ENTRY.finditer(text)]


def read_library_paths(manifest: Path) -> list[Path]:
    """Read ``manifest`` and return the library paths that exist on disk.

    A missing or unreadable manifest yields an empty list.
    """
    try:
        text = manifest.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return []
    except OSError:
        logger.warning("Cannot read Steam manifest: %s", manifest, exc_info=True)
        return []

    libraries: list[Path] = []
    for value in parse_library_paths(text):
        candidate = Path(value)
        try:
            if candidate.is_dir():
                libraries.append(candidate)
        except OSError:
            continue
    logger.debug("Manifest %s lists %d existing libraries", manifest, len(libraries))
    return libraries
