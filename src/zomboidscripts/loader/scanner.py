"""Recursive enumeration of script files under one or more folders.

Walks every tree to unlimited depth and returns absolute file paths in
a deterministic order (directory entries sorted by name). A file is
accepted when its lowercase extension is in the accepted set, or when it
has no extension at all; extensionless files are always accepted.

Symlinked directories are listed but never descended into, and a real
directory reached twice (overlapping roots) is only walked once, so the
walk terminates even on a tree with link loops.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".txt", ".lua", ".xml"})


def is_accepted(path: Path, extensions: frozenset[str] = DEFAULT_EXTENSIONS) -> bool:
    """True for a lowercase suffix in ``extensions`` or no suffix at all."""
    suffix = path.suffix.lower()
    return suffix == "" or suffix in extensions


def _log_walk_error(error: OSError) -> None:
    logger.warning("Cannot read directory %s: %s", error.filename, error.strerror)


def scan_paths(
    paths: Iterable[str | Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """Collect accepted files below every folder in ``paths``.

    Args:
        paths: Root folders; missing ones are logged and skipped.
        extensions: Accepted suffixes including the dot (e.g. ``".txt"``).

    Returns:
        Absolute file paths, each listed once, in walk order.
    """
    accepted = frozenset(e.lower() for e in extensions)
    visited: set[str] = set()
    found: list[Path] = []
    seen_files: set[Path] = set()

    for root in paths:
        base = Path(root).absolute()
        if not base.is_dir():
            logger.warning("Scan root is not a directory: %s", base)
            continue

        for dirpath, dirnames, filenames in os.walk(base, onerror=_log_walk_error):
            real = os.path.realpath(dirpath)
            if real in visited:
                dirnames[:] = []
                continue
            visited.add(real)
            dirnames.sort()

            for filename in sorted(filenames):
                candidate = Path(dirpath) / filename
                if not is_accepted(candidate, accepted):
                    continue
                if candidate in seen_files:
                    continue
                seen_files.add(candidate)
                found.append(candidate)

    logger.debug("Scanned %d directories, found %d files", len(visited), len(found))
    return found
