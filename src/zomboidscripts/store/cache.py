"""Optional on-disk cache of a ``ScriptDataStore``.

The cache is the store's export record written as JSON::

    {"file_count": 2, "files": {"/pz/media/scripts/a.txt": {"content": "...", "metadata": {}}}}

It lives apart from the configuration file and is never required; a
fresh scan rebuilds the same data.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_cache_dir

from zomboidscripts.config.store import APP_NAME
from zomboidscripts.exceptions import CacheError
from zomboidscripts.store.data_store import ScriptDataStore

logger = logging.getLogger(__name__)


def default_cache_path() -> Path:
    return Path(user_cache_dir(APP_NAME)) / "script_cache.json"


def save_cache(store: ScriptDataStore, path: Path | None = None) -> Path:
    """Write the store to ``path`` (default: per-user cache dir).

    Returns:
        The path written.
    """
    target = Path(path) if path is not None else default_cache_path()
    text = json.dumps(store.export_to_dict(), indent=2)
    tmp = target.with_name(target.name + ".tmp")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, target)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise CacheError(f"Cannot write cache {target}: {exc}") from exc
    logger.info("Cached %d files to %s", store.file_count, target)
    return target


def load_cache(store: ScriptDataStore, path: Path | None = None) -> int:
    """Replace the store's contents with the cache at ``path``.

    Returns:
        Number of files imported.

    Raises:
        CacheError: If the cache is missing or malformed.
    """
    source = Path(path) if path is not None else default_cache_path()
    try:
        record = json.loads(source.read_text(encoding="utf-8"))
        return store.import_from_dict(record)
    except FileNotFoundError as exc:
        raise CacheError(f"No cache at {source}") from exc
    except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
        raise CacheError(f"Malformed cache {source}: {exc}") from exc
