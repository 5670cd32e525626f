"""In-memory script store and its optional JSON cache.

Public API::

    from zomboidscripts.store import ScriptDataStore, LoadedFile

All public names are re-exported here.
"""

from __future__ import annotations

from zomboidscripts.store.cache import default_cache_path, load_cache, save_cache
from zomboidscripts.store.data_store import ScriptDataStore
from zomboidscripts.store.models import LoadedFile, MetadataValue, check_metadata_value

__all__ = [
    "LoadedFile",
    "MetadataValue",
    "ScriptDataStore",
    "check_metadata_value",
    "default_cache_path",
    "load_cache",
    "save_cache",
]
