"""Persisted configuration store.

Public API::

    from zomboidscripts.config import ConfigStore

    config = ConfigStore()
    config.load()
    config.add_subfolder("scripts")
    for path in config.subfolder_paths():
        print(path)
"""

from __future__ import annotations

from zomboidscripts.config.store import (
    ConfigLoadStatus,
    ConfigStore,
    default_config_path,
    sanitize_subfolder,
)

__all__ = [
    "ConfigLoadStatus",
    "ConfigStore",
    "default_config_path",
    "sanitize_subfolder",
]
