"""In-memory index of loaded script files.

The ``ScriptDataStore`` keeps two structures:

- **Primary:** ``path -> LoadedFile``. Python dicts keep insertion
  order, so this doubles as the ordered path list used for iteration
  and export.
- **By name:** ``filename -> ordered set of paths`` (a dict with
  ``None`` values), so the same file name under several directories is
  returned in the order the files were added.

Every path in the name index has a primary entry. Records are frozen;
the store owns each record's metadata dict and exposes it read-only.
``clear()`` swaps in fresh containers in one step and publishes a
single ``AllCleared``.
"""

from __future__ import annotations

import copy
import logging
from pathlib import PurePath
from types import MappingProxyType
from typing import Any, Iterator

from zomboidscripts.events import AllCleared, EventBus, FileAdded
from zomboidscripts.store.models import LoadedFile, MetadataValue, check_metadata_value

logger = logging.getLogger(__name__)


class ScriptDataStore:
    """Process-wide collection of ``LoadedFile`` records.

    Example::

        store = ScriptDataStore()
        store.add_file("/pz/media/scripts/items.txt", text)
        for f in store.get_files_by_name("items.txt"):
            print(f.path, len(f.lines))
    """

    def __init__(self, bus: EventBus | None = None) -> None:
        self._bus = bus
        self._files: dict[str, LoadedFile] = {}
        self._by_name: dict[str, dict[str, None]] = {}
        self._metadata: dict[str, dict[str, MetadataValue]] = {}

    def _publish(self, event: Any) -> None:
        if self._bus is not None:
            self._bus.publish(event)

    # -- Mutation -------------------------------------------------------------

    def add_file(self, path: str, content: str) -> LoadedFile:
        """Insert ``path``, overwriting (and resetting metadata) if present."""
        key = str(path)
        if key in self._files:
            logger.warning("Overwriting already loaded file: %s", key)
        metadata: dict[str, MetadataValue] = {}
        loaded = LoadedFile(path=key, content=content, metadata=MappingProxyType(metadata))
        self._files[key] = loaded
        self._metadata[key] = metadata
        self._by_name.setdefault(loaded.name, {})[key] = None
        self._publish(FileAdded(key))
        return loaded

    def remove_file(self, path: str) -> bool:
        loaded = self._files.pop(str(path), None)
        if loaded is None:
            return False
        self._metadata.pop(loaded.path, None)
        paths = self._by_name.get(loaded.name, {})
        paths.pop(loaded.path, None)
        if not paths:
            self._by_name.pop(loaded.name, None)
        return True

    def clear(self) -> None:
        self._files, self._by_name, self._metadata = {}, {}, {}
        self._publish(AllCleared())

    # -- Lookups --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, path: object) -> bool:
        return str(path) in self._files

    def __iter__(self) -> Iterator[LoadedFile]:
        return iter(list(self._files.values()))

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def paths(self) -> list[str]:
        """All paths in insertion order."""
        return list(self._files)

    def get_file(self, path: str) -> LoadedFile | None:
        return self._files.get(str(path))

    def get_files_by_name(self, name: str) -> list[LoadedFile]:
        return [self._files[p] for p in self._by_name.get(name, {})]

    def search_paths(self, text: str, case_sensitive: bool = False) -> list[LoadedFile]:
        """Files whose path contains ``text``."""
        if case_sensitive:
            return [f for f in self._files.values() if text in f.path]
        needle = text.lower()
        return [f for f in self._files.values() if needle in f.path.lower()]

    def search_content(self, text: str, case_sensitive: bool = False) -> list[LoadedFile]:
        """Files whose content contains ``text``."""
        if case_sensitive:
            return [f for f in self._files.values() if text in f.content]
        needle = text.lower()
        return [f for f in self._files.values() if needle in f.content.lower()]

    def get_files_in_directory(self, directory: str, recursive: bool = False) -> list[LoadedFile]:
        """Files directly inside ``directory``, or anywhere below it if ``recursive``."""
        target = PurePath(directory)
        if not recursive:
            return [f for f in self._files.values() if PurePath(f.path).parent == target]
        return [
            f for f in self._files.values()
            if PurePath(f.path).parent == target or target in PurePath(f.path).parents
        ]

    def get_files_with_metadata(self, key: str) -> list[LoadedFile]:
        return [f for f in self._files.values() if key in f.metadata]

    # -- Metadata -------------------------------------------------------------

    def set_metadata(self, path: str, key: str, value: MetadataValue) -> bool:
        """Tag a loaded file. Returns False if ``path`` is not loaded.

        Raises:
            TypeError: If ``value`` is not JSON-compatible.
        """
        loaded = self._files.get(str(path))
        if loaded is None:
            logger.warning("Cannot set metadata %r on unknown file: %s", key, path)
            return False
        check_metadata_value(value)
        self._metadata[loaded.path][key] = copy.deepcopy(value)
        return True

    def get_metadata(self, path: str, key: str, default: Any = None) -> Any:
        loaded = self._files.get(str(path))
        if loaded is None:
            return default
        return copy.deepcopy(loaded.metadata.get(key, default))

    # -- Export / import ------------------------------------------------------

    def export_to_dict(self) -> dict[str, Any]:
        """Snapshot the store as ``{file_count, files: {path: {content, metadata}}}``."""
        return {
            "file_count": len(self._files),
            "files": {
                path: {"content": f.content, "metadata": copy.deepcopy(dict(f.metadata))}
                for path, f in self._files.items()
            },
        }

    def import_from_dict(self, record: dict[str, Any]) -> int:
        """Replace the store's contents with an exported record.

        The record is validated in full before anything is replaced, so a
        bad entry leaves the current contents untouched.

        Returns:
            The number of files imported.

        Raises:
            ValueError: If ``record`` does not have the exported shape.
            TypeError: If any metadata value is not JSON-compatible.
        """
        files = record.get("files") if isinstance(record, dict) else None
        if not isinstance(files, dict):
            raise ValueError("Record has no 'files' mapping")

        staged: list[tuple[str, str, dict[str, MetadataValue]]] = []
        for path, entry in files.items():
            if not isinstance(entry, dict):
                logger.warning("Skipping malformed entry for %s", path)
                continue
            content = entry.get("content", "")
            metadata = entry.get("metadata") or {}
            tags = {str(k): v for k, v in metadata.items()} if isinstance(metadata, dict) else {}
            for value in tags.values():
                check_metadata_value(value)
            staged.append((str(path), content if isinstance(content, str) else "", tags))

        self.clear()
        for path, content, tags in staged:
            self.add_file(path, content)
            self._metadata[path].update(copy.deepcopy(tags))
        return len(self._files)
