"""Composition root: one config, one store, one bus, wired together.

``ScriptWorkbench`` is what a UI (or the CLI) talks to. It accepts the
user-level inputs -- auto load, load a folder, edit the configuration,
clear everything -- and reports outcomes through the ``EventBus``. It
never raises for per-operation failures: a busy loader, an empty scan
or a failed discovery come back as ``None`` and an event.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from zomboidscripts.config import ConfigStore
from zomboidscripts.discovery import DiscoveryResult, PathDiscovery
from zomboidscripts.events import DataReady, EventBus, FolderNotFound, LoadCompleted
from zomboidscripts.exceptions import BusyError, CacheError, ScanEmptyError
from zomboidscripts.loader import LoadJob, ScriptLoader
from zomboidscripts.store import ScriptDataStore, load_cache

logger = logging.getLogger(__name__)


class ScriptWorkbench:
    """Owns the process-wide stores and exposes the operations a UI needs.

    Usage::

        bench = ScriptWorkbench.create()
        bench.bus.subscribe(LoadProgress, show_progress)
        job = bench.start_auto_load()
        if job is not None:
            job.run()
        print(bench.store.file_count)
    """

    def __init__(
        self,
        config: ConfigStore,
        store: ScriptDataStore,
        bus: EventBus,
        discovery: PathDiscovery,
        loader: ScriptLoader,
    ) -> None:
        self.config = config
        self.store = store
        self.bus = bus
        self.discovery = discovery
        self.loader = loader
        self.last_discovery: DiscoveryResult | None = None
        bus.subscribe(LoadCompleted, self._on_load_completed)

    @classmethod
    def create(cls, config_path: Path | None = None, **discovery_options) -> ScriptWorkbench:
        """Build a workbench with default components and a loaded config."""
        bus = EventBus()
        config = ConfigStore(config_path, bus=bus)
        config.load()
        store = ScriptDataStore(bus=bus)
        discovery = PathDiscovery(config, **discovery_options)
        loader = ScriptLoader(store, bus)
        return cls(config, store, bus, discovery, loader)

    def _on_load_completed(self, event: LoadCompleted) -> None:
        self.bus.publish(DataReady(event.count))

    # -- Loading --------------------------------------------------------------

    def discover(self) -> DiscoveryResult:
        self.last_discovery = self.discovery.discover()
        if not self.last_discovery.found:
            self.bus.publish(FolderNotFound())
        return self.last_discovery

    def start_auto_load(self) -> LoadJob | None:
        """Discover the install and load the tracked subfolders.

        Falls back to the discovered scripts directory when none of the
        tracked subfolders exist. Returns None when nothing was found or
        the load could not start.
        """
        if self.loader.busy:
            logger.warning("Auto load ignored: a load is already running")
            return None
        result = self.discover()
        if not result.found:
            return None
        paths = self.config.subfolder_paths() or [result.path]
        return self.load_from_multiple_paths(paths)

    def load_from_path(self, path: str | Path) -> LoadJob | None:
        return self.load_from_multiple_paths([path])

    def load_from_multiple_paths(self, paths: Iterable[str | Path]) -> LoadJob | None:
        try:
            return self.loader.load_from_multiple_paths(paths)
        except BusyError as exc:
            logger.warning("Load rejected: %s", exc)
        except ScanEmptyError as exc:
            logger.debug("Load did not start: %s", exc)
        return None

    def reload(self) -> LoadJob | None:
        """Fresh scan of the currently configured subfolders."""
        paths = self.config.subfolder_paths()
        if not paths:
            return self.start_auto_load()
        return self.load_from_multiple_paths(paths)

    def load_cache(self, path: Path | None = None) -> int | None:
        """Replace the store with a cache file; None if unreadable or busy."""
        if self.loader.busy:
            logger.warning("Cache import ignored: a load is already running")
            return None
        try:
            count = load_cache(self.store, path)
        except CacheError as exc:
            logger.warning("%s", exc)
            return None
        self.bus.publish(DataReady(count))
        return count

    # -- Configuration --------------------------------------------------------

    def set_root(self, path: str | Path) -> None:
        self.config.set_root(str(Path(path).expanduser()))

    def add_subfolder(self, name: str) -> bool:
        return self.config.add_subfolder(name)

    def remove_subfolder(self, name: str) -> bool:
        return self.config.remove_subfolder(name)

    def clear_all(self) -> None:
        """Drop every loaded file. Ignored while a load is running."""
        if self.loader.busy:
            logger.warning("Clear ignored: a load is already running")
            return
        self.store.clear()
