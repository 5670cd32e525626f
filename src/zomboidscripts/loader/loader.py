"""Scan-then-load pipeline with a single in-flight load.

State machine::

    IDLE -> SCANNING -> LOADING -> COMPLETED | FAILED | CANCELLED
                    \\-> FAILED (no files found)

Any terminal state accepts a new load. Requesting a load while
SCANNING or LOADING raises ``BusyError`` without touching the store or
publishing anything.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from zomboidscripts.events import EventBus, LoadFailed, LoadStarted
from zomboidscripts.exceptions import BusyError, ScanEmptyError
from zomboidscripts.loader.job import LoaderState, LoadJob
from zomboidscripts.loader.scanner import DEFAULT_EXTENSIONS, scan_paths
from zomboidscripts.store import ScriptDataStore

logger = logging.getLogger(__name__)


class ScriptLoader:
    """Turns folders into a ``LoadJob`` feeding a ``ScriptDataStore``.

    Args:
        store: Destination store. Cleared when a new load starts loading.
        bus: Receives ``LoadStarted``/``LoadFailed`` and the job's events.
        extensions: Accepted file suffixes (extensionless files always pass).
    """

    def __init__(
        self,
        store: ScriptDataStore,
        bus: EventBus,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.store = store
        self.bus = bus
        self.extensions = frozenset(e.lower() for e in extensions)
        self._state = LoaderState.IDLE
        self.current_job: LoadJob | None = None

    @property
    def state(self) -> LoaderState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state in (LoaderState.SCANNING, LoaderState.LOADING)

    def _job_finished(self, state: LoaderState) -> None:
        self._state = state

    def load_from_path(self, path: str | Path) -> LoadJob:
        return self.load_from_multiple_paths([path])

    def load_from_multiple_paths(self, paths: Iterable[str | Path]) -> LoadJob:
        """Scan every folder into one file list and start loading it.

        Returns:
            The job to drive; ``LoadStarted`` has already been published.

        Raises:
            BusyError: Another load is scanning or loading.
            ScanEmptyError: No accepted files under any of ``paths``.
        """
        if self.busy:
            raise BusyError(f"A load is already {self._state.value}")

        roots = [Path(p) for p in paths]
        self._state = LoaderState.SCANNING
        try:
            files = scan_paths(roots, self.extensions)
        except Exception:
            self._state = LoaderState.FAILED
            raise

        if not files:
            self._state = LoaderState.FAILED
            message = "no files found in " + ", ".join(str(r) for r in roots)
            logger.warning("Load failed: %s", message)
            self.bus.publish(LoadFailed(message))
            raise ScanEmptyError(message)

        self._state = LoaderState.LOADING
        self.store.clear()
        self.current_job = LoadJob(files, self.store, self.bus, on_finish=self._job_finished)
        logger.info("Loading %d files from %d folder(s)", len(files), len(roots))
        self.bus.publish(LoadStarted(len(files)))
        return self.current_job
