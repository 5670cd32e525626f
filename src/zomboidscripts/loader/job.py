"""A single in-flight load, processed one file per step.

``LoadJob`` is an iterator: each ``next()`` reads exactly one file,
stores it, publishes a ``LoadProgress`` event and returns it. Control
goes back to the caller between files, so a UI loop can drive the job
one tick at a time and stay responsive::

    job = loader.load_from_path(scripts_dir)
    def on_tick():
        progress = next(job, None)
        if progress is not None:
            schedule(on_tick)

Hosts without their own loop call ``run()``; asyncio hosts await
``run_async()``, which yields to the event loop after every file.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Callable

from zomboidscripts.events import EventBus, LoadCompleted, LoadFailed, LoadProgress
from zomboidscripts.exceptions import FileReadError
from zomboidscripts.store import ScriptDataStore

logger = logging.getLogger(__name__)


class LoaderState(Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    LOADING = "loading"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


def read_script(path: Path) -> str:
    """Read a script file as text, replacing undecodable bytes.

    Raises:
        FileReadError: If the file cannot be opened or read.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc


class LoadJob:
    """Iterator over pending files; see module docstring.

    Args:
        files: Files to load, in order.
        store: Destination for every file read successfully.
        bus: Receives ``LoadProgress`` per file, then one terminal event.
        on_finish: Called once with the terminal state.
    """

    def __init__(
        self,
        files: list[Path],
        store: ScriptDataStore,
        bus: EventBus,
        on_finish: Callable[[LoaderState], None] | None = None,
    ) -> None:
        self.files = list(files)
        self._store = store
        self._bus = bus
        self._on_finish = on_finish
        self._index = 0
        self.loaded_count = 0
        self.skipped: list[Path] = []
        self.state = LoaderState.LOADING

    @property
    def total(self) -> int:
        return len(self.files)

    @property
    def done(self) -> bool:
        return self.state is not LoaderState.LOADING

    def __iter__(self) -> LoadJob:
        return self

    def __next__(self) -> LoadProgress:
        if self.done:
            raise StopIteration

        path = self.files[self._index]
        self._index += 1
        self._load_one(path)

        progress = LoadProgress(current=self._index, total=self.total, name=path.name)
        self._bus.publish(progress)
        if self.done:
            return progress

        if self._index >= self.total:
            logger.info("Loaded %d of %d files", self.loaded_count, self.total)
            self._finish(LoaderState.COMPLETED)
            self._bus.publish(LoadCompleted(self.loaded_count))
        return progress

    def _load_one(self, path: Path) -> None:
        try:
            content = read_script(path)
        except FileReadError as exc:
            logger.warning("Skipping file: %s", exc)
            self.skipped.append(path)
            return
        self._store.add_file(str(path), content)
        self.loaded_count += 1

    def _finish(self, state: LoaderState) -> None:
        self.state = state
        if self._on_finish is not None:
            self._on_finish(state)

    def cancel(self) -> bool:
        """Stop before the next file. Returns False if already finished."""
        if self.done:
            return False
        logger.info("Load cancelled after %d of %d files", self._index, self.total)
        self._finish(LoaderState.CANCELLED)
        self._bus.publish(LoadFailed("load cancelled"))
        return True

    def run(self) -> int:
        """Process every remaining file. Returns the number loaded."""
        for _ in self:
            pass
        return self.loaded_count

    async def run_async(self) -> int:
        """Like ``run`` but yields to the event loop after each file."""
        for _ in self:
            await asyncio.sleep(0)
        return self.loaded_count
