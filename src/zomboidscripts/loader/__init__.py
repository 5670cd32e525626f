"""Directory scanning and cooperative file loading.

Public API::

    from zomboidscripts.loader import ScriptLoader

    loader = ScriptLoader(store, bus)
    job = loader.load_from_multiple_paths(config.subfolder_paths())
    for progress in job:          # one file per step
        ui.update(progress.current, progress.total, progress.name)
"""

from __future__ import annotations

from zomboidscripts.loader.job import LoaderState, LoadJob, read_script
from zomboidscripts.loader.loader import ScriptLoader
from zomboidscripts.loader.scanner import DEFAULT_EXTENSIONS, is_accepted, scan_paths

__all__ = [
    "DEFAULT_EXTENSIONS",
    "LoadJob",
    "LoaderState",
    "ScriptLoader",
    "is_accepted",
    "read_script",
    "scan_paths",
]
