"""zomboid-scripts exception hierarchy.

All public exceptions inherit from ZomboidScriptsError, giving callers a
single base class to catch when they want to handle any failure raised
by the discovery and ingestion core without swallowing unrelated errors.

Not every failure is an exception: a discovery run that finds nothing
returns a ``DiscoveryResult`` with no path, and an unreadable file
during a load is logged and skipped.
"""


class ZomboidScriptsError(Exception):
    """Base exception for all zomboid-scripts errors."""


class ConfigError(ZomboidScriptsError):
    """Raised when the persisted configuration cannot be parsed.

    ``ConfigStore.load`` recovers from this by keeping its in-memory
    defaults; the instance is kept on ``ConfigStore.last_error``.
    """


class ValidationError(ZomboidScriptsError, ValueError):
    """Raised when user input is rejected before reaching a store.

    Covers subfolder names that are empty once path separators and
    surrounding whitespace are stripped.
    """


class ScanEmptyError(ZomboidScriptsError):
    """Raised when a scan of the requested folders yields no files."""


class FileReadError(ZomboidScriptsError):
    """Raised when a single script file cannot be opened or read.

    The loader catches this per file, logs it and moves on to the next
    file; it never aborts the whole batch.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class BusyError(ZomboidScriptsError):
    """Raised when a load is requested while another is still running."""


class CacheError(ZomboidScriptsError):
    """Raised when a cache file is missing, malformed or unwritable."""
