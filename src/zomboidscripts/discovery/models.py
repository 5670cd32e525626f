"""Data models for the discovery module."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of a discovery run: a scripts directory, or nothing.

    Attributes:
        path: Absolute path to ``<root>/media/scripts``; None if not found.
        strategy: Name of the strategy that produced ``path``.
    """

    path: Path | None = None
    strategy: str | None = None

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def root(self) -> Path | None:
        """The game root, two levels above the scripts directory."""
        return self.path.parent.parent if self.path is not None else None

    @classmethod
    def not_found(cls) -> DiscoveryResult:
        return cls()
