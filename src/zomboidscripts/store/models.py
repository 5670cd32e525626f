"""Data models for the script store.

``LoadedFile`` is one ingested file. Metadata values are restricted to
JSON-compatible data (``MetadataValue``) so any store can be exported
to a cache file and read back unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import Any, Mapping, Union

MetadataValue = Union[
    None, bool, int, float, str, list["MetadataValue"], dict[str, "MetadataValue"],
]


def check_metadata_value(value: Any) -> None:
    """Raise ``TypeError`` unless ``value`` is JSON-compatible."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for item in value:
            check_metadata_value(item)
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Metadata dict keys must be str, got {type(key).__name__}")
            check_metadata_value(item)
        return
    raise TypeError(f"Unsupported metadata value type: {type(value).__name__}")


@dataclass(frozen=True)
class LoadedFile:
    """A single script file held in memory.

    Records are immutable. The owning store keeps the metadata dict and
    hands out a read-only view of it; tags change only through
    ``ScriptDataStore.set_metadata``.

    Attributes:
        path: Absolute path; unique key within a store.
        content: Decoded text of the file.
        metadata: Read-only view of the tags attached after load.
    """

    path: str
    content: str
    metadata: Mapping[str, MetadataValue] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def name(self) -> str:
        """Final path component."""
        return PurePath(self.path).name

    @property
    def lines(self) -> list[str]:
        """Content split on newlines; recomputed on every access."""
        return self.content.split("\n")

    @property
    def directory(self) -> str:
        return str(PurePath(self.path).parent)
