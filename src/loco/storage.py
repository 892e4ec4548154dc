"""Durable key-value storage used for hotbar persistence.

Values are opaque strings (callers serialise to JSON themselves). Two backends
are provided:
- FileStorage: one file per key inside a directory, written synchronously
- MemoryStorage: in-process dictionary, for tests and hosts without a disk

Backends raise StorageError for any failure so callers only need to handle
one exception type.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class StorageError(Exception):
    """Raised when a storage backend cannot read or write a value."""


class KeyValueStorage(ABC):
    """Abstract key-value store with string values."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never written."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        ...


class FileStorage(KeyValueStorage):
    """Stores each key in its own file under a directory.

    Writes go straight to disk on every set() (no batching) so that an abrupt
    exit never loses the last mutation.

    Attributes:
        storage_dir: Directory containing the value files.
    """

    def __init__(self, storage_dir: Path | None = None) -> None:
        """Initialize the storage.

        Args:
            storage_dir: Directory for value files. Defaults to 'storage' in the
                        current working directory. Created on first write.
        """
        if storage_dir is None:
            storage_dir = Path.cwd() / "storage"
        self.storage_dir = storage_dir

    def get(self, key: str) -> str | None:
        """Read a value from its file."""
        path = self._get_path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to read storage key '{key}'"
            raise StorageError(msg) from e

    def set(self, key: str, value: str) -> None:
        """Write a value to its file."""
        path = self._get_path(key)
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write(value)
        except OSError as e:
            msg = f"Failed to write storage key '{key}'"
            raise StorageError(msg) from e
        logger.debug("Wrote storage key %s", key)

    def delete(self, key: str) -> None:
        """Delete the file backing a key."""
        try:
            self._get_path(key).unlink(missing_ok=True)
        except OSError as e:
            msg = f"Failed to delete storage key '{key}'"
            raise StorageError(msg) from e

    def _get_path(self, key: str) -> Path:
        """Get the file path for a key."""
        return self.storage_dir / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"


class MemoryStorage(KeyValueStorage):
    """Dictionary-backed storage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Initialize with optional pre-populated values."""
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        """Return the stored value."""
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store the value."""
        self.values[key] = value

    def delete(self, key: str) -> None:
        """Remove the key."""
        self.values.pop(key, None)
