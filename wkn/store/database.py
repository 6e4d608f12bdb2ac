"""
Integer-Array Store Module

This module implements the core storage of WKN: an in-memory mapping from
names to ordered lists of integers, persisted to a single snapshot file.
"""

import logging
import sys
import threading
from typing import Dict, List, Optional, Sequence, TextIO

from .errors import KeyNotFoundError
from .snapshot import read_snapshot, write_snapshot

logger = logging.getLogger(__name__)


def render(values: Sequence[int]) -> str:
    """
    Render a sequence for display.

    Examples:
        >>> render([3, 1, 2])
        '[3 1 2]'
        >>> render([])
        '[]'
    """
    return "[" + " ".join(str(v) for v in values) + "]"


class Store:
    """
    Lock-protected mapping from names to integer lists.

    Every read and write of the table happens while holding a single
    non-reentrant lock, so the store is safe to share between threads.
    Locked methods never call other locked methods.

    Internal Storage:
        A plain dict. Format: name -> list of ints.
        Every key maps to a list (possibly empty); deleting removes the key.

    Attributes:
        path: Location of the snapshot file
    """

    def __init__(self, path: str):
        """
        Initialize an empty store.

        Args:
            path: Snapshot file used by load() and save()
        """
        self._path = path
        self._data: Dict[str, List[int]] = {}
        self._lock = threading.Lock()

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> None:
        """
        Replace the table with the contents of the snapshot file.

        Raises:
            SnapshotIOError: If the file is missing or unreadable
            SnapshotDecodeError: If the file is not a valid snapshot
        """
        table = read_snapshot(self._path)
        with self._lock:
            self._data = table
        logger.debug(f"Loaded {len(table)} arrays from {self._path}")

    def save(self) -> None:
        """
        Write the whole table to the snapshot file.

        Raises:
            SnapshotIOError: If the file cannot be written
        """
        with self._lock:
            write_snapshot(self._path, self._data)
            count = len(self._data)
        logger.debug(f"Saved {count} arrays to {self._path}")

    def set(self, key: str, values: Sequence[int]) -> None:
        """Insert or replace the list bound to key."""
        with self._lock:
            self._data[key] = list(values)

    def get(self, key: str) -> List[int]:
        """
        Return a copy of the list bound to key.

        Raises:
            KeyNotFoundError: If key is absent
        """
        with self._lock:
            if key not in self._data:
                raise KeyNotFoundError(key)
            return list(self._data[key])

    def delete(self, key: str) -> None:
        """
        Remove key from the store.

        Raises:
            KeyNotFoundError: If key is absent
        """
        with self._lock:
            if key not in self._data:
                raise KeyNotFoundError(key)
            del self._data[key]

    def merge(self, dest_key: str, src_key: str) -> None:
        """
        Append the elements of src_key to the end of dest_key.

        The source list is left unchanged. Merging a key into itself
        doubles it.

        Raises:
            KeyNotFoundError: If dest_key is absent (checked first), or
                if src_key is absent
        """
        with self._lock:
            if dest_key not in self._data:
                raise KeyNotFoundError(dest_key, "destination array does not exist")
            if src_key not in self._data:
                raise KeyNotFoundError(src_key, "source array does not exist")
            self._data[dest_key] = self._data[dest_key] + self._data[src_key]

    def show(self, key: str, stream: Optional[TextIO] = None) -> None:
        """
        Print the list bound to key.

        Args:
            key: Name of the array
            stream: Where to write (default: standard output)

        Raises:
            KeyNotFoundError: If key is absent
        """
        out = stream if stream is not None else sys.stdout
        with self._lock:
            if key not in self._data:
                raise KeyNotFoundError(key, "array does not exist")
            out.write(render(self._data[key]) + "\n")

    def sort(self, key: str) -> None:
        """
        Sort the list bound to key in non-decreasing order.

        Raises:
            KeyNotFoundError: If key is absent
        """
        with self._lock:
            if key not in self._data:
                raise KeyNotFoundError(key, "array does not exist")
            self._data[key].sort()

    def keys(self) -> List[str]:
        """Return the stored names, sorted."""
        with self._lock:
            return sorted(self._data)

    def size(self) -> int:
        """Get the current number of arrays in the store."""
        with self._lock:
            return len(self._data)
