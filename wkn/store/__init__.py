"""Store module for WKN."""

from .database import Store, render
from .errors import (
    KeyNotFoundError,
    SnapshotDecodeError,
    SnapshotIOError,
    ValueParseError,
    WknError,
)

__all__ = [
    "Store",
    "render",
    "WknError",
    "KeyNotFoundError",
    "ValueParseError",
    "SnapshotIOError",
    "SnapshotDecodeError",
]
