"""
Error types raised by the store and the value parser.

The shell recovers from ``KeyNotFoundError`` and ``ValueParseError`` by
printing them; snapshot errors are fatal at startup.
"""


class WknError(Exception):
    """Base class for all WKN errors."""


class KeyNotFoundError(WknError, KeyError):
    """Raised when an operation names a key that is not in the store."""

    def __init__(self, key: str, message: str = "key not found"):
        super().__init__(message)
        self.key = key
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class ValueParseError(WknError, ValueError):
    """Raised when a comma-separated value list has a malformed element."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"{reason}: {value!r}")
        self.value = value
        self.reason = reason


class SnapshotIOError(WknError):
    """Raised when the snapshot file cannot be created, read or written."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class SnapshotDecodeError(WknError):
    """Raised when the snapshot content is not in the expected format."""
