"""
Snapshot Codec Module

Encodes the store table to its on-disk form and back.

Format:
    A UTF-8 JSON document:

        {"format": "wkn", "version": 1, "arrays": {"name": [1, 2, 3]}}

    Keys are written sorted so identical tables produce identical files.
    The snapshot is the only persisted state; there is no index or journal.
"""

import json
import logging
import os
import stat
import tempfile
from typing import Dict, List

from ..config.settings import settings
from .errors import SnapshotDecodeError, SnapshotIOError

logger = logging.getLogger(__name__)

Table = Dict[str, List[int]]


def encode(table: Table) -> str:
    """Serialize a table into snapshot text."""
    document = {
        "format": settings.SNAPSHOT_FORMAT,
        "version": settings.SNAPSHOT_VERSION,
        "arrays": table,
    }
    return json.dumps(document, sort_keys=True) + "\n"


def decode(text: str) -> Table:
    """
    Parse snapshot text into a table.

    Args:
        text: Full contents of a snapshot file

    Returns:
        A new dict mapping each name to a new list of ints

    Raises:
        SnapshotDecodeError: If the text is not a valid snapshot
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotDecodeError(f"invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise SnapshotDecodeError("snapshot root must be an object")
    if document.get("format") != settings.SNAPSHOT_FORMAT:
        raise SnapshotDecodeError(f"unexpected format {document.get('format')!r}")
    if document.get("version") != settings.SNAPSHOT_VERSION:
        raise SnapshotDecodeError(f"unsupported version {document.get('version')!r}")

    arrays = document.get("arrays")
    if not isinstance(arrays, dict):
        raise SnapshotDecodeError("'arrays' must be an object")

    table: Table = {}
    for key, values in arrays.items():
        if not isinstance(values, list):
            raise SnapshotDecodeError(f"array {key!r} is not a list")
        for value in values:
            # bool is a subclass of int
            if isinstance(value, bool) or not isinstance(value, int):
                raise SnapshotDecodeError(f"array {key!r} holds a non-integer: {value!r}")
            if not settings.INT_MIN <= value <= settings.INT_MAX:
                raise SnapshotDecodeError(f"array {key!r} holds an out-of-range integer: {value}")
        table[key] = list(values)
    return table


def read_snapshot(path: str) -> Table:
    """
    Read and decode the snapshot at path.

    Raises:
        SnapshotIOError: If the file is missing or unreadable
        SnapshotDecodeError: If the content is not a valid snapshot
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SnapshotDecodeError(f"snapshot is not UTF-8 text: {e}") from e
    except OSError as e:
        raise SnapshotIOError(path, e) from e

    table = decode(text)
    logger.debug(f"Read snapshot {path} ({len(table)} arrays)")
    return table


def _snapshot_mode(path: str) -> int:
    """Permission bits for a new snapshot: the existing file's, else 0666 & ~umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_snapshot(path: str, table: Table) -> None:
    """
    Encode table and replace the file at path with it.

    The document is written to a temporary file in the same directory and
    renamed over path, so a reader sees either the old or the new file.
    An existing file keeps its permissions; a new one gets 0666 less the
    umask.

    Raises:
        SnapshotIOError: If any step of the write fails
    """
    text = encode(table)
    directory = os.path.dirname(os.path.abspath(path))
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, prefix=".wkn-", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, _snapshot_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SnapshotIOError(path, e) from e

    logger.debug(f"Wrote snapshot {path} ({len(table)} arrays)")
