#!/usr/bin/env python3
"""
WKN Entry Point

Opens (or creates) the snapshot file and starts the interactive shell.

Usage:
    wkn                             # Use ./.wkn
    wkn --db-path data/arrays.wkn   # Custom snapshot file
    wkn --debug                     # Enable debug logging on stderr
    python -m wkn                   # Same as wkn

Environment Variables:
    WKN_DB_PATH     - Snapshot file path
    WKN_PROMPT      - Shell prompt
    WKN_DEBUG       - Enable debug mode (true/false)
    WKN_LOG_LEVEL   - Log level when not in debug mode
"""

import argparse
import io
import logging
import os
import sys
from typing import List, Optional

from .config.settings import settings
from .shell.repl import Shell
from .store.database import Store
from .store.errors import SnapshotDecodeError, SnapshotIOError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="wkn",
        description="WKN: persistent integer-array store with an interactive shell",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--db-path",
        type=str,
        default=settings.DB_PATH,
        help="Path to the database file",
    )

    parser.add_argument(
        "--prompt",
        type=str,
        default=settings.PROMPT,
        help="Prompt printed before each command",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging; records go to stderr, away from shell output."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def open_store(path: str) -> Store:
    """
    Load the store at path, creating an empty snapshot if none exists.

    Raises:
        SnapshotIOError: If the file cannot be created or read
        SnapshotDecodeError: If an existing file is not a valid snapshot
    """
    store = Store(path)
    if not os.path.exists(path):
        logger.info(f"Creating new database at {path}")
        store.save()
    else:
        logger.info(f"Loading database from {path}")
        store.load()
    return store


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    db_path = os.path.normpath(args.db_path)
    existed = os.path.exists(db_path)

    try:
        store = open_store(db_path)
    except (SnapshotIOError, SnapshotDecodeError) as e:
        logger.error(f"Startup failed for {db_path}: {e}")
        action = "loading database" if existed else "creating database file"
        print(f"Error {action}: {e}")
        return 1

    logger.debug(f"Store ready with {store.size()} arrays: {', '.join(store.keys())}")

    # Pass undecodable bytes through as tokens instead of failing the read
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")

    shell = Shell(store, prompt=args.prompt)
    try:
        return shell.run()
    except KeyboardInterrupt:
        # Same as end of input: leave without saving
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
