"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import io
import os

import pytest

from wkn.shell.parser import CommandParser
from wkn.shell.repl import Shell
from wkn.store.database import Store


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def db_path(tmp_path) -> str:
    """Path of a snapshot file that does not exist yet."""
    return os.path.join(str(tmp_path), ".wkn")


@pytest.fixture
def store(db_path: str) -> Store:
    """Create a fresh, empty Store backed by a temporary file."""
    return Store(db_path)


@pytest.fixture
def filled_store(store: Store) -> Store:
    """A Store holding a=[1, 2] and b=[3, 4]."""
    store.set("a", [1, 2])
    store.set("b", [3, 4])
    return store


# ============================================================================
# Shell Fixtures
# ============================================================================

@pytest.fixture
def parser() -> CommandParser:
    """Create a CommandParser instance."""
    return CommandParser()


@pytest.fixture
def output() -> io.StringIO:
    """Captures everything the shell writes."""
    return io.StringIO()


@pytest.fixture
def shell(store: Store, output: io.StringIO) -> Shell:
    """A Shell over the test store, writing to an in-memory stream."""
    return Shell(store, stdin=io.StringIO(""), stdout=output, prompt="wkn> ")


@pytest.fixture
def run_session(store: Store):
    """
    Factory fixture that feeds lines to a fresh Shell.

    Usage:
        def test_something(run_session):
            code, out = run_session(["new a 1,2", "show a", "exit"])
    """
    def run(lines, prompt: str = ""):
        stdin = io.StringIO("".join(line + "\n" for line in lines))
        stdout = io.StringIO()
        code = Shell(store, stdin=stdin, stdout=stdout, prompt=prompt).run()
        return code, stdout.getvalue()
    return run
