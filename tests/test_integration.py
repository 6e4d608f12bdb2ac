"""
Integration Tests

End-to-end tests that run the real entry point against a snapshot file
in a temporary directory, feeding commands through standard input.

Run with: python -m pytest tests/test_integration.py -v
"""

import io
import json
import os

import pytest

from wkn.cli import main, open_store, parse_args
from wkn.config.settings import settings
from wkn.store.errors import SnapshotDecodeError


@pytest.fixture
def session(monkeypatch, capsys, db_path: str):
    """
    Run one process lifetime of wkn.

    Usage:
        code, out = session(["new a 1", "exit"])
    """
    def run(lines, extra_args=None):
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(line + "\n" for line in lines)))
        code = main(["--db-path", db_path, "--prompt", ""] + (extra_args or []))
        return code, capsys.readouterr().out
    return run


class TestStartup:
    """Test load-or-create at startup."""

    def test_creates_missing_file(self, session, db_path: str):
        """Test the snapshot exists after the first run, even without exit."""
        code, _ = session([])

        assert code == 0
        assert os.path.exists(db_path)
        with open(db_path) as f:
            assert json.load(f)["arrays"] == {}

    def test_corrupt_file_is_fatal(self, session, db_path: str):
        """Test a bad snapshot stops startup before the shell runs."""
        with open(db_path, "w") as f:
            f.write("garbage")

        code, out = session(["new a 1", "exit"])

        assert code == 1
        assert out.startswith("Error loading database:")
        assert "CREATED" not in out
        with open(db_path) as f:
            assert f.read() == "garbage"

    def test_uncreatable_file_is_fatal(self, monkeypatch, capsys, tmp_path):
        """Test failing to create the first snapshot exits with status 1."""
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
        path = os.path.join(str(tmp_path), "no-such-dir", ".wkn")

        code = main(["--db-path", path])

        assert code == 1
        assert capsys.readouterr().out.startswith("Error creating database file:")

    def test_open_store_loads_existing(self, db_path: str):
        """Test open_store reads an existing snapshot."""
        with open(db_path, "w") as f:
            json.dump({"format": "wkn", "version": 1, "arrays": {"a": [1, 2]}}, f)

        assert open_store(db_path).get("a") == [1, 2]

    def test_open_store_bad_snapshot(self, db_path: str):
        """Test open_store propagates decode errors."""
        with open(db_path, "w") as f:
            json.dump({"format": "wkn", "version": 99, "arrays": {}}, f)

        with pytest.raises(SnapshotDecodeError):
            open_store(db_path)


class TestSessions:
    """Test state carried between process lifetimes."""

    def test_second_session_sees_first(self, session):
        """Test the second session loads exactly what exit saved."""
        code, out = session([
            "new a 1,2",
            "new b 3,4",
            "new c 9",
            "merge a b",
            "del c",
            "new foo 3,1,2",
            "sort foo",
            "exit",
        ])
        assert code == 0
        assert out.splitlines()[-1] == "Bye!"

        code, out = session(["show a", "show b", "show c", "show foo", "exit"])
        assert code == 0
        assert out.splitlines() == [
            "[1 2 3 4]",
            "[3 4]",
            "Error: array does not exist",
            "[1 2 3]",
            "Bye!",
        ]

    def test_end_of_input_discards_changes(self, session):
        """Test changes are only persisted by exit."""
        session(["new keep 1", "exit"])
        session(["new lost 2", "del keep"])

        _, out = session(["show keep", "show lost"])
        # End of input leaves a bare newline after the last prompt
        assert out.splitlines() == ["[1]", "Error: array does not exist", ""]

    def test_malformed_new_not_persisted(self, session):
        """Test a rejected new leaves nothing behind across sessions."""
        _, out = session(["new foo 1,x,2", "exit"])
        assert out.splitlines()[0].startswith("Error parsing value:")

        _, out = session(["show foo"])
        assert out.splitlines() == ["Error: array does not exist", ""]


class TestEncoding:
    """Test input that is not valid UTF-8."""

    def test_undecodable_line_does_not_end_session(self, monkeypatch, db_path: str):
        """Test a bad byte sequence is an unknown command and exit still saves."""
        stdin = io.TextIOWrapper(io.BytesIO(b"new a 1\n\xff\xfe\nexit\n"), encoding="utf-8")
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr("sys.stdout", stdout)

        code = main(["--db-path", db_path, "--prompt", ""])
        stdout.flush()

        assert code == 0
        assert stdout.buffer.getvalue() == b"CREATED\nUnknown command: \xff\xfe\nBye!\n"
        assert open_store(db_path).get("a") == [1]

    def test_undecodable_value_list(self, monkeypatch, db_path: str):
        """Test a bad byte inside a value list is a parse error."""
        stdin = io.TextIOWrapper(io.BytesIO(b"new a 1,\xff\nexit\n"), encoding="utf-8")
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr("sys.stdout", stdout)

        code = main(["--db-path", db_path, "--prompt", ""])
        stdout.flush()

        lines = stdout.buffer.getvalue().splitlines()
        assert code == 0
        assert lines[0].startswith(b"Error parsing value:")
        assert lines[-1] == b"Bye!"
        assert open_store(db_path).keys() == []


class TestArgs:
    """Test command line parsing."""

    def test_defaults(self):
        """Test the default snapshot path and prompt."""
        args = parse_args([])
        assert args.db_path == settings.DB_PATH
        assert args.prompt == settings.PROMPT

    def test_overrides(self):
        """Test flags override defaults."""
        args = parse_args(["--db-path", "x.db", "--prompt", "$ ", "--debug"])
        assert args.db_path == "x.db"
        assert args.prompt == "$ "
        assert args.debug is True
