"""
Interactive Shell Module

Reads commands one line at a time, dispatches them to the store and
prints the results. The store is passed in by the caller, so a shell can
be driven from tests with in-memory streams.
"""

import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from ..config.settings import settings
from ..store.database import Store
from ..store.errors import KeyNotFoundError, SnapshotIOError, ValueParseError
from .commands import Command, CommandType, Response
from .parser import CommandParser, parse_int_list

logger = logging.getLogger(__name__)

HELP_TEXT = "\n".join([
    "Commands:",
    "  new <array_name> [<comma-separated-values>]: Create a new array",
    "  show <array_name>: Print the content of an array",
    "  del <array_name>: Delete an array",
    "  merge <dest_array_name> <src_array_name>: Merge two arrays",
    "  sort <array_name>: Sort the content of an array",
    "  exit: Exit the REPL",
    "  help: Show this help message",
])

Handler = Callable[[Command], Response]


class Shell:
    """
    Line-oriented command shell over a Store.

    Each line is parsed into a Command and routed through a table that
    maps every CommandType to a handler. Handlers check their own
    argument count, call the store, and return a Response; they never
    print, except that show writes through the store to the shell's
    output stream.

    Usage:
        shell = Shell(store)
        exit_code = shell.run()  # until exit or end of input

    Attributes:
        store: The Store commands operate on
        parser: The CommandParser for input lines
    """

    def __init__(
            self,
            store: Store,
            stdin: TextIO = None,
            stdout: TextIO = None,
            prompt: str = None,
    ):
        """
        Initialize the shell.

        Args:
            store: Store to operate on
            stdin: Input stream (default sys.stdin)
            stdout: Output stream for prompts, results and errors
                (default sys.stdout)
            prompt: Prompt printed before each read (default from settings)
        """
        self.store = store
        self.parser = CommandParser()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt if prompt is not None else settings.PROMPT

        self._handlers: Dict[CommandType, Handler] = {
            CommandType.NEW: self._handle_new,
            CommandType.SHOW: self._handle_show,
            CommandType.DEL: self._handle_del,
            CommandType.MERGE: self._handle_merge,
            CommandType.SORT: self._handle_sort,
            CommandType.EXIT: self._handle_exit,
            CommandType.HELP: self._handle_help,
            CommandType.UNKNOWN: self._handle_unknown,
        }

    def execute(self, line: str) -> Optional[Response]:
        """
        Run a single input line.

        Args:
            line: Raw input line

        Returns:
            The handler's Response, or None for a blank line
        """
        command = self.parser.parse_line(line)
        if command is None:
            return None

        logger.debug(f"Dispatching {command.type.name} args={command.args}")
        return self._handlers[command.type](command)

    def run(self) -> int:
        """
        Run the read-eval-print loop until exit or end of input.

        Returns:
            Exit code: 1 if the final exit could not save the store,
            0 otherwise
        """
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            try:
                line = self.stdin.readline()
            except UnicodeDecodeError:
                logger.debug("Undecodable input line")
                self.stdout.write(self.parser.format_response(Response.error("Error: invalid encoding")))
                self.stdout.flush()
                continue

            if not line:
                # End of input
                self.stdout.write("\n")
                self.stdout.flush()
                logger.debug("End of input")
                return 0

            response = self.execute(line)
            if response is None:
                continue

            self.stdout.write(self.parser.format_response(response))
            self.stdout.flush()

            if response.stop:
                return 0 if response.is_ok else 1

    def _handle_new(self, command: Command) -> Response:
        """new <name> [<v1,v2,...>]"""
        if not 1 <= len(command.args) <= 2:
            return Response.usage("new <array_name> [<comma-separated-values>]")

        key = command.args[0]
        values = []
        if len(command.args) == 2:
            try:
                values = parse_int_list(command.args[1])
            except ValueParseError as e:
                return Response.error(f"Error parsing value: {e}")

        self.store.set(key, values)
        return Response.created()

    def _handle_show(self, command: Command) -> Response:
        """show <name>"""
        if len(command.args) != 1:
            return Response.usage("show <array_name>")

        try:
            self.store.show(command.args[0], stream=self.stdout)
        except KeyNotFoundError as e:
            return Response.error(f"Error: {e}")
        return Response.ok()

    def _handle_del(self, command: Command) -> Response:
        """del <name>"""
        if len(command.args) != 1:
            return Response.usage("del <array_name>")

        try:
            self.store.delete(command.args[0])
        except KeyNotFoundError as e:
            return Response.error(f"Error: {e}")
        return Response.deleted()

    def _handle_merge(self, command: Command) -> Response:
        """merge <dest> <src>"""
        if len(command.args) != 2:
            return Response.usage("merge <dest_array_name> <src_array_name>")

        try:
            self.store.merge(command.args[0], command.args[1])
        except KeyNotFoundError as e:
            return Response.error(f"Error: {e}")
        return Response.merged()

    def _handle_sort(self, command: Command) -> Response:
        """sort <name>"""
        if len(command.args) != 1:
            return Response.usage("sort <array_name>")

        try:
            self.store.sort(command.args[0])
        except KeyNotFoundError as e:
            return Response.error(f"Error: {e}")
        return Response.sorted()

    def _handle_exit(self, command: Command) -> Response:
        """Save the store and stop, even if saving fails."""
        if command.args:
            return Response.usage("exit")

        try:
            self.store.save()
        except SnapshotIOError as e:
            logger.error(f"Failed to save {self.store.path}: {e}")
            return Response.error(f"Error saving database: {e}\nBye!", stop=True)
        return Response.ok("Bye!", stop=True)

    def _handle_help(self, command: Command) -> Response:
        if command.args:
            return Response.usage("help")
        return Response.ok(HELP_TEXT)

    def _handle_unknown(self, command: Command) -> Response:
        return Response.error(f"Unknown command: {command.name}")
