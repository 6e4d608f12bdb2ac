"""
Shell Line Parser Module

Turns raw input lines into Command objects and comma-separated value
lists into integer lists.
"""

import re
from typing import List, Optional

from ..config.settings import settings
from ..store.errors import ValueParseError
from .commands import COMMAND_NAMES, Command, CommandType, Response

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_int_list(text: str) -> List[int]:
    """
    Parse a comma-separated list of decimal integers.

    The whole list is rejected if any one element is malformed; a partial
    list is never returned.

    Args:
        text: e.g. "3,1,2" or "-5,+7"

    Returns:
        The parsed integers, in order

    Raises:
        ValueParseError: On an empty, non-decimal or out-of-range element

    Examples:
        >>> parse_int_list("3,1,2")
        [3, 1, 2]
    """
    result = []
    for part in text.split(","):
        if not _DECIMAL.fullmatch(part):
            raise ValueParseError(part, "invalid syntax")
        n = int(part)
        if not settings.INT_MIN <= n <= settings.INT_MAX:
            raise ValueParseError(part, "value out of range")
        result.append(n)
    return result


class CommandParser:
    """
    Parser for shell input lines.

    Line Format:
        <command> [ARGS...]

    Tokens are separated by any run of whitespace. Argument counts are
    not checked here; each handler validates its own arity so it can
    print a command-specific usage line.
    """

    def parse_line(self, line: str) -> Optional[Command]:
        """
        Parse one input line.

        Args:
            line: Raw line (may include trailing newline)

        Returns:
            None for a blank line, otherwise a Command. Unrecognised
            command names give a Command with type=UNKNOWN.

        Examples:
            >>> cmd = CommandParser().parse_line("merge a b")
            >>> cmd.type == CommandType.MERGE, cmd.args
            (True, ['a', 'b'])
        """
        parts = line.split()
        if not parts:
            return None

        name = parts[0]
        return Command(
            type=COMMAND_NAMES.get(name, CommandType.UNKNOWN),
            name=name,
            args=parts[1:],
            raw=line.strip(),
        )

    def format_response(self, response: Response) -> str:
        """
        Format a Response for printing.

        Returns:
            The message with a trailing newline, or "" when there is
            nothing to print.
        """
        if not response.message:
            return ""
        return f"{response.message}\n"
