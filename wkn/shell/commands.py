"""
Shell Command and Response Definitions

This module defines the data structures passed between the command
parser, the dispatcher and the output formatter.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class CommandType(Enum):
    """Enumeration of supported shell commands."""
    NEW = auto()
    SHOW = auto()
    DEL = auto()
    MERGE = auto()
    SORT = auto()
    EXIT = auto()
    HELP = auto()
    UNKNOWN = auto()


# Command names are case-sensitive
COMMAND_NAMES = {
    "new": CommandType.NEW,
    "show": CommandType.SHOW,
    "del": CommandType.DEL,
    "merge": CommandType.MERGE,
    "sort": CommandType.SORT,
    "exit": CommandType.EXIT,
    "help": CommandType.HELP,
}


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Command:
    """
    Represents a parsed shell line.

    Attributes:
        type: The command type (UNKNOWN for unrecognised names)
        name: The first token as typed
        args: The remaining tokens
        raw: The original line, stripped
    """
    type: CommandType
    name: str = ""
    args: List[str] = field(default_factory=list)
    raw: str = ""


@dataclass
class Response:
    """
    Result of executing one command.

    Attributes:
        status: OK or ERROR
        message: Text to print (may be empty, e.g. after show)
        stop: True when the shell should stop reading input
    """
    status: ResponseStatus
    message: str = ""
    stop: bool = False

    @property
    def is_ok(self) -> bool:
        return self.status == ResponseStatus.OK

    @classmethod
    def ok(cls, message: str = "", stop: bool = False) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, stop=stop)

    @classmethod
    def error(cls, message: str, stop: bool = False) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message, stop=stop)

    @classmethod
    def usage(cls, text: str) -> "Response":
        """Create a usage error response for a wrong argument count."""
        return cls.error(message=f"Usage: {text}")

    @classmethod
    def created(cls) -> "Response":
        return cls.ok(message="CREATED")

    @classmethod
    def deleted(cls) -> "Response":
        return cls.ok(message="DELETED")

    @classmethod
    def merged(cls) -> "Response":
        return cls.ok(message="MERGED")

    @classmethod
    def sorted(cls) -> "Response":
        return cls.ok(message="SORTED")
