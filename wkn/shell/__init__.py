"""Shell module for WKN."""

from .commands import Command, CommandType, Response, ResponseStatus
from .parser import CommandParser, parse_int_list
from .repl import Shell

__all__ = [
    "Command",
    "CommandType",
    "Response",
    "ResponseStatus",
    "CommandParser",
    "parse_int_list",
    "Shell",
]
