"""
Command-line argument parsing for wordhex.

Only two invocation forms are accepted:

    PROGRAM FILE
    PROGRAM -n LEN FILE

Anything else is a usage error.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


LENGTH_FLAG = '-n'

_LENGTH_RE = re.compile(r'\+?[0-9]+')


class ArgErrorKind(Enum):
    """Classification of an argument parsing failure."""
    INVALID_USAGE = 'invalid-usage'
    INVALID_LENGTH = 'invalid-length'


class ArgumentError(Exception):
    """Raised when the argument list matches neither accepted form."""

    def __init__(self, kind: ArgErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def message(self, program: str) -> str:
        """Text to show the user for this failure."""
        if self.kind is ArgErrorKind.INVALID_USAGE:
            return f"Usage: {program} [-n LEN] FILE"
        return "Invalid length argument"


@dataclass(frozen=True)
class ParsedArguments:
    """Result of a successful parse."""
    filename: str
    max_bytes: Optional[int] = None


def parse_length(text: str) -> int:
    """
    Parse a byte count.

    Args:
        text: Decimal digits, optionally with a leading '+'

    Returns:
        The non-negative integer value

    Raises:
        ArgumentError: With INVALID_LENGTH if the text is not a valid count
    """
    if not _LENGTH_RE.fullmatch(text):
        raise ArgumentError(ArgErrorKind.INVALID_LENGTH)
    return int(text)


def parse_args(argv: Sequence[str]) -> ParsedArguments:
    """
    Extract the filename and optional byte limit from a full argv.

    Args:
        argv: Argument list including the program name at index 0

    Returns:
        ParsedArguments for the matched form

    Raises:
        ArgumentError: INVALID_USAGE on a shape mismatch, INVALID_LENGTH
            when the -n form matches but LEN is not a valid count
    """
    if len(argv) == 2:
        return ParsedArguments(filename=argv[1])
    if len(argv) == 4 and argv[1] == LENGTH_FLAG:
        max_bytes = parse_length(argv[2])
        return ParsedArguments(filename=argv[3], max_bytes=max_bytes)
    raise ArgumentError(ArgErrorKind.INVALID_USAGE)
