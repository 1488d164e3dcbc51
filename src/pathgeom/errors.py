"""Errors raised for invalid path data."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The reason a path was rejected."""

    UNKNOWN_COMMAND = "unknown command"
    INVALID_ARITY = "invalid number of arguments"
    MALFORMED_NUMBER = "malformed number"
    ARGUMENT_BEFORE_COMMAND = "argument before first command"
    INVALID_FLAG = "arc flag is not 0 or 1"


class ParseError(ValueError):
    """Invalid path data.

    Attributes:
        kind: The reason the path was rejected.
        position: Character offset into the parsed text, or the command index
            when raised while validating an already built path.
        detail: Optional extra context, e.g. the offending command.
    """

    def __init__(self, kind: ErrorKind, position: int, detail: str = "") -> None:
        self.kind = kind
        self.position = position
        self.detail = detail
        message = f"{kind.value} at {position}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
