"""Parse path data text into commands."""

from __future__ import annotations

import logging
import string

from .errors import ErrorKind, ParseError
from .path import Command, Path, validate_command

logger = logging.getLogger(__name__)


def _to_number(token: str, position: int) -> float:
    """Convert a finished numeric token."""
    try:
        return float(token)
    except ValueError as err:
        # a lone sign or decimal point
        raise ParseError(ErrorKind.MALFORMED_NUMBER, position, repr(token)) from err


def parse_path(text: str) -> Path:
    """Parse path data into a path.

    A letter starts a new command. Digits and a single decimal point build a
    number. A minus sign starts a new negative number and so also separates
    numbers. Any other character only separates numbers.

    Args:
        text: The path data, e.g. the `d` attribute of an SVG path.

    Returns:
        The commands in drawing order, as written (relative commands and
        repeated argument groups are kept).

    Raises:
        ParseError: For the first problem found, with the character offset.

    Example:
        >>> parse_path("M 10,10 l 10-5")
        Path('M10 10l10-5')
    """
    commands: list[tuple[Command, int]] = []

    name: str | None = None
    name_position = 0
    args: list[float] = []
    token = ""
    token_position = 0

    for position, char in enumerate(text):
        if char in string.digits or char == ".":
            if name is None:
                raise ParseError(ErrorKind.ARGUMENT_BEFORE_COMMAND, position)
            if char == "." and "." in token:
                raise ParseError(
                    ErrorKind.MALFORMED_NUMBER, position, repr(token + char)
                )
            if not token:
                token_position = position
            token += char
            continue

        if token:
            args.append(_to_number(token, token_position))
            token = ""

        if char == "-":
            if name is None:
                raise ParseError(ErrorKind.ARGUMENT_BEFORE_COMMAND, position)
            token, token_position = char, position
        elif char.isalpha():
            if name is not None:
                commands.append((Command(name, tuple(args)), name_position))
            name, name_position, args = char, position, []

    # the end of the text finishes the last command
    if token:
        args.append(_to_number(token, token_position))
    if name is not None:
        commands.append((Command(name, tuple(args)), name_position))

    for command, position in commands:
        validate_command(command, position)

    logger.debug("Parsed %d commands", len(commands))
    return Path(command for command, _ in commands)
