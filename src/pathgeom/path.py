"""Path commands, their normalization and conversion into segments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from typing_extensions import Self, override

from .constants import ARITIES, VALID_COMMANDS
from .errors import ErrorKind, ParseError
from .primitives import BBox, Point, Rect, format_number, get_bbox
from .segments import Arc, CubicCurve, Line, QuadraticCurve, Segment

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

ORIGIN = Point(0, 0)


class Command(NamedTuple):
    """A single path command with all of its argument groups.

    Examples:
        >>> str(Command("L", (10.0, 10.0, 20.0, -5.0)))
        'L10 10 20-5'
    """

    name: str
    args: tuple[float, ...] = ()

    @override
    def __str__(self) -> str:
        text = self.name
        for i, arg in enumerate(self.args):
            arg_text = format_number(arg)
            if i > 0 and not arg_text.startswith("-"):
                text += " "
            text += arg_text
        return text

    @property
    def is_relative(self) -> bool:
        """If the command is given relative to the current point."""
        return self.name.islower()

    @property
    def arity(self) -> int:
        """Number of arguments a single call consumes."""
        return ARITIES[self.name.upper()]  # type: ignore[index]

    def groups(self) -> Iterator[tuple[float, ...]]:
        """Iterate over the argument groups of the repeated calls."""
        arity = self.arity
        if arity == 0:
            return

        for i in range(0, len(self.args), arity):
            yield self.args[i : i + arity]


def validate_command(command: Command, position: int) -> None:
    """Check the name and the arguments of a command.

    Raises:
        ParseError: If the command is unknown, has a wrong number of
            arguments or an arc flag is neither 0 nor 1.
    """
    upper = command.name.upper()
    if len(command.name) != 1 or upper not in VALID_COMMANDS:
        raise ParseError(ErrorKind.UNKNOWN_COMMAND, position, repr(command.name))

    arity = command.arity
    count = len(command.args)
    if arity == 0:
        if count:
            raise ParseError(
                ErrorKind.INVALID_ARITY,
                position,
                f"{command.name} takes no arguments, got {count}",
            )
    elif count == 0 or count % arity:
        raise ParseError(
            ErrorKind.INVALID_ARITY,
            position,
            f"{command.name} takes a positive multiple of {arity} arguments, "
            f"got {count}",
        )

    if upper == "A":
        for group in command.groups():
            if {group[3], group[4]} - {0, 1}:
                raise ParseError(ErrorKind.INVALID_FLAG, position, str(command))


def _offset_group(
    name: str, group: tuple[float, ...], offset: Point
) -> tuple[float, ...]:
    """Move the coordinates of one argument group of an upper case command."""
    if name == "H":
        return (group[0] + offset.x,)
    if name == "V":
        return (group[0] + offset.y,)
    if name == "A":
        return (*group[:5], group[5] + offset.x, group[6] + offset.y)
    return tuple(
        value + (offset.y if i % 2 else offset.x) for i, value in enumerate(group)
    )


def _end_point(name: str, group: tuple[float, ...], current: Point) -> Point:
    """The current point after an absolute argument group."""
    if name == "H":
        return Point(group[0], current.y)
    if name == "V":
        return Point(current.x, group[0])
    return Point(group[-2], group[-1])


def _reflected_control(previous: Command | None, kind: str, current: Point) -> Point:
    """The implicit control point of a smooth curve.

    The last control point of the previous curve is reflected about the
    current point if the previous command is a curve of the same kind.
    """
    if previous is None or previous.name != kind:
        return current

    # second control point of C, only control point of Q
    control = Point(*previous.args[-4:-2])
    return control.reflect(current)


class Path(tuple[Command, ...]):
    """An immutable sequence of path commands.

    Every transformation returns a new path and leaves the original intact.
    """

    __slots__ = ()

    def __new__(cls, commands: Iterable[tuple[str, Iterable[float]]] = ()) -> Self:
        return super().__new__(
            cls,
            (
                Command(name, tuple(float(x) for x in args))
                for name, args in commands
            ),
        )

    @override
    def __repr__(self) -> str:
        return f"Path({self.to_string()!r})"

    @override
    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Serialize the path as path data."""
        return "".join(str(command) for command in self)

    def validate(self) -> None:
        """Check every command of the path.

        Raises:
            ParseError: For the first invalid command, with its index as the
                position.
        """
        for index, command in enumerate(self):
            validate_command(command, index)

    def to_absolute(self) -> Path:
        """Convert all relative commands into absolute ones.

        Repeated argument groups are resolved one after the other, each
        relative to the point the previous group reached.

        Example:
            >>> Path([("m", (10, 10, 10, -10))]).to_absolute()
            Path('M10 10 20 0')
        """
        self.validate()

        current = subpath_start = ORIGIN
        result: list[Command] = []

        for command in self:
            name = command.name.upper()

            if name == "Z":
                current = subpath_start
                result.append(Command("Z"))
                continue

            args: list[float] = []
            for i, group in enumerate(command.groups()):
                absolute = group
                if command.is_relative:
                    absolute = _offset_group(name, group, current)
                if name == "M" and i == 0:
                    subpath_start = Point(absolute[0], absolute[1])
                current = _end_point(name, absolute, current)
                args.extend(absolute)

            result.append(Command(name, tuple(args)))

        return Path(result)

    def split_multicalls(self) -> Path:
        """Split commands with repeated argument groups into single calls.

        Extra coordinate pairs of a move command become line commands.

        Example:
            >>> Path([("M", (10, 10, 20, 0))]).split_multicalls()
            Path('M10 10L20 0')
        """
        self.validate()

        result: list[Command] = []
        for command in self:
            if command.arity == 0:
                result.append(command)
                continue

            for i, group in enumerate(command.groups()):
                name = command.name
                if i > 0:
                    name = {"M": "L", "m": "l"}.get(name, name)
                result.append(Command(name, group))

        return Path(result)

    def normalize(self) -> Path:
        """Convert the path into absolute, single calls without shorthands.

        Horizontal and vertical lines become lines, smooth curves become full
        curves. The result only contains M, L, C, Q, A and Z commands.
        """
        self.validate()

        result: list[Command] = []
        current = subpath_start = ORIGIN

        for command in self.to_absolute().split_multicalls():
            name, args = command
            previous = result[-1] if result else None

            if name == "H":
                command = Command("L", (args[0], current.y))
            elif name == "V":
                command = Command("L", (current.x, args[0]))
            elif name == "S":
                control = _reflected_control(previous, "C", current)
                command = Command("C", (control.x, control.y, *args))
            elif name == "T":
                control = _reflected_control(previous, "Q", current)
                command = Command("Q", (control.x, control.y, *args))
            elif name == "M":
                subpath_start = Point(args[0], args[1])

            result.append(command)

            if name == "Z":
                current = subpath_start
            else:
                current = Point(command.args[-2], command.args[-1])

        logger.debug("Normalized %d commands into %d", len(self), len(result))
        return Path(result)

    def to_segments(self) -> list[Segment]:
        """Convert the path into its geometric segments.

        Moves start a new subpath without a segment, a close command adds a
        line back to the subpath start unless the path is already there.
        """
        segments: list[Segment] = []
        current = subpath_start = ORIGIN

        for name, args in self.normalize():
            if name == "M":
                current = subpath_start = Point(args[0], args[1])
                continue

            if name == "Z":
                if current != subpath_start:
                    segments.append(Line(current, subpath_start))
                current = subpath_start
                continue

            end = Point(args[-2], args[-1])
            if name == "L":
                segments.append(Line(current, end))
            elif name == "Q":
                segments.append(QuadraticCurve(current, Point(args[0], args[1]), end))
            elif name == "C":
                segments.append(
                    CubicCurve(
                        current, Point(args[0], args[1]), Point(args[2], args[3]), end
                    )
                )
            else:
                rx, ry, rotation, large_arc, sweep = args[:5]
                segments.append(
                    Arc(current, end, rx, ry, rotation, bool(large_arc), bool(sweep))
                )
            current = end

        return segments

    def translate(self, offset: complex) -> Path:
        """Move the path by an offset. The result is absolute."""
        shift = Point(offset.real, offset.imag)

        result: list[Command] = []
        for command in self.to_absolute():
            args = [
                x
                for group in command.groups()
                for x in _offset_group(command.name, group, shift)
            ]
            result.append(Command(command.name, tuple(args)))

        return Path(result)

    def bounds(self) -> Rect:
        """The exact bounds of all segments.

        Raises:
            ValueError: If the path has no segments.
        """
        return Rect.union(*(segment.bounds() for segment in self.to_segments()))

    def bbox(self) -> BBox:
        """The bounds as a tuple (x, y, width, height)."""
        return get_bbox(
            corner for segment in self.to_segments() for corner in segment.bounds()
        )

    def length(self) -> float:
        """The approximate length of all segments."""
        return sum(segment.length() for segment in self.to_segments())
