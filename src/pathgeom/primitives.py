"""Points and axis-aligned rectangles."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from numpy import format_float_positional
from typing_extensions import Self, override

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

BBox: TypeAlias = tuple[float, float, float, float]
"""Bounding box as a tuple (x, y, width, height)."""


def format_number(value: float) -> str:
    """Format a number for path data without exponent notation.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(-0.5)
        '-0.5'
    """
    return format_float_positional(value, trim="-")


class Point(complex):
    """A point in 2D space. Wrapper for complex numbers."""

    @override
    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    @property
    def x(self) -> float:
        """The x coordinate."""
        return self.real

    @property
    def y(self) -> float:
        """The y coordinate."""
        return self.imag

    @property
    def text(self) -> str:
        """The point as space-separated path data."""
        return f"{format_number(self.x)} {format_number(self.y)}"

    @override
    def __mul__(self, other: complex) -> Self:
        return self.__class__(super().__mul__(other))

    @override
    def __rmul__(self, other: complex) -> Self:
        return self.__class__(super().__rmul__(other))

    @override
    def __add__(self, other: complex) -> Self:
        return self.__class__(super().__add__(other))

    @override
    def __radd__(self, other: complex) -> Self:
        return self.__class__(super().__radd__(other))

    @override
    def __sub__(self, other: complex) -> Self:
        return self.__class__(super().__sub__(other))

    @override
    def __truediv__(self, other: complex) -> Self:
        return self.__class__(super().__truediv__(other))

    @override
    def __neg__(self) -> Self:
        return self.__class__(super().__neg__())

    def distance(self, other: complex) -> float:
        """Euclidean distance to another point."""
        return abs(other - self)

    def lerp(self, other: complex, t: float) -> Point:
        """Interpolate linearly towards another point."""
        return Point(
            self.x + (other.real - self.x) * t, self.y + (other.imag - self.y) * t
        )

    def reflect(self, center: complex) -> Point:
        """Reflect the point about a center point."""
        return Point(2 * center.real - self.x, 2 * center.imag - self.y)

    @classmethod
    def min(cls, *points: complex) -> Point:
        """Get the minimum point."""
        return cls(min(x.real for x in points), min(x.imag for x in points))

    @classmethod
    def max(cls, *points: complex) -> Point:
        """Get the maximum point."""
        return cls(max(x.real for x in points), max(x.imag for x in points))


def get_bbox(points: Iterable[complex]) -> BBox:
    """Calculates the bounding box from multiple points.

    Args:
        points: Points as complex numbers.

    Returns:
        The bounding box as a tuple (x, y, width, height).
    """
    points = list(points)
    if not points:
        raise ValueError("No bounding box points found")

    x = min(x.real for x in points)
    y = min(x.imag for x in points)
    width = max(x.real for x in points) - x
    height = max(x.imag for x in points) - y

    return x, y, width, height


class Rect:
    """An axis-aligned box defined by its minimum and maximum corner."""

    __slots__ = ("max", "min")

    def __init__(self, min: complex, max: complex) -> None:  # noqa: A002
        """Initialize the rect.

        Args:
            min: The corner with the smallest coordinates.
            max: The corner with the largest coordinates.
        """
        if min.real > max.real or min.imag > max.imag:
            raise ValueError(f"Invalid rect corners {min} and {max}")
        object.__setattr__(self, "min", Point(min.real, min.imag))
        object.__setattr__(self, "max", Point(max.real, max.imag))

    @override
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @override
    def __repr__(self) -> str:
        return f"Rect({self.min}, {self.max})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    @override
    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def __iter__(self) -> Iterator[Point]:
        yield self.min
        yield self.max

    @classmethod
    def from_points(cls, *points: complex) -> Self:
        """Smallest rect containing all points."""
        if not points:
            raise ValueError("No bounding box points found")
        return cls(Point.min(*points), Point.max(*points))

    @classmethod
    def union(cls, *rects: Rect) -> Self:
        """Smallest rect containing all rects."""
        return cls.from_points(*(p for rect in rects for p in rect))

    @property
    def width(self) -> float:
        """Extent along the x axis."""
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        """Extent along the y axis."""
        return self.max.y - self.min.y

    @property
    def bbox(self) -> BBox:
        """The rect as a tuple (x, y, width, height)."""
        return self.min.x, self.min.y, self.width, self.height

    def _contains(self, point: complex) -> bool:
        """Check if a point is contained in the rect."""
        return (
            self.min.x <= point.real <= self.max.x
            and self.min.y <= point.imag <= self.max.y
        )

    def __contains__(self, key: complex | Rect) -> bool:
        """Checks if a single point or a rect is contained in the rect."""
        if isinstance(key, Rect):
            return all(self._contains(p) for p in key)

        return self._contains(key)
