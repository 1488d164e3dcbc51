"""Geometric primitives a path is made of: lines, Bezier curves and arcs."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, TypeAlias

from typing_extensions import override

from .constants import LENGTH_STEP
from .math import (
    arc_center,
    clip_degrees,
    cubic_bezier,
    derivative_coefficients,
    ellipse_extreme_angles,
    ellipse_point,
    includes_angle,
    quadratic_bezier,
    solve_for_extreme,
    solve_quadratic_from_coeffs,
    sweep_angle,
)
from .primitives import Point, Rect

if TYPE_CHECKING:
    from collections.abc import Iterator


def iter_parameters(step: float = LENGTH_STEP) -> Iterator[float]:
    """Iterate over evenly spaced parameters from 0 to 1, both included.

    The spacing is the largest value not above `step` which divides [0, 1]
    evenly, so the last parameter is exactly 1.

    Examples:
        >>> list(iter_parameters(0.25))
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if not 0 < step <= 1:
        raise ValueError(f"Step must be in (0, 1], got {step}")

    # tolerate steps like 0.1 which are not exact in binary
    count = math.ceil(1 / step - 1e-9)
    for i in range(count + 1):
        yield i / count


class Shape(ABC):
    """Base class of all path segments.

    Every segment has a `start` and an `end` point and can be queried for
    its bounding box, its length and points along it.
    """

    start: Point
    end: Point

    @abstractmethod
    def bounds(self) -> Rect:
        """The exact axis-aligned bounding box."""

    @abstractmethod
    def evaluate(self, t: float) -> Point:
        """The point at parameter t in [0, 1]."""

    def length(self) -> float:
        """Approximate length as the sum of chords between sampled points.

        The error shrinks with a smaller `LENGTH_STEP`; this is not exact.
        """
        return polyline_length(self, LENGTH_STEP)

    def points(self, step: float = LENGTH_STEP) -> Iterator[Point]:
        """Iterate over points along the segment, start and end included."""
        for t in iter_parameters(step):
            yield self.evaluate(t)


def polyline_length(shape: Shape, step: float) -> float:
    """Sum of the chord lengths between points sampled every `step`."""
    return sum(a.distance(b) for a, b in itertools.pairwise(shape.points(step)))


@dataclass(frozen=True)
class Line(Shape):
    """A straight line."""

    start: Point
    end: Point

    @override
    def bounds(self) -> Rect:
        return Rect.from_points(self.start, self.end)

    @override
    def length(self) -> float:
        return self.start.distance(self.end)

    @override
    def evaluate(self, t: float) -> Point:
        return self.start.lerp(self.end, t)

    def midpoint(self) -> Point:
        """The point halfway along the line."""
        return self.evaluate(0.5)


@dataclass(frozen=True)
class QuadraticCurve(Shape):
    """A quadratic Bezier curve."""

    start: Point
    control: Point
    end: Point

    @override
    def evaluate(self, t: float) -> Point:
        P0, P1, P2 = self.start, self.control, self.end  # noqa: N806
        return Point(
            quadratic_bezier(float(t), P0.real, P1.real, P2.real),
            quadratic_bezier(float(t), P0.imag, P1.imag, P2.imag),
        )

    @override
    def bounds(self) -> Rect:
        """Get the bounding box of a quadratic Bezier curve.

        https://www.desmos.com/calculator/fsgcq11iqf
        """
        P0, P1, P2 = self.start, self.control, self.end  # noqa: N806
        tx = solve_for_extreme(P0.real, P1.real, P2.real)
        ty = solve_for_extreme(P0.imag, P1.imag, P2.imag)

        # if tx and ty are not in the range [0, 1]
        # P0 and P2 are the bounding box
        points = [P0, P2]

        for t in (tx, ty):
            if not 0 <= t <= 1:
                continue

            points.append(self.evaluate(t))

        return Rect.from_points(*points)


@dataclass(frozen=True)
class CubicCurve(Shape):
    """A cubic Bezier curve."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    @override
    def evaluate(self, t: float) -> Point:
        P0, P1, P2, P3 = self.start, self.control1, self.control2, self.end  # noqa: N806
        return Point(
            cubic_bezier(float(t), P0.real, P1.real, P2.real, P3.real),
            cubic_bezier(float(t), P0.imag, P1.imag, P2.imag, P3.imag),
        )

    @override
    def bounds(self) -> Rect:
        """Get the bounding box of a cubic Bezier curve.

        https://www.desmos.com/calculator/ifyeddi2eh
        """
        P0, P1, P2, P3 = self.start, self.control1, self.control2, self.end  # noqa: N806

        # get the coefficients of the derivative of the cubic Bezier curve
        # in the form at^2 + bt + c
        dx_coeffs = derivative_coefficients(P0.real, P1.real, P2.real, P3.real)
        dy_coeffs = derivative_coefficients(P0.imag, P1.imag, P2.imag, P3.imag)

        txs = solve_quadratic_from_coeffs(*dx_coeffs)
        tys = solve_quadratic_from_coeffs(*dy_coeffs)

        # Evaluate the cubic Bezier curve at t = 0, t = 1, and at the critical points
        x_points = [P0.real, P3.real] + [
            cubic_bezier(t, P0.real, P1.real, P2.real, P3.real)
            for t in txs
            if 0 <= t <= 1
        ]
        y_points = [P0.imag, P3.imag] + [
            cubic_bezier(t, P0.imag, P1.imag, P2.imag, P3.imag)
            for t in tys
            if 0 <= t <= 1
        ]

        return Rect(
            Point(min(x_points), min(y_points)), Point(max(x_points), max(y_points))
        )


@dataclass(frozen=True)
class ArcCenterParams:
    """An elliptical arc in center parameterization.

    Attributes:
        center: Center of the ellipse.
        start_angle: Parametric angle of the start point, in [0, 360).
        end_angle: Parametric angle of the end point, in [0, 360).
        rotation: Rotation of the ellipse x axis, in [0, 360).
        x_radius: Positive radius along the rotated x axis.
        y_radius: Positive radius along the rotated y axis.
        sweep: True if the arc is traced with increasing angles.
    """

    center: Point
    start_angle: float
    end_angle: float
    rotation: float
    x_radius: float
    y_radius: float
    sweep: bool

    def evaluate_angle(self, angle: float) -> Point:
        """The point on the ellipse at a parametric angle in degrees."""
        return Point(
            *ellipse_point(
                float(angle),
                self.center.real,
                self.center.imag,
                self.x_radius,
                self.y_radius,
                self.rotation,
            )
        )

    def angle_at(self, t: float) -> float:
        """The parametric angle reached after tracing a fraction t of the arc."""
        return sweep_angle(float(t), self.start_angle, self.end_angle, self.sweep)

    def evaluate(self, t: float) -> Point:
        """The point at parameter t in [0, 1]."""
        return self.evaluate_angle(self.angle_at(t))

    def includes_angle(self, angle: float) -> bool:
        """Check if the traced range covers a parametric angle."""
        return includes_angle(
            clip_degrees(float(angle)), self.start_angle, self.end_angle, self.sweep
        )

    def bounds(self) -> Rect:
        """Exact bounds from the endpoints and the extremes within the range."""
        points = [self.evaluate(0), self.evaluate(1)]

        x_angle, y_angle = ellipse_extreme_angles(
            self.x_radius, self.y_radius, self.rotation
        )
        for angle in (x_angle, x_angle + 180, y_angle, y_angle + 180):
            if self.includes_angle(angle):
                points.append(self.evaluate_angle(angle))

        return Rect.from_points(*points)


@dataclass(frozen=True)
class Arc(Shape):
    """An elliptical arc in endpoint parameterization.

    An arc with a zero radius or with coincident endpoints is not a valid
    ellipse and behaves exactly like the line from `start` to `end`.
    """

    start: Point
    end: Point
    x_radius: float
    y_radius: float
    rotation: float
    large_arc: bool
    sweep: bool

    @property
    def is_degenerate(self) -> bool:
        """True if the arc is treated as a straight line."""
        return self.x_radius == 0 or self.y_radius == 0 or self.start == self.end

    def as_line(self) -> Line:
        """The line between the endpoints."""
        return Line(self.start, self.end)

    @cached_property
    def center_params(self) -> ArcCenterParams | None:
        """The arc in center parameterization, None if degenerate."""
        if self.is_degenerate:
            return None

        cx, cy, start_angle, end_angle, rx, ry = arc_center(
            self.start.real,
            self.start.imag,
            self.end.real,
            self.end.imag,
            float(abs(self.x_radius)),
            float(abs(self.y_radius)),
            float(self.rotation),
            bool(self.large_arc),
            bool(self.sweep),
        )
        return ArcCenterParams(
            center=Point(cx, cy),
            start_angle=start_angle,
            end_angle=end_angle,
            rotation=clip_degrees(float(self.rotation)),
            x_radius=rx,
            y_radius=ry,
            sweep=bool(self.sweep),
        )

    @override
    def bounds(self) -> Rect:
        params = self.center_params
        if params is None:
            return self.as_line().bounds()
        return params.bounds()

    @override
    def length(self) -> float:
        if self.center_params is None:
            return self.as_line().length()
        return super().length()

    @override
    def evaluate(self, t: float) -> Point:
        params = self.center_params
        if params is None:
            return self.as_line().evaluate(t)
        return params.evaluate(t)


Segment: TypeAlias = Line | QuadraticCurve | CubicCurve | Arc
"""A concrete segment of a path."""
