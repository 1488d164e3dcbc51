# %%
"""Numeric kernels for Bezier curves and elliptical arcs."""

# allow mathematical names, which would be invalid otherwise
# ruff: noqa: N803
from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import numba
from numba import njit
from numpy import nan

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# for easier access
bool_ = numba.types.bool_
f8 = numba.types.float64
Tuple = numba.types.Tuple

if os.environ.get("COVERAGE_DEBUG", "0") == "1":

    def njit(  # pylint: disable=function-redefined
        *args: Any, **kwargs: Any
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Dummy decorator if numba is deactivated."""
        del args, kwargs  # as it is just a debug tool, args and kwargs are not used

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            return func

        return decorator


@njit(f8(f8, f8, f8, f8))
def quadratic_bezier(t: float, P0: float, P1: float, P2: float) -> float:
    """Evaluate the quadratic Bezier curve at t."""
    return (1 - t) ** 2 * P0 + 2 * (1 - t) * t * P1 + t**2 * P2


@njit(f8(f8, f8, f8, f8, f8))
def cubic_bezier(t: float, P0: float, P1: float, P2: float, P3: float) -> float:
    """Evaluate the cubic Bezier curve at t."""
    return (
        (1 - t) ** 3 * P0
        + 3 * (1 - t) ** 2 * t * P1
        + 3 * (1 - t) * t**2 * P2
        + t**3 * P3
    )


@njit(f8(f8, f8, f8))
def solve_for_extreme(P0: float, P1: float, P2: float) -> float:
    """Solve for the extreme point of a quadratic Bezier curve.

    1. derivative: 2(1-t)(P1-P0) + 2t(P2-P1) = 0
    => t = (P0-P1) / (P0 - 2P1 + P2)

    Returns:
        The parameter of the extreme point or NaN if the derivative is constant.
    """
    denominator = P0 - 2 * P1 + P2
    if denominator == 0:
        return nan
    return (P0 - P1) / denominator


@njit(Tuple([f8, f8, f8])(f8, f8, f8, f8))
def derivative_coefficients(
    P0: float, P1: float, P2: float, P3: float
) -> tuple[float, float, float]:
    """Get the coefficients of the derivative of the cubic Bezier curve.

    1. derivative: -3(1-t)^2P0 + 3(1-t)^2P1 - 6t(1-t)P1 + 6t(1-t)P2 - 3t^2P2 + 3t^2P3
    to the form: at^2 + bt + c
    gives the coefficients: a, b, c
    """
    return (
        -3 * P0 + 9 * P1 - 9 * P2 + 3 * P3,
        6 * P0 - 12 * P1 + 6 * P2,
        -3 * P0 + 3 * P1,
    )


@njit(Tuple([f8, f8])(f8, f8, f8))
def solve_quadratic_from_coeffs(a: float, b: float, c: float) -> tuple[float, float]:
    """Solve a quadratic equation from the coefficients.

    Returns:
        A tuple with the two solutions of the quadratic equation.
        NaN if a solution is non-real.
    """
    # Solve the quadratic equation ax^2 + bx + c = 0
    # -b +- sqrt(b^2 - 4ac) / 2a
    if a == 0:
        if b == 0:
            return (nan, nan)  # No solution if both `a` and `b` are zero
        # single solution
        return (-c / b, nan)

    discriminant = b**2 - 4 * a * c
    if discriminant < 0:
        # No solutions
        return (nan, nan)

    sqrt_discriminant = math.sqrt(discriminant)
    t1 = (-b + sqrt_discriminant) / (2 * a)
    t2 = (-b - sqrt_discriminant) / (2 * a)
    # two solutions
    return (t1, t2)


@njit(f8(f8))
def clip_degrees(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    angle = angle % 360.0
    # tiny negative values round up to 360
    if angle >= 360.0:
        return 0.0
    return angle


@njit(f8(f8, f8, f8, f8))
def angle_between(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle in degrees from vector u to vector v.

    The sign follows the cross product u x v.
    """
    return math.degrees(math.atan2(ux * vy - uy * vx, ux * vx + uy * vy))


@njit(Tuple([f8, f8, f8, f8, f8, f8])(f8, f8, f8, f8, f8, f8, f8, bool_, bool_))
def arc_center(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
) -> tuple[float, float, float, float, float, float]:
    """Convert an arc from endpoint to center parameterization.

    Radii must be positive and the endpoints must differ.

    https://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter

    Returns:
        center x, center y, start angle, end angle, x radius, y radius.
        Both angles are in degrees in [0, 360), radii are scaled up if they
        are too small to span the endpoints.
    """
    phi = math.radians(rotation)
    sin, cos = math.sin(phi), math.cos(phi)

    # Step 1: Compute (x1', y1')
    x1p = cos * (x1 - x2) / 2 + sin * (y1 - y2) / 2
    y1p = -sin * (x1 - x2) / 2 + cos * (y1 - y2) / 2

    # Canonicalize the radii
    scale = (x1p / rx) ** 2 + (y1p / ry) ** 2
    if scale > 1:
        rx *= math.sqrt(scale)
        ry *= math.sqrt(scale)

    # Step 2: Compute (cx', cy')
    rx_sq, ry_sq = rx**2, ry**2
    x1p_sq, y1p_sq = x1p**2, y1p**2

    radical = max(
        0.0,
        (rx_sq * ry_sq - rx_sq * y1p_sq - ry_sq * x1p_sq)
        / (rx_sq * y1p_sq + ry_sq * x1p_sq),
    )
    coefficient = math.sqrt(radical)
    if large_arc == sweep:
        coefficient = -coefficient
    cxp = coefficient * rx * y1p / ry
    cyp = -coefficient * ry * x1p / rx

    # Step 3: Compute (cx, cy) from (cx', cy')
    cx = cos * cxp - sin * cyp + (x1 + x2) / 2
    cy = sin * cxp + cos * cyp + (y1 + y2) / 2

    # Step 4: Compute start and end angles
    ux, uy = (x1p - cxp) / rx, (y1p - cyp) / ry
    vx, vy = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    start_angle = angle_between(1.0, 0.0, ux, uy)
    delta = clip_degrees(angle_between(ux, uy, vx, vy))
    end_angle = clip_degrees(start_angle + delta)

    return cx, cy, clip_degrees(start_angle), end_angle, rx, ry


@njit(f8(f8, f8, f8, bool_))
def sweep_angle(t: float, start: float, end: float, sweep: bool) -> float:
    """Map t in [0, 1] to an angle traced from start to end.

    The direction is increasing angles if sweep is set, decreasing otherwise,
    wrapping through 0/360 when needed.
    """
    if sweep == (end > start):
        return start + t * (end - start)
    if sweep:
        return clip_degrees(start + t * (end + 360 - start))
    return clip_degrees(start + t * (end - 360 - start))


@njit(bool_(f8, f8, f8, bool_))
def includes_angle(angle: float, start: float, end: float, sweep: bool) -> bool:
    """Check if an angle lies on the traced range from start to end.

    All angles must be in [0, 360).
    """
    if start < end:
        if sweep:
            return start <= angle <= end
        return angle <= start or angle >= end
    if sweep:
        return angle <= end or angle >= start
    return end <= angle <= start


@njit(Tuple([f8, f8])(f8, f8, f8, f8, f8, f8))
def ellipse_point(
    angle: float, cx: float, cy: float, rx: float, ry: float, rotation: float
) -> tuple[float, float]:
    """Point on a rotated ellipse at a parametric angle (both in degrees)."""
    theta = math.radians(angle)
    phi = math.radians(rotation)
    sin, cos = math.sin(phi), math.cos(phi)
    x = rx * math.cos(theta)
    y = ry * math.sin(theta)
    return cx + x * cos - y * sin, cy + x * sin + y * cos


@njit(Tuple([f8, f8])(f8, f8, f8))
def ellipse_extreme_angles(
    rx: float, ry: float, rotation: float
) -> tuple[float, float]:
    """Parametric angles of the x and y extremes of a rotated ellipse.

    x: -rx sin(a) cos(phi) - ry cos(a) sin(phi) = 0 => tan(a) = -ry tan(phi) / rx
    y: -rx sin(a) sin(phi) + ry cos(a) cos(phi) = 0 => tan(a) = ry cot(phi) / rx

    Each extreme has a second solution 180 degrees apart.
    """
    phi = math.radians(rotation)
    x_angle = math.degrees(math.atan2(-ry * math.sin(phi), rx * math.cos(phi)))
    y_angle = math.degrees(math.atan2(ry * math.cos(phi), rx * math.sin(phi)))
    return clip_degrees(x_angle), clip_degrees(y_angle)
