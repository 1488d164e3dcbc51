"""Parse path data and compute exact bounds, lengths and points of its segments."""

from __future__ import annotations

import logging

from .errors import ErrorKind, ParseError
from .parser import parse_path
from .path import Command, Path
from .primitives import BBox, Point, Rect, get_bbox
from .segments import (
    Arc,
    ArcCenterParams,
    CubicCurve,
    Line,
    QuadraticCurve,
    Segment,
    iter_parameters,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Arc",
    "ArcCenterParams",
    "BBox",
    "Command",
    "CubicCurve",
    "ErrorKind",
    "Line",
    "ParseError",
    "Path",
    "Point",
    "QuadraticCurve",
    "Rect",
    "Segment",
    "get_bbox",
    "iter_parameters",
    "parse_path",
]
