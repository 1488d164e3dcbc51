"""Constants for the path data utilities."""

from __future__ import annotations

from typing import Literal, TypeAlias

VALID_COMMANDS = set("MLHVCSQTAZ")
"""A set containing all the valid upper case path commands."""

NORMALIZED_COMMANDS = set("MLCQAZ")
"""The commands left after shorthand expansion."""

ValidCommand: TypeAlias = Literal["M", "L", "H", "V", "C", "S", "Q", "T", "A", "Z"]
"""A type alias for the valid upper case path commands."""

ARITIES: dict[ValidCommand, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}
"""The number of values one call of each command consumes."""

LENGTH_STEP = 0.005
"""Parameter step used to approximate curve and arc lengths."""
