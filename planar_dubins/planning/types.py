"""
Value types shared by the Dubins planner.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import numpy as np
from beartype.typing import Tuple


@dataclass(frozen=True)
class State:
    """Planar pose: position and heading (radians, counter-clockwise from +x)."""

    x: float
    y: float
    heading: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.heading], dtype=float)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.heading})"


class CourseType(Enum):
    """Motion primitive of a single path segment."""

    LEFT = "L"  # CCW arc
    STRAIGHT = "S"
    RIGHT = "R"  # CW arc

    @property
    def turn_sign(self) -> int:
        return _TURN_SIGNS[self]


class PathType(Enum):
    """The six Dubins path families."""

    LSL = "LSL"
    LSR = "LSR"
    RSL = "RSL"
    RSR = "RSR"
    RLR = "RLR"
    LRL = "LRL"

    @property
    def course_types(self) -> Tuple[CourseType, CourseType, CourseType]:
        return _COURSE_TYPES[self]


_TURN_SIGNS = MappingProxyType(
    {
        CourseType.LEFT: 1,
        CourseType.STRAIGHT: 0,
        CourseType.RIGHT: -1,
    }
)

_L, _S, _R = CourseType.LEFT, CourseType.STRAIGHT, CourseType.RIGHT

_COURSE_TYPES = MappingProxyType(
    {
        PathType.LSL: (_L, _S, _L),
        PathType.LSR: (_L, _S, _R),
        PathType.RSL: (_R, _S, _L),
        PathType.RSR: (_R, _S, _R),
        PathType.RLR: (_R, _L, _R),
        PathType.LRL: (_L, _R, _L),
    }
)

# Lexicographic by name; also the tie-break order when lengths are equal
PATH_TYPES: Tuple[PathType, ...] = tuple(sorted(PathType, key=lambda path_type: path_type.value))


@dataclass(frozen=True)
class PathSegment:
    """One of the three pieces of a Dubins path, length in physical units."""

    length: float
    course_type: CourseType
