"""
Dubins Path Planner
===================

Forward-only, 2D, fixed turn radius R planner.

Usage:
    >>> from planar_dubins import State, shortest_path
    >>> path = shortest_path(State(0, 0, 0), State(4, 4, 0), 1.0)
    >>> path.path_type.value
    'LSR'
    >>> round(path.length, 6)
    5.85459
    >>> states = path.interpolate(0.1)  # poses every 0.1 of arc length
    >>> len(states)
    59

Functions:
    - shortest_path() -> minimum length path or None
    - available_paths() -> every feasible family
    - path_by_type() -> one requested family or None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from beartype.typing import List, Optional, Tuple, Union

from .families import PathCandidate, solve_family
from .params import path_params
from .types import PATH_TYPES, CourseType, PathSegment, PathType, State

log = logging.getLogger(__name__)


# ==============================================================================
# Propagation
# ==============================================================================


def state_at_distance(start: State, delta: float, course_type: CourseType, turning_radius: float) -> State:
    """
    Advance a pose along one motion primitive.

    Args:
        start: Pose at the beginning of the primitive
        delta: Arc length travelled
        course_type: Left arc, straight line or right arc
        turning_radius: Arc radius

    Returns:
        Pose after travelling delta
    """
    if delta == 0:
        return start

    phi = delta / turning_radius
    r = turning_radius
    yaw = start.heading

    if course_type is CourseType.LEFT:
        dx = r * np.sin(yaw + phi) - r * np.sin(yaw)
        dy = -r * np.cos(yaw + phi) + r * np.cos(yaw)
        dyaw = phi
    elif course_type is CourseType.RIGHT:
        dx = -r * np.sin(yaw - phi) + r * np.sin(yaw)
        dy = r * np.cos(yaw - phi) - r * np.cos(yaw)
        dyaw = -phi
    else:
        dx = delta * np.cos(yaw)
        dy = delta * np.sin(yaw)
        dyaw = 0.0

    return State(
        x=float(start.x + dx),
        y=float(start.y + dy),
        heading=float(yaw + dyaw),
    )


# ==============================================================================
# Path
# ==============================================================================


@dataclass(frozen=True)
class DubinsPath:
    """
    A three segment Dubins curve anchored at its start pose.

    Instances are produced by shortest_path(), available_paths() and
    path_by_type(); every instance they return has positive length.
    """

    path_type: PathType
    segments: Tuple[PathSegment, PathSegment, PathSegment]
    turning_radius: float
    origin: State

    @classmethod
    def from_candidate(cls, candidate: PathCandidate, turning_radius: float, origin: State) -> DubinsPath:
        """Scale unit-radius segment parameters to physical lengths."""
        lengths = (
            candidate.t * turning_radius,
            candidate.p * turning_radius,
            candidate.q * turning_radius,
        )
        segments = tuple(
            PathSegment(length=length, course_type=course_type)
            for length, course_type in zip(lengths, candidate.path_type.course_types)
        )
        return cls(
            path_type=candidate.path_type,
            segments=segments,
            turning_radius=turning_radius,
            origin=origin,
        )

    @property
    def length(self) -> float:
        return self.segments[0].length + self.segments[1].length + self.segments[2].length

    @property
    def family(self) -> PathType:
        """Alias of path_type."""
        return self.path_type

    def segment_lengths_normalized(self) -> Tuple[float, float, float]:
        """Segment lengths in units of the turning radius (t, p, q)."""
        return tuple(segment.length / self.turning_radius for segment in self.segments)

    def sample(self, distance: float) -> State:
        """Pose reached after travelling distance along the path."""
        if distance <= 0:
            return self.origin

        distance = min(distance, self.length)
        state = self.origin

        for segment in self.segments:
            delta = min(distance, segment.length)
            distance -= delta
            state = state_at_distance(state, delta, segment.course_type, self.turning_radius)
            if distance <= 0:
                break

        return state

    def endpoint(self) -> State:
        return self.sample(self.length)

    def interpolate(self, step_size: float) -> List[State]:
        """
        Sample the path every step_size of arc length.

        Returns floor(length / step_size) + 1 poses, starting at the origin.
        """
        if not step_size > 0:
            raise ValueError(f"step_size must be greater than zero, got {step_size}")

        n_states = int(np.floor(self.length / step_size)) + 1
        return [self.sample(i * step_size) for i in range(n_states)]

    def interpolate_array(self, step_size: float) -> np.ndarray:
        """interpolate() as an (N, 3) array of x, y, heading."""
        states = self.interpolate(step_size)
        return np.array([[s.x, s.y, s.heading] for s in states], dtype=float)

    def truncate(self, distance: float) -> DubinsPath:
        """Sub-path covering the first distance of this path."""
        if not distance > 0:
            raise ValueError(f"distance must be greater than zero, got {distance}")

        remaining = min(distance, self.length)
        segments = []
        for segment in self.segments:
            delta = min(remaining, segment.length)
            remaining -= delta
            segments.append(PathSegment(length=delta, course_type=segment.course_type))

        return DubinsPath(
            path_type=self.path_type,
            segments=tuple(segments),
            turning_radius=self.turning_radius,
            origin=self.origin,
        )

    def __str__(self) -> str:
        lengths = ", ".join(f"{s.course_type.value}:{s.length:.6g}" for s in self.segments)
        return f"DubinsPath({self.path_type.value}, length={self.length:.6g}, [{lengths}])"


# ==============================================================================
# Main API
# ==============================================================================


def path_by_type(
    start: State, goal: State, turning_radius: float, path_type: Union[PathType, str]
) -> Optional[DubinsPath]:
    """
    Path of a single family from start to goal.

    Args:
        start: Start pose
        goal: Goal pose
        turning_radius: Minimum turn radius, must be positive
        path_type: PathType or its name, e.g. "RSL"

    Returns:
        DubinsPath, or None if the family cannot connect the poses

    Raises:
        ValueError: non-positive turning_radius or unknown path_type
    """
    path_type = PathType(path_type)
    pp = path_params(start, goal, turning_radius)
    if pp.is_degenerate:
        log.debug("start and goal coincide, no path")
        return None

    candidate = solve_family(pp, path_type)
    if candidate is None:
        return None

    path = DubinsPath.from_candidate(candidate, turning_radius, start)
    if path.length <= 0:
        return None
    return path


def available_paths(start: State, goal: State, turning_radius: float) -> List[DubinsPath]:
    """
    Every feasible family from start to goal, in PATH_TYPES order.

    Raises:
        ValueError: turning_radius is not positive
    """
    pp = path_params(start, goal, turning_radius)
    if pp.is_degenerate:
        log.debug("start and goal coincide, no path")
        return []

    paths = []
    for path_type in PATH_TYPES:
        candidate = solve_family(pp, path_type)
        if candidate is None:
            continue

        path = DubinsPath.from_candidate(candidate, turning_radius, start)
        if path.length <= 0:
            continue
        paths.append(path)

    return paths


def shortest_path(start: State, goal: State, turning_radius: float) -> Optional[DubinsPath]:
    """
    Minimum length Dubins path from start to goal.

    Equal lengths are resolved in favour of the lexicographically first
    family name.

    Returns:
        DubinsPath, or None when no family connects the poses (start == goal)

    Raises:
        ValueError: turning_radius is not positive
    """
    paths = available_paths(start, goal, turning_radius)
    if not paths:
        return None

    best = min(paths, key=lambda path: (path.length, path.path_type.value))
    log.debug("shortest of %d candidates: %s", len(paths), best)
    return best
