"""
Planning Module
===============

Dubins path planning for a forward-only vehicle with fixed turn radius.

- types: poses, course types, path families and segments
- params: angle normalization and the dimensionless pose-pair parameters
- families: closed-form solvers for the six path families
- dubins: path construction, selection and sampling
- symbolic: CasADi functions for the same planner
"""

from .dubins import DubinsPath, available_paths, path_by_type, shortest_path, state_at_distance
from .params import TWO_PI, PathParams, mod2pi, path_params
from .symbolic import derive_dubins
from .types import PATH_TYPES, CourseType, PathSegment, PathType, State

__all__ = [
    "CourseType",
    "DubinsPath",
    "PATH_TYPES",
    "PathParams",
    "PathSegment",
    "PathType",
    "State",
    "TWO_PI",
    "available_paths",
    "derive_dubins",
    "mod2pi",
    "path_by_type",
    "path_params",
    "shortest_path",
    "state_at_distance",
]
