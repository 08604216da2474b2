"""
planar_dubins - Shortest bounded-curvature paths between planar poses

A Python library computing the six canonical Dubins curves (LSL, LSR, RSL,
RSR, RLR, LRL) between two oriented poses, selecting the shortest and
sampling poses along it, with a branch-free CasADi rendition for code
generation and optimization.
"""

from beartype import BeartypeConf
from beartype.claw import beartype_package

beartype_package(__name__, conf=BeartypeConf(is_pep484_tower=True))

__version__ = "0.1.0"

from . import planning
from .planning import (
    CourseType,
    DubinsPath,
    PathSegment,
    PathType,
    State,
    available_paths,
    derive_dubins,
    mod2pi,
    path_by_type,
    shortest_path,
)

__all__ = [
    "planning",
    "CourseType",
    "DubinsPath",
    "PathSegment",
    "PathType",
    "State",
    "available_paths",
    "derive_dubins",
    "mod2pi",
    "path_by_type",
    "shortest_path",
    "__version__",
]
