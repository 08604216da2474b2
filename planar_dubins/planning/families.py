"""
Closed-form solvers for the six Dubins path families.

Each solver takes the normalized parameters of a pose pair and returns the
unit-radius segment parameters (t, p, q) of its family, or None when the
family cannot connect the poses. For CSC families t and q are arc angles and
p the straight length; for CCC families all three are arc angles.

Ref: Shkel & Lumelsky, "Classification of the Dubins set", 2001
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np
from beartype.typing import Callable, Optional

from .params import TWO_PI, PathParams, mod2pi
from .types import PathType

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathCandidate:
    """Segment parameters of one family for a turn radius of one."""

    t: float
    p: float
    q: float
    path_type: PathType


def lsl(pp: PathParams) -> Optional[PathCandidate]:
    p_square = 2 + pp.d_square - 2 * pp.cos_alpha_minus_beta + 2 * pp.d * (pp.sin_alpha - pp.sin_beta)
    if p_square < 0:
        return None

    tmp = np.arctan2(pp.cos_beta - pp.cos_alpha, pp.d + pp.sin_alpha - pp.sin_beta)
    return PathCandidate(
        t=mod2pi(tmp - pp.alpha),
        p=float(np.sqrt(p_square)),
        q=mod2pi(pp.beta - tmp),
        path_type=PathType.LSL,
    )


def rsr(pp: PathParams) -> Optional[PathCandidate]:
    p_square = 2 + pp.d_square - 2 * pp.cos_alpha_minus_beta + 2 * pp.d * (pp.sin_beta - pp.sin_alpha)
    if p_square < 0:
        return None

    tmp = np.arctan2(pp.cos_alpha - pp.cos_beta, pp.d - pp.sin_alpha + pp.sin_beta)
    return PathCandidate(
        t=mod2pi(pp.alpha - tmp),
        p=float(np.sqrt(p_square)),
        q=mod2pi(tmp - pp.beta),
        path_type=PathType.RSR,
    )


def lsr(pp: PathParams) -> Optional[PathCandidate]:
    p_square = -2 + pp.d_square + 2 * pp.cos_alpha_minus_beta + 2 * pp.d * (pp.sin_alpha + pp.sin_beta)
    if p_square < 0:
        return None

    p = float(np.sqrt(p_square))
    tmp = np.arctan2(-pp.cos_alpha - pp.cos_beta, pp.d + pp.sin_alpha + pp.sin_beta) - np.arctan2(-2.0, p)
    return PathCandidate(
        t=mod2pi(tmp - pp.alpha),
        p=p,
        q=mod2pi(tmp - mod2pi(pp.beta)),
        path_type=PathType.LSR,
    )


def rsl(pp: PathParams) -> Optional[PathCandidate]:
    p_square = -2 + pp.d_square + 2 * pp.cos_alpha_minus_beta - 2 * pp.d * (pp.sin_alpha + pp.sin_beta)
    if p_square < 0:
        return None

    p = float(np.sqrt(p_square))
    tmp = np.arctan2(pp.cos_alpha + pp.cos_beta, pp.d - pp.sin_alpha - pp.sin_beta) - np.arctan2(2.0, p)
    return PathCandidate(
        t=mod2pi(pp.alpha - tmp),
        p=p,
        q=mod2pi(pp.beta - tmp),
        path_type=PathType.RSL,
    )


def rlr(pp: PathParams) -> Optional[PathCandidate]:
    tmp = (6 - pp.d_square + 2 * pp.cos_alpha_minus_beta + 2 * pp.d * (pp.sin_alpha - pp.sin_beta)) / 8
    if abs(tmp) > 1:
        return None

    phi = np.arctan2(pp.cos_alpha - pp.cos_beta, pp.d - pp.sin_alpha + pp.sin_beta)
    p = mod2pi(TWO_PI - np.arccos(tmp))
    t = mod2pi(pp.alpha - phi + mod2pi(p / 2))
    q = mod2pi(pp.alpha - pp.beta - t + mod2pi(p))
    return PathCandidate(t=t, p=p, q=q, path_type=PathType.RLR)


def lrl(pp: PathParams) -> Optional[PathCandidate]:
    tmp = (6 - pp.d_square + 2 * pp.cos_alpha_minus_beta + 2 * pp.d * (pp.sin_beta - pp.sin_alpha)) / 8
    if abs(tmp) > 1:
        return None

    phi = np.arctan2(pp.cos_alpha - pp.cos_beta, pp.d + pp.sin_alpha - pp.sin_beta)
    p = mod2pi(TWO_PI - np.arccos(tmp))
    t = mod2pi(-pp.alpha - phi + p / 2)
    q = mod2pi(mod2pi(pp.beta) - pp.alpha - t + mod2pi(p))
    return PathCandidate(t=t, p=p, q=q, path_type=PathType.LRL)


FAMILY_SOLVERS = MappingProxyType(
    {
        PathType.LSL: lsl,
        PathType.LSR: lsr,
        PathType.RSL: rsl,
        PathType.RSR: rsr,
        PathType.RLR: rlr,
        PathType.LRL: lrl,
    }
)


def solve_family(pp: PathParams, path_type: PathType) -> Optional[PathCandidate]:
    """Run the solver of one family, None if it rejects the pose pair."""
    solver: Callable[[PathParams], Optional[PathCandidate]] = FAMILY_SOLVERS[path_type]
    candidate = solver(pp)
    if candidate is None:
        log.debug("%s infeasible for alpha=%g beta=%g d=%g", path_type.value, pp.alpha, pp.beta, pp.d)
    return candidate
