"""
Angle normalization and the dimensionless parameters of a pose pair.

Every family formula works in a frame where the start lies at the origin,
the goal lies on the +x axis and the turning radius is one. ``path_params``
maps a (start, goal, radius) triple into that frame once so the six
solvers can share the trigonometric terms.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .types import State

TWO_PI = 2 * np.pi


def mod2pi(theta: float) -> float:
    """Wrap angle to [0, 2pi) using floored division."""
    wrapped = float(theta - TWO_PI * np.floor(theta / TWO_PI))
    # tiny negative inputs round up to exactly 2pi
    if wrapped >= TWO_PI:
        return 0.0
    return wrapped


@dataclass(frozen=True)
class PathParams:
    alpha: float
    beta: float
    d: float

    sin_alpha: float
    sin_beta: float
    cos_alpha: float
    cos_beta: float
    cos_alpha_minus_beta: float
    d_square: float

    @property
    def is_degenerate(self) -> bool:
        """Start and goal coincide in position and heading."""
        # d == 0 puts theta at 0, so alpha and beta are the wrapped headings
        return self.d == 0 and self.alpha == self.beta


def path_params(start: State, goal: State, turning_radius: float) -> PathParams:
    """
    Normalize a pose pair for the family solvers.

    Args:
        start: Start pose
        goal: Goal pose
        turning_radius: Minimum turn radius, must be positive

    Returns:
        PathParams with alpha, beta relative to the start-goal line and
        d the separation in turn radii

    Raises:
        ValueError: turning_radius is not positive
    """
    if not turning_radius > 0:
        raise ValueError(f"turning_radius must be greater than zero, got {turning_radius}")

    dx = goal.x - start.x
    dy = goal.y - start.y
    D = float(np.sqrt(dx * dx + dy * dy))
    theta = 0.0
    if D > 0:
        theta = mod2pi(np.arctan2(dy, dx))

    alpha = mod2pi(start.heading - theta)
    beta = mod2pi(goal.heading - theta)
    d = D / turning_radius

    return PathParams(
        alpha=alpha,
        beta=beta,
        d=d,
        sin_alpha=float(np.sin(alpha)),
        sin_beta=float(np.sin(beta)),
        cos_alpha=float(np.cos(alpha)),
        cos_beta=float(np.cos(beta)),
        cos_alpha_minus_beta=float(np.cos(alpha - beta)),
        d_square=d * d,
    )
