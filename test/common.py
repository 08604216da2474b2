import casadi as ca
import numpy as np

EPS = 1e-9


def is_finite(e) -> bool:
    """Check if all elements in a CasADi expression are finite."""
    return bool(np.all(np.isfinite(ca.DM(e))))


def heading_error(a, b):
    """Smallest signed difference between two headings."""
    return float(np.arctan2(np.sin(a - b), np.cos(a - b)))


def position_error(s1, s2):
    return float(np.hypot(s1.x - s2.x, s1.y - s2.y))
