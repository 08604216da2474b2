"""
Symbolic Dubins Planner
=======================

Branch-free CasADi rendition of the six closed-form Dubins families, for use
inside optimization problems or generated code.

Usage:
    >>> from planar_dubins.planning import derive_dubins
    >>> plan, eval_fn = derive_dubins()
    >>> start, goal = [0, 0, 0], [4, 4, 0]  # x, y, heading
    >>> R = 1.0  # Turn radius
    >>> cost, type, l1, l2, l3 = plan(start, goal, R)
    >>> round(float(cost), 6)
    5.85459
    >>> x = eval_fn(0.5 * cost, start, type, l1, l2, l3, R)  # pose halfway
    >>> x.shape
    (3, 1)

The planner mirrors planar_dubins.planning.dubins: every family is evaluated,
infeasible ones get infinite cost and the cheapest wins. ``type`` indexes
PATH_TYPES.
"""

import casadi as ca

from .types import PATH_TYPES

# ==============================================================================
# Core Utilities
# ==============================================================================


def casadi_min_with_cargo(costs, cargos):
    """Select minimum cost and return its cargo (branch-free CasADi)."""
    if len(costs) == 1:
        return costs[0], cargos[0]

    current_min_cost = costs[0]
    current_min_cargo = cargos[0]

    for i in range(1, len(costs)):
        is_lower = costs[i] < current_min_cost
        current_min_cost = ca.if_else(is_lower, costs[i], current_min_cost)
        current_min_cargo = ca.if_else(is_lower, cargos[i], current_min_cargo)

    return current_min_cost, current_min_cargo


def mod2pi(x):
    """Wrap angle to [0, 2pi) with floored division."""
    wrapped = x - 2 * ca.pi * ca.floor(x / (2 * ca.pi))
    return ca.if_else(wrapped >= 2 * ca.pi, 0, wrapped)


def path_params(start, goal, R):
    """Symbolic counterpart of planar_dubins.planning.params.path_params."""
    dx = goal[0] - start[0]
    dy = goal[1] - start[1]
    D = ca.sqrt(dx**2 + dy**2)
    theta = ca.if_else(D > 0, mod2pi(ca.atan2(dy, dx)), 0)

    alpha = mod2pi(start[2] - theta)
    beta = mod2pi(goal[2] - theta)
    d = D / R

    return {
        "alpha": alpha,
        "beta": beta,
        "d": d,
        "sa": ca.sin(alpha),
        "sb": ca.sin(beta),
        "ca": ca.cos(alpha),
        "cb": ca.cos(beta),
        "cab": ca.cos(alpha - beta),
        "d2": d**2,
    }


# ==============================================================================
# Path Families
# ==============================================================================
# Each returns unit-radius (t, p, q) and a feasibility flag. Discriminants are
# clamped so infeasible branches stay finite.


def compute_lsl(pp):
    p2 = 2 + pp["d2"] - 2 * pp["cab"] + 2 * pp["d"] * (pp["sa"] - pp["sb"])
    tmp = ca.atan2(pp["cb"] - pp["ca"], pp["d"] + pp["sa"] - pp["sb"])
    t = mod2pi(tmp - pp["alpha"])
    p = ca.sqrt(ca.fmax(p2, 0))
    q = mod2pi(pp["beta"] - tmp)
    return t, p, q, p2 >= 0


def compute_rsr(pp):
    p2 = 2 + pp["d2"] - 2 * pp["cab"] + 2 * pp["d"] * (pp["sb"] - pp["sa"])
    tmp = ca.atan2(pp["ca"] - pp["cb"], pp["d"] - pp["sa"] + pp["sb"])
    t = mod2pi(pp["alpha"] - tmp)
    p = ca.sqrt(ca.fmax(p2, 0))
    q = mod2pi(tmp - pp["beta"])
    return t, p, q, p2 >= 0


def compute_lsr(pp):
    p2 = -2 + pp["d2"] + 2 * pp["cab"] + 2 * pp["d"] * (pp["sa"] + pp["sb"])
    p = ca.sqrt(ca.fmax(p2, 0))
    tmp = ca.atan2(-pp["ca"] - pp["cb"], pp["d"] + pp["sa"] + pp["sb"]) - ca.atan2(-2, p)
    t = mod2pi(tmp - pp["alpha"])
    q = mod2pi(tmp - mod2pi(pp["beta"]))
    return t, p, q, p2 >= 0


def compute_rsl(pp):
    p2 = -2 + pp["d2"] + 2 * pp["cab"] - 2 * pp["d"] * (pp["sa"] + pp["sb"])
    p = ca.sqrt(ca.fmax(p2, 0))
    tmp = ca.atan2(pp["ca"] + pp["cb"], pp["d"] - pp["sa"] - pp["sb"]) - ca.atan2(2, p)
    t = mod2pi(pp["alpha"] - tmp)
    q = mod2pi(pp["beta"] - tmp)
    return t, p, q, p2 >= 0


def compute_rlr(pp):
    tmp = (6 - pp["d2"] + 2 * pp["cab"] + 2 * pp["d"] * (pp["sa"] - pp["sb"])) / 8
    phi = ca.atan2(pp["ca"] - pp["cb"], pp["d"] - pp["sa"] + pp["sb"])
    p = mod2pi(2 * ca.pi - ca.acos(ca.fmin(ca.fmax(tmp, -1), 1)))
    t = mod2pi(pp["alpha"] - phi + mod2pi(p / 2))
    q = mod2pi(pp["alpha"] - pp["beta"] - t + mod2pi(p))
    return t, p, q, ca.fabs(tmp) <= 1


def compute_lrl(pp):
    tmp = (6 - pp["d2"] + 2 * pp["cab"] + 2 * pp["d"] * (pp["sb"] - pp["sa"])) / 8
    phi = ca.atan2(pp["ca"] - pp["cb"], pp["d"] + pp["sa"] - pp["sb"])
    p = mod2pi(2 * ca.pi - ca.acos(ca.fmin(ca.fmax(tmp, -1), 1)))
    t = mod2pi(-pp["alpha"] - phi + p / 2)
    q = mod2pi(mod2pi(pp["beta"]) - pp["alpha"] - t + mod2pi(p))
    return t, p, q, ca.fabs(tmp) <= 1


FAMILY_FUNCTIONS = {
    "LSL": compute_lsl,
    "LSR": compute_lsr,
    "RSL": compute_rsl,
    "RSR": compute_rsr,
    "RLR": compute_rlr,
    "LRL": compute_lrl,
}


# ==============================================================================
# Main API
# ==============================================================================


def derive_dubins():
    """
    Create CasADi functions for Dubins path planning and evaluation.

    Returns:
        dubins_plan: Planner function
            Inputs: start[3], goal[3], R
            Outputs: cost, type, l1, l2, l3
            cost is inf when no family connects the poses.

        dubins_eval: Evaluator function
            Inputs: s, start[3], type, l1, l2, l3, R
            Outputs: x[3], the pose after arc length s
    """
    # --- Planner ---
    start = ca.SX.sym("start", 3)
    goal = ca.SX.sym("goal", 3)
    R = ca.SX.sym("R")

    pp = path_params(start, goal, R)
    degenerate = ca.logic_and(pp["d"] == 0, pp["alpha"] == pp["beta"])

    costs = []
    cargos = []
    for i, path_type in enumerate(PATH_TYPES):
        t, p, q, feasible = FAMILY_FUNCTIONS[path_type.value](pp)
        length = R * (t + p + q)
        valid = ca.logic_and(ca.logic_and(feasible, ca.logic_not(degenerate)), length > 0)
        costs.append(ca.if_else(valid, length, ca.inf))
        cargos.append(ca.vertcat(i, R * t, R * p, R * q))

    min_cost, best_cargo = casadi_min_with_cargo(costs=costs, cargos=cargos)

    dubins_plan = ca.Function(
        "dubins_plan",
        [start, goal, R],
        [min_cost, best_cargo[0], best_cargo[1], best_cargo[2], best_cargo[3]],
        ["start", "goal", "R"],
        ["cost", "type", "l1", "l2", "l3"],
    )

    # --- Evaluator ---
    s = ca.SX.sym("s")
    start_e = ca.SX.sym("start_e", 3)
    type_e = ca.SX.sym("type")
    lengths = [ca.SX.sym("l1"), ca.SX.sym("l2"), ca.SX.sym("l3")]
    R_e = ca.SX.sym("R_e")

    remaining = ca.fmin(ca.fmax(s, 0), lengths[0] + lengths[1] + lengths[2])
    x, y, psi = start_e[0], start_e[1], start_e[2]

    for k, seg_len in enumerate(lengths):
        # +1 left, 0 straight, -1 right
        sign = 0
        for i, path_type in enumerate(PATH_TYPES):
            sign = sign + (type_e == i) * path_type.course_types[k].turn_sign

        delta = ca.fmin(remaining, seg_len)
        remaining = remaining - delta
        phi = delta / R_e

        x_arc = x + sign * R_e * (ca.sin(psi + sign * phi) - ca.sin(psi))
        y_arc = y - sign * R_e * (ca.cos(psi + sign * phi) - ca.cos(psi))
        straight = sign == 0
        x, y = (
            ca.if_else(straight, x + delta * ca.cos(psi), x_arc),
            ca.if_else(straight, y + delta * ca.sin(psi), y_arc),
        )
        psi = psi + sign * phi

    dubins_eval = ca.Function(
        "dubins_eval",
        [s, start_e, type_e, lengths[0], lengths[1], lengths[2], R_e],
        [ca.vertcat(x, y, psi)],
        ["s", "start", "type", "l1", "l2", "l3", "R"],
        ["x"],
    )

    return dubins_plan, dubins_eval
