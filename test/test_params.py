"""
Tests for angle normalization and pose-pair parameters
"""

import math

import numpy as np
import pytest

from common import EPS
from planar_dubins import State, mod2pi
from planar_dubins.planning import TWO_PI, path_params


class TestMod2Pi:
    """mod2pi must floor, not truncate."""

    def test_values_in_range(self):
        for theta in [0.0, 1.0, np.pi, TWO_PI, -np.pi / 2, -7 * np.pi, 5 * np.pi, 1e6, -1e6]:
            wrapped = mod2pi(theta)
            assert 0 <= wrapped < TWO_PI, f"mod2pi({theta}) = {wrapped} out of [0, 2pi)"

    def test_negative_inputs(self):
        assert mod2pi(-np.pi / 2) == pytest.approx(3 * np.pi / 2, abs=EPS)
        assert mod2pi(-7 * np.pi) == pytest.approx(np.pi, abs=EPS)
        assert mod2pi(-TWO_PI - 0.25) == pytest.approx(TWO_PI - 0.25, abs=EPS)
        # truncating remainder keeps the sign, floored one must not
        assert math.fmod(-np.pi / 2, TWO_PI) < 0
        assert mod2pi(-np.pi / 2) > 0

    def test_large_inputs(self):
        assert mod2pi(5 * np.pi) == pytest.approx(np.pi, abs=EPS)
        assert mod2pi(TWO_PI) == 0.0
        assert mod2pi(4 * np.pi + 1.0) == pytest.approx(1.0, abs=EPS)

    def test_tiny_negative_wraps_to_zero(self):
        assert mod2pi(-1e-18) == 0.0

    def test_accepts_int(self):
        assert mod2pi(0) == 0.0

    def test_random_inputs_keep_angle(self):
        np.random.seed(0)
        for theta in np.random.uniform(-100, 100, 200):
            wrapped = mod2pi(theta)
            assert 0 <= wrapped < TWO_PI
            assert np.sin(wrapped) == pytest.approx(np.sin(theta), abs=1e-9)
            assert np.cos(wrapped) == pytest.approx(np.cos(theta), abs=1e-9)


class TestPathParams:
    def test_goal_on_y_axis(self):
        pp = path_params(State(0, 0, 0), State(0, 2, np.pi / 2), 2.0)
        assert pp.alpha == pytest.approx(3 * np.pi / 2, abs=EPS)
        assert pp.beta == pytest.approx(0.0, abs=EPS)
        assert pp.d == pytest.approx(1.0, abs=EPS)

    def test_distance_scaled_by_radius(self):
        pp = path_params(State(1, 1, 0), State(4, 5, 0), 0.5)
        assert pp.d == pytest.approx(10.0, abs=EPS)
        assert pp.d_square == pytest.approx(100.0, abs=EPS)

    def test_cached_trig(self):
        pp = path_params(State(0, 0, 0.3), State(3, -2, 2.1), 1.5)
        assert pp.sin_alpha == pytest.approx(np.sin(pp.alpha))
        assert pp.cos_alpha == pytest.approx(np.cos(pp.alpha))
        assert pp.sin_beta == pytest.approx(np.sin(pp.beta))
        assert pp.cos_beta == pytest.approx(np.cos(pp.beta))
        assert pp.cos_alpha_minus_beta == pytest.approx(np.cos(pp.alpha - pp.beta))

    def test_coincident_positions_use_zero_theta(self):
        pp = path_params(State(1, 1, 1.0), State(1, 1, 2.0), 1.0)
        assert pp.d == 0
        assert pp.alpha == pytest.approx(1.0)
        assert pp.beta == pytest.approx(2.0)
        assert not pp.is_degenerate

    def test_identical_poses_are_degenerate(self):
        assert path_params(State(3, -2, 0), State(3, -2, 0), 1.0).is_degenerate
        assert path_params(State(3, -2, TWO_PI), State(3, -2, 0), 1.0).is_degenerate
        assert path_params(State(2, -3, 1.5), State(2, -3, 1.5), 1.0).is_degenerate
        assert path_params(State(2, -3, -1.0), State(2, -3, TWO_PI - 1.0), 2.0).is_degenerate

    def test_same_position_other_heading_not_degenerate(self):
        assert not path_params(State(2, -3, 1.5), State(2, -3, 0.5), 1.0).is_degenerate

    def test_headings_normalized(self):
        pp = path_params(State(0, 0, -np.pi / 2), State(1, 0, 9 * np.pi), 1.0)
        assert pp.alpha == pytest.approx(3 * np.pi / 2, abs=EPS)
        assert pp.beta == pytest.approx(np.pi, abs=EPS)

    @pytest.mark.parametrize("radius", [0.0, -1.0, float("nan")])
    def test_invalid_radius(self, radius):
        with pytest.raises(ValueError, match="turning_radius"):
            path_params(State(0, 0, 0), State(1, 1, 0), radius)
