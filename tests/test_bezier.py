# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""Tests for the cubic Bézier easing solver."""

import logging
import math

import numpy as np
import pytest

from warpgradient.schema import EasingCurve
from warpgradient.warp.bezier import (
    SolverConfig,
    rate_magnitude,
    sample_curve_x,
    sample_curve_y,
    sample_derivative_x,
    sample_derivative_y,
    slope,
    solve,
    solve_parameter,
)

EASE_IN = EasingCurve.from_values(0.42, 0.0, 1.0, 1.0)
EASE_IN_OUT = EasingCurve.from_values(0.42, 0.0, 0.58, 1.0)
STEEP_S = EasingCurve.from_values(0.9, 0.0, 0.1, 1.0)
FOLDED = EasingCurve.from_values(1.3, 0.0, -0.3, 1.0)


class TestPolynomial:

    def test_endpoints(self):
        for curve in (EASE_IN, EASE_IN_OUT, STEEP_S, FOLDED):
            assert sample_curve_x(0.0, curve) == 0.0
            assert sample_curve_y(0.0, curve) == 0.0
            assert sample_curve_x(1.0, curve) == pytest.approx(1.0)
            assert sample_curve_y(1.0, curve) == pytest.approx(1.0)

    def test_accepts_arrays(self):
        t = np.linspace(0.0, 1.0, 11)
        x = sample_curve_x(t, EASE_IN_OUT)
        assert x.shape == (11,)
        assert np.all(np.diff(x) > 0)

    def test_derivative_matches_finite_difference(self):
        h = 1e-6
        for t in (0.1, 0.37, 0.8):
            fd_x = (sample_curve_x(t + h, EASE_IN) - sample_curve_x(t - h, EASE_IN)) / (2 * h)
            fd_y = (sample_curve_y(t + h, EASE_IN) - sample_curve_y(t - h, EASE_IN)) / (2 * h)
            assert sample_derivative_x(t, EASE_IN) == pytest.approx(fd_x, abs=1e-6)
            assert sample_derivative_y(t, EASE_IN) == pytest.approx(fd_y, abs=1e-6)

    def test_folded_curve_has_negative_x_derivative(self):
        assert sample_derivative_x(0.5, FOLDED) == pytest.approx(-0.45)
        t = np.linspace(0.0, 1.0, 1001)
        assert sample_derivative_x(t, FOLDED).min() < 0

    def test_steep_s_curve_stays_monotone(self):
        t = np.linspace(0.0, 1.0, 1001)
        assert sample_derivative_x(t, STEEP_S).min() > 0


class TestSolve:

    def test_clamps_below_zero(self):
        assert solve(-0.5, EASE_IN) == 0.0
        assert solve(0.0, EASE_IN) == 0.0

    def test_clamps_above_one(self):
        assert solve(1.0, EASE_IN) == 1.0
        assert solve(3.0, EASE_IN) == 1.0

    @pytest.mark.parametrize("x", [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
    def test_linear_shortcut(self, x):
        assert solve(x, EasingCurve.linear()) == x

    def test_near_linear_curve_is_linear(self):
        curve = EasingCurve.from_values(1e-11, 0.0, 1.0, 1.0 - 1e-11)
        assert curve.is_linear
        assert solve(0.3, curve) == 0.3

    def test_slightly_bent_curve_is_not_linear(self):
        curve = EasingCurve.from_values(1e-3, 0.0, 1.0, 1.0)
        assert not curve.is_linear

    def test_ease_in_front_loaded(self):
        y = solve(0.5, EASE_IN)
        assert y < 0.5
        assert y == pytest.approx(0.3153, abs=1e-3)

    def test_ease_in_out_symmetric(self):
        assert solve(0.5, EASE_IN_OUT) == pytest.approx(0.5, abs=1e-6)
        assert solve(0.25, EASE_IN_OUT) == pytest.approx(1.0 - solve(0.75, EASE_IN_OUT), abs=1e-5)

    def test_solution_inverts_x(self):
        for x in np.linspace(0.01, 0.99, 25):
            t = solve_parameter(float(x), EASE_IN_OUT)
            assert sample_curve_x(t, EASE_IN_OUT) == pytest.approx(x, abs=1e-6)

    def test_folded_curve_converges(self):
        """Bisection fallback finds a root on non-monotone curves."""
        for x in np.linspace(0.0, 1.0, 101):
            t = solve_parameter(float(x), FOLDED)
            assert 0.0 <= t <= 1.0
            assert sample_curve_x(t, FOLDED) == pytest.approx(x, abs=1e-6)
            assert math.isfinite(solve(float(x), FOLDED))

    def test_folded_curve_uses_bisection(self, caplog):
        caplog.set_level(logging.DEBUG, logger="warpgradient.warp.bezier")
        t = solve_parameter(0.3, FOLDED)
        assert sample_curve_x(t, FOLDED) == pytest.approx(0.3, abs=1e-6)
        assert "falling back to bisection" in caplog.text

    def test_steep_s_curve_converges(self):
        for x in np.linspace(0.0, 1.0, 101):
            t = solve_parameter(float(x), STEEP_S)
            assert sample_curve_x(t, STEEP_S) == pytest.approx(x, abs=1e-6)

    def test_control_points_outside_unit_square(self):
        curve = EasingCurve.from_values(0.3, -0.6, 0.7, 1.6)
        for x in np.linspace(0.0, 1.0, 21):
            y = solve(float(x), curve)
            assert math.isfinite(y)
        assert solve(0.2, curve) < 0.0  # anticipation dips below zero

    def test_custom_config(self):
        config = SolverConfig(newton_iterations=0)
        t = solve_parameter(0.4, EASE_IN_OUT, config)
        assert sample_curve_x(t, EASE_IN_OUT) == pytest.approx(0.4, abs=1e-6)


class TestRate:

    def test_endpoints_return_one(self):
        for curve in (EASE_IN, STEEP_S, FOLDED, EasingCurve.linear()):
            assert rate_magnitude(0.0, curve) == 1.0
            assert rate_magnitude(1.0, curve) == 1.0

    def test_linear_is_constant(self):
        for x in (0.1, 0.5, 0.9):
            assert rate_magnitude(x, EasingCurve.linear()) == pytest.approx(math.sqrt(2.0))

    def test_rate_is_at_least_one(self):
        for curve in (EASE_IN, EASE_IN_OUT, STEEP_S, FOLDED):
            for x in np.linspace(0.0, 1.0, 51):
                assert rate_magnitude(float(x), curve) >= 1.0

    def test_ease_in_steeper_at_end(self):
        assert rate_magnitude(0.9, EASE_IN) > rate_magnitude(0.1, EASE_IN)

    def test_rate_matches_slope(self):
        x = 0.6
        assert rate_magnitude(x, EASE_IN) == pytest.approx(math.hypot(1.0, slope(x, EASE_IN)))

    def test_folded_rate_is_finite(self):
        for x in np.linspace(0.0, 1.0, 101):
            assert math.isfinite(rate_magnitude(float(x), FOLDED))
