# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""Tests for adaptive sampling of stop positions."""

import numpy as np
import pytest

from warpgradient.schema import EasingCurve
from warpgradient.warp.sampler import SamplerConfig, adaptive_samples, probe_density

LINEAR = EasingCurve.linear()
EASE_IN = EasingCurve.from_values(0.42, 0.0, 1.0, 1.0)
EASE_OUT = EasingCurve.from_values(0.0, 0.0, 0.58, 1.0)
STEEP_S = EasingCurve.from_values(0.9, 0.0, 0.1, 1.0)
FOLDED = EasingCurve.from_values(1.3, 0.0, -0.3, 1.0)


def _random_curves(n, seed=7):
    rng = np.random.RandomState(seed)
    return [EasingCurve.from_values(*rng.uniform(-0.5, 1.5, size=4)) for _ in range(n)]


class TestSamplerGuarantees:

    @pytest.mark.parametrize("count", [2, 3, 4, 10, 16, 64])
    @pytest.mark.parametrize("curve", [LINEAR, EASE_IN, EASE_OUT, STEEP_S, FOLDED])
    def test_anchored_monotone_bounded(self, curve, count):
        positions = adaptive_samples(count, curve)
        assert positions[0] == 0.0
        assert positions[-1] == 1.0
        assert count <= len(positions) <= count + 1
        assert all(a <= b for a, b in zip(positions, positions[1:]))

    def test_random_curves(self):
        for curve in _random_curves(40):
            for count in (2, 5, 17):
                positions = adaptive_samples(count, curve)
                assert positions[0] == 0.0
                assert positions[-1] == 1.0
                assert count <= len(positions) <= count + 1
                assert np.all(np.diff(positions) >= 0.0)
                assert np.all(np.isfinite(positions))

    def test_count_below_minimum_clamped(self):
        assert adaptive_samples(0, LINEAR) == (0.0, 1.0)
        assert adaptive_samples(-3, EASE_IN) == (0.0, 1.0)

    def test_deterministic(self):
        assert adaptive_samples(23, EASE_IN) == adaptive_samples(23, EASE_IN)


class TestSamplerDistribution:

    def test_two_samples_are_endpoints(self):
        assert adaptive_samples(2, LINEAR) == (0.0, 1.0)

    def test_three_samples_linear_midpoint(self):
        positions = adaptive_samples(3, LINEAR)
        assert len(positions) == 3
        assert positions[1] == pytest.approx(0.5, abs=1e-6)

    def test_linear_is_approximately_uniform(self):
        positions = adaptive_samples(11, LINEAR)
        np.testing.assert_allclose(positions, np.linspace(0.0, 1.0, 11), atol=0.01)

    def test_ease_in_denser_near_end(self):
        positions = adaptive_samples(10, EASE_IN)
        gaps = np.diff(positions)
        assert gaps[0] > gaps[-1]

    def test_ease_out_denser_near_start(self):
        positions = adaptive_samples(10, EASE_OUT)
        gaps = np.diff(positions)
        assert gaps[0] < gaps[-1]

    def test_folded_curve_positions_finite(self):
        positions = adaptive_samples(16, FOLDED)
        assert np.all(np.isfinite(positions))
        assert np.all(np.diff(positions) >= 0.0)

    def test_custom_probe_count(self):
        positions = adaptive_samples(5, EASE_IN, SamplerConfig(probe_count=400))
        assert len(positions) == 5
        assert positions[-1] == 1.0


class TestProbeDensity:

    def test_shape(self):
        probes, density = probe_density(EASE_IN)
        assert probes.shape == (101,)
        assert density.shape == (101,)
        assert probes[0] == 0.0
        assert probes[-1] == 1.0

    def test_endpoint_density_is_one(self):
        _, density = probe_density(FOLDED)
        assert density[0] == 1.0
        assert density[-1] == 1.0
