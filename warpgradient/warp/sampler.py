# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Adaptive sampling of stop positions along the easing curve.

A piecewise-linear gradient can only follow a curved color progression if
its stops are placed where the progression bends. The sampler partitions
[0,1] into segments of equal arc-length mass under the easing curve, so
steep regions of the curve receive proportionally more stops.

Algorithm:
    1. Probe the density ρ(x) (see ``bezier.rate_magnitude``) at K+1
       equally spaced abscissae x_i = i/K.
    2. Integrate with the trapezoid rule into a cumulative mass A(x_i),
       total T.
    3. N requested stops make N-1 segments of mass μ = T/(N-1). Each
       interior target k·μ is located by linear interpolation inside the
       probe interval where A crosses it.
    4. Anchor the result with 0 and 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from warpgradient.schema import EasingCurve, MIN_SAMPLES
from warpgradient.warp.bezier import SolverConfig, rate_magnitude

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for adaptive sampling."""

    # Number of probe intervals (K); buffers are proportional to N + K
    probe_count: int = 100

    # Requested counts below this are clamped up
    min_samples: int = MIN_SAMPLES


DEFAULT_SAMPLER = SamplerConfig()


def probe_density(
    curve: EasingCurve,
    probe_count: int = DEFAULT_SAMPLER.probe_count,
    solver: Optional[SolverConfig] = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Evaluate the curve's arc-length density at equally spaced probes.

    Returns:
        (probes, density), both of shape (probe_count + 1,)
    """
    probes = np.linspace(0.0, 1.0, probe_count + 1)
    density = np.array(
        [rate_magnitude(float(x), curve, solver) for x in probes],
        dtype=np.float64,
    )
    return probes, density


def adaptive_samples(
    count: int,
    curve: EasingCurve,
    config: Optional[SamplerConfig] = None,
    solver: Optional[SolverConfig] = None,
) -> tuple[float, ...]:
    """
    Distribute stop positions on [0,1] by the curve's arc-length measure.

    Args:
        count: Desired number of positions N (clamped to >= 2)
        curve: Easing curve whose steepness drives the distribution
        config: Sampler settings (uses defaults if None)
        solver: Curve solver settings (uses defaults if None)

    Returns:
        Non-decreasing positions with first 0.0 and last 1.0,
        N <= length <= N + 1. Identical inputs give identical output.

    Example:
        >>> [round(x, 6) for x in adaptive_samples(3, EasingCurve.linear())]
        [0.0, 0.5, 1.0]
    """
    cfg = config or DEFAULT_SAMPLER
    n = max(cfg.min_samples, int(count))

    probes, density = probe_density(curve, cfg.probe_count, solver)

    # Trapezoid mass of each probe interval, then running total
    step = 1.0 / cfg.probe_count
    masses = (density[:-1] + density[1:]) * 0.5 * step
    cumulative = np.cumsum(masses)
    total = float(cumulative[-1])

    segment_mass = total / (n - 1)
    targets = segment_mass * np.arange(1, n - 1, dtype=np.float64)

    # First interval whose running mass reaches each target
    intervals = np.searchsorted(cumulative, targets, side="left")
    intervals = np.minimum(intervals, cfg.probe_count - 1)

    mass_before = np.where(
        intervals > 0, cumulative[np.maximum(intervals - 1, 0)], 0.0
    )
    fraction = np.clip((targets - mass_before) / masses[intervals], 0.0, 1.0)
    interior = probes[intervals] + fraction * step

    positions = [0.0]
    positions.extend(float(x) for x in interior)
    if positions[-1] < 1.0 or len(positions) < n:
        positions.append(1.0)

    if len(positions) > n + 1:
        logger.debug(
            "Trimming %d surplus sample positions", len(positions) - (n + 1)
        )
        positions = positions[:n] + [1.0]

    return tuple(positions)
