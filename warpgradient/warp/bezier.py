# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Cubic Bézier easing solver.

The easing curve has knots (0,0), P1, P2, (1,1) and is parameterized by
t ∈ [0,1]:

    X(t) = 3(1-t)²t·p1.x + 3(1-t)t²·p2.x + t³
    Y(t) = 3(1-t)²t·p1.y + 3(1-t)t²·p2.y + t³

Solving for y at a given x means inverting X(t) = x. This follows the
WebKit approach used for CSS timing functions: Newton-Raphson from t₀ = x,
with a bisection fallback for curves where Newton stalls or escapes.

All functions are total on finite input: they never raise and always
return a finite value.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from warpgradient.schema import EasingCurve

logger = logging.getLogger(__name__)

Scalar = Union[float, NDArray[np.float64]]


@dataclass(frozen=True)
class SolverConfig:
    """Numeric tunables for curve inversion."""

    # Newton-Raphson iterations before giving up
    newton_iterations: int = 8

    # |X(t) - x| below this counts as solved
    tolerance: float = 1e-6

    # |X'(t)| below this stalls Newton (and floors the rate denominator)
    derivative_epsilon: float = 1e-6

    # Upper bound on bisection halvings (2^-60 is below double resolution)
    max_bisections: int = 60


DEFAULT_SOLVER = SolverConfig()


# =============================================================================
# Polynomial evaluation
# =============================================================================


def _sample(t: Scalar, c1: float, c2: float) -> Scalar:
    u = 1.0 - t
    return 3.0 * u * u * t * c1 + 3.0 * u * t * t * c2 + t * t * t


def _sample_derivative(t: Scalar, c1: float, c2: float) -> Scalar:
    u = 1.0 - t
    return 3.0 * u * u * c1 + 6.0 * u * t * (c2 - c1) + 3.0 * t * t * (1.0 - c2)


def sample_curve_x(t: Scalar, curve: EasingCurve) -> Scalar:
    """X(t). Accepts a float or a NumPy array of parameters."""
    return _sample(t, curve.p1.x, curve.p2.x)


def sample_curve_y(t: Scalar, curve: EasingCurve) -> Scalar:
    """Y(t). Accepts a float or a NumPy array of parameters."""
    return _sample(t, curve.p1.y, curve.p2.y)


def sample_derivative_x(t: Scalar, curve: EasingCurve) -> Scalar:
    """dX/dt at t."""
    return _sample_derivative(t, curve.p1.x, curve.p2.x)


def sample_derivative_y(t: Scalar, curve: EasingCurve) -> Scalar:
    """dY/dt at t."""
    return _sample_derivative(t, curve.p1.y, curve.p2.y)


# =============================================================================
# Inversion
# =============================================================================


def solve_parameter(
    x: float,
    curve: EasingCurve,
    config: Optional[SolverConfig] = None,
) -> float:
    """
    Find the curve parameter t* with X(t*) = x.

    Edge policy:
        - x <= 0 → 0
        - x >= 1 → 1

    Args:
        x: Spatial coordinate
        curve: Easing curve
        config: Solver tunables (uses defaults if None)

    Returns:
        t* in [0, 1]
    """
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    cfg = config or DEFAULT_SOLVER

    t = x
    for _ in range(cfg.newton_iterations):
        error = sample_curve_x(t, curve) - x
        if abs(error) < cfg.tolerance:
            return t
        dxdt = sample_derivative_x(t, curve)
        if abs(dxdt) < cfg.derivative_epsilon:
            break
        t -= error / dxdt
        if not 0.0 <= t <= 1.0:
            break

    return _bisect(x, curve, cfg)


def _bisect(x: float, curve: EasingCurve, cfg: SolverConfig) -> float:
    """
    Bisection on [0, 1] for X(t) = x.

    X(0) = 0 < x < 1 = X(1), so a root always exists even when X is not
    monotone; which root is found for folded curves is unspecified.
    """
    logger.debug("Newton stalled at x=%.6f, falling back to bisection", x)

    lo, hi = 0.0, 1.0
    t = x
    for _ in range(cfg.max_bisections):
        t = lo + (hi - lo) / 2.0
        estimate = sample_curve_x(t, curve)
        if abs(estimate - x) < cfg.tolerance:
            break
        if estimate > x:
            hi = t
        else:
            lo = t
    return t


def solve(
    x: float,
    curve: EasingCurve,
    config: Optional[SolverConfig] = None,
) -> float:
    """
    Evaluate the easing curve: y = Y(t*) where X(t*) = x.

    Example:
        >>> solve(0.5, EasingCurve.named("ease-in")) < 0.5
        True
    """
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    if curve.is_linear:
        return float(x)

    t = solve_parameter(x, curve, config)
    return float(sample_curve_y(t, curve))


def slope(
    x: float,
    curve: EasingCurve,
    config: Optional[SolverConfig] = None,
) -> float:
    """
    dy/dx at x, computed as Y'(t*) / X'(t*).

    The denominator is floored at the solver's derivative epsilon (keeping
    its sign), so vertical tangents yield a large but finite slope.
    """
    cfg = config or DEFAULT_SOLVER
    if curve.is_linear:
        return 1.0

    t = solve_parameter(x, curve, cfg)
    dx = float(sample_derivative_x(t, curve))
    dy = float(sample_derivative_y(t, curve))
    if abs(dx) < cfg.derivative_epsilon:
        dx = math.copysign(cfg.derivative_epsilon, dx)
    return dy / dx


def rate_magnitude(
    x: float,
    curve: EasingCurve,
    config: Optional[SolverConfig] = None,
) -> float:
    """
    Arc length of the curve per unit x at t*.

        ρ(x) = √(X'² + Y'²) / |X'|  =  √(1 + (dy/dx)²)

    Used by the adaptive sampler as a density: steep parts of the easing
    curve (fast color change) get more stops. ρ >= 1 everywhere, and the
    linear curve has constant density √2, so its samples are uniform.

    Returns 1 at the endpoints (x <= 0 or x >= 1), where a stalling curve
    would otherwise report a degenerate tangent.
    """
    if x <= 0.0 or x >= 1.0:
        return 1.0
    return math.hypot(1.0, slope(x, curve, config))
