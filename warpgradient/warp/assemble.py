# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Main warping API.

This is the primary entry point for WarpGradient's core: it composes the
curve solver, the adaptive sampler and the key-stop evaluator into a
``WarpedGradient``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from warpgradient.schema import (
    DEFAULT_CURVE,
    DEFAULT_SAMPLES,
    ColorStop,
    EasingCurve,
    InterpolationMode,
    WarpedGradient,
    WarpRequest,
    clamp_samples,
)
from warpgradient.warp.bezier import SolverConfig, solve
from warpgradient.warp.interpolate import color_at, sort_stops
from warpgradient.warp.sampler import SamplerConfig, adaptive_samples

logger = logging.getLogger(__name__)


def stop_id(position: float) -> str:
    """Deterministic identifier for a warped stop at ``position``."""
    return f"warp-{position:.6f}"


def warp_gradient(
    key_stops: Iterable[ColorStop],
    curve: Optional[EasingCurve] = None,
    *,
    mode: Union[InterpolationMode, str] = InterpolationMode.OKLCH,
    samples: int = DEFAULT_SAMPLES,
    sampler: Optional[SamplerConfig] = None,
    solver: Optional[SolverConfig] = None,
) -> WarpedGradient:
    """
    Expand key stops into warped stops shaped by an easing curve.

    For each position x chosen by the adaptive sampler, the color
    progression y = E(x) is solved on the curve and the key-stop gradient
    is evaluated at y. Rendering the result as an ordinary linear gradient
    approximates the eased gradient.

    Args:
        key_stops: User key stops, any order. Positions outside [0,1] are
            allowed and extend their endpoint color.
        curve: Easing curve (default: ease-in-out, 0.42/0/0.58/1)
        mode: Interpolation space, enum or "rgb" / "oklab" / "oklch"
            (default: OKLCH)
        samples: Desired number of warped stops (default: 16). Values
            below 2 are clamped to 2.
        sampler: Adaptive sampler settings (uses defaults if None)
        solver: Curve solver settings (uses defaults if None)

    Returns:
        WarpedGradient whose stops start at 0.0, end at 1.0, are
        non-decreasing, and number between ``samples`` and ``samples + 1``.
        Coincident positions are not deduplicated.

    Raises:
        ValueError: If ``mode`` is not a known interpolation mode

    Example:
        >>> g = warp_gradient(
        ...     [ColorStop("#000000", 0.0), ColorStop("#FFFFFF", 1.0)],
        ...     EasingCurve.linear(),
        ...     mode="rgb",
        ...     samples=3,
        ... )
        >>> g.colors[0], g.colors[-1]
        ('#000000', '#FFFFFF')
    """
    curve = curve or DEFAULT_CURVE
    mode = InterpolationMode.parse(mode)
    samples = clamp_samples(samples)
    ordered = sort_stops(key_stops)

    stops = []
    for x in adaptive_samples(samples, curve, sampler, solver):
        # x is the spatial position, y the color progression at x
        y = solve(x, curve, solver)
        stops.append(
            ColorStop(color=color_at(y, ordered, mode), position=x, id=stop_id(x))
        )

    logger.debug(
        "Warped %d key stops into %d stops (mode=%s, curve=%s)",
        len(ordered), len(stops), mode.value, curve.to_css(),
    )

    return WarpedGradient(
        stops=tuple(stops),
        mode=mode,
        curve=curve,
        samples=samples,
    )


def warp(
    request: Union[WarpRequest, dict],
    *,
    sampler: Optional[SamplerConfig] = None,
    solver: Optional[SolverConfig] = None,
) -> WarpedGradient:
    """
    Run the warping pipeline from a configuration object.

    Args:
        request: A WarpRequest, or a dict in its ``to_dict`` layout::

            {
              "keyStops": [{"color": "#FB2883", "position": 0},
                           {"color": "#CCE31C", "position": 1}],
              "curve": {"p1": {"x": 0.42, "y": 0}, "p2": {"x": 1, "y": 1}},
              "mode": "oklch",
              "samples": 10
            }

    Returns:
        WarpedGradient (see ``warp_gradient``)
    """
    if isinstance(request, dict):
        request = WarpRequest.from_dict(request)

    return warp_gradient(
        request.key_stops,
        request.curve,
        mode=request.mode,
        samples=request.samples,
        sampler=sampler,
        solver=solver,
    )
