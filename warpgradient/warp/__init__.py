# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Warping core for WarpGradient.

This module turns key stops and an easing curve into warped stops.
All operations are pure, synchronous and deterministic.
"""

from warpgradient.warp.assemble import warp, warp_gradient
from warpgradient.warp.bezier import SolverConfig, rate_magnitude, solve
from warpgradient.warp.cache import WarpCache
from warpgradient.warp.interpolate import color_at, interpolate_color
from warpgradient.warp.parser import parse_gradient_stops
from warpgradient.warp.sampler import SamplerConfig, adaptive_samples

__all__ = [
    "warp",
    "warp_gradient",
    "solve",
    "rate_magnitude",
    "adaptive_samples",
    "color_at",
    "interpolate_color",
    "parse_gradient_stops",
    "WarpCache",
    "SolverConfig",
    "SamplerConfig",
]
