# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
WarpGradient -- eased, perceptually interpolated linear gradients.

Expands a few key stops into many warped stops so that an ordinary
piecewise-linear gradient follows an easing curve in OKLab/OKLCH space.

Quick start::

    from warpgradient import ColorStop, EasingCurve, warp_gradient

    g = warp_gradient(
        [ColorStop("#FB2380", 0.0), ColorStop("#28E2FB", 1.0)],
        EasingCurve.named("ease-in-out"),
        mode="oklch",
        samples=16,
    )
    g.stops     # Warped (position, color) stops
    g.to_json() # Compact JSON for exporters
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from warpgradient.schema import (
    ColorStop,
    EasingCurve,
    InterpolationMode,
    Point,
    WarpedGradient,
    WarpRequest,
)
from warpgradient.warp import (
    WarpCache,
    parse_gradient_stops,
    warp,
    warp_gradient,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "warp_gradient",
    "warp",
    # Types (commonly needed)
    "ColorStop",
    "EasingCurve",
    "Point",
    "InterpolationMode",
    "WarpRequest",
    "WarpedGradient",
    # Helpers
    "parse_gradient_stops",
    "WarpCache",
    # Version
    "__version__",
]
