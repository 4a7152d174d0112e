# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Schema definitions for gradient warping.

All types in this module are immutable (frozen dataclasses).
Once a warped gradient is produced, it cannot be altered.
"""

from warpgradient.schema.gradient import (
    BLACK_HEX,
    CSS_EASINGS,
    DEFAULT_CURVE,
    DEFAULT_SAMPLES,
    MIN_SAMPLES,
    SCHEMA_VERSION,
    ColorStop,
    EasingCurve,
    InterpolationMode,
    Point,
    WarpedGradient,
    WarpRequest,
    clamp_samples,
    normalize_hex,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Curve types
    "Point",
    "EasingCurve",
    "CSS_EASINGS",
    "DEFAULT_CURVE",
    # Color types
    "ColorStop",
    "InterpolationMode",
    "BLACK_HEX",
    "normalize_hex",
    # Request / result
    "WarpRequest",
    "WarpedGradient",
    "MIN_SAMPLES",
    "DEFAULT_SAMPLES",
    "clamp_samples",
]
