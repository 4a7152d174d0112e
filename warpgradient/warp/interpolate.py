# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Color interpolation between key stops.

Three interpolation spaces are supported:

- RGB: componentwise blend of the gamma-encoded 8-bit sRGB values
  (no linearization; matches naive CSS/SVG rendering)
- OKLab: Euclidean blend of (L, a, b)
- OKLCH: blend of L and C, hue along the shortest arc of the color wheel

Every result is clamped componentwise into the sRGB gamut and quantized
to ``#RRGGBB``.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

import numpy as np

from warpgradient.schema import BLACK_HEX, ColorStop, InterpolationMode
from warpgradient.warp.colorspace import (
    hex_to_srgb,
    oklab_to_oklch,
    oklab_to_srgb,
    oklch_to_srgb,
    srgb_to_hex,
    srgb_to_oklab,
)

# Below this chroma the hue angle is numerical noise (gray/black/white)
ACHROMATIC_CHROMA = 1e-4


def _lerp(a, b, u: float):
    return a + (b - a) * u


def interpolate_hue(h0: float, h1: float, u: float) -> float:
    """
    Interpolate hue angles (degrees) along the shortest arc.

    The difference is wrapped into (-180, 180] so red (≈29°) to magenta
    (≈328°) travels through 0°, not through yellow and green.

    Returns:
        Hue in [0, 360)
    """
    dh = (h1 - h0) % 360.0
    if dh > 180.0:
        dh -= 360.0
    return (h0 + u * dh) % 360.0


def _interpolate_oklch(
    start: np.ndarray, end: np.ndarray, u: float
) -> np.ndarray:
    L0, C0, h0 = oklab_to_oklch(srgb_to_oklab(start))
    L1, C1, h1 = oklab_to_oklch(srgb_to_oklab(end))

    # An achromatic endpoint borrows the other endpoint's hue
    if C0 < ACHROMATIC_CHROMA <= C1:
        h0 = h1
    elif C1 < ACHROMATIC_CHROMA <= C0:
        h1 = h0

    lch = np.array(
        [_lerp(L0, L1, u), _lerp(C0, C1, u), interpolate_hue(h0, h1, u)],
        dtype=np.float64,
    )
    return oklch_to_srgb(lch)


def interpolate_color(
    start: str,
    end: str,
    u: float,
    mode: Union[InterpolationMode, str] = InterpolationMode.OKLCH,
) -> str:
    """
    Interpolate between two sRGB hex colors.

    Args:
        start: Color at u = 0 (hex; malformed parses as black)
        end: Color at u = 1
        u: Local parameter in [0, 1]
        mode: Interpolation space (enum or name)

    Returns:
        ``#RRGGBB`` hex string

    Example:
        >>> interpolate_color("#000000", "#FFFFFF", 0.5, "rgb")
        '#808080'
    """
    mode = InterpolationMode.parse(mode)
    c0 = hex_to_srgb(start)
    c1 = hex_to_srgb(end)

    if mode is InterpolationMode.OKLAB:
        srgb = oklab_to_srgb(_lerp(srgb_to_oklab(c0), srgb_to_oklab(c1), u))
    elif mode is InterpolationMode.OKLCH:
        srgb = _interpolate_oklch(c0, c1, u)
    else:
        srgb = _lerp(c0, c1, u)

    return srgb_to_hex(srgb)


def sort_stops(stops: Iterable[ColorStop]) -> tuple[ColorStop, ...]:
    """Sort key stops by position (stable for coincident positions)."""
    return tuple(sorted(stops, key=lambda s: s.position))


def color_at(
    y: float,
    stops: Sequence[ColorStop],
    mode: Union[InterpolationMode, str] = InterpolationMode.OKLCH,
) -> str:
    """
    Evaluate the key-stop gradient at progression coordinate y.

    ``stops`` must already be sorted by position (see ``sort_stops``).

    Lookup policy:
        - no stops → black
        - y at or before the first stop → first color
        - y at or after the last stop → last color
        - otherwise interpolate inside the enclosing segment

    Returns:
        ``#RRGGBB`` hex string
    """
    if not stops:
        return BLACK_HEX

    first, last = stops[0], stops[-1]
    if y <= first.position:
        return first.color
    if y >= last.position:
        return last.color

    for start, end in zip(stops, stops[1:]):
        if start.position <= y <= end.position:
            span = end.position - start.position
            if span <= 0.0:
                return start.color
            u = (y - start.position) / span
            return interpolate_color(start.color, end.color, u, mode)

    return last.color
