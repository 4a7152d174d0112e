# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Key-stop extraction from gradient text.

Recognized formats, tried in order:

1. SwiftUI stops::

       Gradient.Stop(color: Color(red: 0.92, green: 0.84, blue: 0.92), location: 0.00)

2. CSS gradients::

       linear-gradient(90deg, #ff0000 0%, #00ff00 50%, #0000ff 100%)
       radial-gradient(326.45% 100% at 50.11% 100%, #EBD5EB 0%, #A1BEE8 47.12%)

3. rgb()/rgba() lists (evenly distributed)::

       rgba(235, 213, 235, 1), rgba(161, 190, 232, 1)

4. Hex lists, at least two colors (evenly distributed)::

       #ff0000, #00ff00, #0000ff

Parsed positions are clamped to [0, 1]. Stop ids are deterministic
(``stop-0``, ``stop-1``, ...).
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np

from warpgradient.schema import ColorStop
from warpgradient.warp.colorspace import srgb_to_hex

_SWIFT_STOP_RE = re.compile(
    r"Gradient\.Stop\s*\(\s*color:\s*Color\s*\(\s*red:\s*([\d.]+)\s*,"
    r"\s*green:\s*([\d.]+)\s*,\s*blue:\s*([\d.]+)\s*\)\s*,"
    r"\s*location:\s*([\d.]+)\s*\)",
    re.IGNORECASE,
)
_CSS_GRADIENT_RE = re.compile(
    r"(?:linear|radial|conic)-gradient\s*\((?:[^()]|\([^()]*\))+\)",
    re.IGNORECASE,
)
_CSS_STOP_RE = re.compile(
    r"(#[0-9a-f]{3,8}\b|rgba?\([^)]+\))\s*([\d.]+%?)?",
    re.IGNORECASE,
)
_RGBA_RE = re.compile(
    r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+)?\s*\)",
    re.IGNORECASE,
)
_HEX_RE = re.compile(r"#[0-9a-f]{3,8}\b", re.IGNORECASE)


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def _even_position(index: int, count: int) -> float:
    return index / (count - 1) if count > 1 else 0.0


def _rgb_to_hex(r: float, g: float, b: float) -> str:
    return srgb_to_hex(np.array([r, g, b], dtype=np.float64))


def _rgba_to_hex(text: str) -> str:
    """Convert ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` to hex; black if malformed."""
    m = _RGBA_RE.search(text)
    if not m:
        return "#000000"
    r, g, b = (int(v) / 255.0 for v in m.groups())
    return _rgb_to_hex(r, g, b)


def _parse_swift(text: str) -> Optional[tuple[ColorStop, ...]]:
    matches = _SWIFT_STOP_RE.findall(text)
    if not matches:
        return None
    return tuple(
        ColorStop(
            color=_rgb_to_hex(float(r), float(g), float(b)),
            position=_clamp_unit(float(location)),
            id=f"stop-{i}",
        )
        for i, (r, g, b, location) in enumerate(matches)
    )


def _parse_css(text: str) -> Optional[tuple[ColorStop, ...]]:
    gradient = _CSS_GRADIENT_RE.search(text)
    if not gradient:
        return None
    matches = _CSS_STOP_RE.findall(gradient.group(0))
    if not matches:
        return None

    stops = []
    for i, (color, position) in enumerate(matches):
        if color.lower().startswith("rgb"):
            color = _rgba_to_hex(color)
        if position:
            scale = 100.0 if position.endswith("%") else 1.0
            pos = float(position.rstrip("%")) / scale
        else:
            pos = _even_position(i, len(matches))
        stops.append(ColorStop(color=color, position=_clamp_unit(pos), id=f"stop-{i}"))
    return tuple(stops)


def _parse_rgba_list(text: str) -> Optional[tuple[ColorStop, ...]]:
    matches = _RGBA_RE.findall(text)
    if not matches:
        return None
    return tuple(
        ColorStop(
            color=_rgb_to_hex(int(r) / 255.0, int(g) / 255.0, int(b) / 255.0),
            position=_even_position(i, len(matches)),
            id=f"stop-{i}",
        )
        for i, (r, g, b) in enumerate(matches)
    )


def _parse_hex_list(text: str) -> Optional[tuple[ColorStop, ...]]:
    matches = _HEX_RE.findall(text)
    if len(matches) < 2:
        return None
    return tuple(
        ColorStop(color=color, position=_even_position(i, len(matches)), id=f"stop-{i}")
        for i, color in enumerate(matches)
    )


def parse_gradient_stops(text: str) -> Optional[tuple[ColorStop, ...]]:
    """
    Extract key stops from pasted gradient text.

    Args:
        text: Swift, CSS, rgb(a) list or hex list (see module docstring)

    Returns:
        Key stops in source order, or None if no format matched.
        Colors that cannot be parsed become black.

    Example:
        >>> [s.color for s in parse_gradient_stops("#f00, #00ff00")]
        ['#FF0000', '#00FF00']
    """
    for parser in (_parse_swift, _parse_css, _parse_rgba_list, _parse_hex_list):
        stops = parser(text)
        if stops:
            return stops
    return None
