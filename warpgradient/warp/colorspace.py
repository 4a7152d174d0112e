# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear sRGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

All conversions are pure NumPy in double precision. Arrays have shape
(..., 3); single colors are plain length-3 arrays.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from warpgradient.schema.gradient import normalize_hex


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut channels are clamped
    componentwise; no chroma reduction is attempted.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube-rooted) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Published inverses (same reference)
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # cbrt keeps the sign for out-of-gamut inputs
    return np.einsum('...j,ij->...i', np.cbrt(lms), _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values (may leave [0,1])
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    return np.einsum('...j,ij->...i', lms_cbrt ** 3, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Convenience: full chains
# =============================================================================


def srgb_to_oklab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """sRGB [0,1] → OKLab (L, a, b)."""
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLab → sRGB [0,1], clamped componentwise."""
    return linear_to_srgb(oklab_to_linear_rgb(lab))


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    return oklab_to_oklch(srgb_to_oklab(srgb))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB
    Values are clipped to [0, 1].
    """
    return oklab_to_srgb(oklch_to_oklab(lch))


# =============================================================================
# 8-bit quantization and hex
# =============================================================================


def srgb_to_uint8(srgb: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Quantize sRGB [0,1] to 8-bit channel values.

    Channels are clamped to [0, 1] first and rounded half-up, so 0.5
    maps to 128.
    """
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    return np.floor(srgb * 255.0 + 0.5).astype(np.int64)


def srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    """
    Convert one sRGB [0,1] triple to a hex string like "#3941C8".
    """
    r, g, b = srgb_to_uint8(srgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_srgb(hex_color: str) -> NDArray[np.float64]:
    """
    Convert a hex color string to an sRGB [0,1] triple.

    Malformed input parses as black.
    """
    value = int(normalize_hex(hex_color)[1:], 16)
    channels = np.array(
        [(value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF],
        dtype=np.float64,
    )
    return channels / 255.0
