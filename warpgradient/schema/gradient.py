# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
WarpGradient schema: canonical types for gradient warping.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same warped gradient
- Serializable: JSON-ready for the surrounding UI and exporters

Coordinates:
- Position x: spatial coordinate along the gradient axis (0.0-1.0)
- Progression y: color-progression coordinate, y = E(x) for easing curve E

Colors are stored as normalized ``#RRGGBB`` sRGB hex strings.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"

BLACK_HEX = "#000000"


# =============================================================================
# Parsing Helpers
# =============================================================================

_HEX6_RE = re.compile(r"^#?([0-9a-fA-F]{6})(?:[0-9a-fA-F]{2})?$")
_HEX3_RE = re.compile(r"^#?([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])$")
_CUBIC_BEZIER_RE = re.compile(
    r"^\s*cubic-bezier\(\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*,"
    r"\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*\)\s*$"
)


def normalize_hex(value: Union[str, int]) -> str:
    """Normalize a color to uppercase ``#RRGGBB``.

    Accepts ``#RRGGBB``, ``RRGGBB``, ``#RGB`` shorthand, ``#RRGGBBAA`` (alpha
    is dropped) or a 24-bit integer ``0xRRGGBB``.

    Returns ``#000000`` as fallback for unparseable input.
    """
    if isinstance(value, bool):
        return BLACK_HEX
    if isinstance(value, int):
        if 0 <= value <= 0xFFFFFF:
            return f"#{value:06X}"
        return BLACK_HEX
    if not isinstance(value, str):
        return BLACK_HEX

    s = value.strip()
    m = _HEX6_RE.match(s)
    if m:
        return f"#{m.group(1).upper()}"
    m = _HEX3_RE.match(s)
    if m:
        return "#" + "".join(ch * 2 for ch in m.groups()).upper()
    return BLACK_HEX


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


# =============================================================================
# Easing Curve Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Point:
    """A control point of the easing curve."""
    x: float
    y: float

    def __post_init__(self) -> None:
        """Reject NaN/inf coordinates."""
        _require_finite("Point.x", self.x)
        _require_finite("Point.y", self.y)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> Point:
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))


# Epsilon for treating a curve as the identity mapping
LINEAR_EPSILON = 1e-9

# CSS timing-function keywords as (x1, y1, x2, y2)
CSS_EASINGS = {
    "linear": (0.0, 0.0, 1.0, 1.0),
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
}


@dataclass(frozen=True, slots=True)
class EasingCurve:
    """
    A planar cubic Bézier easing curve through (0,0) and (1,1).

    The curve maps a spatial coordinate x to a color-progression coordinate y.
    Only the two inner control points are stored; the endpoints are implicit.

    The x-coordinates are NOT required to be monotone. Curves whose X(t) folds
    back are still solvable (see ``warpgradient.warp.bezier.solve``), although
    the resulting progression may look surprising.

    Attributes:
        p1: First control point (typically within [0,1]²)
        p2: Second control point (typically within [0,1]²)
    """
    p1: Point
    p2: Point

    @property
    def is_linear(self) -> bool:
        """True if the curve is (within 1e-9) the identity mapping."""
        deviation = (
            abs(self.p1.x) + abs(self.p1.y)
            + abs(self.p2.x - 1.0) + abs(self.p2.y - 1.0)
        )
        return deviation < LINEAR_EPSILON

    @property
    def values(self) -> tuple[float, float, float, float]:
        """Control point coordinates as (x1, y1, x2, y2)."""
        return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)

    def to_css(self) -> str:
        """Format as a CSS ``cubic-bezier(...)`` timing function."""
        return "cubic-bezier({:.2f}, {:.2f}, {:.2f}, {:.2f})".format(*self.values)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"p1": self.p1.to_dict(), "p2": self.p2.to_dict()}

    @classmethod
    def from_values(cls, x1: float, y1: float, x2: float, y2: float) -> EasingCurve:
        """Build a curve from its four control coordinates."""
        return cls(p1=Point(float(x1), float(y1)), p2=Point(float(x2), float(y2)))

    @classmethod
    def linear(cls) -> EasingCurve:
        """The identity easing curve."""
        return cls.from_values(*CSS_EASINGS["linear"])

    @classmethod
    def named(cls, name: str) -> EasingCurve:
        """
        Build a curve from a CSS timing-function keyword.

        Raises:
            ValueError: If the keyword is unknown
        """
        key = name.strip().lower()
        if key not in CSS_EASINGS:
            raise ValueError(
                f"Unknown easing {name!r}, expected one of {sorted(CSS_EASINGS)}"
            )
        return cls.from_values(*CSS_EASINGS[key])

    @classmethod
    def from_css(cls, text: str) -> EasingCurve:
        """
        Parse a CSS ``cubic-bezier(x1, y1, x2, y2)`` or timing keyword.

        Raises:
            ValueError: If the text is neither
        """
        m = _CUBIC_BEZIER_RE.match(text)
        if m:
            return cls.from_values(*(float(g) for g in m.groups()))
        return cls.named(text)

    @classmethod
    def from_dict(cls, data: dict) -> EasingCurve:
        """Deserialize from dictionary."""
        return cls(p1=Point.from_dict(data["p1"]), p2=Point.from_dict(data["p2"]))


# Default curve for new gradients (ease-in-out)
DEFAULT_CURVE = EasingCurve.named("ease-in-out")


# =============================================================================
# Color Types
# =============================================================================


class InterpolationMode(Enum):
    """Color space in which key-stop interpolation is performed."""
    RGB = "rgb"      # componentwise blend of gamma-encoded sRGB
    OKLAB = "oklab"  # Euclidean blend in OKLab
    OKLCH = "oklch"  # cylindrical blend, shortest hue arc

    @classmethod
    def parse(cls, value: Union[InterpolationMode, str]) -> InterpolationMode:
        """
        Accept an enum member or a case-insensitive mode name.

        Raises:
            ValueError: If the name is not a known mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown interpolation mode {value!r}, "
                f"expected one of {[m.value for m in cls]}"
            ) from None


@dataclass(frozen=True, slots=True)
class ColorStop:
    """
    A (position, color) pair.

    Used both for user key stops and for generated warped stops.

    Attributes:
        color: sRGB color, normalized on construction to ``#RRGGBB``.
            Malformed input silently becomes ``#000000``.
        position: Position along the gradient axis. Key stops may lie
            outside [0,1]; they are not clamped.
        id: Opaque identifier used only for external correlation
    """
    color: str
    position: float
    id: str = ""

    def __post_init__(self) -> None:
        """Normalize the color and reject non-finite positions."""
        object.__setattr__(self, "color", normalize_hex(self.color))
        _require_finite("ColorStop.position", self.position)

    @property
    def rgb24(self) -> int:
        """The color as an opaque 24-bit ``0xRRGGBB`` value."""
        return int(self.color[1:], 16)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {"position": self.position, "color": self.color}
        if self.id:
            d["id"] = self.id
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorStop:
        """Deserialize from dictionary."""
        return cls(
            color=data.get("color", BLACK_HEX),
            position=float(data["position"]),
            id=str(data.get("id", "")),
        )


# =============================================================================
# Request / Result Containers
# =============================================================================

MIN_SAMPLES = 2
DEFAULT_SAMPLES = 16


def clamp_samples(samples: int) -> int:
    """Clamp a requested sample count to the supported minimum."""
    return max(MIN_SAMPLES, int(samples))


@dataclass(frozen=True, slots=True)
class WarpRequest:
    """
    Configuration object for a single warp.

    Attributes:
        key_stops: User key stops, in any order
        curve: Easing curve shaping the color progression
        mode: Interpolation color space
        samples: Desired number of warped stops (clamped to >= 2)
    """
    key_stops: tuple[ColorStop, ...]
    curve: EasingCurve = DEFAULT_CURVE
    mode: InterpolationMode = InterpolationMode.OKLCH
    samples: int = DEFAULT_SAMPLES

    def __post_init__(self) -> None:
        """Coerce loose inputs (lists, mode strings, small counts)."""
        object.__setattr__(self, "key_stops", tuple(self.key_stops))
        object.__setattr__(self, "mode", InterpolationMode.parse(self.mode))
        object.__setattr__(self, "samples", clamp_samples(self.samples))

    def to_dict(self) -> dict:
        """Serialize to dictionary (camelCase keys, as the UI sends them)."""
        return {
            "keyStops": [s.to_dict() for s in self.key_stops],
            "curve": self.curve.to_dict(),
            "mode": self.mode.value,
            "samples": self.samples,
        }

    @classmethod
    def from_dict(cls, data: dict) -> WarpRequest:
        """
        Deserialize from dictionary.

        Accepts ``keyStops`` or ``key_stops``; ``curve``, ``mode`` and
        ``samples`` fall back to the defaults when absent.
        """
        raw_stops = data.get("keyStops", data.get("key_stops", ()))
        curve = data.get("curve")
        return cls(
            key_stops=tuple(ColorStop.from_dict(s) for s in raw_stops),
            curve=EasingCurve.from_dict(curve) if curve else DEFAULT_CURVE,
            mode=data.get("mode", InterpolationMode.OKLCH),
            samples=data.get("samples", DEFAULT_SAMPLES),
        )


@dataclass(frozen=True, slots=True)
class WarpedGradient:
    """
    The expanded stop list produced by the warping pipeline.

    Rendering ``stops`` as an ordinary piecewise-linear gradient approximates
    the eased, perceptually interpolated gradient.

    Invariants (guaranteed by the assembler, not re-checked here):
        - positions are non-decreasing
        - first position is 0.0, last position is 1.0
        - samples <= len(stops) <= samples + 1

    Coincident positions are kept as-is; callers that need strictly unique
    positions must post-process.

    Attributes:
        stops: Warped stops in position order
        mode: Interpolation mode used to produce the colors
        curve: Easing curve used to produce the positions
        samples: Requested (clamped) sample count
    """
    stops: tuple[ColorStop, ...]
    mode: InterpolationMode
    curve: EasingCurve
    samples: int
    version: str = field(default=SCHEMA_VERSION)

    def __len__(self) -> int:
        return len(self.stops)

    @property
    def positions(self) -> tuple[float, ...]:
        return tuple(s.position for s in self.stops)

    @property
    def colors(self) -> tuple[str, ...]:
        return tuple(s.color for s in self.stops)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": self.version,
            "mode": self.mode.value,
            "samples": self.samples,
            "curve": self.curve.to_dict(),
            "stops": [s.to_dict() for s in self.stops],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> WarpedGradient:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            stops=tuple(ColorStop.from_dict(s) for s in data["stops"]),
            mode=InterpolationMode.parse(data["mode"]),
            curve=EasingCurve.from_dict(data["curve"]),
            samples=int(data["samples"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> WarpedGradient:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
