# Copyright (c) 2026 WarpGradient
# SPDX-License-Identifier: MIT

"""
Caller-side memoization of warped gradients.

The warping core is pure and keeps no state. Interactive callers that
re-render on every input event can hold a ``WarpCache`` to skip recomputing
identical requests. Keys are canonicalized, so key-stop order and stop ids
do not affect cache hits.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Hashable, Iterable, Optional, Union

from warpgradient.schema import (
    DEFAULT_CURVE,
    DEFAULT_SAMPLES,
    ColorStop,
    EasingCurve,
    InterpolationMode,
    WarpedGradient,
    clamp_samples,
)
from warpgradient.warp.assemble import warp_gradient
from warpgradient.warp.interpolate import sort_stops

logger = logging.getLogger(__name__)


def request_key(
    key_stops: Iterable[ColorStop],
    curve: EasingCurve,
    mode: InterpolationMode,
    samples: int,
) -> Hashable:
    """Canonical, hashable key for a warp request."""
    stops = tuple((s.position, s.color) for s in sort_stops(key_stops))
    return (stops, curve.values, mode.value, clamp_samples(samples))


class WarpCache:
    """
    Small LRU cache in front of ``warp_gradient``.

    Not thread-safe; give each thread its own cache.

    Example:
        >>> cache = WarpCache(maxsize=8)
        >>> g1 = cache.get(stops, curve, mode="oklch", samples=16)
        >>> g2 = cache.get(stops, curve, mode="oklch", samples=16)
        >>> g1 is g2
        True
    """

    def __init__(self, maxsize: int = 32) -> None:
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[Hashable, WarpedGradient] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(
        self,
        key_stops: Iterable[ColorStop],
        curve: Optional[EasingCurve] = None,
        *,
        mode: Union[InterpolationMode, str] = InterpolationMode.OKLCH,
        samples: int = DEFAULT_SAMPLES,
    ) -> WarpedGradient:
        """Return the cached gradient for this request, computing it on a miss."""
        key_stops = tuple(key_stops)
        curve = curve or DEFAULT_CURVE
        mode = InterpolationMode.parse(mode)
        key = request_key(key_stops, curve, mode, samples)

        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            self._entries.move_to_end(key)
            return cached

        self.misses += 1
        result = warp_gradient(key_stops, curve, mode=mode, samples=samples)
        self._entries[key] = result
        if len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)
            logger.debug("Evicted warp cache entry (size=%d)", self.maxsize)
        return result

    def clear(self) -> None:
        """Drop all cached gradients and reset counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
