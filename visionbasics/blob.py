"""Median colour sampling and colour-range bounds for blob tracking."""

from __future__ import annotations

from typing import Iterable

import numpy as np

_HUE_MARGIN = 5
_CHANNEL_MARGIN = 50
_CHANNEL_MAX = 255


def median(values: Iterable[float]) -> float:
    """Return the median of the values, or 0.0 when there are none.

    With an even count the two middle values are averaged.
    """
    ordered = sorted(float(v) for v in values)
    size = len(ordered)
    if size == 0:
        return 0.0
    middle = size // 2
    if size % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return ordered[middle]


def median_pixel_values(image) -> tuple[float, float, float]:
    """Return the median of each of the three channels of an image."""
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("image must be a three-channel array")
    channels = array.reshape(-1, 3).T
    first, second, third = (median(channel.tolist()) for channel in channels)
    return first, second, third


def hsv_bounds(
    hue: float, saturation: float, value: float
) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """Return the lower and upper HSV bounds around a sampled colour.

    The inputs are truncated to integers. Hue is widened by 5 either way;
    saturation and value by 50, kept within 0..255.
    """
    h, s, v = int(hue), int(saturation), int(value)
    lower = (
        h - _HUE_MARGIN,
        max(0, s - _CHANNEL_MARGIN),
        max(0, v - _CHANNEL_MARGIN),
    )
    upper = (
        h + _HUE_MARGIN,
        min(s + _CHANNEL_MARGIN, _CHANNEL_MAX),
        min(v + _CHANNEL_MARGIN, _CHANNEL_MAX),
    )
    return lower, upper