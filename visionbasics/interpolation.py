"""Image resizing by bilinear and nearest-neighbour interpolation."""

from __future__ import annotations

import numpy as np


def _prepare(image, width: int, height: int) -> tuple[np.ndarray, bool]:
    array = np.asarray(image)
    if array.ndim not in (2, 3):
        raise ValueError("image must be a 2-D or 3-D array")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError("image must not be empty")
    if width < 2 or height < 2:
        raise ValueError("target width and height must both be at least 2")
    grayscale = array.ndim == 2
    if grayscale:
        array = array[:, :, np.newaxis]
    return array, grayscale


def _ratios(array: np.ndarray, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    rows, cols = array.shape[:2]
    xs = (cols - 1) / (width - 1) * np.arange(width, dtype=np.float64)
    ys = (rows - 1) / (height - 1) * np.arange(height, dtype=np.float64)
    return xs, ys


def _finish(result: np.ndarray, grayscale: bool) -> np.ndarray:
    return result[:, :, 0] if grayscale else result


def bilinear_interpolate(image, width: int, height: int) -> np.ndarray:
    """Resize an image to width x height using bilinear interpolation."""
    array, grayscale = _prepare(image, width, height)
    xs, ys = _ratios(array, width, height)

    x_l = np.floor(xs).astype(np.intp)
    x_h = np.ceil(xs).astype(np.intp)
    y_l = np.floor(ys).astype(np.intp)
    y_h = np.ceil(ys).astype(np.intp)
    x_w = (xs - x_l).astype(np.float32)[np.newaxis, :, np.newaxis]
    y_w = (ys - y_l).astype(np.float32)[:, np.newaxis, np.newaxis]

    source = array.astype(np.float32)
    a = source[np.ix_(y_l, x_l)]
    b = source[np.ix_(y_l, x_h)]
    c = source[np.ix_(y_h, x_l)]
    d = source[np.ix_(y_h, x_h)]

    one = np.float32(1)
    blended = (
        a * (one - x_w) * (one - y_w)
        + b * x_w * (one - y_w)
        + c * (one - x_w) * y_w
        + d * x_w * y_w
    )
    result = np.clip(np.trunc(blended), 0, 255).astype(np.uint8)
    return _finish(result, grayscale)


def nearest_neighbour_interpolate(image, width: int, height: int) -> np.ndarray:
    """Resize an image to width x height using nearest-neighbour interpolation."""
    array, grayscale = _prepare(image, width, height)
    xs, ys = _ratios(array, width, height)
    # Halves round away from zero; every coordinate here is non-negative.
    cols = np.floor(xs + 0.5).astype(np.intp)
    rows = np.floor(ys + 0.5).astype(np.intp)
    result = array[np.ix_(rows, cols)].astype(np.uint8)
    return _finish(result, grayscale)