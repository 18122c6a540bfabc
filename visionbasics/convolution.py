"""Naive 2-D convolution with a replicated one-pixel border."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _as_image(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim not in (2, 3):
        raise ValueError("image must be a 2-D or 3-D array")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError("image must not be empty")
    return array


def _as_kernel(kernel) -> np.ndarray:
    array = np.asarray(kernel, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError("kernel must be a 2-D array")
    if array.size == 0:
        raise ValueError("kernel must not be empty")
    return array


def convolve(image, kernel) -> np.ndarray:
    """Apply a kernel to every channel of an 8-bit image.

    The image is padded by one replicated pixel on each side, and the kernel's
    top-left element is anchored one pixel up and to the left of the output
    pixel, whatever the kernel's size. Kernel positions that fall outside the
    padded image contribute nothing. The kernel is not flipped, and each sum is
    rounded to the nearest integer (halves to even) and clipped to 0..255.
    """
    array = _as_image(image)
    weights = _as_kernel(kernel)
    grayscale = array.ndim == 2
    if grayscale:
        array = array[:, :, np.newaxis]

    rows, cols = array.shape[:2]
    k_rows, k_cols = weights.shape

    padded = np.pad(array.astype(np.float64), ((1, 1), (1, 1), (0, 0)), mode="edge")
    # Zeros beyond the padded border stand for the skipped out-of-range taps.
    padded = np.pad(padded, ((0, k_rows), (0, k_cols), (0, 0)), mode="constant")

    total = np.zeros(array.shape, dtype=np.float64)
    for (k, l), weight in np.ndenumerate(weights):
        total += weight * padded[k:k + rows, l:l + cols]

    result = np.clip(np.rint(total), 0, 255).astype(np.uint8)
    return result[:, :, 0] if grayscale else result


def separable_convolve(
    image, vertical: Sequence[float], horizontal: Sequence[float]
) -> np.ndarray:
    """Convolve with a column kernel and then with a row kernel.

    The intermediate image is saturated to 8 bits, as a stored image would be.
    """
    column = np.asarray(vertical, dtype=np.float64).reshape(-1, 1)
    row = np.asarray(horizontal, dtype=np.float64).reshape(1, -1)
    intermediate = convolve(image, column)
    return convolve(intermediate, row)