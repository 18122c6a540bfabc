"""Binary morphology on grayscale images using square kernels of ones."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def _check_kernel_size(kernel_size: int) -> None:
    if kernel_size % 2 != 1 or kernel_size < 3:
        raise ValueError("Kernel size should be odd and greater than or equal to 3")


def _as_gray(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 2:
        raise ValueError("image must be a 2-D grayscale array")
    return array


def _window_sums(image: np.ndarray, kernel_size: int) -> np.ndarray:
    half = (kernel_size - 1) // 2
    padded = np.pad(image.astype(np.int64), half, mode="constant")
    windows = sliding_window_view(padded, (kernel_size, kernel_size))
    return windows.sum(axis=(2, 3))


def kernel_sum(image, row: int, col: int, kernel_size: int) -> int:
    """Sum the pixels in the square window centred on (row, col).

    Positions outside the image are left out of the sum.
    """
    _check_kernel_size(kernel_size)
    array = _as_gray(image)
    half = (kernel_size - 1) // 2
    top, left = max(row - half, 0), max(col - half, 0)
    bottom, right = max(row + half + 1, 0), max(col + half + 1, 0)
    return int(array[top:bottom, left:right].astype(np.int64).sum())


def erosion(image, kernel_size: int) -> np.ndarray:
    """Set a pixel to 255 only where its whole window, inside the image, is 255."""
    _check_kernel_size(kernel_size)
    array = _as_gray(image)
    sums = _window_sums(array, kernel_size)
    full = 255 * kernel_size * kernel_size
    return np.where(sums == full, 255, 0).astype(np.uint8)


def dilation(image, kernel_size: int) -> np.ndarray:
    """Set a pixel to 255 wherever any pixel in its window is non-zero."""
    _check_kernel_size(kernel_size)
    array = _as_gray(image)
    sums = _window_sums(array, kernel_size)
    return np.where(sums > 0, 255, 0).astype(np.uint8)


def difference(first, second) -> np.ndarray:
    """Return the absolute per-pixel difference of two equally sized images."""
    a = _as_gray(first)
    b = _as_gray(second)
    if a.shape != b.shape:
        raise ValueError("Images are of different sizes.")
    diff = np.abs(a.astype(np.int64) - b.astype(np.int64))
    return (diff & 0xFF).astype(np.uint8)


def opening(image, kernel_size: int) -> np.ndarray:
    """Erode and then dilate."""
    return dilation(erosion(image, kernel_size), kernel_size)


def closing(image, kernel_size: int) -> np.ndarray:
    """Dilate and then erode."""
    return erosion(dilation(image, kernel_size), kernel_size)


def gradient(image, kernel_size: int) -> np.ndarray:
    """Difference between the dilation and the erosion of an image."""
    return difference(dilation(image, kernel_size), erosion(image, kernel_size))