"""Direct pixel manipulation: row edits, line drawing, cropping, shifting, masking."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

WHITE = (255, 255, 255)
GREY = (230, 230, 230)


def _as_colour_image(image) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("image must be a three-channel array")
    return array


def black_out_rows(image) -> np.ndarray:
    """Return a copy of a colour image with every even-numbered row set to black."""
    result = _as_colour_image(image).copy()
    result[::2] = 0
    return result


def change_blue(image) -> np.ndarray:
    """Return a copy of a BGR image with the blue channel of even rows set to 255."""
    result = _as_colour_image(image).copy()
    result[::2, :, 0] = 255
    return result


def draw_lines(height: int = 480, width: int = 720) -> np.ndarray:
    """Draw white horizontal, vertical and 45-degree lines on a black BGR canvas.

    The horizontal line runs along row 200 from column 100 to 620, the vertical
    line along column 300 from row 80 to 400, and the diagonal from (100, 100)
    to (300, 300). Parts that fall outside the canvas are left out.
    """
    if height < 0 or width < 0:
        raise ValueError("height and width must not be negative")
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    if height > 200:
        canvas[200, 100:621] = WHITE
    if width > 300:
        canvas[80:401, 300] = WHITE
    for index in range(100, min(301, height, width)):
        canvas[index, index] = WHITE
    return canvas


def crop(image, rows: int, cols: int) -> np.ndarray:
    """Return a copy of the top-left rows x cols region of an image."""
    array = np.asarray(image)
    if array.ndim < 2:
        raise ValueError("image must have at least two dimensions")
    if not (0 <= rows <= array.shape[0] and 0 <= cols <= array.shape[1]):
        raise ValueError("crop region lies outside the image")
    return array[:rows, :cols].copy()


def _spans(size: int, shift: int) -> tuple[slice, slice]:
    dest = slice(min(size, max(-shift, 0)), max(0, min(size, size - shift)))
    src = slice(min(size, max(shift, 0)), max(0, min(size, size + shift)))
    return dest, src


def translate(image, tx: float, ty: float) -> np.ndarray:
    """Shift an image so that output pixel (r, c) is input pixel (r + ty, c + tx).

    Shifts are truncated to whole pixels; positive shifts move the content up
    and to the left. Pixels with no source are black.
    """
    array = np.asarray(image)
    if array.ndim < 2:
        raise ValueError("image must have at least two dimensions")
    row_shift, col_shift = int(ty), int(tx)
    rows, cols = array.shape[:2]
    dest_rows, src_rows = _spans(rows, row_shift)
    dest_cols, src_cols = _spans(cols, col_shift)
    result = np.zeros_like(array)
    result[dest_rows, dest_cols] = array[src_rows, src_cols]
    return result


def mask_colours(
    image, colours: Iterable[Sequence[int]] = (GREY, WHITE)
) -> np.ndarray:
    """Return a copy of a colour image with pixels of the given colours set to black."""
    array = _as_colour_image(image)
    result = array.copy()
    for colour in colours:
        target = np.asarray(colour, dtype=array.dtype)
        if target.shape != (3,):
            raise ValueError("each colour must have three channels")
        result[np.all(array == target, axis=-1)] = 0
    return result