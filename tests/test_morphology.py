import numpy as np
import pytest

from visionbasics.morphology import (
    closing,
    difference,
    dilation,
    erosion,
    gradient,
    kernel_sum,
    opening,
)


def _binary_image(shape, seed=0):
    rng = np.random.default_rng(seed)
    return np.where(rng.random(shape) > 0.5, 255, 0).astype(np.uint8)


def test_kernel_sum_of_full_window():
    image = np.full((5, 5), 255, dtype=np.uint8)
    assert kernel_sum(image, 2, 2, 3) == 255 * (3 * 3)


def test_kernel_sum_leaves_out_positions_outside_image():
    image = np.full((5, 5), 255, dtype=np.uint8)
    assert kernel_sum(image, 0, 0, 3) == 255 * 4
    assert kernel_sum(image, 0, 0, 3) < kernel_sum(image, 2, 2, 3)


@pytest.mark.parametrize("size", [1, 2, 4, 0, -3])
def test_bad_kernel_sizes_are_rejected(size):
    image = np.zeros((3, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        kernel_sum(image, 1, 1, size)
    with pytest.raises(ValueError):
        erosion(image, size)
    with pytest.raises(ValueError):
        dilation(image, size)


def test_erosion_of_full_image_clears_border():
    image = np.full((5, 5), 255, dtype=np.uint8)
    result = erosion(image, 3)
    assert (result[1:-1, 1:-1] == 255).all()
    assert not result[0].any()
    assert not result[-1].any()
    assert not result[:, 0].any()
    assert not result[:, -1].any()


def test_dilation_of_single_pixel_fills_its_window():
    image = np.zeros((7, 7), dtype=np.uint8)
    image[3, 3] = 255
    result = dilation(image, 3)
    assert (result[2:5, 2:5] == 255).all()
    assert result.sum() == 255 * 9


def test_dilation_counts_any_nonzero_value():
    image = np.zeros((5, 5), dtype=np.uint8)
    image[2, 2] = 1
    result = dilation(image, 5)
    assert (result == 255).all()


def test_outputs_are_binary_and_ordered():
    image = _binary_image((9, 11))
    eroded = erosion(image, 3)
    dilated = dilation(image, 3)
    assert set(np.unique(eroded)) <= {0, 255}
    assert set(np.unique(dilated)) <= {0, 255}
    assert (eroded <= image).all()
    assert (image <= dilated).all()


def test_opening_removes_isolated_pixel():
    image = np.zeros((7, 7), dtype=np.uint8)
    image[3, 3] = 255
    assert not opening(image, 3).any()


def test_closing_fills_small_hole():
    image = np.full((9, 9), 255, dtype=np.uint8)
    image[4, 4] = 0
    result = closing(image, 3)
    assert result[4, 4] == 255
    np.testing.assert_array_equal(result, erosion(dilation(image, 3), 3))


def test_opening_and_closing_compose_primitives():
    image = _binary_image((8, 8), seed=4)
    np.testing.assert_array_equal(opening(image, 3), dilation(erosion(image, 3), 3))
    np.testing.assert_array_equal(closing(image, 3), erosion(dilation(image, 3), 3))


def test_gradient_is_dilation_minus_erosion():
    image = _binary_image((10, 10), seed=5)
    expected = dilation(image, 3).astype(int) - erosion(image, 3).astype(int)
    np.testing.assert_array_equal(gradient(image, 3), expected)


def test_difference_is_symmetric_absolute():
    first = np.array([[10, 200], [0, 255]], dtype=np.uint8)
    second = np.array([[20, 100], [255, 0]], dtype=np.uint8)
    result = difference(first, second)
    np.testing.assert_array_equal(result, difference(second, first))
    np.testing.assert_array_equal(result, [[10, 100], [255, 255]])


def test_difference_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        difference(np.zeros((2, 3), dtype=np.uint8), np.zeros((3, 2), dtype=np.uint8))


def test_colour_image_is_rejected():
    with pytest.raises(ValueError):
        erosion(np.zeros((3, 3, 3), dtype=np.uint8), 3)