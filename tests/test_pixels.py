import numpy as np
import pytest

from visionbasics.pixels import (
    black_out_rows,
    change_blue,
    crop,
    draw_lines,
    mask_colours,
    translate,
)


@pytest.fixture
def colour_image():
    rng = np.random.default_rng(1)
    return rng.integers(1, 200, size=(5, 4, 3), dtype=np.uint8)


def test_black_out_rows_zeroes_even_rows(colour_image):
    result = black_out_rows(colour_image)
    assert np.all(result[::2] == 0)
    assert np.array_equal(result[1::2], colour_image[1::2])


def test_black_out_rows_leaves_input_alone(colour_image):
    original = colour_image.copy()
    black_out_rows(colour_image)
    assert np.array_equal(colour_image, original)


def test_black_out_rows_rejects_grayscale():
    with pytest.raises(ValueError):
        black_out_rows(np.zeros((3, 3), dtype=np.uint8))


def test_change_blue_sets_channel_zero_on_even_rows(colour_image):
    result = change_blue(colour_image)
    assert np.all(result[::2, :, 0] == 255)
    assert np.array_equal(result[:, :, 1:], colour_image[:, :, 1:])
    assert np.array_equal(result[1::2], colour_image[1::2])


def test_draw_lines_default_canvas():
    canvas = draw_lines()
    assert canvas.shape == (480, 720, 3)
    assert tuple(canvas[200, 100]) == (255, 255, 255)
    assert tuple(canvas[200, 620]) == (255, 255, 255)
    assert tuple(canvas[200, 621]) == (0, 0, 0)
    assert tuple(canvas[80, 300]) == (255, 255, 255)
    assert tuple(canvas[400, 300]) == (255, 255, 255)
    assert tuple(canvas[401, 300]) == (0, 0, 0)
    assert tuple(canvas[150, 150]) == (255, 255, 255)
    assert tuple(canvas[150, 151]) == (0, 0, 0)


def test_draw_lines_small_canvas_is_black():
    canvas = draw_lines(50, 50)
    assert canvas.shape == (50, 50, 3)
    assert not canvas.any()


def test_draw_lines_rejects_negative_size():
    with pytest.raises(ValueError):
        draw_lines(-1, 10)


def test_crop_takes_top_left(colour_image):
    result = crop(colour_image, 2, 3)
    assert result.shape == (2, 3, 3)
    assert np.array_equal(result, colour_image[:2, :3])


def test_crop_outside_image_raises(colour_image):
    with pytest.raises(ValueError):
        crop(colour_image, 6, 2)


def test_translate_zero_is_identity(colour_image):
    assert np.array_equal(translate(colour_image, 0, 0), colour_image)


def test_translate_positive_moves_content_up_left():
    image = np.arange(1, 21, dtype=np.uint8).reshape(4, 5)
    result = translate(image, 2, 1)
    assert np.array_equal(result[:3, :3], image[1:, 2:])
    assert not result[3:].any()
    assert not result[:, 3:].any()


def test_translate_negative_moves_content_down_right():
    image = np.arange(1, 21, dtype=np.uint8).reshape(4, 5)
    result = translate(image, -1, -2)
    assert np.array_equal(result[2:, 1:], image[:2, :4])
    assert not result[:2].any()
    assert not result[:, :1].any()


def test_translate_beyond_image_is_black(colour_image):
    assert not translate(colour_image, 10, 10).any()


def test_translate_truncates_fractional_shift(colour_image):
    assert np.array_equal(translate(colour_image, 1.7, 2.2), translate(colour_image, 1, 2))


def test_mask_colours_default_removes_grey_and_white():
    image = np.zeros((1, 3, 3), dtype=np.uint8)
    image[0, 0] = (230, 230, 230)
    image[0, 1] = (255, 255, 255)
    image[0, 2] = (10, 20, 30)
    result = mask_colours(image)
    assert not result[0, :2].any()
    assert np.array_equal(result[0, 2], image[0, 2])


def test_mask_colours_custom_list(colour_image):
    target = tuple(int(v) for v in colour_image[0, 0])
    result = mask_colours(colour_image, [target])
    hits = np.all(colour_image == np.array(target, dtype=np.uint8), axis=-1)
    assert not result[hits].any()
    assert np.array_equal(result[~hits], colour_image[~hits])


def test_mask_colours_rejects_bad_colour(colour_image):
    with pytest.raises(ValueError):
        mask_colours(colour_image, [(1, 2)])