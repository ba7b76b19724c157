import math

import numpy as np
import pytest

from pixeltext.quantizer import brightness, quantize


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((0, 0, 0), 0),
        ((255, 255, 255), 255),
        ((1, 0, 0), 0),
        ((1, 1, 0), 1),
        ((10, 20, 31), 20),
        ((255, 0, 0), 85),
        ((0, 255, 255), 170),
    ],
)
def test_brightness_is_rounded_mean(rgb, expected):
    assert int(brightness(rgb)) == expected


def test_brightness_ignores_alpha_channel():
    assert int(brightness((30, 60, 90, 0))) == 60


def test_brightness_in_range_and_monotonic():
    values = np.arange(0, 256, 5)
    r, g, b = np.meshgrid(values, values, values, indexing="ij")
    result = brightness(np.stack([r, g, b], axis=-1))
    assert result.min() >= 0
    assert result.max() <= 255
    # Non-decreasing along each channel with the others fixed
    for axis in range(3):
        assert (np.diff(result, axis=axis) >= 0).all()


def test_brightness_on_grid_shape():
    grid = np.zeros((3, 4, 3), dtype=np.uint8)
    assert brightness(grid).shape == (3, 4)


def test_quantize_matches_floor_formula():
    for levels in (2, 3, 4, 5, 10, 70):
        for value in range(256):
            expected = math.floor(value / 255 * (levels - 1))
            assert int(quantize(value, levels)) == expected


def test_quantize_index_in_range():
    values = np.arange(256)
    for levels in range(2, 71):
        for invert in (False, True):
            index = quantize(values, levels, invert)
            assert index.min() >= 0
            assert index.max() <= levels - 1


def test_quantize_invert_mirrors_index():
    values = np.arange(256)
    for levels in (2, 3, 5, 10):
        plain = quantize(values, levels)
        inverted = quantize(values, levels, invert=True)
        np.testing.assert_array_equal(inverted, levels - 1 - plain)


def test_five_levels_extremes():
    assert int(quantize(0, 5)) == 0
    assert int(quantize(255, 5)) == 4
    assert int(quantize(255, 5, invert=True)) == 0


def test_single_level_ramp_always_zero():
    assert int(quantize(200, 1)) == 0
    assert int(quantize(200, 1, invert=True)) == 0


def test_quantize_rejects_empty_ramp():
    with pytest.raises(ValueError, match="at least one entry"):
        quantize(10, 0)


def test_quantize_is_deterministic():
    assert int(quantize(137, 10, True)) == int(quantize(137, 10, True))
