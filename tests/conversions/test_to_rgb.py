import math

import numpy as np
import pytest

from hueshift.conversions.to_rgb import hsl_to_rgb, hsv_to_rgb, np_hsl_to_rgb, np_hsv_to_rgb
from hueshift.errors import InvalidHue
from tests.samples import samples_hsl_rgb, samples_hsv_rgb, hue_grid, unit_grid


def test_hsl_to_rgb():
    for (h, s, l), expected in samples_hsl_rgb.items():
        assert hsl_to_rgb(h, s, l) == expected


def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array(list(samples_hsl_rgb.values()))
    result = np_hsl_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.issubdtype(result.dtype, np.integer)
    assert np.array_equal(result, expected)


def test_hsl_to_rgb_returns_ints():
    r, g, b = hsl_to_rgb(33, 0.22, 0.44)
    assert all(isinstance(c, int) for c in (r, g, b))


def test_hsl_zero_saturation_is_gray():
    for h in hue_grid:
        for l in unit_grid:
            r, g, b = hsl_to_rgb(h, 0, l)
            assert r == g == b == math.floor(l * 255 + 0.5)


def test_hsl_to_rgb_matches_numpy_on_grid():
    rows = [(h, s, l) for h in hue_grid for s in unit_grid for l in unit_grid]
    hsl = np.array(rows)
    result = np_hsl_to_rgb(hsl[:, 0], hsl[:, 1], hsl[:, 2])
    for row, out in zip(rows, result):
        assert hsl_to_rgb(*row) == tuple(out)


def test_hsv_to_rgb():
    for (h, s, v), expected in samples_hsv_rgb.items():
        assert hsv_to_rgb(h, s, v) == expected


def test_hsv_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_hsv_zero_saturation_is_gray():
    for h in hue_grid:
        for v in unit_grid:
            r, g, b = hsv_to_rgb(h, 0, v)
            assert r == g == b


def test_hsv_to_rgb_matches_numpy_on_grid():
    rows = [(h, s, v) for h in hue_grid for s in unit_grid for v in unit_grid]
    hsv = np.array(rows)
    result = np_hsv_to_rgb(hsv[:, 0], hsv[:, 1], hsv[:, 2])
    for row, out in zip(rows, result):
        assert hsv_to_rgb(*row) == tuple(out)


@pytest.mark.parametrize("hue", [360.0, 400.0, -0.5, -60.0, math.nan, math.inf])
def test_hsv_to_rgb_rejects_hue_outside_sectors(hue):
    with pytest.raises(InvalidHue) as excinfo:
        hsv_to_rgb(hue, 0.5, 0.5)
    assert excinfo.value.hue is hue or math.isnan(excinfo.value.hue)


def test_hsv_to_rgb_numpy_rejects_any_bad_hue():
    with pytest.raises(InvalidHue) as excinfo:
        np_hsv_to_rgb(np.array([10.0, 370.0, 20.0]), 0.5, 0.5)
    assert excinfo.value.hue == 370.0


def test_invalid_hue_is_value_error():
    with pytest.raises(ValueError):
        hsv_to_rgb(360, 1, 1)
