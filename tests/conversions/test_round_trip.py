import numpy as np

from hueshift.conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
)
from tests.samples import rgb_grid, hue_grid, unit_grid, inner_unit_grid

rgb_tolerance = 1
cross_tolerance = 1e-6


def test_round_trip_rgb_hsl():
    for r, g, b in rgb_grid:
        r_out, g_out, b_out = hsl_to_rgb(*rgb_to_hsl(r, g, b))

        assert abs(r - r_out) <= rgb_tolerance
        assert abs(g - g_out) <= rgb_tolerance
        assert abs(b - b_out) <= rgb_tolerance


def test_round_trip_rgb_hsv():
    for r, g, b in rgb_grid:
        r_out, g_out, b_out = hsv_to_rgb(*rgb_to_hsv(r, g, b))

        assert abs(r - r_out) <= rgb_tolerance
        assert abs(g - g_out) <= rgb_tolerance
        assert abs(b - b_out) <= rgb_tolerance


def test_round_trip_rgb_numpy():
    grid = np.array(rgb_grid)
    hsl = np_rgb_to_hsl(grid[:, 0], grid[:, 1], grid[:, 2])
    hsv = np_rgb_to_hsv(grid[:, 0], grid[:, 1], grid[:, 2])

    from_hsl = np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    from_hsv = np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])

    assert np.all(np.abs(from_hsl - grid) <= rgb_tolerance)
    assert np.all(np.abs(from_hsv - grid) <= rgb_tolerance)


def test_round_trip_hsl_hsv():
    for h in hue_grid:
        for s in unit_grid:
            for l in inner_unit_grid:
                h_final, s_final, l_final = hsv_to_hsl(*hsl_to_hsv(h, s, l))

                assert h_final == h
                assert abs(s - s_final) < cross_tolerance
                assert abs(l - l_final) < cross_tolerance


def test_round_trip_hsv_hsl():
    for h in hue_grid:
        for s in unit_grid:
            for v in inner_unit_grid:
                h_final, s_final, v_final = hsl_to_hsv(*hsv_to_hsl(h, s, v))

                assert h_final == h
                assert abs(s - s_final) < cross_tolerance
                assert abs(v - v_final) < cross_tolerance


def test_round_trip_hsl_hsv_numpy():
    rows = np.array([(h, s, l) for h in hue_grid for s in unit_grid for l in inner_unit_grid])
    hsv = np_hsl_to_hsv(rows[:, 0], rows[:, 1], rows[:, 2])
    back = np_hsv_to_hsl(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    assert np.allclose(back, rows, atol=cross_tolerance)
