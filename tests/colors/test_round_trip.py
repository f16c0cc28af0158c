from hueshift.colors import rgb, hsl, hsv
from tests.samples import rgb_grid, hue_grid, unit_grid, inner_unit_grid


def test_rgb_round_trip_through_hsl_and_hsv():
    for components in rgb_grid:
        color = rgb(*components)
        for space in ("hsl", "hsv"):
            back = color.convert(space).convert("rgb")
            assert all(abs(a - b) <= 1 for a, b in zip(back, color))


def test_hsl_hsv_round_trip():
    for h in hue_grid:
        for s in unit_grid:
            for x in inner_unit_grid:
                color = hsl(h, s, x)
                back = color.convert("hsv").convert("hsl")
                assert all(abs(a - b) < 1e-6 for a, b in zip(back, color))

                color = hsv(h, s, x)
                back = color.convert("hsl").convert("hsv")
                assert all(abs(a - b) < 1e-6 for a, b in zip(back, color))


def test_zero_saturation_is_gray():
    for h in hue_grid:
        for x in unit_grid:
            r, g, b = hsl(h, 0, x).convert("rgb")
            assert r == g == b
            r, g, b = hsv(h, 0, x).convert("rgb")
            assert r == g == b


def test_hsl_saturation_vanishes_at_black_and_white():
    assert rgb(0, 0, 0).convert("hsl").s == 0
    assert rgb(255, 255, 255).convert("hsl").s == 0
    assert hsv(200, 0.7, 0).convert("hsl").s == 0
    assert hsv(200, 0, 1).convert("hsl").s == 0
