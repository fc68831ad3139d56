import pytest

from color_rendering.errors import DegenerateChromaticityError
from color_rendering.ucs import (
    color_difference,
    special_index,
    uv60,
    uvw64,
    xyz_from_uv60,
)


def test_uv60_of_equal_energy_white():
    u, v = uv60((1.0, 1.0, 1.0))
    assert u == pytest.approx(4 / 19)
    assert v == pytest.approx(6 / 19)


def test_uv60_of_black_is_degenerate():
    with pytest.raises(DegenerateChromaticityError):
        uv60((0.0, 0.0, 0.0))


def test_xyz_from_uv60_keeps_luminance_and_chromaticity():
    X, Y, Z = xyz_from_uv60(0.22, 0.33, 42.0)
    assert Y == 42.0
    assert uv60((X, Y, Z)) == pytest.approx((0.22, 0.33))


def test_xyz_from_uv60_rejects_zero_v():
    with pytest.raises(DegenerateChromaticityError):
        xyz_from_uv60(0.2, 0.0, 10.0)


def test_uvw64_of_white_relative_to_itself():
    white = (95.047, 100.0, 108.883)
    U, V, W = uvw64(white, white)
    assert U == pytest.approx(0.0)
    assert V == pytest.approx(0.0)
    assert W == pytest.approx(25 * 100 ** (1 / 3) - 17)


def test_uvw64_scales_with_lightness():
    white = (100.0, 100.0, 100.0)
    sample = (20.0, 18.0, 30.0)
    U, V, W = uvw64(sample, white)
    u, v = uv60(sample)
    un, vn = uv60(white)
    assert W == pytest.approx(25 * 18 ** (1 / 3) - 17)
    assert U == pytest.approx(13 * W * (u - un))
    assert V == pytest.approx(13 * W * (v - vn))


def test_special_index():
    assert special_index(0.0) == 100.0
    assert special_index(10.0) == pytest.approx(54.0)
    # no clamping below zero
    assert special_index(50.0) == pytest.approx(-130.0)


def test_color_difference():
    assert color_difference((0, 0, 0), (1, 2, 2)) == pytest.approx(3.0)
