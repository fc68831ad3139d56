import math

import pytest

from color_rendering.adaptation import adaptation_coefficients, von_kries
from color_rendering.errors import DegenerateChromaticityError, ErrorKind


def test_adaptation_coefficients():
    c, d = adaptation_coefficients((0.2, 0.3))
    assert c == pytest.approx((4 - 0.2 - 3.0) / 0.3)
    assert d == pytest.approx((1.708 * 0.3 - 1.481 * 0.2 + 0.404) / 0.3)


def test_von_kries_is_identity_for_matching_whites():
    # with identical test and reference whites the sample chromaticity is unchanged
    white = adaptation_coefficients((0.2238, 0.3206))
    for uv in [(0.25, 0.33), (0.18, 0.29), (0.31, 0.35)]:
        u, v = von_kries(white, white, adaptation_coefficients(uv))
        assert u == pytest.approx(uv[0], abs=1e-12)
        assert v == pytest.approx(uv[1], abs=1e-12)


def test_von_kries_maps_test_white_to_reference_white():
    cdt = adaptation_coefficients((0.2560, 0.3490))
    cdr = adaptation_coefficients((0.2530, 0.3470))
    u, v = von_kries(cdt, cdr, cdt)
    assert u == pytest.approx(0.2530, abs=1e-12)
    assert v == pytest.approx(0.3470, abs=1e-12)


def test_zero_v_is_degenerate():
    with pytest.raises(DegenerateChromaticityError) as excinfo:
        adaptation_coefficients((0.2, 0.0))
    assert excinfo.value.kind is ErrorKind.DEGENERATE_CHROMATICITY


def test_zero_test_white_coefficient_is_degenerate():
    with pytest.raises(DegenerateChromaticityError):
        von_kries((0.0, 1.0), (1.0, 1.0), (1.0, 1.0))
    with pytest.raises(DegenerateChromaticityError):
        von_kries((1.0, 0.0), (1.0, 1.0), (1.0, 1.0))


def test_non_finite_input_is_degenerate():
    with pytest.raises(DegenerateChromaticityError):
        adaptation_coefficients((math.nan, 0.3))
    with pytest.raises(DegenerateChromaticityError):
        von_kries((1.0, 1.0), (math.inf, 1.0), (1.0, 1.0))
