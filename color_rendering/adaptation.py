"""von Kries chromatic adaptation, as prescribed by CIE 13.3-1995.

The transform maps the chromaticity a sample has under the test illuminant
onto the chromaticity it would have under the reference illuminant, so that
later colour differences measure rendering rather than white point shift.
"""
import math

from .errors import DegenerateChromaticityError


def _check_finite(*values):
    if not all(math.isfinite(x) for x in values):
        raise DegenerateChromaticityError(f"non-finite chromaticity term in {values}")


def adaptation_coefficients(uv):
    # c = (4 - u - 10v) / v, d = (1.708v - 1.481u + 0.404) / v
    u, v = uv
    _check_finite(u, v)
    if v == 0.0:
        raise DegenerateChromaticityError(f"chromaticity (u, v) = ({u}, {v}) has v = 0")
    return (4.0 - u - 10.0 * v) / v, (1.708 * v - 1.481 * u + 0.404) / v


def von_kries(cdt, cdr, cdti):
    # (c, d) of the test white, the reference white and the sample under the test white
    ct, dt = cdt
    cr, dr = cdr
    cti, dti = cdti
    _check_finite(ct, dt, cr, dr, cti, dti)
    if ct == 0.0 or dt == 0.0:
        raise DegenerateChromaticityError(f"test white coefficients (c, d) = ({ct}, {dt}) contain a zero")

    c = cr / ct * cti
    d = dr / dt * dti
    den = 16.518 + 1.481 * c - d
    if den == 0.0:
        raise DegenerateChromaticityError("von Kries denominator vanishes")
    return (10.872 + 0.404 * c - 4.0 * d) / den, 5.520 / den
