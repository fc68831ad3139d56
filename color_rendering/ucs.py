import math

from .errors import DegenerateChromaticityError


def uv60(xyz):
    # u = 4X / (X + 15Y + 3Z), v = 6Y / (X + 15Y + 3Z)
    X, Y, Z = xyz
    den = X + 15.0 * Y + 3.0 * Z
    if den == 0.0 or not math.isfinite(den):
        raise DegenerateChromaticityError(f"no chromaticity for XYZ={tuple(xyz)}")
    return 4.0 * X / den, 6.0 * Y / den


def xyz_from_uv60(u, v, Y):
    if v == 0.0 or not (math.isfinite(u) and math.isfinite(v)):
        raise DegenerateChromaticityError(f"cannot rebuild XYZ from (u, v) = ({u}, {v})")
    X = 3.0 * u * Y / (2.0 * v)
    Z = Y * (4.0 - u - 10.0 * v) / (2.0 * v)
    return X, Y, Z


def uvw64(xyz, white):
    # Y on the scale where the white has Y = 100
    u, v = uv60(xyz)
    un, vn = uv60(white)
    W = 25.0 * math.copysign(abs(xyz[1]) ** (1.0 / 3.0), xyz[1]) - 17.0
    return 13.0 * W * (u - un), 13.0 * W * (v - vn), W


def color_difference(a, b):
    return math.sqrt(sum((p - q) ** 2 for p, q in zip(a, b)))


def special_index(delta_e):
    # unbounded below; a badly rendered sample goes strongly negative
    return 100.0 - 4.6 * delta_e
