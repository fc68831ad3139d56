import logging
import math
from collections import namedtuple

from scipy.optimize import minimize_scalar

from .color import CIE1931
from .config import DEFAULT_PARAMETERS
from .errors import CCTEstimationError, DegenerateChromaticityError
from .light import planck
from .spectrum import WAVELENGTHS
from .ucs import uv60

log = logging.getLogger(__name__)

CCT = namedtuple("CCT", ["t", "duv"])


def planckian_uv(temperature, observer=CIE1931):
    return uv60(observer.xyz(planck(WAVELENGTHS, temperature)))


def estimate_cct(xyz, parameters=None, observer=CIE1931):
    """Correlated color temperature of a tristimulus value.

    The locus is searched in reciprocal megakelvin, where chromaticity varies
    smoothly with temperature. Raises CCTEstimationError when the chromaticity
    lies too far from the Planckian locus or outside the search range.
    """
    parameters = parameters or DEFAULT_PARAMETERS
    try:
        u, v = uv60(xyz)
    except DegenerateChromaticityError as e:
        raise CCTEstimationError(f"no chromaticity to estimate a CCT from: {e}") from e

    def distance(mired):
        ut, vt = planckian_uv(1e6 / mired, observer)
        return math.hypot(u - ut, v - vt)

    lo, hi = 1e6 / parameters.cct_max, 1e6 / parameters.cct_min
    result = minimize_scalar(distance, bounds=(lo, hi), method="bounded", options={"xatol": 1e-7})
    if not result.success:
        raise CCTEstimationError(f"CCT search did not converge: {result.message}")

    mired = float(result.x)
    t = 1e6 / mired
    # an optimum pinned to the boundary means the true minimum lies outside the range
    if min(mired - lo, hi - mired) < 1e-3:
        raise CCTEstimationError(
            f"CCT outside the {parameters.cct_min:.0f}-{parameters.cct_max:.0f} K search range"
        )

    ut, vt = planckian_uv(t, observer)
    duv = math.copysign(float(result.fun), v - vt)
    if abs(duv) > parameters.max_duv:
        raise CCTEstimationError(
            f"chromaticity ({u:.4f}, {v:.4f}) is {abs(duv):.4f} from the Planckian locus, limit {parameters.max_duv}"
        )

    log.debug("estimated CCT %.1f K, Duv %.5f", t, duv)
    return CCT(t, duv)
