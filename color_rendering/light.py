import colour
import numpy as np
from colour.colorimetry import SDS_BASIS_FUNCTIONS_CIE_ILLUMINANT_D_SERIES

from .errors import DegenerateChromaticityError, IlluminantRangeError
from .spectrum import WAVELENGTHS, Spectrum

# radiation constants of Planck's law, as used by CIE 15:2004
C1 = 3.741771852e-16  # W m^2
C2 = 1.4388e-2  # m K

# validity range of the CIE daylight model
DAYLIGHT_MIN = 4000.0
DAYLIGHT_MAX = 25000.0


def planck(wavelengths, temperature):
    """Spectral radiant exitance of a blackbody at `temperature` (K), wavelengths in nm."""
    wlm = wavelengths * 1e-9
    return C1 * wlm**-5 / np.expm1(C2 / (wlm * temperature))


def daylight_xy(temperature):
    if not DAYLIGHT_MIN <= temperature <= DAYLIGHT_MAX:
        raise IlluminantRangeError(
            f"daylight model is defined for {DAYLIGHT_MIN:.0f}-{DAYLIGHT_MAX:.0f} K, got {temperature:.1f} K"
        )
    T = temperature
    if T <= 7000.0:
        x = -4.6070e9 / T**3 + 2.9678e6 / T**2 + 0.09911e3 / T + 0.244063
    else:
        x = -2.0064e9 / T**3 + 1.9018e6 / T**2 + 0.24748e3 / T + 0.237040
    y = -3.000 * x**2 + 2.870 * x - 0.275
    return x, y


def _basis(name):
    sd = SDS_BASIS_FUNCTIONS_CIE_ILLUMINANT_D_SERIES[name]
    return np.interp(WAVELENGTHS, sd.wavelengths, sd.values)


S0, S1, S2 = (_basis(name) for name in ("S0", "S1", "S2"))


class Illuminant(Spectrum):
    """A spectral power distribution of a light source."""

    def __init__(self, values):
        super().__init__(values)
        if np.any(self.values < 0):
            raise ValueError("illuminant spectral power must be non-negative")

    @classmethod
    def planckian(cls, temperature):
        if not temperature > 0:
            raise ValueError(f"blackbody temperature must be positive, got {temperature}")
        return cls(planck(WAVELENGTHS, temperature))

    @classmethod
    def daylight(cls, temperature):
        """CIE D-series illuminant with the given correlated color temperature."""
        x, y = daylight_xy(temperature)
        M = 0.0241 + 0.2562 * x - 0.7341 * y
        # CIE 15:2004 rounds the factors to three decimals
        M1 = round((-1.3515 - 1.7703 * x + 5.9114 * y) / M, 3)
        M2 = round((0.0300 - 31.4424 * x + 30.0717 * y) / M, 3)
        return cls(S0 + M1 * S1 + M2 * S2)

    @classmethod
    def standard(cls, name):
        """A CIE illuminant tabulated by colour-science, e.g. "D65" or "FL3.1"."""
        sd = colour.SDS_ILLUMINANTS[name]
        return cls.linear_interpolate(sd.wavelengths, sd.values)

    @classmethod
    def from_csv(cls, path, delimiter=","):
        data = np.loadtxt(path, delimiter=delimiter, usecols=(0, 1), ndmin=2)
        return cls.linear_interpolate(data[:, 0], data[:, 1])

    def set_illuminance(self, observer, illuminance):
        Y = observer.luminance(self)
        if Y <= 0.0:
            raise DegenerateChromaticityError("illuminant has no luminance to rescale")
        return self * (illuminance / Y)
