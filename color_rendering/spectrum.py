import numpy as np

# the working grid used by every spectrum in the package
WL_START = 380.0
WL_END = 780.0
WL_STEP = 5.0

WAVELENGTHS = np.arange(WL_START, WL_END + WL_STEP / 2, WL_STEP)
N_SAMPLES = WAVELENGTHS.shape[0]


class Spectrum:
    """A function of wavelength sampled on the working grid (380-780 nm, 5 nm).

    The sample array is read-only; arithmetic returns new instances of the
    same class.
    """

    def __init__(self, values):
        values = np.array(values, dtype=float)
        if values.shape != (N_SAMPLES,):
            raise ValueError(
                f"expected {N_SAMPLES} samples on the {WL_START:.0f}-{WL_END:.0f} nm grid, got shape {values.shape}"
            )
        if not np.all(np.isfinite(values)):
            raise ValueError("spectrum values must be finite")
        values.flags.writeable = False
        self._values = values

    @classmethod
    def linear_interpolate(cls, wavelengths, values):
        # a [start, end] pair means evenly spaced values over that range; zero outside the source domain
        values = np.asarray(values, dtype=float)
        wavelengths = np.asarray(wavelengths, dtype=float)
        if wavelengths.shape == (2,) and values.shape[0] != 2:
            wavelengths = np.linspace(wavelengths[0], wavelengths[1], num=values.shape[0])
        if wavelengths.shape != values.shape:
            raise ValueError("wavelengths and values must have the same length")
        if np.any(np.diff(wavelengths) <= 0):
            raise ValueError("wavelengths must be strictly increasing")
        return cls(np.interp(WAVELENGTHS, wavelengths, values, left=0.0, right=0.0))

    @property
    def values(self):
        return self._values

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._values
        return self._values.astype(dtype)

    def __len__(self):
        return N_SAMPLES

    def __reduce__(self):
        return type(self), (self._values,)

    def __mul__(self, other):
        return type(self)(self._values * float(other))

    __rmul__ = __mul__

    def __add__(self, other):
        if not isinstance(other, Spectrum):
            return NotImplemented
        return type(self)(self._values + other.values)

    def __eq__(self, other):
        if not isinstance(other, Spectrum):
            return NotImplemented
        return type(self) is type(other) and np.array_equal(self._values, other.values)

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(peak={self._values.max():.4g} at {WAVELENGTHS[self._values.argmax()]:.0f} nm)"


class Colorant(Spectrum):
    """A spectrum read as a reflectance (or transmittance) factor, nominally in [0, 1]."""
