import colour
import numpy as np

from .spectrum import WAVELENGTHS, WL_STEP

# maximum luminous efficacy of radiation for photopic vision, in lm/W
K_M = 683.0


def interp_multicol(x, xp, fp):
    results = []
    for i in range(fp.shape[1]):
        results.append(np.interp(x, xp, fp[:, i], left=0.0, right=0.0))
    return np.column_stack(results)


class Observer:
    """A colorimetric standard observer, defined by its colour matching functions
    resampled onto the working grid.
    """

    def __init__(self, name, cmf):
        cmf = np.array(cmf, dtype=float)
        if cmf.shape != (WAVELENGTHS.shape[0], 3):
            raise ValueError("colour matching functions must have shape (N_SAMPLES, 3)")
        cmf.flags.writeable = False
        self.name = name
        self.cmf = cmf

    @classmethod
    def from_colour(cls, name):
        cmfs = colour.MSDS_CMFS[name]
        return cls(name, interp_multicol(WAVELENGTHS, cmfs.wavelengths, cmfs.values))

    def xyz(self, illuminant, sample=None):
        """Tristimulus values of an illuminant, or of a reflective sample lit by it."""
        stimulus = np.asarray(illuminant, dtype=float)
        if sample is not None:
            stimulus = stimulus * np.asarray(sample, dtype=float)

        # integrate the colour matching functions over the stimulus
        X, Y, Z = K_M * WL_STEP * (stimulus @ self.cmf)
        return float(X), float(Y), float(Z)

    def luminance(self, spectrum):
        return float(K_M * WL_STEP * (np.asarray(spectrum, dtype=float) @ self.cmf[:, 1]))

    def __repr__(self):
        return f"Observer({self.name!r})"


CIE1931 = Observer.from_colour("CIE 1931 2 Degree Standard Observer")
