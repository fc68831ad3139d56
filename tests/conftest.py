import numpy as np
import pytest

from color_rendering.light import Illuminant
from color_rendering.spectrum import N_SAMPLES, WAVELENGTHS


@pytest.fixture
def spike():
    """A narrow line at 550 nm, far from any blackbody chromaticity."""
    values = np.zeros(N_SAMPLES)
    values[np.searchsorted(WAVELENGTHS, 550.0)] = 1.0
    return Illuminant(values)
