"""Colour rendering index of a light source, after CIE 13.3-1995.

For each of the 14 test colour samples the colour under the source, adapted
to the reference white by the von Kries transform, is compared in the
CIE 1964 U*V*W* space with its colour under a reference illuminant of the
same correlated color temperature: Ri = 100 - 4.6 dE.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .adaptation import adaptation_coefficients, von_kries
from .color import CIE1931
from .config import DEFAULT_PARAMETERS, PLANCKIAN_LIMIT
from .errors import ColorimetryError
from .light import Illuminant
from .tcs import N_TCS, get_tcs
from .temperature import CCT, estimate_cct
from .ucs import color_difference, special_index, uv60, uvw64, xyz_from_uv60

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CRI:
    """The special colour rendering indices R1..R14, in test colour sample order.

    `cct` and `reference` record the correlated color temperature and the
    reference branch the indices were computed against; they do not take part
    in equality.
    """

    values: Tuple[float, ...]
    cct: Optional[CCT] = field(default=None, compare=False)
    reference: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        values = tuple(float(v) for v in self.values)
        if len(values) != N_TCS:
            raise ValueError(f"a CRI has exactly {N_TCS} values, got {len(values)}")
        object.__setattr__(self, "values", values)

    def __len__(self):
        return N_TCS

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    def as_array(self):
        return np.array(self.values)


@dataclass(frozen=True)
class Outcome:
    """Either a CRI or the ColorimetryError that prevented computing one."""

    value: Optional[CRI] = None
    error: Optional[ColorimetryError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("an Outcome holds exactly one of value and error")

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value


def reference_branch(cct):
    return "planckian" if cct <= PLANCKIAN_LIMIT else "daylight"


def reference_illuminant(cct, observer=CIE1931, illuminance=100.0):
    # Planckian up to and including 5000 K, CIE daylight above
    if reference_branch(cct) == "planckian":
        log.debug("reference: Planckian radiator at %.1f K", cct)
        reference = Illuminant.planckian(cct)
    else:
        log.debug("reference: CIE daylight at %.1f K", cct)
        reference = Illuminant.daylight(cct)
    return reference.set_illuminance(observer, illuminance)


def rendering_index(cdt, cdr, xyz_sample, xyz_sample_ref, xyz_ref):
    # cdt, cdr: (c, d) of the test and reference whites
    cdti = adaptation_coefficients(uv60(xyz_sample))
    u, v = von_kries(cdt, cdr, cdti)
    xyz_adapted = xyz_from_uv60(u, v, xyz_sample[1])
    delta_e = color_difference(uvw64(xyz_adapted, xyz_ref), uvw64(xyz_sample_ref, xyz_ref))
    return special_index(delta_e)


def compute_cri(illuminant, parameters=None, observer=CIE1931):
    """Special colour rendering indices of `illuminant`.

    Raises CCTEstimationError if the source has no meaningful CCT,
    IlluminantRangeError if no reference illuminant exists for it, and
    DegenerateChromaticityError on a singular chromaticity.
    """
    parameters = parameters or DEFAULT_PARAMETERS
    samples = get_tcs()

    test = illuminant.set_illuminance(observer, parameters.reference_illuminance)
    xyz_test = observer.xyz(test)
    xyz_test_samples = [observer.xyz(test, sample) for sample in samples]

    cct = estimate_cct(xyz_test, parameters, observer)
    reference = reference_illuminant(cct.t, observer, parameters.reference_illuminance)
    xyz_ref = observer.xyz(reference)
    xyz_ref_samples = [observer.xyz(reference, sample) for sample in samples]

    cdt = adaptation_coefficients(uv60(xyz_test))
    cdr = adaptation_coefficients(uv60(xyz_ref))

    return CRI(
        tuple(
            rendering_index(cdt, cdr, xyz, xyz_r, xyz_ref)
            for xyz, xyz_r in zip(xyz_test_samples, xyz_ref_samples)
        ),
        cct=cct,
        reference=reference_branch(cct.t),
    )


def try_compute_cri(illuminant, parameters=None, observer=CIE1931):
    """Like compute_cri, but reports domain failures in the returned Outcome."""
    try:
        return Outcome(value=compute_cri(illuminant, parameters, observer))
    except ColorimetryError as e:
        log.debug("CRI computation failed: %s", e)
        return Outcome(error=e)
