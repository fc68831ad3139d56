from enum import Enum


class ErrorKind(Enum):
    CCT_OUT_OF_RANGE = "cct-out-of-range"
    ILLUMINANT_OUT_OF_RANGE = "illuminant-out-of-range"
    DEGENERATE_CHROMATICITY = "degenerate-chromaticity"


class ColorimetryError(Exception):
    """Base class for the domain failures of the colorimetric pipeline."""

    kind = None

    def __str__(self):
        message = super().__str__()
        return f"{message} ({self.kind.value})" if self.kind is not None else message


class CCTEstimationError(ColorimetryError):
    # the chromaticity is too far from the Planckian locus, or outside the search range
    kind = ErrorKind.CCT_OUT_OF_RANGE


class IlluminantRangeError(ColorimetryError):
    # a reference illuminant was requested outside its model's temperature range
    kind = ErrorKind.ILLUMINANT_OUT_OF_RANGE


class DegenerateChromaticityError(ColorimetryError):
    kind = ErrorKind.DEGENERATE_CHROMATICITY
