from dataclasses import dataclass

# reference illuminant policy: Planckian at or below this CCT, daylight above
PLANCKIAN_LIMIT = 5000.0


@dataclass(frozen=True)
class Parameters:
    cct_min: float = 1000.0  # lower bound of the CCT search, K
    cct_max: float = 100000.0  # upper bound of the CCT search, K
    max_duv: float = 0.05  # largest distance from the Planckian locus for which a CCT is reported
    reference_illuminance: float = 100.0  # both illuminants are normalized to this Y

    def __post_init__(self):
        if not 0 < self.cct_min < self.cct_max:
            raise ValueError(f"invalid CCT search range {self.cct_min}-{self.cct_max} K")
        if not self.max_duv > 0:
            raise ValueError("max_duv must be positive")
        if not self.reference_illuminance > 0:
            raise ValueError("reference_illuminance must be positive")

    @classmethod
    def from_args(cls, args):
        return cls(
            cct_min=args.cct_min,
            cct_max=args.cct_max,
            max_duv=args.max_duv,
        )


DEFAULT_PARAMETERS = Parameters()
