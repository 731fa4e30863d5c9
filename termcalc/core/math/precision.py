"""
Precision — Sampling Step and Trusted Digits

One coherent precision policy is shared by every calculus routine:
- LARGE: reciprocal of the sampling step, also the differentiation scale
- SMALL = 1 / LARGE: finite-difference step and integration step
- ACCURACY = floor(log10(LARGE)) - 1: decimal digits trusted in any result

LARGE is the only knob. SMALL and ACCURACY are always derived from it, so
the derivative, the integrals and Newton's method built on the derivative
stay numerically consistent with each other.

Two parameterizations are in use:
    FAST_PRECISION:  LARGE = 1e4, ACCURACY = 3 (default, cheap integrals)
    FINE_PRECISION:  LARGE = 1e6, ACCURACY = 5 (100x more samples per unit)
"""

import math
from typing import Final

from pydantic import BaseModel, Field


class PrecisionPolicy(BaseModel):
    """
    Immutable precision policy.

    Engine operations take it through the keyword-only `precision` argument,
    so several policies can coexist in one process.
    """

    large: float = Field(
        ...,
        ge=10,
        allow_inf_nan=False,
        description="Reciprocal of the sampling step",
    )

    model_config = {"frozen": True}

    @property
    def small(self) -> float:
        """Finite-difference and integration step."""
        return 1.0 / self.large

    @property
    def accuracy(self) -> int:
        """Number of decimal digits trusted in returned results."""
        return math.floor(math.log10(self.large)) - 1


# =============================================================================
# PRESETS
# =============================================================================

FAST_PRECISION: Final[PrecisionPolicy] = PrecisionPolicy(large=10_000.0)

FINE_PRECISION: Final[PrecisionPolicy] = PrecisionPolicy(large=1_000_000.0)


# =============================================================================
# PROCESS-WIDE DEFAULTS
# =============================================================================

# The only constant that should be changed
LARGE: Final[float] = 10_000.0

DEFAULT_PRECISION: Final[PrecisionPolicy] = PrecisionPolicy(large=LARGE)

SMALL: Final[float] = DEFAULT_PRECISION.small

ACCURACY: Final[int] = DEFAULT_PRECISION.accuracy
