"""
Core math modules for termcalc

Numerical calculus on real functions with one shared precision policy.
"""

# Numerical Safeguards
from termcalc.core.math.numerical_safeguards import (
    # Rounding
    round_half_up,
    # IEEE-754 arithmetic
    ieee_divide,
    ieee_exp,
    is_valid_float,
    # Interval mapping
    normalize_to_range,
    # Validation
    validate_non_negative,
)

# Precision
from termcalc.core.math.precision import (
    ACCURACY,
    DEFAULT_PRECISION,
    FAST_PRECISION,
    FINE_PRECISION,
    LARGE,
    SMALL,
    PrecisionPolicy,
)

# Calculus
from termcalc.core.math.calculus import (
    LAMBERT_W_ITERATIONS,
    ROOTS_ITERATIONS_DEFAULT,
    RealFunction,
    derivative,
    integral,
    integral_definite,
    iterate,
    iterated,
    lambert_w,
    roots,
)

__all__ = [
    # Numerical Safeguards — Rounding
    "round_half_up",
    # Numerical Safeguards — IEEE-754 arithmetic
    "ieee_divide",
    "ieee_exp",
    "is_valid_float",
    # Numerical Safeguards — Interval mapping
    "normalize_to_range",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    # Precision — Constants
    "ACCURACY",
    "LARGE",
    "SMALL",
    # Precision — Policies
    "DEFAULT_PRECISION",
    "FAST_PRECISION",
    "FINE_PRECISION",
    "PrecisionPolicy",
    # Calculus — Constants
    "LAMBERT_W_ITERATIONS",
    "ROOTS_ITERATIONS_DEFAULT",
    # Calculus — Types
    "RealFunction",
    # Calculus — Functions
    "derivative",
    "integral",
    "integral_definite",
    "iterate",
    "iterated",
    "lambert_w",
    "roots",
]
