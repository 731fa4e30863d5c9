"""
Numerical Safeguards — Rounding and IEEE-754 Primitives

The module provides the low-level numeric primitives shared by the calculus
engine and the terminal grapher:
- Half-up rounding to a number of decimal places (the single rounding primitive)
- IEEE-754 division and exponentiation (inf/nan instead of Python exceptions)
- NaN/Inf detection
- Affine mapping between intervals
- Parameter validation for programmer errors

CRITICAL INVARIANTS:
1. round_half_up is total: non-finite values, and values too large to
   scale, pass through unchanged
2. Division by zero never raises; it yields inf or nan like IEEE-754 hardware
3. Non-finite values are propagated, never silently replaced
4. All operations are deterministic and reproducible
"""

import math


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_up(value: float, places: int) -> float:
    """
    Round a value to a number of decimal places.

    Scales by 10**places, adds 0.5, floors and rescales, so halves are always
    rounded towards positive infinity on the scaled value.

    Args:
        value: Value to round
        places: Number of decimal places to keep (>= 0)

    Returns:
        Rounded value, or value itself if it is NaN/Inf or too large to
        scale (every representable digit is already kept there)

    Examples:
        >>> round_half_up(2.345, 2)
        2.35
        >>> round_half_up(-2.5, 0)
        -2.0
        >>> round_half_up(float('inf'), 3)
        inf
        >>> round_half_up(1e306, 3)
        1e+306
    """
    if not is_valid_float(value):
        return value

    scale = 10**places
    scaled = value * scale + 0.5
    if not is_valid_float(scaled):
        return value

    return math.floor(scaled) / scale


# =============================================================================
# IEEE-754 ARITHMETIC
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check whether a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite, False for NaN or Inf
    """
    return math.isfinite(value)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Division with IEEE-754 semantics for a zero denominator.

    Python raises ZeroDivisionError where the hardware would produce a
    non-finite value. The calculus engine relies on the hardware behaviour:
    a zero derivative in Newton's method must yield inf/nan that propagates
    through later iterations.

    Args:
        numerator: Numerator
        denominator: Denominator

    Returns:
        numerator / denominator; +-inf for x/0 (sign of x times sign of the
        zero), nan for 0/0 or a NaN numerator

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if math.isnan(numerator) or numerator == 0.0:
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_exp(x: float) -> float:
    """
    Exponential that overflows to inf instead of raising OverflowError.

    Args:
        x: Exponent

    Returns:
        e**x, or inf when the result is not representable
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


# =============================================================================
# INTERVAL MAPPING
# =============================================================================


def normalize_to_range(
    value: float,
    old_min: float,
    old_max: float,
    new_min: float = 0.0,
    new_max: float = 1.0,
) -> float:
    """
    Affine map of a value from one interval onto another.

    The intervals may be reversed (old_min > old_max or new_min > new_max);
    the map is linear in both cases.

    Args:
        value: Value to map
        old_min: Source interval start
        old_max: Source interval end
        new_min: Target interval start (default: 0.0)
        new_max: Target interval end (default: 1.0)

    Returns:
        Mapped value

    Raises:
        ValueError: If old_min and old_max coincide

    Examples:
        >>> normalize_to_range(5.0, 0.0, 10.0, 0.0, 1.0)
        0.5
        >>> normalize_to_range(2.5, 0.0, 10.0, -1.0, 1.0)
        -0.5
        >>> normalize_to_range(0.0, -10.0, 10.0, 23.0, 0.0)
        11.5
    """
    if old_max == old_min:
        raise ValueError(
            f"old_min and old_max cannot be equal, got [{old_min}, {old_max}]"
        )

    normalized = (value - old_min) / (old_max - old_min)
    return new_min + normalized * (new_max - new_min)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Validate that a value is non-negative.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
