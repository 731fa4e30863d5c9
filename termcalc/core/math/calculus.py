"""
Calculus — Numerical Engine on Real Functions

A real function is any callable mapping one float to one float. The module
provides:
- Forward finite-difference derivative
- Left-Riemann definite integral and anchored antiderivative
- Newton's-method root finder with a fixed iteration count
- Lambert W approximation built on the root finder
- Function iteration (f applied n times) and its closure form

CRITICAL INVARIANTS:
1. Every routine samples with the same step (precision.small) and rounds
   derivatives and integrals to precision.accuracy digits via round_half_up
2. Integration is fixed-step Riemann summation, never adaptive
3. No recursion: roots and iterate run explicit loops of a fixed trip count
4. Numerical failures (zero derivative, overflow, non-finite integration
   bounds) yield inf/nan and are returned as-is, never raised

FORMULAS:
    derivative(f)(x)          = round((f(x + SMALL) - f(x)) * LARGE, ACCURACY)
    integral_definite(f, a, b) = round(sign(b) * sum(f(a + k*SMALL) * SMALL
                                  for a + k*SMALL <= |b|), ACCURACY)
    roots:  x_{n+1} = x_n - f(x_n) / f'(x_n)
    lambert_w(v) = root of x * e^x - v, seeded at v
"""

import logging
import math
from typing import Callable

from termcalc.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_exp,
    is_valid_float,
    round_half_up,
    validate_non_negative,
)
from termcalc.core.math.precision import DEFAULT_PRECISION, PrecisionPolicy

logger = logging.getLogger(__name__)

RealFunction = Callable[[float], float]

# Defaults of the root finder
ROOTS_ITERATIONS_DEFAULT = 100
LAMBERT_W_ITERATIONS = 150


# =============================================================================
# DIFFERENTIATION
# =============================================================================


def derivative(
    fx: RealFunction,
    *,
    precision: PrecisionPolicy = DEFAULT_PRECISION,
) -> RealFunction:
    """
    Derivative of a function as a callable.

    Forward difference scaled by LARGE: two calls to fx per evaluation.

    Args:
        fx: Function to differentiate
        precision: Precision policy (default: DEFAULT_PRECISION)

    Returns:
        Function g(x) = round((fx(x + SMALL) - fx(x)) * LARGE, ACCURACY)

    Examples:
        >>> derivative(lambda x: x * x)(3.0)
        6.0
    """
    small = precision.small
    large = precision.large
    accuracy = precision.accuracy

    def fx_prime(x: float) -> float:
        return round_half_up((fx(x + small) - fx(x)) * large, accuracy)

    return fx_prime


# =============================================================================
# INTEGRATION
# =============================================================================


def integral_definite(
    fx: RealFunction,
    lower: float,
    upper: float,
    *,
    precision: PrecisionPolicy = DEFAULT_PRECISION,
) -> float:
    """
    Definite integral of a function by a left-Riemann sum.

    The grid always runs upward from `lower` to `|upper|`; the sum is negated
    when `upper` is negative. An antiderivative evaluated at negative x
    therefore sees the orientation flip it expects.

    Args:
        fx: Function to integrate
        lower: Lower bound (grid start)
        upper: Upper bound; its absolute value ends the grid, its sign sets
            the sign of the result
        precision: Precision policy (default: DEFAULT_PRECISION)

    Returns:
        Signed area rounded to ACCURACY digits; 0.0 if lower == upper;
        nan if either bound is NaN or Inf

    Examples:
        >>> integral_definite(lambda x: x, 0.0, 4.0)
        8.0
        >>> integral_definite(lambda x: x, 0.0, -4.0)
        -8.0
    """
    if not (is_valid_float(lower) and is_valid_float(upper)):
        return math.nan

    if lower == upper:
        return 0.0

    small = precision.small
    end = abs(upper)

    total = 0.0
    k = 0
    x = lower
    while x <= end:
        total += fx(x) * small
        k += 1
        x = lower + k * small

    if upper < 0:
        total = -total

    return round_half_up(total, precision.accuracy)


def integral(
    fx: RealFunction,
    valid_value: float = 0.0,
    *,
    precision: PrecisionPolicy = DEFAULT_PRECISION,
) -> RealFunction:
    """
    Indefinite integral of a function as a callable.

    The antiderivative is anchored at `valid_value`: F(valid_value) == 0.
    Changing `valid_value` shifts F by a constant.

    Args:
        fx: Function to integrate
        valid_value: A point in the function's domain (constant of integration)
        precision: Precision policy (default: DEFAULT_PRECISION)

    Returns:
        Function F(x) = integral_definite(fx, valid_value, x)
    """

    def antiderivative(x: float) -> float:
        return integral_definite(fx, valid_value, x, precision=precision)

    return antiderivative


# =============================================================================
# ROOT FINDING
# =============================================================================


def roots(
    fx: RealFunction,
    initial: float = 0.0,
    iterations: int = ROOTS_ITERATIONS_DEFAULT,
    *,
    precision: PrecisionPolicy = DEFAULT_PRECISION,
) -> float:
    """
    Approximate a root of a function with Newton's method.

    Runs exactly `iterations` steps; there is no convergence check. The
    closer `initial` is to a root, the fewer steps are needed.

    A zero derivative at some step produces inf or nan, which propagates
    through the remaining steps and is returned. Callers must treat a
    non-finite result as "no root found from this starting point".

    Args:
        fx: Function whose root is wanted
        initial: Starting estimate (default: 0.0)
        iterations: Number of Newton steps (default: 100)
        precision: Precision policy used by the derivative

    Returns:
        Approximation of the nearest root; `initial` itself when
        iterations == 0

    Raises:
        ValueError: If iterations is negative

    Examples:
        >>> roots(lambda x: x - 5.0, 0.0, 10)
        5.0
    """
    validate_non_negative(iterations, "iterations")

    fx_prime = derivative(fx, precision=precision)

    x = initial
    for _ in range(int(iterations)):
        x = x - ieee_divide(fx(x), fx_prime(x))

    if not is_valid_float(x):
        logger.debug(
            "Newton iteration diverged: initial=%r, iterations=%d, result=%r",
            initial,
            iterations,
            x,
        )

    return x


def lambert_w(
    value: float,
    *,
    precision: PrecisionPolicy = DEFAULT_PRECISION,
) -> float:
    """
    Lambert W approximation, the inverse of x * e^x.

    Args:
        value: Input
        precision: Precision policy used by the root finder

    Returns:
        w such that w * e^w ~= value (non-finite if Newton's method fails)

    Examples:
        >>> lambert_w(0.0)
        0.0
    """

    def x_exp_x_minus_value(x: float) -> float:
        return x * ieee_exp(x) - value

    return roots(
        x_exp_x_minus_value,
        value,
        LAMBERT_W_ITERATIONS,
        precision=precision,
    )


# =============================================================================
# ITERATION
# =============================================================================


def iterate(fx: RealFunction, times: float, value: float) -> float:
    """
    Apply a function to a value repeatedly: fx(fx(...fx(value))).

    Only integer `times` are meaningful. A fractional count keeps being
    decremented by one while positive, so 2.5 applies fx three times.

    Args:
        fx: Function to iterate
        times: Number of applications (<= 0 returns value unchanged)
        value: Starting value

    Returns:
        fx applied `times` times to `value`
    """
    remaining = times
    while remaining > 0:
        value = fx(value)
        remaining -= 1
    return value


def iterated(fx: RealFunction, times: float) -> RealFunction:
    """
    Like iterate(), but returns the composition as a callable.

    Args:
        fx: Function to iterate
        times: Number of applications

    Returns:
        Function g(x) = iterate(fx, times, x)
    """

    def composed(x: float) -> float:
        return iterate(fx, times, x)

    return composed
