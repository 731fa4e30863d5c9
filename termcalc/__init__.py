"""
termcalc — numerical calculus on real functions and a terminal grapher.

Contains:
- termcalc.core.math : derivative, integrals, Newton roots, Lambert W, iteration
- termcalc.grapher   : text rasterization of real functions
"""

from termcalc.core.math import (
    ACCURACY,
    DEFAULT_PRECISION,
    LARGE,
    SMALL,
    PrecisionPolicy,
    RealFunction,
    derivative,
    integral,
    integral_definite,
    iterate,
    iterated,
    lambert_w,
    roots,
    round_half_up,
)
from termcalc.grapher import CharacterBuffer, GlyphError, Grapher, ViewportError

__all__ = [
    "ACCURACY",
    "DEFAULT_PRECISION",
    "LARGE",
    "SMALL",
    "PrecisionPolicy",
    "RealFunction",
    "derivative",
    "integral",
    "integral_definite",
    "iterate",
    "iterated",
    "lambert_w",
    "roots",
    "round_half_up",
    "CharacterBuffer",
    "GlyphError",
    "Grapher",
    "ViewportError",
]
