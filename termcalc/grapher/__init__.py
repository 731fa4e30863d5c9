"""
Terminal grapher.

Plots real functions onto a character grid for display in a terminal.
"""

from termcalc.grapher.buffer import BLANK, CharacterBuffer
from termcalc.grapher.grapher import (
    DEFAULT_DOMAIN,
    DEFAULT_GLYPH,
    DEFAULT_HEIGHT,
    DEFAULT_RANGE,
    DEFAULT_WIDTH,
    X_AXIS_GLYPH,
    Y_AXIS_GLYPH,
    GlyphError,
    Grapher,
    GrapherConfig,
)
from termcalc.grapher.viewport import Viewport, ViewportError

__all__ = [
    # Buffer
    "BLANK",
    "CharacterBuffer",
    # Grapher — Defaults
    "DEFAULT_DOMAIN",
    "DEFAULT_GLYPH",
    "DEFAULT_HEIGHT",
    "DEFAULT_RANGE",
    "DEFAULT_WIDTH",
    "X_AXIS_GLYPH",
    "Y_AXIS_GLYPH",
    # Grapher — Types
    "GlyphError",
    "Grapher",
    "GrapherConfig",
    # Viewport
    "Viewport",
    "ViewportError",
]
