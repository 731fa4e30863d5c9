"""
Grapher — Plot Real Functions as Text

Rasterizes registered functions onto a CharacterBuffer:
- Axes are drawn first (`|` for x = 0, `-` for y = 0), so curves land on top
- Each function is sampled once per column, left to right
- Out-of-range samples leave a gap in the curve
- Vertical jumps between consecutive plotted samples are filled in the
  current column so steep curves stay continuous
- Functions are drawn in registration order; the last glyph written wins

Setters perform no validation. render() fails fast with ViewportError when
the configuration cannot be mapped onto a grid, and with GlyphError when a
function glyph is not a single character.
"""

import logging
from dataclasses import dataclass, field
from typing import Final

from termcalc.core.math.calculus import RealFunction
from termcalc.grapher.buffer import CharacterBuffer
from termcalc.grapher.viewport import Viewport

logger = logging.getLogger(__name__)

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_WIDTH: Final[int] = 80
DEFAULT_HEIGHT: Final[int] = 24
DEFAULT_DOMAIN: Final[tuple[float, float]] = (-10.0, 10.0)
DEFAULT_RANGE: Final[tuple[float, float]] = (-10.0, 10.0)

DEFAULT_GLYPH: Final[str] = "#"
X_AXIS_GLYPH: Final[str] = "-"
Y_AXIS_GLYPH: Final[str] = "|"


class GlyphError(ValueError):
    """Function glyph that does not occupy exactly one grid cell."""

    pass


@dataclass
class GrapherConfig:
    """Render configuration owned by one Grapher."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    x_min: float = DEFAULT_DOMAIN[0]
    x_max: float = DEFAULT_DOMAIN[1]
    y_min: float = DEFAULT_RANGE[0]
    y_max: float = DEFAULT_RANGE[1]
    functions: list[tuple[RealFunction, str]] = field(default_factory=list)

    def viewport(self) -> Viewport:
        return Viewport(
            width=self.width,
            height=self.height,
            x_min=self.x_min,
            x_max=self.x_max,
            y_min=self.y_min,
            y_max=self.y_max,
        )


class Grapher:
    """
    Terminal function plotter.

    Not thread-safe: the configuration must not change while render() runs.

    Examples:
        >>> grapher = Grapher()
        >>> grapher.set_output_dimensions(40, 12)
        >>> grapher.add_function(lambda x: x * x, "*")
        >>> text = grapher.render_text()
    """

    def __init__(self) -> None:
        self._config = GrapherConfig()

    @property
    def config(self) -> GrapherConfig:
        return self._config

    @property
    def functions(self) -> tuple[tuple[RealFunction, str], ...]:
        """Registered (function, glyph) pairs in draw order."""
        return tuple(self._config.functions)

    # -------------------------------------------------------------------------
    # configuration
    # -------------------------------------------------------------------------

    def set_output_dimensions(self, width: int, height: int) -> None:
        """
        Set the size of the output, in characters.

        Args:
            width: Columns of the printed output
            height: Rows of the printed output
        """
        self._config.width = width
        self._config.height = height

    def set_domain(self, lo: float, hi: float) -> None:
        """
        Set the visible x interval.

        Args:
            lo: Left end-point
            hi: Right end-point
        """
        self._config.x_min = lo
        self._config.x_max = hi

    def set_range(self, lo: float, hi: float) -> None:
        """
        Set the visible y interval.

        Args:
            lo: Bottom end-point
            hi: Top end-point
        """
        self._config.y_min = lo
        self._config.y_max = hi

    def add_function(self, fx: RealFunction, glyph: str = DEFAULT_GLYPH) -> None:
        """
        Queue a function to be drawn on the next render().

        Args:
            fx: Function to plot
            glyph: Single character used to draw it; checked by render()
        """
        self._config.functions.append((fx, glyph))

    def clear_functions(self) -> None:
        self._config.functions.clear()

    # -------------------------------------------------------------------------
    # rendering
    # -------------------------------------------------------------------------

    def render(self) -> CharacterBuffer:
        """
        Rasterize the axes and every registered function.

        Returns:
            Fresh buffer of height x width characters

        Raises:
            ViewportError: If the viewport has fewer than two columns, no
                rows, or an empty domain or range
            GlyphError: If a registered glyph is not a single character
        """
        viewport = self._config.viewport()
        viewport.validate()
        for _, glyph in self._config.functions:
            if len(glyph) != 1:
                raise GlyphError(f"glyph must be a single character, got {glyph!r}")

        logger.debug(
            "Rendering %d function(s) on %dx%d, domain=[%s, %s], range=[%s, %s]",
            len(self._config.functions),
            viewport.width,
            viewport.height,
            viewport.x_min,
            viewport.x_max,
            viewport.y_min,
            viewport.y_max,
        )

        buffer = CharacterBuffer(viewport.width, viewport.height)
        _draw_axes(buffer, viewport)

        for fx, glyph in self._config.functions:
            _draw_function(buffer, viewport, fx, glyph)

        return buffer

    def render_text(self) -> str:
        return self.render().to_text()


# =============================================================================
# RASTERIZATION
# =============================================================================


def _draw_axes(buffer: CharacterBuffer, viewport: Viewport) -> None:
    # the y axis sits at column x = 0, the x axis at row y = 0
    y_axis_col = viewport.x_to_pixel(0.0)
    x_axis_row = viewport.y_to_pixel(0.0)

    if buffer.contains(0, y_axis_col):
        buffer.fill_column(y_axis_col, Y_AXIS_GLYPH)
    if buffer.contains(x_axis_row, 0):
        buffer.fill_row(x_axis_row, X_AXIS_GLYPH)


def _draw_function(
    buffer: CharacterBuffer,
    viewport: Viewport,
    fx: RealFunction,
    glyph: str,
) -> None:
    # None until the first in-range sample; gaps keep the previous row
    last_row: int | None = None

    for col in range(buffer.width):
        y = fx(viewport.pixel_to_x(col))
        if not viewport.in_range(y):
            continue

        row = viewport.y_to_pixel(y)

        if last_row is not None and last_row != row:
            step = 1 if row > last_row else -1
            for fill_row in range(last_row, row, step):
                buffer.set(fill_row, col, glyph)

        last_row = row
        buffer.set(row, col, glyph)
