"""
Viewport — Coordinate Maps Between Function Space and the Character Grid

Function space: x grows to the right over [x_min, x_max], y grows upward
over [y_min, y_max]. Grid space: columns 0..width-1 left to right, rows
0..height-1 top to bottom. The vertical map is therefore inverted.

Pixel coordinates are rounded with round_half_up, the same rounding
primitive the calculus engine uses.
"""

from dataclasses import dataclass

from termcalc.core.math.numerical_safeguards import normalize_to_range, round_half_up


class ViewportError(ValueError):
    """
    Viewport that cannot be mapped onto a grid.

    Raised for fewer than two columns, no rows, or a zero-width domain or
    range, all of which would divide by zero in the coordinate maps.
    """

    pass


@dataclass(frozen=True)
class Viewport:
    """Snapshot of the grid size and the visible window of one render."""

    width: int
    height: int
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def validate(self) -> None:
        """
        Fail fast on a viewport the maps cannot handle.

        Reversed intervals (min > max) are accepted and render degenerately.

        Raises:
            ViewportError: If the grid or an interval is empty
        """
        if self.width < 2:
            raise ViewportError(f"width must be at least 2 columns, got {self.width}")
        if self.height < 1:
            raise ViewportError(f"height must be at least 1 row, got {self.height}")
        if self.x_min == self.x_max:
            raise ViewportError(f"domain is empty: [{self.x_min}, {self.x_max}]")
        if self.y_min == self.y_max:
            raise ViewportError(f"range is empty: [{self.y_min}, {self.y_max}]")

    # -------------------------------------------------------------------------
    # grid -> function space
    # -------------------------------------------------------------------------

    def pixel_to_x(self, col: int) -> float:
        return normalize_to_range(col, 0, self.width - 1, self.x_min, self.x_max)

    def pixel_to_y(self, row: int) -> float:
        """Inverse of y_to_pixel; needs at least two rows."""
        return normalize_to_range(row, self.height - 1, 0, self.y_min, self.y_max)

    # -------------------------------------------------------------------------
    # function space -> grid
    # -------------------------------------------------------------------------

    def x_to_pixel(self, x: float) -> int:
        col = normalize_to_range(x, self.x_min, self.x_max, 0, self.width - 1)
        return int(round_half_up(col, 0))

    def y_to_pixel(self, y: float) -> int:
        row = normalize_to_range(y, self.y_min, self.y_max, self.height - 1, 0)
        return int(round_half_up(row, 0))

    def in_range(self, y: float) -> bool:
        """True if y is inside [y_min, y_max]; False for NaN."""
        return self.y_min <= y <= self.y_max
