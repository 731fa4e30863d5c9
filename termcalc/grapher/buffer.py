"""
CharacterBuffer — Row-major Character Grid

A height x width grid of single characters, filled with a blank on
creation, mutated in place while rendering and serialized to one text
block (every row terminated by a newline).
"""

from typing import Final

BLANK: Final[str] = " "


class CharacterBuffer:
    """
    Mutable character grid.

    Row 0 is the top of the screen, column 0 the left edge.
    """

    def __init__(self, width: int, height: int, blank: str = BLANK):
        self.width = width
        self.height = height
        self.blank = blank
        self._cells: list[list[str]] = [[blank] * width for _ in range(height)]

    def contains(self, row: int, col: int) -> bool:
        """True if (row, col) lies inside the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> str:
        return self._cells[row][col]

    def set(self, row: int, col: int, ch: str) -> None:
        self._cells[row][col] = ch

    def fill_row(self, row: int, ch: str) -> None:
        """Overwrite a whole row with one character."""
        self._cells[row] = [ch] * self.width

    def fill_column(self, col: int, ch: str) -> None:
        """Overwrite a whole column with one character."""
        for cells in self._cells:
            cells[col] = ch

    def row_text(self, row: int) -> str:
        return "".join(self._cells[row])

    def column_text(self, col: int) -> str:
        """Column read top to bottom."""
        return "".join(cells[col] for cells in self._cells)

    def to_text(self) -> str:
        """
        Serialize the grid.

        Returns:
            All rows in order, each followed by a newline
        """
        return "".join(self.row_text(row) + "\n" for row in range(self.height))

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"CharacterBuffer(width={self.width}, height={self.height})"
