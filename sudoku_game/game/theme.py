"""Light and dark colour themes, and colours derived from puzzle state."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..core.board import GRID_SIZE, BOX_SIZE

RGBA = Tuple[int, int, int, int]


class Theme(Enum):
    """Available colour themes."""
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


@dataclass(frozen=True)
class ThemePalette:
    """RGBA colours a presentation layer needs to draw a puzzle."""
    background: RGBA
    text: RGBA
    grid_lines: RGBA
    given_digit: RGBA
    entered_digit: RGBA
    row_highlight: RGBA
    col_highlight: RGBA
    box_highlight: RGBA
    selected_cell: RGBA
    digit_count: RGBA
    digit_count_complete: RGBA
    message: RGBA

    @classmethod
    def for_theme(cls, theme: Theme) -> ThemePalette:
        return _PALETTES[theme]

    def digit_color(self, is_fixed: bool) -> RGBA:
        """Givens and player entries are drawn in different colours."""
        return self.given_digit if is_fixed else self.entered_digit

    def count_color(self, count: int) -> RGBA:
        """Colour for a digit's placement counter; complete digits stand out."""
        return self.digit_count_complete if count >= GRID_SIZE else self.digit_count

    def cell_fill(self, row: int, col: int, selected: Optional[Tuple[int, int]]) -> Optional[RGBA]:
        """
        Background for a cell given the current selection.

        The selected cell wins over its box, which wins over its column,
        which wins over its row. Unrelated cells get None (plain background).
        """
        if selected is None:
            return None
        sel_row, sel_col = selected
        if (row, col) == (sel_row, sel_col):
            return self.selected_cell
        if row // BOX_SIZE == sel_row // BOX_SIZE and col // BOX_SIZE == sel_col // BOX_SIZE:
            return self.box_highlight
        if col == sel_col:
            return self.col_highlight
        if row == sel_row:
            return self.row_highlight
        return None


_PALETTES = {
    Theme.LIGHT: ThemePalette(
        background=(255, 255, 255, 255),
        text=(0, 0, 0, 255),
        grid_lines=(0, 0, 0, 255),
        given_digit=(0, 0, 0, 255),
        entered_digit=(0, 0, 255, 255),
        row_highlight=(230, 240, 255, 255),
        col_highlight=(220, 235, 255, 255),
        box_highlight=(225, 238, 255, 255),
        selected_cell=(215, 233, 255, 255),
        digit_count=(0, 0, 0, 255),
        digit_count_complete=(0, 255, 0, 255),
        message=(0, 128, 0, 255),
    ),
    Theme.DARK: ThemePalette(
        background=(0, 0, 0, 255),
        text=(255, 255, 255, 255),
        grid_lines=(255, 255, 255, 255),
        given_digit=(255, 255, 255, 255),
        entered_digit=(100, 100, 255, 255),
        row_highlight=(45, 25, 0, 255),
        col_highlight=(55, 30, 0, 255),
        box_highlight=(50, 27, 0, 255),
        selected_cell=(80, 60, 0, 255),
        digit_count=(255, 255, 255, 255),
        digit_count_complete=(255, 0, 0, 255),
        message=(0, 255, 0, 255),
    ),
}
