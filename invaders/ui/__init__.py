"""User interface components."""

from .grid import BLANK, Cell, render_grid, rows_as_text
from .text import cause_label, game_over_lines, status_line

__all__ = [
    "BLANK",
    "Cell",
    "cause_label",
    "game_over_lines",
    "render_grid",
    "rows_as_text",
    "status_line",
]
