"""
Shared test helpers for the Reversi tests.
"""
import textwrap

import pytest

from reversi.game import Board, Point
from reversi.game.pieces import cell_from_glyph


def parse_board(text: str) -> Board:
    """
    Build a Board from the text produced by Board.render().

    The first line (column indices) is skipped; every other line is
    '<y>|<glyph>|<glyph>|...|' with the border ring included.
    """
    lines = [line for line in textwrap.dedent(text).splitlines() if line.strip()]
    rows = lines[1:]

    cells = {}
    for line in rows:
        parts = line.split('|')
        y = int(parts[0])
        for x, glyph in enumerate(parts[1:-1]):
            cells[Point(x, y)] = cell_from_glyph(glyph)

    width = len(rows[0].split('|')) - 4
    height = len(rows) - 2
    return Board.from_cells(width, height, cells)


@pytest.fixture
def board_from_text():
    return parse_board
