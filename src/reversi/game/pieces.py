"""
Piece colors and cell contents.

A cell is one of three variants:
    Occupied(piece) - a Black or White piece sits on it
    Playable()      - empty and inside the play area
    Border()        - the ring around the play area, never playable
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Piece(Enum):
    """The two piece colors."""
    BLACK = 'black'
    WHITE = 'white'

    def opposite(self) -> 'Piece':
        return Piece.WHITE if self is Piece.BLACK else Piece.BLACK

    @property
    def glyph(self) -> str:
        return BLACK_GLYPH if self is Piece.BLACK else WHITE_GLYPH

    @classmethod
    def from_name(cls, name: str) -> 'Piece':
        """Look up a piece by its name, case-insensitive ('black' / 'white')."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown piece: {name!r}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


# Display glyphs
BLACK_GLYPH = '●'
WHITE_GLYPH = '○'
PLAYABLE_GLYPH = ' '
BORDER_GLYPH = '×'


@dataclass(frozen=True)
class Occupied:
    piece: Piece

    @property
    def glyph(self) -> str:
        return self.piece.glyph


@dataclass(frozen=True)
class Playable:

    @property
    def glyph(self) -> str:
        return PLAYABLE_GLYPH


@dataclass(frozen=True)
class Border:

    @property
    def glyph(self) -> str:
        return BORDER_GLYPH


Cell = Union[Occupied, Playable, Border]

PLAYABLE = Playable()
BORDER = Border()


def cell_from_glyph(glyph: str) -> Cell:
    """Inverse of `cell.glyph`."""
    if glyph == BLACK_GLYPH:
        return Occupied(Piece.BLACK)
    if glyph == WHITE_GLYPH:
        return Occupied(Piece.WHITE)
    if glyph == PLAYABLE_GLYPH:
        return PLAYABLE
    if glyph == BORDER_GLYPH:
        return BORDER
    raise ValueError(f"Unknown cell glyph: {glyph!r}")
