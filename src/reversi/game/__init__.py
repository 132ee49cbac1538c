"""
Reversi game module.
This package contains the board model and the turn loop for Reversi.
"""

from .point import Point
from .pieces import Piece, Cell, Occupied, Playable, Border
from .board import Board, DIRECTIONS
from .game import ReversiGame, run_console

__all__ = ['Point', 'Piece', 'Cell', 'Occupied', 'Playable', 'Border',
           'Board', 'DIRECTIONS', 'ReversiGame', 'run_console']
